# Third-party imports
from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

# Local application imports
from smartmunic.core.db import get_async_session
from smartmunic.schemas.issues.issue_schemas import IssueResponse
from smartmunic.schemas.technicians.work_session_schemas import (
    ActiveWorkSession,
    WorkSessionComplete,
    WorkSessionCompleteResponse,
    WorkSessionResponse,
    WorkSessionStart,
)
from smartmunic.services.dispatch.work_session_services import complete_work, list_active_work_sessions, start_work

router = APIRouter(prefix="/work-sessions", tags=["Work Sessions"])


@router.post("/start", response_model=WorkSessionResponse)
async def start_work_session(session_data: WorkSessionStart, db: AsyncSession = Depends(get_async_session)):
    """Technician arrives on site; the assigned issue moves to in progress."""
    issue = await start_work(db, session_data.issue_id, session_data.technician_id)
    return WorkSessionResponse(message="Work session started", issue=IssueResponse.model_validate(issue))


@router.post("/complete", response_model=WorkSessionCompleteResponse)
async def complete_work_session(session_data: WorkSessionComplete, db: AsyncSession = Depends(get_async_session)):
    issue, completed_at = await complete_work(
        db, session_data.issue_id, session_data.technician_id, session_data.completion_notes
    )
    return WorkSessionCompleteResponse(
        message="Work completed successfully",
        issue=IssueResponse.model_validate(issue),
        completed_at=completed_at,
    )


@router.get("/active", response_model=list[ActiveWorkSession])
async def get_active_work_sessions(
    technician_id: int = Query(..., alias="technicianId"),
    db: AsyncSession = Depends(get_async_session),
):
    issues = await list_active_work_sessions(db, technician_id)
    return [
        ActiveWorkSession(
            issue_id=issue.id,
            reference_number=issue.reference_number,
            title=issue.title,
            arrival_time=issue.updated_at,
        )
        for issue in issues
    ]
