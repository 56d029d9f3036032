# Third-party imports
from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

# Local application imports
from smartmunic.core.db import get_async_session
from smartmunic.schemas.issues.note_schemas import (
    EscalationCreate,
    EscalationResponse,
    HistoryResponse,
    NoteCreate,
    NoteResponse,
)
from smartmunic.services.issues import escalation_services, history_services, note_services

router = APIRouter(prefix="/issues", tags=["Issue Notes"])


@router.post("/{issue_id}/notes", response_model=NoteResponse, status_code=status.HTTP_201_CREATED)
async def add_note(issue_id: int, note_data: NoteCreate, db: AsyncSession = Depends(get_async_session)):
    return await note_services.add_note(db, issue_id, note_data)


@router.get("/{issue_id}/notes", response_model=list[NoteResponse])
async def list_notes(issue_id: int, db: AsyncSession = Depends(get_async_session)):
    """Notes in the order they were written"""
    return await note_services.get_notes(db, issue_id)


@router.post("/{issue_id}/escalate", response_model=EscalationResponse, status_code=status.HTTP_201_CREATED)
async def escalate_issue(
    issue_id: int, escalation_data: EscalationCreate, db: AsyncSession = Depends(get_async_session)
):
    """Escalate an issue; its priority becomes urgent."""
    return await escalation_services.escalate_issue(db, issue_id, escalation_data)


@router.get("/{issue_id}/escalations", response_model=list[EscalationResponse])
async def list_escalations(issue_id: int, db: AsyncSession = Depends(get_async_session)):
    return await escalation_services.get_escalations(db, issue_id)


@router.get("/{issue_id}/history", response_model=list[HistoryResponse])
async def list_history(issue_id: int, db: AsyncSession = Depends(get_async_session)):
    return await history_services.get_issue_history(db, issue_id)
