# Third-party imports
from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

# Local application imports
from smartmunic.core.db import get_async_session
from smartmunic.models.issues import IssueCategory, IssueStatus
from smartmunic.schemas.common.base_schema import MessageResponse
from smartmunic.schemas.issues.issue_schemas import IssueCreate, IssueRating, IssueResponse, IssueUpdate
from smartmunic.schemas.technicians.technician_schemas import TechnicianWithDistance
from smartmunic.services.dispatch.dispatch_services import suggest_technicians_for_issue
from smartmunic.services.issues import issue_services

router = APIRouter(prefix="/issues", tags=["Issues"])


@router.get("", response_model=list[IssueResponse])
async def list_issues(
    status_filter: IssueStatus | None = Query(None, alias="status"),
    category: IssueCategory | None = None,
    ward: str | None = None,
    technician_id: int | None = Query(None, alias="technicianId"),
    db: AsyncSession = Depends(get_async_session),
):
    """List issues, newest first. Filters combine."""
    return await issue_services.list_issues(
        db, status=status_filter, category=category, ward=ward, technician_id=technician_id
    )


@router.post("", response_model=IssueResponse, status_code=status.HTTP_201_CREATED)
async def create_issue(issue_data: IssueCreate, db: AsyncSession = Depends(get_async_session)):
    """Report a new issue"""
    return await issue_services.create_issue(db, issue_data)


@router.get("/{issue_id}", response_model=IssueResponse)
async def get_issue(issue_id: int, db: AsyncSession = Depends(get_async_session)):
    return await issue_services.get_issue(db, issue_id)


@router.patch("/{issue_id}", response_model=IssueResponse)
async def update_issue(issue_id: int, update_data: IssueUpdate, db: AsyncSession = Depends(get_async_session)):
    """Partially update an issue (status, priority, details)."""
    return await issue_services.update_issue(db, issue_id, update_data)


@router.delete("/{issue_id}", response_model=MessageResponse)
async def delete_issue(issue_id: int, db: AsyncSession = Depends(get_async_session)):
    """Administrative hard delete"""
    deleted = await issue_services.delete_issue(db, issue_id)
    if not deleted:
        raise HTTPException(status_code=404, detail="Issue not found")
    return MessageResponse(message="Issue deleted successfully")


@router.post("/{issue_id}/rating", response_model=IssueResponse)
async def rate_issue(issue_id: int, rating_data: IssueRating, db: AsyncSession = Depends(get_async_session)):
    """Rate a resolved or closed issue"""
    return await issue_services.rate_issue(db, issue_id, rating_data.rating, rating_data.feedback)


@router.delete("/{issue_id}/photos/{photo_index}", response_model=IssueResponse)
async def remove_issue_photo(issue_id: int, photo_index: int, db: AsyncSession = Depends(get_async_session)):
    return await issue_services.remove_issue_photo(db, issue_id, photo_index)


@router.get("/{issue_id}/technician-suggestions", response_model=list[TechnicianWithDistance])
async def get_technician_suggestions(
    issue_id: int,
    limit: int | None = Query(None, ge=1, le=50),
    db: AsyncSession = Depends(get_async_session),
):
    """Nearest available technicians from the department handling this issue's category"""
    matches = await suggest_technicians_for_issue(db, issue_id, limit=limit)
    return [TechnicianWithDistance.from_match(technician, distance) for technician, distance in matches]
