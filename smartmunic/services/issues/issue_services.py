# Standard library imports
from collections.abc import Sequence

# Third-party imports
from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession

# Local application imports
from smartmunic.core.exceptions import ConflictError, NotFoundError, ValidationError
from smartmunic.core.monitoring.logging import get_contextual_logger
from smartmunic.db_selectors import issues as issue_selectors
from smartmunic.db_selectors.technicians import get_technician_by_id
from smartmunic.models.issues import (
    Issue,
    IssueCategory,
    IssueEscalation,
    IssueHistory,
    IssueNote,
    IssuePriority,
    IssueStatus,
)
from smartmunic.models.technicians import Technician, TechnicianStatus
from smartmunic.schemas.issues.issue_schemas import IssueCreate, IssueUpdate
from smartmunic.services.issues.history_services import record_status_change
from smartmunic.services.notifications.notification_services import notify_status_change
from smartmunic.settings import settings
from smartmunic.utils.datetime_utils import utc_now
from smartmunic.utils.model_utils import commit_or_conflict, update_model_fields
from smartmunic.utils.reference_utils import generate_reference_number

RATEABLE_STATUSES = (IssueStatus.RESOLVED, IssueStatus.CLOSED)
DEFAULT_UPDATED_BY = "Staff"


async def generate_unique_reference_number(db: AsyncSession) -> str:
    """
    Generate a reference number not yet used by any issue.

    Raises:
        ConflictError: if every attempt collided.
    """
    for _ in range(settings.REFERENCE_NUMBER_MAX_ATTEMPTS):
        candidate = generate_reference_number()
        if not await issue_selectors.reference_number_exists(db, candidate):
            return candidate
    raise ConflictError("Could not allocate a unique reference number")


async def create_issue(db: AsyncSession, data: IssueCreate) -> Issue:
    """
    Log a new citizen report.

    The issue starts ``open`` with no rating, feedback or resolution time,
    and ``created_at`` equal to ``updated_at``.
    """
    now = utc_now()
    issue = Issue(
        reference_number=await generate_unique_reference_number(db),
        title=data.title,
        description=data.description,
        category=data.category,
        priority=data.priority,
        status=IssueStatus.OPEN,
        location=data.location,
        ward=data.ward,
        latitude=data.latitude,
        longitude=data.longitude,
        reporter_name=data.reporter_name,
        reporter_phone=data.reporter_phone,
        photos=list(data.photos),
        created_at=now,
        updated_at=now,
    )
    db.add(issue)
    # Flush for the id the history row points at
    await db.flush()
    record_status_change(db, issue, None, IssueStatus.OPEN, comment="Issue reported", updated_by="Citizen")

    await commit_or_conflict(db, "Reference number collision, please retry")

    logger = get_contextual_logger(__name__, issue_id=issue.id, reference_number=issue.reference_number)
    logger.info(f"Issue created in category {issue.category.value}")

    notify_status_change(issue)
    return issue


async def get_issue(db: AsyncSession, issue_id: int) -> Issue:
    issue = await issue_selectors.get_issue_by_id(db, issue_id)
    if issue is None:
        raise NotFoundError("Issue not found")
    return issue


async def list_issues(
    db: AsyncSession,
    status: IssueStatus | None = None,
    category: IssueCategory | None = None,
    ward: str | None = None,
    technician_id: int | None = None,
) -> Sequence[Issue]:
    return await issue_selectors.list_issues(
        db, status=status, category=category, ward=ward, technician_id=technician_id
    )


async def _release_technician(db: AsyncSession, issue: Issue) -> Technician | None:
    """
    Put the issue's technician back to ``available`` once the issue no
    longer needs them. Technicians who still hold another active issue, or
    who are off duty, are left alone. The caller commits.
    """
    if issue.assigned_to_id is None:
        return None

    technician = await get_technician_by_id(db, issue.assigned_to_id)
    if technician is None or technician.status != TechnicianStatus.ON_JOB:
        return None
    if await issue_selectors.technician_has_other_active_issues(db, technician.id, issue.id):
        return None

    technician.status = TechnicianStatus.AVAILABLE
    technician.updated_at = utc_now()
    return technician


async def update_issue(db: AsyncSession, issue_id: int, command: IssueUpdate) -> Issue:
    """
    Apply a partial update.

    ``updated_at`` is always refreshed. ``resolved_at`` is stamped the first
    time the issue becomes resolved and never touched again. Other status
    moves are accepted as sent; moving out of assigned or in progress frees
    the technician, and moving back to open also drops the assignment.

    Raises:
        ConflictError: lowering the priority of an escalated issue, or a
            concurrent update.
    """
    issue = await get_issue(db, issue_id)
    previous_status = issue.status
    now = utc_now()

    if (
        command.priority is not None
        and command.priority != IssuePriority.URGENT
        and await issue_selectors.issue_has_escalations(db, issue.id)
    ):
        raise ConflictError("Escalated issues must stay at urgent priority")

    changes = update_model_fields(issue, command)

    status_changed = "status" in changes and issue.status != previous_status
    if issue.status == IssueStatus.RESOLVED and issue.resolved_at is None:
        issue.resolved_at = now
    issue.updated_at = now

    released = None
    if (
        status_changed
        and previous_status in issue_selectors.ACTIVE_ISSUE_STATUSES
        and issue.status not in issue_selectors.ACTIVE_ISSUE_STATUSES
    ):
        released = await _release_technician(db, issue)
        if issue.status == IssueStatus.OPEN:
            issue.assigned_to_id = None

    if status_changed:
        record_status_change(
            db, issue, previous_status, issue.status, updated_by=command.updated_by or DEFAULT_UPDATED_BY
        )

    await commit_or_conflict(db, "Issue was modified concurrently, please retry")

    logger = get_contextual_logger(__name__, issue_id=issue.id, reference_number=issue.reference_number)
    logger.info(f"Issue updated: {', '.join(sorted(changes)) or 'no fields'}")

    if status_changed:
        logger.info(f"Status changed {previous_status.value} -> {issue.status.value}")
        notify_status_change(issue)
    if released is not None:
        logger.info(f"Technician {released.name} is available again")

    return issue


async def rate_issue(db: AsyncSession, issue_id: int, rating: int, feedback: str | None = None) -> Issue:
    """
    Store the citizen's 1-5 rating and optional feedback.

    Raises:
        ValidationError: rating outside 1-5.
        NotFoundError: unknown issue.
        ConflictError: the issue is not resolved or closed yet.
    """
    if not 1 <= rating <= 5:
        raise ValidationError("Rating must be between 1 and 5")

    issue = await get_issue(db, issue_id)
    if issue.status not in RATEABLE_STATUSES:
        raise ConflictError("Only resolved or closed issues can be rated")

    issue.rating = rating
    issue.feedback = feedback
    issue.updated_at = utc_now()

    await commit_or_conflict(db, "Issue was modified concurrently, please retry")

    logger = get_contextual_logger(__name__, issue_id=issue.id)
    logger.info(f"Issue rated {rating}/5")
    return issue


async def delete_issue(db: AsyncSession, issue_id: int) -> bool:
    """
    Administrative hard delete. Notes, escalations and history go with the
    issue in the same transaction, and a technician still on the job is
    made available again.

    Returns:
        False when the issue does not exist.
    """
    issue = await issue_selectors.get_issue_by_id(db, issue_id)
    if issue is None:
        return False

    reference_number = issue.reference_number
    if issue.status in issue_selectors.ACTIVE_ISSUE_STATUSES:
        await _release_technician(db, issue)
    await db.execute(delete(IssueNote).where(IssueNote.issue_id == issue_id))
    await db.execute(delete(IssueEscalation).where(IssueEscalation.issue_id == issue_id))
    await db.execute(delete(IssueHistory).where(IssueHistory.issue_id == issue_id))
    await db.delete(issue)

    await commit_or_conflict(db, "Issue was modified concurrently, please retry")

    logger = get_contextual_logger(__name__, issue_id=issue_id)
    logger.warning(f"Issue {reference_number} deleted")
    return True


async def remove_issue_photo(db: AsyncSession, issue_id: int, index: int) -> Issue:
    """Drop one photo by position. Only allowed while the issue is still open."""
    issue = await get_issue(db, issue_id)

    if issue.status != IssueStatus.OPEN:
        raise ConflictError("Photos can only be removed from open issues")

    photos = list(issue.photos or [])
    if index < 0 or index >= len(photos):
        raise ValidationError("Invalid photo index")

    removed = photos.pop(index)
    issue.photos = photos
    issue.updated_at = utc_now()

    await commit_or_conflict(db, "Issue was modified concurrently, please retry")

    logger = get_contextual_logger(__name__, issue_id=issue.id)
    logger.info(f"Photo removed: {removed}")
    return issue
