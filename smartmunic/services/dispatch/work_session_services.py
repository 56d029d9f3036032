# Standard library imports
from collections.abc import Sequence
from datetime import datetime

# Third-party imports
from sqlalchemy.ext.asyncio import AsyncSession

# Local application imports
from smartmunic.core.exceptions import ConflictError, NotFoundError, ValidationError
from smartmunic.core.monitoring.logging import get_contextual_logger
from smartmunic.db_selectors.issues import get_issue_by_id, list_issues
from smartmunic.db_selectors.technicians import get_technician_by_id
from smartmunic.models.issues import Issue, IssueNote, IssueStatus
from smartmunic.models.technicians import Technician, TechnicianStatus
from smartmunic.services.issues.history_services import record_status_change
from smartmunic.services.notifications.notification_services import notify_status_change
from smartmunic.utils.datetime_utils import as_utc, utc_now
from smartmunic.utils.model_utils import commit_or_conflict


async def _load_assignment(db: AsyncSession, issue_id: int, technician_id: int) -> tuple[Issue, Technician]:
    issue = await get_issue_by_id(db, issue_id)
    if issue is None:
        raise NotFoundError("Issue not found")
    technician = await get_technician_by_id(db, technician_id)
    if technician is None:
        raise NotFoundError("Technician not found")
    if issue.assigned_to_id != technician.id:
        raise ConflictError("Issue is not assigned to this technician")
    return issue, technician


async def start_work(db: AsyncSession, issue_id: int, technician_id: int) -> Issue:
    """Technician arrives on site: ``assigned`` -> ``in_progress``."""
    issue, technician = await _load_assignment(db, issue_id, technician_id)

    if issue.status != IssueStatus.ASSIGNED:
        raise ConflictError(f"Work cannot start while the issue is {issue.status.value}")

    now = utc_now()
    issue.status = IssueStatus.IN_PROGRESS
    issue.updated_at = now
    technician.status = TechnicianStatus.ON_JOB
    technician.updated_at = now

    record_status_change(
        db,
        issue,
        IssueStatus.ASSIGNED,
        IssueStatus.IN_PROGRESS,
        comment="Technician on site",
        updated_by=technician.name,
        technician_id=technician.id,
    )

    await commit_or_conflict(db, "Issue was modified concurrently, please retry")

    logger = get_contextual_logger(__name__, issue_id=issue.id, technician_id=technician.id)
    logger.info("Work session started")
    notify_status_change(issue)
    return issue


async def complete_work(
    db: AsyncSession, issue_id: int, technician_id: int, completion_notes: str
) -> tuple[Issue, datetime]:
    """
    Close out a work session.

    The issue becomes resolved, the completion notes are appended as a
    note, and the technician goes back to ``available`` with their running
    resolution-time average updated.

    Returns:
        The resolved issue and the completion time.
    """
    notes = completion_notes.strip()
    if not notes:
        raise ValidationError("Completion notes are required")

    issue, technician = await _load_assignment(db, issue_id, technician_id)

    if issue.status != IssueStatus.IN_PROGRESS:
        raise ConflictError(f"Work cannot be completed while the issue is {issue.status.value}")

    now = utc_now()
    issue.status = IssueStatus.RESOLVED
    if issue.resolved_at is None:
        issue.resolved_at = now
    issue.updated_at = now

    db.add(
        IssueNote(
            issue_id=issue.id,
            note=notes,
            note_type="completion",
            created_by=technician.name,
            created_by_role="field_technician",
            created_at=now,
        )
    )
    record_status_change(
        db,
        issue,
        IssueStatus.IN_PROGRESS,
        IssueStatus.RESOLVED,
        comment="Work completed",
        updated_by=technician.name,
        technician_id=technician.id,
    )

    resolution_hours = (as_utc(issue.resolved_at) - as_utc(issue.created_at)).total_seconds() / 3600
    completed = technician.completed_issues + 1
    technician.avg_resolution_time = round(
        (technician.avg_resolution_time * technician.completed_issues + resolution_hours) / completed, 2
    )
    technician.completed_issues = completed
    technician.status = TechnicianStatus.AVAILABLE
    technician.updated_at = now

    await commit_or_conflict(db, "Issue was modified concurrently, please retry")

    logger = get_contextual_logger(__name__, issue_id=issue.id, technician_id=technician.id)
    logger.info(f"Work completed after {resolution_hours:.1f}h")
    notify_status_change(issue)
    return issue, now


async def list_active_work_sessions(db: AsyncSession, technician_id: int) -> Sequence[Issue]:
    """Issues the technician is currently working on."""
    if await get_technician_by_id(db, technician_id) is None:
        raise NotFoundError("Technician not found")
    return await list_issues(db, status=IssueStatus.IN_PROGRESS, technician_id=technician_id)
