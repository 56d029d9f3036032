# Standard library imports
from collections.abc import Sequence

# Third-party imports
from sqlalchemy.ext.asyncio import AsyncSession

# Local application imports
from smartmunic.core.exceptions import NotFoundError, ValidationError
from smartmunic.core.monitoring.logging import get_contextual_logger
from smartmunic.db_selectors.issues import get_issue_by_id, list_issue_escalations
from smartmunic.models.issues import IssueEscalation, IssuePriority
from smartmunic.schemas.issues.note_schemas import EscalationCreate
from smartmunic.utils.datetime_utils import utc_now
from smartmunic.utils.model_utils import commit_or_conflict


async def escalate_issue(db: AsyncSession, issue_id: int, data: EscalationCreate) -> IssueEscalation:
    """
    Record an escalation and raise the issue to urgent priority.

    Both writes share one commit, so an issue with an escalation on file is
    always urgent.

    Args:
        db: The current database session.
        issue_id: The issue being escalated.
        data: Reason and the staff member escalating.

    Returns:
        The new escalation record.
    """
    issue = await get_issue_by_id(db, issue_id)
    if issue is None:
        raise NotFoundError("Issue not found")

    reason = data.escalation_reason.strip()
    if not reason:
        raise ValidationError("Escalation reason is required")

    now = utc_now()
    escalation = IssueEscalation(
        issue_id=issue.id,
        escalation_reason=reason,
        escalated_by=data.escalated_by,
        escalated_by_role=data.escalated_by_role,
        escalated_to=data.escalated_to,
        priority=IssuePriority.URGENT,
        status="pending",
        created_at=now,
    )
    db.add(escalation)

    issue.priority = IssuePriority.URGENT
    issue.updated_at = now

    await commit_or_conflict(db, "Issue was modified concurrently, please retry")

    logger = get_contextual_logger(__name__, issue_id=issue.id, reference_number=issue.reference_number)
    logger.info(f"Issue escalated by {escalation.escalated_by} to {escalation.escalated_to}")
    return escalation


async def get_escalations(db: AsyncSession, issue_id: int) -> Sequence[IssueEscalation]:
    if await get_issue_by_id(db, issue_id) is None:
        raise NotFoundError("Issue not found")
    return await list_issue_escalations(db, issue_id)
