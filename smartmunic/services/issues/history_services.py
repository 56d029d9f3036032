# Standard library imports
from collections.abc import Sequence

# Third-party imports
from sqlalchemy.ext.asyncio import AsyncSession

# Local application imports
from smartmunic.core.exceptions import NotFoundError
from smartmunic.db_selectors.issues import get_issue_by_id, list_issue_history
from smartmunic.models.issues import Issue, IssueHistory, IssueStatus
from smartmunic.utils.datetime_utils import utc_now


def record_status_change(
    db: AsyncSession,
    issue: Issue,
    from_status: IssueStatus | None,
    to_status: IssueStatus,
    comment: str | None = None,
    updated_by: str = "System",
    technician_id: int | None = None,
) -> IssueHistory:
    """Stage a history row for the caller to commit with the status change."""
    entry = IssueHistory(
        issue_id=issue.id,
        from_status=from_status,
        to_status=to_status,
        comment=comment,
        updated_by=updated_by,
        technician_id=technician_id,
        created_at=utc_now(),
    )
    db.add(entry)
    return entry


async def get_issue_history(db: AsyncSession, issue_id: int) -> Sequence[IssueHistory]:
    if await get_issue_by_id(db, issue_id) is None:
        raise NotFoundError("Issue not found")
    return await list_issue_history(db, issue_id)
