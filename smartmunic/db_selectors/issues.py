# Standard library imports
from collections.abc import Sequence

# Third-party imports
from sqlalchemy import and_, exists, select
from sqlalchemy.ext.asyncio import AsyncSession

# Local application imports
from smartmunic.models.issues import Issue, IssueCategory, IssueEscalation, IssueHistory, IssueNote, IssueStatus

ACTIVE_ISSUE_STATUSES = (IssueStatus.ASSIGNED, IssueStatus.IN_PROGRESS)


async def get_issue_by_id(db: AsyncSession, issue_id: int) -> Issue | None:
    result = await db.execute(select(Issue).where(Issue.id == issue_id))
    return result.scalar_one_or_none()


async def reference_number_exists(db: AsyncSession, reference_number: str) -> bool:
    result = await db.execute(select(exists().where(Issue.reference_number == reference_number)))
    return bool(result.scalar())


async def list_issues(
    db: AsyncSession,
    status: IssueStatus | None = None,
    category: IssueCategory | None = None,
    ward: str | None = None,
    technician_id: int | None = None,
) -> Sequence[Issue]:
    """Issues matching every given filter, newest first."""
    query = select(Issue)

    filters = []
    if status:
        filters.append(Issue.status == status)
    if category:
        filters.append(Issue.category == category)
    if ward:
        filters.append(Issue.ward == ward)
    if technician_id is not None:
        filters.append(Issue.assigned_to_id == technician_id)

    if filters:
        query = query.where(and_(*filters))

    result = await db.execute(query.order_by(Issue.created_at.desc(), Issue.id.desc()))
    return result.scalars().all()


async def list_issue_notes(db: AsyncSession, issue_id: int) -> Sequence[IssueNote]:
    result = await db.execute(
        select(IssueNote).where(IssueNote.issue_id == issue_id).order_by(IssueNote.created_at, IssueNote.id)
    )
    return result.scalars().all()


async def list_issue_escalations(db: AsyncSession, issue_id: int) -> Sequence[IssueEscalation]:
    result = await db.execute(
        select(IssueEscalation)
        .where(IssueEscalation.issue_id == issue_id)
        .order_by(IssueEscalation.created_at, IssueEscalation.id)
    )
    return result.scalars().all()


async def list_issue_history(db: AsyncSession, issue_id: int) -> Sequence[IssueHistory]:
    result = await db.execute(
        select(IssueHistory).where(IssueHistory.issue_id == issue_id).order_by(IssueHistory.created_at, IssueHistory.id)
    )
    return result.scalars().all()


async def issue_has_escalations(db: AsyncSession, issue_id: int) -> bool:
    result = await db.execute(select(exists().where(IssueEscalation.issue_id == issue_id)))
    return bool(result.scalar())


async def technician_has_other_active_issues(db: AsyncSession, technician_id: int, issue_id: int) -> bool:
    """True when the technician still holds an assigned or in-progress issue other than ``issue_id``."""
    result = await db.execute(
        select(
            exists().where(
                Issue.assigned_to_id == technician_id,
                Issue.id != issue_id,
                Issue.status.in_(ACTIVE_ISSUE_STATUSES),
            )
        )
    )
    return bool(result.scalar())
