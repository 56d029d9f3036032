# Standard library imports
from collections import Counter
from datetime import datetime, time

# Third-party imports
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

# Local application imports
from smartmunic.core.exceptions import NotFoundError
from smartmunic.db_selectors.technicians import list_technicians
from smartmunic.models.issues import Issue, IssueStatus
from smartmunic.models.technicians import Department, TechnicianStatus
from smartmunic.schemas.stats.stats_schemas import DashboardStats, DepartmentStats, TechnicianPerformance, WardStats
from smartmunic.services.dispatch.dispatch_services import CATEGORY_DEPARTMENTS
from smartmunic.utils.cache_utils import cached_stats
from smartmunic.utils.datetime_utils import as_utc, utc_now

SECONDS_PER_DAY = 86400


async def _count_by_status(db: AsyncSession) -> dict[IssueStatus, int]:
    result = await db.execute(select(Issue.status, func.count(Issue.id)).group_by(Issue.status))
    return {status: count for status, count in result.all()}


async def get_dashboard_stats(db: AsyncSession) -> DashboardStats:
    """Headline numbers: open, in progress, resolved today, mean days to resolve."""
    counts = await _count_by_status(db)

    result = await db.execute(select(Issue.created_at, Issue.resolved_at).where(Issue.resolved_at.is_not(None)))
    resolved_rows = result.all()

    start_of_day = datetime.combine(utc_now().date(), time.min, tzinfo=utc_now().tzinfo)
    resolved_today = sum(1 for _, resolved_at in resolved_rows if as_utc(resolved_at) >= start_of_day)

    durations = [
        (as_utc(resolved_at) - as_utc(created_at)).total_seconds() / SECONDS_PER_DAY
        for created_at, resolved_at in resolved_rows
    ]
    avg_resolution = round(sum(durations) / len(durations), 1) if durations else 0.0

    return DashboardStats(
        open_issues=counts.get(IssueStatus.OPEN, 0),
        in_progress=counts.get(IssueStatus.IN_PROGRESS, 0),
        resolved_today=resolved_today,
        avg_resolution=avg_resolution,
    )


async def get_ward_stats(db: AsyncSession, ward: str) -> WardStats:
    result = await db.execute(select(Issue).where(Issue.ward == ward))
    issues = result.scalars().all()
    if not issues:
        raise NotFoundError("No issues reported for this ward")

    statuses = Counter(issue.status for issue in issues)
    ratings = [issue.rating for issue in issues if issue.rating is not None]

    return WardStats(
        ward=ward,
        total_issues=len(issues),
        open_issues=statuses[IssueStatus.OPEN],
        in_progress=statuses[IssueStatus.IN_PROGRESS],
        resolved=statuses[IssueStatus.RESOLVED] + statuses[IssueStatus.CLOSED],
        avg_rating=round(sum(ratings) / len(ratings), 1) if ratings else None,
        category_breakdown=dict(Counter(issue.category.value for issue in issues)),
    )


async def _compute_department_stats(db: AsyncSession, department: Department | None) -> list[DepartmentStats]:
    departments = [department] if department else list(Department)
    technicians = await list_technicians(db)

    result = await db.execute(
        select(Issue.category, Issue.status, func.count(Issue.id)).group_by(Issue.category, Issue.status)
    )
    issue_counts: dict[Department, Counter[IssueStatus]] = {}
    for category, status, count in result.all():
        mapped = CATEGORY_DEPARTMENTS.get(category)
        if mapped is not None:
            issue_counts.setdefault(mapped, Counter())[status] += count

    stats = []
    for dept in departments:
        staff = [t for t in technicians if t.department == dept]
        counts = issue_counts.get(dept, Counter())
        stats.append(
            DepartmentStats(
                department=dept,
                total_technicians=len(staff),
                available_technicians=sum(1 for t in staff if t.status == TechnicianStatus.AVAILABLE),
                open_issues=counts[IssueStatus.OPEN] + counts[IssueStatus.ASSIGNED],
                in_progress_issues=counts[IssueStatus.IN_PROGRESS],
                resolved_issues=counts[IssueStatus.RESOLVED] + counts[IssueStatus.CLOSED],
            )
        )
    return stats


async def _compute_technician_performance(db: AsyncSession) -> list[TechnicianPerformance]:
    technicians = await list_technicians(db)

    result = await db.execute(
        select(Issue.assigned_to_id, func.count(Issue.id))
        .where(Issue.status.in_([IssueStatus.ASSIGNED, IssueStatus.IN_PROGRESS]))
        .group_by(Issue.assigned_to_id)
    )
    active = {technician_id: count for technician_id, count in result.all() if technician_id is not None}

    return [
        TechnicianPerformance(
            id=t.id,
            name=t.name,
            department=t.department,
            status=t.status,
            completed_issues=t.completed_issues,
            active_issues=active.get(t.id, 0),
            avg_resolution_time=t.avg_resolution_time,
            performance_rating=t.performance_rating,
        )
        for t in technicians
    ]


async def get_department_stats(db: AsyncSession, department: Department | None = None) -> list[DepartmentStats]:
    """Technician availability and issue load per department, cached briefly in Redis."""

    async def load() -> list[dict]:
        return [item.model_dump(mode="json") for item in await _compute_department_stats(db, department)]

    cache_key = f"stats:departments:{department.value if department else 'all'}"
    return [DepartmentStats.model_validate(item) for item in await cached_stats(cache_key, load)]


async def get_technician_performance(db: AsyncSession) -> list[TechnicianPerformance]:
    async def load() -> list[dict]:
        return [item.model_dump(mode="json") for item in await _compute_technician_performance(db)]

    return [TechnicianPerformance.model_validate(item) for item in await cached_stats("stats:technicians", load)]
