# Third-party imports
from sqlalchemy.ext.asyncio import AsyncSession

# Local application imports
from smartmunic.core.exceptions import ConflictError, NotFoundError, ValidationError
from smartmunic.core.monitoring.logging import get_contextual_logger
from smartmunic.db_selectors.issues import get_issue_by_id
from smartmunic.db_selectors.technicians import get_technician_by_id, list_technicians
from smartmunic.models.issues import Issue, IssueCategory, IssueStatus
from smartmunic.models.technicians import Department, Technician, TechnicianStatus
from smartmunic.services.issues.history_services import record_status_change
from smartmunic.services.notifications.notification_services import notify_status_change
from smartmunic.settings import settings
from smartmunic.utils.datetime_utils import utc_now
from smartmunic.utils.geo_utils import calculate_distance, parse_coordinate
from smartmunic.utils.model_utils import commit_or_conflict

# Categories without an entry here cannot be matched to a department
CATEGORY_DEPARTMENTS: dict[IssueCategory, Department] = {
    IssueCategory.WATER_SANITATION: Department.WATER_SANITATION,
    IssueCategory.ELECTRICITY: Department.ELECTRICITY,
    IssueCategory.ROADS_TRANSPORT: Department.ROADS_TRANSPORT,
    IssueCategory.WASTE_MANAGEMENT: Department.WASTE_MANAGEMENT,
}

ASSIGNABLE_ISSUE_STATUSES = (IssueStatus.OPEN, IssueStatus.ASSIGNED)


def department_for_category(category: IssueCategory) -> Department | None:
    return CATEGORY_DEPARTMENTS.get(category)


async def find_nearest_technicians(
    db: AsyncSession,
    latitude: float,
    longitude: float,
    department: Department | None = None,
    limit: int | None = None,
) -> list[tuple[Technician, float]]:
    """
    Rank available technicians by great-circle distance from a point.

    Technicians without usable coordinates are left out rather than ranked
    last. Nothing is modified.

    Returns:
        ``(technician, distance_km)`` pairs, nearest first.
    """
    candidates = await list_technicians(db, department=department, status=TechnicianStatus.AVAILABLE)

    ranked: list[tuple[Technician, float]] = []
    for technician in candidates:
        tech_lat = parse_coordinate(technician.latitude)
        tech_lon = parse_coordinate(technician.longitude)
        if tech_lat is None or tech_lon is None:
            continue
        ranked.append((technician, calculate_distance(latitude, longitude, tech_lat, tech_lon)))

    ranked.sort(key=lambda pair: pair[1])
    if limit is not None:
        ranked = ranked[:limit]
    return ranked


async def suggest_technicians_for_issue(
    db: AsyncSession, issue_id: int, limit: int | None = None
) -> list[tuple[Technician, float]]:
    """Nearest available technicians in the department that handles the issue's category."""
    issue = await get_issue_by_id(db, issue_id)
    if issue is None:
        raise NotFoundError("Issue not found")

    department = department_for_category(issue.category)
    if department is None:
        return []

    latitude = parse_coordinate(issue.latitude)
    longitude = parse_coordinate(issue.longitude)
    if latitude is None or longitude is None:
        raise ValidationError("Issue has no coordinates to match technicians against")

    return await find_nearest_technicians(
        db,
        latitude,
        longitude,
        department=department,
        limit=limit or settings.NEAREST_TECHNICIANS_DEFAULT_LIMIT,
    )


async def assign_technician_to_issue(db: AsyncSession, technician_id: int, issue_id: int) -> bool:
    """
    Assign a technician to an issue.

    The issue moves to ``assigned`` and the technician to ``on_job`` in one
    commit. Both rows are version-checked, so two requests racing for the
    same technician or issue cannot both succeed.

    Returns:
        False, with nothing changed, when either id is unknown.

    Raises:
        ConflictError: the technician is not available, the issue already
            has an assignee or is past the assignable states, or a
            concurrent request got there first.
    """
    technician = await get_technician_by_id(db, technician_id)
    issue: Issue | None = await get_issue_by_id(db, issue_id)
    logger = get_contextual_logger(__name__, technician_id=technician_id, issue_id=issue_id)

    if technician is None or issue is None:
        logger.warning("Assignment skipped: technician or issue not found")
        return False

    if technician.status != TechnicianStatus.AVAILABLE:
        raise ConflictError(f"Technician is not available (status: {technician.status.value})")
    if issue.assigned_to_id is not None:
        raise ConflictError("Issue is already assigned to a technician")
    if issue.status not in ASSIGNABLE_ISSUE_STATUSES:
        raise ConflictError(f"Issue cannot be assigned while {issue.status.value}")

    previous_status = issue.status
    now = utc_now()

    issue.assigned_to_id = technician.id
    issue.status = IssueStatus.ASSIGNED
    issue.updated_at = now
    technician.status = TechnicianStatus.ON_JOB
    technician.updated_at = now

    record_status_change(
        db,
        issue,
        previous_status,
        IssueStatus.ASSIGNED,
        comment=f"Assigned to {technician.name}",
        updated_by="Technical Manager",
        technician_id=technician.id,
    )

    await commit_or_conflict(db, "Technician or issue changed during assignment, please retry")

    logger.info(f"Issue {issue.reference_number} assigned to {technician.name}")
    notify_status_change(issue)
    return True
