# Standard library imports
from collections.abc import Sequence

# Third-party imports
from sqlalchemy.ext.asyncio import AsyncSession

# Local application imports
from smartmunic.core.exceptions import NotFoundError
from smartmunic.core.monitoring.logging import get_contextual_logger
from smartmunic.db_selectors import technicians as technician_selectors
from smartmunic.models.technicians import Department, Team, Technician, TechnicianStatus
from smartmunic.schemas.technicians.team_schemas import TeamCreate, TeamUpdate
from smartmunic.schemas.technicians.technician_schemas import TechnicianCreate, TechnicianUpdate
from smartmunic.utils.datetime_utils import utc_now
from smartmunic.utils.model_utils import commit_or_conflict, update_model_fields


async def get_technician(db: AsyncSession, technician_id: int) -> Technician:
    technician = await technician_selectors.get_technician_by_id(db, technician_id)
    if technician is None:
        raise NotFoundError("Technician not found")
    return technician


async def list_technicians(
    db: AsyncSession,
    department: Department | None = None,
    status: TechnicianStatus | None = None,
) -> Sequence[Technician]:
    return await technician_selectors.list_technicians(db, department=department, status=status)


async def _ensure_team_exists(db: AsyncSession, team_id: int | None) -> None:
    if team_id is not None and await technician_selectors.get_team_by_id(db, team_id) is None:
        raise NotFoundError("Team not found")


async def create_technician(db: AsyncSession, data: TechnicianCreate) -> Technician:
    await _ensure_team_exists(db, data.team_id)

    now = utc_now()
    technician = Technician(
        **data.model_dump(),
        status=TechnicianStatus.AVAILABLE,
        created_at=now,
        updated_at=now,
    )
    db.add(technician)
    await commit_or_conflict(db, "Technician could not be created")

    logger = get_contextual_logger(__name__, technician_id=technician.id)
    logger.info(f"Technician {technician.name} added to {technician.department.value}")
    return technician


async def update_technician(db: AsyncSession, technician_id: int, data: TechnicianUpdate) -> Technician:
    """Partial update; covers self-reported status and location changes from the field."""
    technician = await get_technician(db, technician_id)
    if "team_id" in data.model_fields_set:
        await _ensure_team_exists(db, data.team_id)

    changes = update_model_fields(technician, data)
    technician.updated_at = utc_now()

    await commit_or_conflict(db, "Technician was modified concurrently, please retry")

    logger = get_contextual_logger(__name__, technician_id=technician.id)
    logger.info(f"Technician updated: {', '.join(sorted(changes)) or 'no fields'}")
    return technician


async def list_teams(db: AsyncSession, department: Department | None = None) -> Sequence[Team]:
    return await technician_selectors.list_teams(db, department=department)


async def create_team(db: AsyncSession, data: TeamCreate) -> Team:
    now = utc_now()
    team = Team(**data.model_dump(), created_at=now, updated_at=now)
    db.add(team)
    await commit_or_conflict(db, "Team could not be created")
    return team


async def update_team(db: AsyncSession, team_id: int, data: TeamUpdate) -> Team:
    team = await technician_selectors.get_team_by_id(db, team_id)
    if team is None:
        raise NotFoundError("Team not found")

    update_model_fields(team, data)
    team.updated_at = utc_now()
    await commit_or_conflict(db, "Team could not be updated")
    return team
