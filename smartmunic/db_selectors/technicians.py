# Standard library imports
from collections.abc import Sequence

# Third-party imports
from sqlalchemy import and_, select
from sqlalchemy.ext.asyncio import AsyncSession

# Local application imports
from smartmunic.models.technicians import Department, Team, Technician, TechnicianStatus


async def get_technician_by_id(db: AsyncSession, technician_id: int) -> Technician | None:
    result = await db.execute(select(Technician).where(Technician.id == technician_id))
    return result.scalar_one_or_none()


async def list_technicians(
    db: AsyncSession,
    department: Department | None = None,
    status: TechnicianStatus | None = None,
) -> Sequence[Technician]:
    query = select(Technician)

    filters = []
    if department:
        filters.append(Technician.department == department)
    if status:
        filters.append(Technician.status == status)

    if filters:
        query = query.where(and_(*filters))

    result = await db.execute(query.order_by(Technician.id))
    return result.scalars().all()


async def get_team_by_id(db: AsyncSession, team_id: int) -> Team | None:
    result = await db.execute(select(Team).where(Team.id == team_id))
    return result.scalar_one_or_none()


async def list_teams(db: AsyncSession, department: Department | None = None) -> Sequence[Team]:
    query = select(Team)
    if department:
        query = query.where(Team.department == department)
    result = await db.execute(query.order_by(Team.id))
    return result.scalars().all()
