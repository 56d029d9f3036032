# Third-party imports
from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

# Local application imports
from smartmunic.core.db import get_async_session
from smartmunic.models.technicians import Department
from smartmunic.schemas.technicians.team_schemas import TeamCreate, TeamResponse, TeamUpdate
from smartmunic.services.dispatch import technician_services

router = APIRouter(prefix="/teams", tags=["Teams"])


@router.get("", response_model=list[TeamResponse])
async def list_teams(department: Department | None = None, db: AsyncSession = Depends(get_async_session)):
    return await technician_services.list_teams(db, department=department)


@router.post("", response_model=TeamResponse, status_code=status.HTTP_201_CREATED)
async def create_team(team_data: TeamCreate, db: AsyncSession = Depends(get_async_session)):
    return await technician_services.create_team(db, team_data)


@router.patch("/{team_id}", response_model=TeamResponse)
async def update_team(team_id: int, update_data: TeamUpdate, db: AsyncSession = Depends(get_async_session)):
    return await technician_services.update_team(db, team_id, update_data)
