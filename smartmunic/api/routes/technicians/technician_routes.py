# Third-party imports
from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

# Local application imports
from smartmunic.core.db import get_async_session
from smartmunic.models.technicians import Department, TechnicianStatus
from smartmunic.schemas.common.base_schema import MessageResponse
from smartmunic.schemas.technicians.technician_schemas import (
    NearestTechniciansRequest,
    TechnicianCreate,
    TechnicianResponse,
    TechnicianUpdate,
    TechnicianWithDistance,
)
from smartmunic.services.dispatch import technician_services
from smartmunic.services.dispatch.dispatch_services import assign_technician_to_issue, find_nearest_technicians

router = APIRouter(prefix="/technicians", tags=["Technicians"])


@router.get("", response_model=list[TechnicianResponse])
async def list_technicians(
    department: Department | None = None,
    status_filter: TechnicianStatus | None = Query(None, alias="status"),
    db: AsyncSession = Depends(get_async_session),
):
    return await technician_services.list_technicians(db, department=department, status=status_filter)


@router.post("", response_model=TechnicianResponse, status_code=status.HTTP_201_CREATED)
async def create_technician(technician_data: TechnicianCreate, db: AsyncSession = Depends(get_async_session)):
    return await technician_services.create_technician(db, technician_data)


@router.post("/nearest", response_model=list[TechnicianWithDistance])
async def find_nearest(request: NearestTechniciansRequest, db: AsyncSession = Depends(get_async_session)):
    """Available technicians ranked by distance from a point, nearest first."""
    matches = await find_nearest_technicians(
        db,
        request.latitude,
        request.longitude,
        department=request.department,
        limit=request.limit,
    )
    return [TechnicianWithDistance.from_match(technician, distance) for technician, distance in matches]


@router.get("/{technician_id}", response_model=TechnicianResponse)
async def get_technician(technician_id: int, db: AsyncSession = Depends(get_async_session)):
    return await technician_services.get_technician(db, technician_id)


@router.patch("/{technician_id}", response_model=TechnicianResponse)
async def update_technician(
    technician_id: int, update_data: TechnicianUpdate, db: AsyncSession = Depends(get_async_session)
):
    return await technician_services.update_technician(db, technician_id, update_data)


@router.post("/{technician_id}/assign/{issue_id}", response_model=MessageResponse)
async def assign_technician(technician_id: int, issue_id: int, db: AsyncSession = Depends(get_async_session)):
    """Assign a technician to an issue"""
    assigned = await assign_technician_to_issue(db, technician_id, issue_id)
    if not assigned:
        raise HTTPException(status_code=404, detail="Technician or issue not found")
    return MessageResponse(message="Technician assigned successfully")
