# Third-party imports
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

# Local application imports
from smartmunic.core.db import get_async_session
from smartmunic.models.technicians import Department
from smartmunic.schemas.stats.stats_schemas import DashboardStats, DepartmentStats, TechnicianPerformance, WardStats
from smartmunic.services.stats import stats_services

router = APIRouter(tags=["Statistics"])


@router.get("/stats", response_model=DashboardStats)
async def get_dashboard_stats(db: AsyncSession = Depends(get_async_session)):
    return await stats_services.get_dashboard_stats(db)


@router.get("/wards/{ward}/stats", response_model=WardStats)
async def get_ward_stats(ward: str, db: AsyncSession = Depends(get_async_session)):
    return await stats_services.get_ward_stats(db, ward)


@router.get("/analytics/departments", response_model=list[DepartmentStats])
async def get_department_stats(department: Department | None = None, db: AsyncSession = Depends(get_async_session)):
    """Technician availability and issue load per department"""
    return await stats_services.get_department_stats(db, department=department)


@router.get("/analytics/technicians", response_model=list[TechnicianPerformance])
async def get_technician_performance(db: AsyncSession = Depends(get_async_session)):
    return await stats_services.get_technician_performance(db)
