# Local application imports
from smartmunic.models.technicians.technician import Department, TechnicianStatus
from smartmunic.schemas.common.base_schema import CamelModel


class DashboardStats(CamelModel):
    open_issues: int
    in_progress: int
    resolved_today: int
    avg_resolution: float  # days


class WardStats(CamelModel):
    ward: str
    total_issues: int
    open_issues: int
    in_progress: int
    resolved: int
    avg_rating: float | None
    category_breakdown: dict[str, int]


class DepartmentStats(CamelModel):
    department: Department
    total_technicians: int
    available_technicians: int
    open_issues: int
    in_progress_issues: int
    resolved_issues: int


class TechnicianPerformance(CamelModel):
    id: int
    name: str
    department: Department
    status: TechnicianStatus
    completed_issues: int
    active_issues: int
    avg_resolution_time: float
    performance_rating: float
