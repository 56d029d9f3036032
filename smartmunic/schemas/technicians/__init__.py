from .team_schemas import TeamCreate, TeamResponse, TeamUpdate
from .technician_schemas import (
    NearestTechniciansRequest,
    TechnicianCreate,
    TechnicianResponse,
    TechnicianUpdate,
    TechnicianWithDistance,
)
from .work_session_schemas import (
    ActiveWorkSession,
    WorkSessionComplete,
    WorkSessionCompleteResponse,
    WorkSessionResponse,
    WorkSessionStart,
)

__all__ = [
    "TechnicianCreate",
    "TechnicianUpdate",
    "TechnicianResponse",
    "TechnicianWithDistance",
    "NearestTechniciansRequest",
    "TeamCreate",
    "TeamUpdate",
    "TeamResponse",
    "WorkSessionStart",
    "WorkSessionComplete",
    "WorkSessionResponse",
    "WorkSessionCompleteResponse",
    "ActiveWorkSession",
]
