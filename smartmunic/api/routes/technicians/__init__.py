from .team_routes import router as team_router
from .technician_routes import router as technician_router
from .work_session_routes import router as work_session_router

__all__ = ["team_router", "technician_router", "work_session_router"]
