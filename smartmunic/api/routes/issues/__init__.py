from .issue_routes import router as issue_router
from .note_routes import router as note_router

__all__ = ["issue_router", "note_router"]
