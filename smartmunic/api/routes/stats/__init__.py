from .stats_routes import router as stats_router

__all__ = ["stats_router"]
