# Standard library imports
from contextlib import asynccontextmanager

# Third-party imports
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.routing import APIRoute
from sqladmin import Admin
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

# Local application imports
from smartmunic.admin.views import ADMIN_VIEWS
from smartmunic.api import router as api_router
from smartmunic.api.utils.exceptions import register_exception_handlers
from smartmunic.core.db import async_engine, run_with_new_session
from smartmunic.core.monitoring import get_logger, init_sentry
from smartmunic.services.users.user_services import create_default_admin_user
from smartmunic.settings import settings

# Set up the main application logger
logger = get_logger("smartmunic")

init_sentry()

APP_VERSION = "1.0.0"


def custom_generate_unique_id(route: APIRoute) -> str:
    # Handle routes without tags
    if route.tags and len(route.tags) > 0:
        return f"{route.tags[0]}-{route.name}"
    else:
        return route.name or "unnamed_route"


@asynccontextmanager
async def lifespan(_: FastAPI):
    # Startup
    logger.info(f"Starting {settings.PROJECT_NAME} API ({settings.ENVIRONMENT})")

    try:
        admin_id = await run_with_new_session(create_default_admin_user)
        logger.info(f"Admin user ready with ID: {admin_id}")
    except Exception as e:
        logger.error(f"Failed to create admin user: {e}")

    yield

    # Shutdown
    logger.info("Shutting down")
    await async_engine.dispose()


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    docs_enabled = settings.ENVIRONMENT != "production"

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=APP_VERSION,
        description=f"Citizen services API for {settings.MUNICIPALITY_NAME}",
        openapi_url=f"{settings.API_PREFIX}/openapi.json" if docs_enabled else None,
        docs_url=f"{settings.API_PREFIX}/docs" if docs_enabled else None,
        redoc_url=f"{settings.API_PREFIX}/redoc" if docs_enabled else None,
        generate_unique_id_function=custom_generate_unique_id,
        lifespan=lifespan,
    )

    if settings.all_cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.all_cors_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    register_exception_handlers(app)

    @app.get("/health")
    async def health_check():
        try:
            async with async_engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
        except SQLAlchemyError as e:
            logger.error(f"Health check failed: {e}")
            return JSONResponse(
                status_code=503,
                content={"status": "unhealthy", "version": APP_VERSION, "database": "unavailable"},
            )
        return {"status": "healthy", "version": APP_VERSION, "database": "connected"}

    app.include_router(api_router)

    admin = Admin(app, async_engine, title=f"{settings.PROJECT_NAME} Admin")
    for view in ADMIN_VIEWS:
        admin.add_view(view)

    return app


# Create the app instance
app = create_app()
