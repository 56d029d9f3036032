# Standard library imports
from typing import TypeVar

# Third-party imports
from fastapi import APIRouter, FastAPI
from fastapi.routing import APIRoute

# Local application imports
from smartmunic.api.routes.routes import router as routes_router
from smartmunic.settings import settings

ParentT = TypeVar("ParentT", APIRouter, FastAPI)


def remove_trailing_slashes_from_routes(parent: ParentT) -> ParentT:
    "Removes trailing slashes from all routes in the given router"

    for route in parent.routes:
        if isinstance(route, APIRoute) and route.path != "/":
            route.path = route.path.rstrip("/")

    return parent


router = APIRouter(prefix=settings.API_PREFIX)
router.include_router(routes_router)
router = remove_trailing_slashes_from_routes(router)
