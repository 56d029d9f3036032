# Third-party imports
from fastapi import APIRouter

# Local application imports
from smartmunic.api.routes.billing import payment_router, voucher_router
from smartmunic.api.routes.issues import issue_router, note_router
from smartmunic.api.routes.stats import stats_router
from smartmunic.api.routes.technicians import team_router, technician_router, work_session_router
from smartmunic.api.routes.users import user_router

router = APIRouter()

router.include_router(issue_router)
router.include_router(note_router)
router.include_router(technician_router)
router.include_router(team_router)
router.include_router(work_session_router)
router.include_router(payment_router)
router.include_router(voucher_router)
router.include_router(stats_router)
router.include_router(user_router)
