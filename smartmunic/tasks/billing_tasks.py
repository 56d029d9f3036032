# Standard library imports
from typing import Any

# Local application imports
from smartmunic.core.celery.celery import celery_app
from smartmunic.core.db import run_with_new_session
from smartmunic.core.monitoring.logging import get_contextual_logger
from smartmunic.services.billing.payment_services import mark_overdue_payments
from smartmunic.services.billing.voucher_services import expire_vouchers
from smartmunic.utils.celery_utils import celery_async_task


@celery_app.task(bind=True)
@celery_async_task
async def mark_overdue_payments_task(self: Any) -> dict[str, int]:
    updated = await run_with_new_session(mark_overdue_payments)
    get_contextual_logger(__name__, task_id=self.request.id).info(f"{updated} payment(s) marked overdue")
    return {"updated": updated}


@celery_app.task(bind=True)
@celery_async_task
async def expire_vouchers_task(self: Any) -> dict[str, int]:
    expired = await run_with_new_session(expire_vouchers)
    get_contextual_logger(__name__, task_id=self.request.id).info(f"{expired} voucher(s) expired")
    return {"expired": expired}
