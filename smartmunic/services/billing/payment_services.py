# Standard library imports
from collections.abc import Sequence

# Third-party imports
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

# Local application imports
from smartmunic.core.exceptions import ConflictError, NotFoundError
from smartmunic.core.monitoring.logging import get_contextual_logger
from smartmunic.db_selectors import billing as billing_selectors
from smartmunic.models.billing import Payment, PaymentStatus, PaymentType
from smartmunic.schemas.billing.payment_schemas import PaymentCreate
from smartmunic.utils.datetime_utils import as_utc, utc_now
from smartmunic.utils.model_utils import commit_or_conflict

logger = get_contextual_logger(__name__)


def _is_overdue(payment: Payment) -> bool:
    return payment.status == PaymentStatus.PENDING and as_utc(payment.due_date) < utc_now()


async def mark_overdue_payments(db: AsyncSession) -> int:
    """Flag pending payments whose due date has passed. Returns how many changed."""
    result = await db.execute(select(Payment).where(Payment.status == PaymentStatus.PENDING))
    overdue = [payment for payment in result.scalars().all() if _is_overdue(payment)]
    if not overdue:
        return 0

    now = utc_now()
    for payment in overdue:
        payment.status = PaymentStatus.OVERDUE
        payment.updated_at = now
    await commit_or_conflict(db, "Payments changed while marking overdue")

    logger.info(f"Marked {len(overdue)} payment(s) overdue")
    return len(overdue)


async def list_payments(db: AsyncSession, payment_type: PaymentType | None = None) -> Sequence[Payment]:
    await mark_overdue_payments(db)
    return await billing_selectors.list_payments(db, payment_type=payment_type)


async def get_payment(db: AsyncSession, payment_id: int) -> Payment:
    payment = await billing_selectors.get_payment_by_id(db, payment_id)
    if payment is None:
        raise NotFoundError("Payment not found")
    return payment


async def create_payment(db: AsyncSession, data: PaymentCreate) -> Payment:
    now = utc_now()
    payment = Payment(
        **data.model_dump(),
        status=PaymentStatus.PENDING,
        created_at=now,
        updated_at=now,
    )
    db.add(payment)
    await commit_or_conflict(db, "Payment could not be created")
    return payment


async def pay_payment(db: AsyncSession, payment_id: int) -> Payment:
    """Settle a pending or overdue bill."""
    payment = await get_payment(db, payment_id)
    if payment.status == PaymentStatus.PAID:
        raise ConflictError("Payment has already been made")

    now = utc_now()
    payment.status = PaymentStatus.PAID
    payment.paid_at = now
    payment.updated_at = now
    await commit_or_conflict(db, "Payment was modified concurrently, please retry")

    logger.info(f"Payment {payment.id} settled ({payment.type.value}, {payment.amount} cents)")
    return payment
