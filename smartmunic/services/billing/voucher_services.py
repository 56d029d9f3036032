# Standard library imports
from collections.abc import Sequence
from datetime import timedelta
from decimal import ROUND_HALF_UP, Decimal

# Third-party imports
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

# Local application imports
from smartmunic.core.exceptions import ConflictError, NotFoundError
from smartmunic.core.monitoring.logging import get_contextual_logger
from smartmunic.db_selectors import billing as billing_selectors
from smartmunic.models.billing import Voucher, VoucherStatus, VoucherType
from smartmunic.settings import settings
from smartmunic.utils.datetime_utils import as_utc, utc_now
from smartmunic.utils.model_utils import commit_or_conflict
from smartmunic.utils.reference_utils import generate_voucher_code

logger = get_contextual_logger(__name__)


def to_cents(amount: Decimal) -> int:
    return int((amount * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


async def purchase_voucher(db: AsyncSession, voucher_type: VoucherType, amount: Decimal) -> Voucher:
    """Issue a prepaid voucher valid for VOUCHER_VALIDITY_DAYS."""
    now = utc_now()
    voucher = Voucher(
        type=voucher_type,
        amount=to_cents(amount),
        voucher_code=generate_voucher_code(voucher_type.value),
        status=VoucherStatus.ACTIVE,
        purchase_date=now,
        expiry_date=now + timedelta(days=settings.VOUCHER_VALIDITY_DAYS),
        created_at=now,
        updated_at=now,
    )
    db.add(voucher)
    await commit_or_conflict(db, "Voucher code collision, please retry")

    logger.info(f"Voucher {voucher.voucher_code} issued for {voucher.amount} cents")
    return voucher


async def list_vouchers(db: AsyncSession, voucher_type: VoucherType | None = None) -> Sequence[Voucher]:
    return await billing_selectors.list_vouchers(db, voucher_type=voucher_type)


async def use_voucher(db: AsyncSession, voucher_code: str) -> Voucher:
    """
    Redeem a voucher.

    Raises:
        NotFoundError: unknown code.
        ConflictError: already used or expired. A voucher found past its
            expiry date is marked expired first.
    """
    voucher = await billing_selectors.get_voucher_by_code(db, voucher_code.strip())
    if voucher is None:
        raise NotFoundError("Voucher not found")

    now = utc_now()
    if voucher.status == VoucherStatus.ACTIVE and as_utc(voucher.expiry_date) < now:
        voucher.status = VoucherStatus.EXPIRED
        voucher.updated_at = now
        await commit_or_conflict(db, "Voucher was modified concurrently, please retry")

    if voucher.status != VoucherStatus.ACTIVE:
        raise ConflictError(f"Voucher is not active (status: {voucher.status.value})")

    voucher.status = VoucherStatus.USED
    voucher.used_date = now
    voucher.updated_at = now
    await commit_or_conflict(db, "Voucher was modified concurrently, please retry")

    logger.info(f"Voucher {voucher.voucher_code} redeemed")
    return voucher


async def expire_vouchers(db: AsyncSession) -> int:
    """Mark active vouchers past their expiry date as expired. Returns how many changed."""
    result = await db.execute(select(Voucher).where(Voucher.status == VoucherStatus.ACTIVE))
    now = utc_now()
    expired = [voucher for voucher in result.scalars().all() if as_utc(voucher.expiry_date) < now]
    if not expired:
        return 0

    for voucher in expired:
        voucher.status = VoucherStatus.EXPIRED
        voucher.updated_at = now
    await commit_or_conflict(db, "Vouchers changed while expiring")

    logger.info(f"Expired {len(expired)} voucher(s)")
    return len(expired)
