# Standard library imports
from collections.abc import Sequence

# Third-party imports
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

# Local application imports
from smartmunic.models.billing import Payment, PaymentType, Voucher, VoucherType


async def get_payment_by_id(db: AsyncSession, payment_id: int) -> Payment | None:
    result = await db.execute(select(Payment).where(Payment.id == payment_id))
    return result.scalar_one_or_none()


async def list_payments(db: AsyncSession, payment_type: PaymentType | None = None) -> Sequence[Payment]:
    query = select(Payment)
    if payment_type:
        query = query.where(Payment.type == payment_type)
    result = await db.execute(query.order_by(Payment.due_date, Payment.id))
    return result.scalars().all()


async def get_voucher_by_code(db: AsyncSession, voucher_code: str) -> Voucher | None:
    result = await db.execute(select(Voucher).where(Voucher.voucher_code == voucher_code))
    return result.scalar_one_or_none()


async def list_vouchers(db: AsyncSession, voucher_type: VoucherType | None = None) -> Sequence[Voucher]:
    query = select(Voucher)
    if voucher_type:
        query = query.where(Voucher.type == voucher_type)
    result = await db.execute(query.order_by(Voucher.purchase_date.desc(), Voucher.id.desc()))
    return result.scalars().all()
