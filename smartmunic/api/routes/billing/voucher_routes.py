# Third-party imports
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

# Local application imports
from smartmunic.core.db import get_async_session
from smartmunic.models.billing import VoucherType
from smartmunic.schemas.billing.voucher_schemas import VoucherPurchase, VoucherResponse, VoucherUse
from smartmunic.services.billing import voucher_services

router = APIRouter(prefix="/vouchers", tags=["Vouchers"])


@router.get("", response_model=list[VoucherResponse])
async def list_vouchers(
    voucher_type: VoucherType | None = Query(None, alias="type"),
    db: AsyncSession = Depends(get_async_session),
):
    return await voucher_services.list_vouchers(db, voucher_type=voucher_type)


@router.post("", response_model=VoucherResponse, status_code=status.HTTP_201_CREATED)
async def purchase_voucher(purchase_data: VoucherPurchase, db: AsyncSession = Depends(get_async_session)):
    """Buy a prepaid water or electricity voucher. The amount is given in rand."""
    return await voucher_services.purchase_voucher(db, purchase_data.type, purchase_data.amount)


@router.post("/use", response_model=VoucherResponse)
async def use_voucher(use_data: VoucherUse, db: AsyncSession = Depends(get_async_session)):
    return await voucher_services.use_voucher(db, use_data.voucher_code)
