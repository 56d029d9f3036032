# Third-party imports
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

# Local application imports
from smartmunic.core.db import get_async_session
from smartmunic.models.billing import PaymentType
from smartmunic.schemas.billing.payment_schemas import PaymentCreate, PaymentResponse
from smartmunic.services.billing import payment_services

router = APIRouter(prefix="/payments", tags=["Payments"])


@router.get("", response_model=list[PaymentResponse])
async def list_payments(
    payment_type: PaymentType | None = Query(None, alias="type"),
    db: AsyncSession = Depends(get_async_session),
):
    """Municipal bills by due date. Overdue bills are flagged before listing."""
    return await payment_services.list_payments(db, payment_type=payment_type)


@router.post("", response_model=PaymentResponse, status_code=status.HTTP_201_CREATED)
async def create_payment(payment_data: PaymentCreate, db: AsyncSession = Depends(get_async_session)):
    return await payment_services.create_payment(db, payment_data)


@router.get("/{payment_id}", response_model=PaymentResponse)
async def get_payment(payment_id: int, db: AsyncSession = Depends(get_async_session)):
    return await payment_services.get_payment(db, payment_id)


@router.post("/{payment_id}/pay", response_model=PaymentResponse)
async def pay_payment(payment_id: int, db: AsyncSession = Depends(get_async_session)):
    return await payment_services.pay_payment(db, payment_id)
