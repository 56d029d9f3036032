# Standard library imports
from decimal import Decimal

# Third-party imports
from pydantic import Field

# Local application imports
from smartmunic.models.billing.voucher import VoucherStatus, VoucherType
from smartmunic.schemas.common.base_schema import CamelModel, NonEmptyStr, UtcDateTime


class VoucherPurchase(CamelModel):
    type: VoucherType
    amount: Decimal = Field(..., gt=0, max_digits=10, decimal_places=2, description="Amount in rand")


class VoucherUse(CamelModel):
    voucher_code: NonEmptyStr


class VoucherResponse(CamelModel):
    id: int
    type: VoucherType
    amount: int  # cents
    voucher_code: str
    status: VoucherStatus
    purchase_date: UtcDateTime
    expiry_date: UtcDateTime
    used_date: UtcDateTime | None
