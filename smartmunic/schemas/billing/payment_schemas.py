# Third-party imports
from pydantic import Field

# Local application imports
from smartmunic.models.billing.payment import PaymentStatus, PaymentType
from smartmunic.schemas.common.base_schema import CamelModel, UtcDateTime


class PaymentCreate(CamelModel):
    type: PaymentType
    amount: int = Field(..., gt=0, description="Amount in cents")
    due_date: UtcDateTime
    account_number: str | None = Field(None, max_length=50)
    description: str | None = None


class PaymentResponse(CamelModel):
    id: int
    type: PaymentType
    amount: int
    due_date: UtcDateTime
    status: PaymentStatus
    account_number: str | None
    description: str | None
    paid_at: UtcDateTime | None
    created_at: UtcDateTime
