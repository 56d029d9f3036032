# Standard library imports
from datetime import datetime
import enum

# Third-party imports
from sqlalchemy import DateTime, Enum as SQLEnum, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

# Local application imports
from smartmunic.models.base import Base
from smartmunic.models.mixins.int_timestamp import IntTimeStampMixin


class PaymentType(str, enum.Enum):
    WATER = "water"
    ELECTRICITY = "electricity"
    RATES = "rates"
    FINE = "fine"


class PaymentStatus(str, enum.Enum):
    PENDING = "pending"
    PAID = "paid"
    OVERDUE = "overdue"


class Payment(IntTimeStampMixin, Base):
    __tablename__ = "payments"

    type: Mapped[PaymentType] = mapped_column(SQLEnum(PaymentType), nullable=False, index=True)
    amount: Mapped[int] = mapped_column(Integer, nullable=False)  # cents
    due_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    status: Mapped[PaymentStatus] = mapped_column(
        SQLEnum(PaymentStatus), nullable=False, default=PaymentStatus.PENDING, index=True
    )
    account_number: Mapped[str | None] = mapped_column(String(50), nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    paid_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
