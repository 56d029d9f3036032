# Standard library imports
from datetime import datetime
import enum

# Third-party imports
from sqlalchemy import DateTime, Enum as SQLEnum, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

# Local application imports
from smartmunic.models.base import Base
from smartmunic.models.mixins.int_timestamp import IntTimeStampMixin


class VoucherType(str, enum.Enum):
    WATER = "water"
    ELECTRICITY = "electricity"


class VoucherStatus(str, enum.Enum):
    ACTIVE = "active"
    USED = "used"
    EXPIRED = "expired"


class Voucher(IntTimeStampMixin, Base):
    __tablename__ = "vouchers"

    type: Mapped[VoucherType] = mapped_column(SQLEnum(VoucherType), nullable=False, index=True)
    amount: Mapped[int] = mapped_column(Integer, nullable=False)  # cents
    voucher_code: Mapped[str] = mapped_column(String(64), unique=True, index=True, nullable=False)
    status: Mapped[VoucherStatus] = mapped_column(
        SQLEnum(VoucherStatus), nullable=False, default=VoucherStatus.ACTIVE, index=True
    )
    purchase_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    expiry_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    used_date: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
