# Standard library imports
import enum

# Third-party imports
from sqlalchemy import Boolean, Enum as SQLEnum, String, text
from sqlalchemy.orm import Mapped, mapped_column, validates

# Local application imports
from smartmunic.models.base import Base
from smartmunic.models.mixins.int_timestamp import IntTimeStampMixin
from smartmunic.utils.validators.phone_validator import validate_phone_number


class UserRole(str, enum.Enum):
    CITIZEN = "citizen"
    CALL_CENTER_AGENT = "call_center_agent"
    TECH_MANAGER = "tech_manager"
    FIELD_TECHNICIAN = "field_technician"
    ADMIN = "admin"
    MAYOR = "mayor"
    WARD_COUNCILLOR = "ward_councillor"


class User(IntTimeStampMixin, Base):
    __tablename__ = "users"

    username: Mapped[str] = mapped_column(String(100), unique=True, index=True, nullable=False)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    role: Mapped[UserRole] = mapped_column(SQLEnum(UserRole), nullable=False, default=UserRole.CITIZEN)
    email: Mapped[str | None] = mapped_column(String(200), nullable=True)
    phone: Mapped[str | None] = mapped_column(String(32), nullable=True)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, server_default=text("true"), nullable=False)

    @validates("phone")
    def validate_phone(self, key: str, value: str | None) -> str | None:
        """
        Use the shared phone number validation utility to validate and normalize
        the phone number.
        """
        if value is None:
            return None
        phone_value = validate_phone_number(value)
        if phone_value is None:
            raise ValueError("Invalid phone number")
        return phone_value

    def __str__(self) -> str:
        return f"User: {self.name} ({self.username})"
