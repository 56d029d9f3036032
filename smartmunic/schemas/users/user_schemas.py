# Third-party imports
from pydantic import Field, field_validator

# Local application imports
from smartmunic.models.users.user import UserRole
from smartmunic.schemas.common.base_schema import CamelModel, NonEmptyStr, UtcDateTime, check_phone


class UserCreate(CamelModel):
    username: NonEmptyStr = Field(..., max_length=100)
    name: NonEmptyStr = Field(..., max_length=200)
    role: UserRole = UserRole.CITIZEN
    email: str | None = Field(None, max_length=200)
    phone: str | None = None

    validate_phone = field_validator("phone")(check_phone)


class UserResponse(CamelModel):
    id: int
    username: str
    name: str
    role: UserRole
    email: str | None
    phone: str | None
    is_active: bool
    created_at: UtcDateTime
