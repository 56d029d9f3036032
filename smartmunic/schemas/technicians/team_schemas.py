# Third-party imports
from pydantic import Field, field_validator

# Local application imports
from smartmunic.models.technicians.technician import Department, TechnicianStatus
from smartmunic.schemas.common.base_schema import CamelModel, NonEmptyStr, UtcDateTime


class TeamCreate(CamelModel):
    name: NonEmptyStr = Field(..., max_length=200)
    department: Department
    status: TechnicianStatus = TechnicianStatus.AVAILABLE
    current_location: str | None = Field(None, max_length=255)
    members: list[str] = Field(default_factory=list)
    equipment: list[str] = Field(default_factory=list)


class TeamUpdate(CamelModel):
    name: NonEmptyStr | None = Field(None, max_length=200)
    status: TechnicianStatus | None = None
    current_location: str | None = Field(None, max_length=255)
    members: list[str] | None = None
    equipment: list[str] | None = None

    @field_validator("name", "status", "members", "equipment")
    @classmethod
    def reject_null(cls, value: object) -> object:
        if value is None:
            raise ValueError("Field cannot be null")
        return value


class TeamResponse(CamelModel):
    id: int
    name: str
    department: Department
    status: TechnicianStatus
    current_location: str | None
    members: list[str]
    equipment: list[str]
    created_at: UtcDateTime
    updated_at: UtcDateTime
