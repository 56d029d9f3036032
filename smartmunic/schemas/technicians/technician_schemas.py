# Third-party imports
from pydantic import Field, field_validator

# Local application imports
from smartmunic.models.technicians.technician import Department, TechnicianStatus
from smartmunic.schemas.common.base_schema import (
    CamelModel,
    Coordinate,
    NonEmptyStr,
    UtcDateTime,
    check_coordinate,
    check_phone,
)


class TechnicianCreate(CamelModel):
    name: NonEmptyStr = Field(..., max_length=200)
    phone: NonEmptyStr
    email: str | None = Field(None, max_length=200)
    department: Department
    skills: list[str] = Field(default_factory=list)
    current_location: str | None = Field(None, max_length=255)
    latitude: Coordinate = None
    longitude: Coordinate = None
    team_id: int | None = None

    validate_coordinates = field_validator("latitude", "longitude")(check_coordinate)
    validate_phone = field_validator("phone")(check_phone)


class TechnicianUpdate(CamelModel):
    name: NonEmptyStr | None = Field(None, max_length=200)
    phone: NonEmptyStr | None = None
    email: str | None = Field(None, max_length=200)
    department: Department | None = None
    skills: list[str] | None = None
    status: TechnicianStatus | None = None
    current_location: str | None = Field(None, max_length=255)
    latitude: Coordinate = None
    longitude: Coordinate = None
    team_id: int | None = None

    validate_coordinates = field_validator("latitude", "longitude")(check_coordinate)
    validate_phone = field_validator("phone")(check_phone)

    @field_validator("name", "phone", "department", "skills", "status")
    @classmethod
    def reject_null(cls, value: object) -> object:
        if value is None:
            raise ValueError("Field cannot be null")
        return value


class TechnicianResponse(CamelModel):
    id: int
    name: str
    phone: str
    email: str | None
    department: Department
    skills: list[str]
    status: TechnicianStatus
    current_location: str | None
    latitude: str | None
    longitude: str | None
    team_id: int | None
    performance_rating: float
    completed_issues: int
    avg_resolution_time: float
    created_at: UtcDateTime
    updated_at: UtcDateTime


class TechnicianWithDistance(TechnicianResponse):
    distance: float  # kilometres

    @classmethod
    def from_match(cls, technician: object, distance: float) -> "TechnicianWithDistance":
        base = TechnicianResponse.model_validate(technician)
        return cls(**base.model_dump(), distance=round(distance, 2))


class NearestTechniciansRequest(CamelModel):
    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)
    department: Department | None = None
    limit: int | None = Field(None, ge=1, le=100)
