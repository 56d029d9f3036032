# Standard library imports
from typing import Annotated, Any

# Third-party imports
from pydantic import BeforeValidator, ConfigDict, Field, field_validator

# Local application imports
from smartmunic.models.issues.issue import IssueCategory, IssuePriority, IssueStatus
from smartmunic.schemas.common.base_schema import (
    CamelModel,
    Coordinate,
    NonEmptyStr,
    UtcDateTime,
    check_coordinate,
    check_phone,
)


def _normalise_priority(value: Any) -> Any:
    # Citizen-facing forms label the top priority "emergency"
    if isinstance(value, str) and value.strip().lower() == "emergency":
        return IssuePriority.URGENT
    return value


Priority = Annotated[IssuePriority, BeforeValidator(_normalise_priority)]


class IssueCreate(CamelModel):
    title: NonEmptyStr = Field(..., max_length=200)
    description: NonEmptyStr
    category: IssueCategory
    priority: Priority = IssuePriority.MEDIUM
    location: NonEmptyStr
    ward: str | None = Field(None, max_length=100)
    latitude: Coordinate = None
    longitude: Coordinate = None
    reporter_name: str | None = Field(None, max_length=200)
    reporter_phone: str | None = None
    photos: list[str] = Field(default_factory=list)

    validate_coordinates = field_validator("latitude", "longitude")(check_coordinate)
    validate_phone = field_validator("reporter_phone")(check_phone)


class IssueUpdate(CamelModel):
    """
    Fields a PATCH may change. Anything else (id, referenceNumber,
    createdAt, rating, ...) is rejected rather than silently ignored.
    """

    model_config = ConfigDict(extra="forbid")

    title: NonEmptyStr | None = Field(None, max_length=200)
    description: NonEmptyStr | None = None
    category: IssueCategory | None = None
    priority: Priority | None = None
    status: IssueStatus | None = None
    location: NonEmptyStr | None = None
    ward: str | None = Field(None, max_length=100)
    latitude: Coordinate = None
    longitude: Coordinate = None
    photos: list[str] | None = None
    # Recorded on the history row when the status changes; not an issue column
    updated_by: NonEmptyStr | None = Field(None, max_length=200)

    validate_coordinates = field_validator("latitude", "longitude")(check_coordinate)

    @field_validator("title", "description", "category", "priority", "status", "location", "photos")
    @classmethod
    def reject_null(cls, value: Any) -> Any:
        if value is None:
            raise ValueError("Field cannot be null")
        return value


class IssueRating(CamelModel):
    rating: int = Field(..., ge=1, le=5)
    feedback: str | None = None


class IssueResponse(CamelModel):
    id: int
    reference_number: str
    title: str
    description: str
    category: IssueCategory
    priority: IssuePriority
    status: IssueStatus
    location: str
    ward: str | None
    latitude: str | None
    longitude: str | None
    reporter_name: str | None
    reporter_phone: str | None
    assigned_to: int | None = Field(None, validation_alias="assigned_to_id", serialization_alias="assignedTo")
    photos: list[str]
    rating: int | None
    feedback: str | None
    created_at: UtcDateTime
    updated_at: UtcDateTime
    resolved_at: UtcDateTime | None
