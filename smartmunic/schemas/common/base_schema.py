# Standard library imports
from datetime import datetime
from typing import Annotated

# Third-party imports
from pydantic import AfterValidator, BaseModel, BeforeValidator, ConfigDict, StringConstraints
from pydantic.alias_generators import to_camel

# Local application imports
from smartmunic.utils.datetime_utils import as_utc
from smartmunic.utils.geo_utils import parse_coordinate
from smartmunic.utils.validators.phone_validator import validate_phone_number

# Required text: surrounding whitespace is stripped and the rest must be non-empty
NonEmptyStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]

# Timestamps always leave the API as UTC; SQLite returns them naive
UtcDateTime = Annotated[datetime, AfterValidator(as_utc)]

# Coordinates are stored as numeric strings; clients may send numbers
Coordinate = Annotated[str | None, BeforeValidator(lambda v: None if v is None else str(v))]


def check_coordinate(value: str | None) -> str | None:
    if value is None:
        return None
    if parse_coordinate(value) is None:
        raise ValueError("Coordinates must be numeric")
    return value.strip()


def check_phone(value: str | None) -> str | None:
    if value is None or not value.strip():
        return None
    phone_value = validate_phone_number(value)
    if phone_value is None:
        raise ValueError("Invalid phone number")
    return phone_value


class CamelModel(BaseModel):
    """Serialises to camelCase on the wire and accepts either casing on input."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class MessageResponse(CamelModel):
    message: str
