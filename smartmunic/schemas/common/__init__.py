# Local application imports
from smartmunic.schemas.common.base_schema import (
    CamelModel,
    Coordinate,
    MessageResponse,
    NonEmptyStr,
    UtcDateTime,
    check_coordinate,
    check_phone,
)
from smartmunic.schemas.common.response_schemas import BaseResponse, ErrorDetails

__all__ = [
    "BaseResponse",
    "CamelModel",
    "Coordinate",
    "ErrorDetails",
    "MessageResponse",
    "NonEmptyStr",
    "check_coordinate",
    "UtcDateTime",
    "check_phone",
]
