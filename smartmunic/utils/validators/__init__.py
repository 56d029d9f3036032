# Local application imports
from smartmunic.utils.validators.phone_validator import mask_phone_number, validate_phone_number

__all__ = ["mask_phone_number", "validate_phone_number"]
