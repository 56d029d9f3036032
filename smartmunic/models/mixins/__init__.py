# Local application imports
from smartmunic.models.mixins.int_timestamp import IntTimeStampMixin

__all__ = ["IntTimeStampMixin"]
