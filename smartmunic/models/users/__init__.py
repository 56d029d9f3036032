# Local application imports
from smartmunic.models.users.user import User, UserRole

__all__ = ["User", "UserRole"]
