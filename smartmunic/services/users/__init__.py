# Local application imports
from smartmunic.services.users.user_services import create_default_admin_user, create_user, get_user, get_users

__all__ = ["create_default_admin_user", "create_user", "get_user", "get_users"]
