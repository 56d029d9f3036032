# Local application imports
from smartmunic.services.notifications.notification_services import notify_status_change

__all__ = ["notify_status_change"]
