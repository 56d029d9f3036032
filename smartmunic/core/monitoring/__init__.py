# Local application imports
from smartmunic.core.monitoring.logging import get_contextual_logger, get_logger
from smartmunic.core.monitoring.sentry import init_sentry

__all__ = ["get_contextual_logger", "get_logger", "init_sentry"]
