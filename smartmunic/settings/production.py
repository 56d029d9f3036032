# Local application imports
from smartmunic.settings.common import CommonSettings


class ProductionSettings(CommonSettings):
    DEBUG_MODE: bool = False
    SQL_ECHO: bool = False
    LOG_COLORS: bool = False
    SENTRY_DSN: str | None = None
    SMS_ENABLED: bool = True
    STATS_CACHE_ENABLED: bool = True
