# Local application imports
from smartmunic.settings.common import CommonSettings


class DevSettings(CommonSettings):
    DEBUG_MODE: bool = True
    SQL_ECHO: bool = False

    # Local SQLite database unless DATABASE_URL points elsewhere
    DATABASE_URL: str | None = "sqlite+aiosqlite:///./smartmunic.db"

    # Run Celery tasks inline so no broker is needed during development
    CELERY_TASK_ALWAYS_EAGER: bool = True
