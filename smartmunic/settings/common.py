# Standard library imports
from pathlib import Path
from typing import Annotated, Any, Literal

# Third-party imports
from pydantic import AnyUrl, BeforeValidator, computed_field
from pydantic_core import MultiHostUrl
from pydantic_settings import BaseSettings, SettingsConfigDict

BASE_DIR: Path = Path(__file__).resolve().parent.parent


def parse_cors(v: Any) -> list[str] | str:
    if isinstance(v, str) and not v.startswith("["):
        return [i.strip() for i in v.split(",")]
    elif isinstance(v, list | str):
        return v
    raise ValueError(v)


class CommonSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_ignore_empty=True,
        extra="ignore",
    )

    # General settings
    API_PREFIX: str = "/api"
    ENVIRONMENT: Literal["dev", "staging", "production"] = "dev"
    DEBUG_MODE: bool = False
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR"] | None = None
    LOG_COLORS: bool = True
    PROJECT_NAME: str = "Smart Munic"
    MUNICIPALITY_NAME: str = "City of Tshwane"

    # Database settings
    POSTGRES_SERVER: str = "localhost"
    POSTGRES_PORT: int = 5432
    POSTGRES_USER: str = "smartmunic"
    POSTGRES_PASSWORD: str = "smartmunic"
    POSTGRES_DB: str = "smartmunic"

    # Full async URL, takes precedence over the POSTGRES_* parts when set
    DATABASE_URL: str | None = None
    SQL_ECHO: bool = False

    @computed_field  # type: ignore[prop-decorator, misc]
    @property
    def SQLALCHEMY_ASYNC_DATABASE_URI(self) -> str:
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return str(
            MultiHostUrl.build(
                scheme="postgresql+asyncpg",  # async driver for async queries
                username=self.POSTGRES_USER,
                password=self.POSTGRES_PASSWORD,
                host=self.POSTGRES_SERVER,
                port=self.POSTGRES_PORT,
                path=self.POSTGRES_DB,
            )
        )

    # CORS settings
    BACKEND_CORS_ORIGINS: Annotated[list[AnyUrl] | str, BeforeValidator(parse_cors)] = [
        AnyUrl("http://localhost/"),
        AnyUrl("http://localhost:3000/"),
        AnyUrl("http://localhost:5000/"),
        AnyUrl("http://localhost:8000/"),
    ]

    @computed_field  # type: ignore[prop-decorator, misc]
    @property
    def all_cors_origins(self) -> list[str]:
        return [str(origin).rstrip("/") for origin in self.BACKEND_CORS_ORIGINS]

    # Optional settings
    SENTRY_DSN: str | None = None

    # Admin settings (seeded on start-up)
    ADMIN_USERNAME: str = "admin"
    ADMIN_NAME: str = "System Administrator"
    ADMIN_EMAIL: str = "admin@smartmunic.gov.za"
    ADMIN_PHONE_NUMBER: str = "+27123580000"

    # Celery settings
    CELERY_BROKER_URL: str = "redis://redis:6379/2"
    CELERY_RESULT_BACKEND: str = "redis://redis:6379/3"
    CELERY_WORKER_CONCURRENCY: int = 4
    CELERY_TASK_TIME_LIMIT: int = 300  # 5 minutes
    CELERY_TASK_SOFT_TIME_LIMIT: int = 240  # 4 minutes
    CELERY_TASK_ALWAYS_EAGER: bool = False

    # Redis cache settings
    REDIS_URL: str = "redis://redis:6379/0"
    STATS_CACHE_ENABLED: bool = False
    STATS_CACHE_TTL_SECONDS: int = 60

    # SMS gateway settings
    SMS_ENABLED: bool = False
    SMS_BASE_URL: str = "https://sms01.umsg.co.za"
    SMS_USERNAME: str | None = None
    SMS_PASSWORD: str | None = None
    SMS_TIMEOUT_SECONDS: float = 10.0
    SMS_DUPLICATE_TTL_SECONDS: int = 15 * 60
    DEFAULT_PHONE_REGION: str = "ZA"

    # Issue workflow settings
    REFERENCE_NUMBER_MAX_ATTEMPTS: int = 10
    NEAREST_TECHNICIANS_DEFAULT_LIMIT: int = 5

    # Billing settings
    VOUCHER_VALIDITY_DAYS: int = 30
