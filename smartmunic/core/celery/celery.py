# Standard library imports
from typing import Any

# Third-party imports
from celery import Celery
from celery.schedules import crontab
from celery.signals import task_failure, task_retry, task_success

# Local application imports
from smartmunic.core.monitoring.logging import get_contextual_logger
from smartmunic.settings import settings

NOTIFICATIONS_QUEUE = "notifications"
BILLING_QUEUE = "billing"

celery_app = Celery(
    "smartmunic",
    broker=settings.CELERY_BROKER_URL,
    backend=settings.CELERY_RESULT_BACKEND,
    include=[
        "smartmunic.tasks.notification_tasks",
        "smartmunic.tasks.billing_tasks",
    ],
)

celery_app.conf.update(
    task_serializer="json",
    accept_content=["json"],
    result_serializer="json",
    result_expires=24 * 60 * 60,
    timezone="Africa/Johannesburg",
    enable_utc=True,
    worker_prefetch_multiplier=1,
    worker_concurrency=settings.CELERY_WORKER_CONCURRENCY,
    task_acks_late=True,
    task_reject_on_worker_lost=True,
    task_time_limit=settings.CELERY_TASK_TIME_LIMIT,
    task_soft_time_limit=settings.CELERY_TASK_SOFT_TIME_LIMIT,
    # SMS sends are short and bursty, nightly billing sweeps are slow; keep
    # them on separate queues so a sweep never delays a notification.
    # Run workers with ``-Q notifications,billing`` (or one each).
    task_routes={
        "smartmunic.tasks.notification_tasks.*": {"queue": NOTIFICATIONS_QUEUE},
        "smartmunic.tasks.billing_tasks.*": {"queue": BILLING_QUEUE},
    },
    task_always_eager=settings.CELERY_TASK_ALWAYS_EAGER,
    task_eager_propagates=False,
    beat_scheduler="redbeat.RedBeatScheduler",
    redbeat_redis_url=settings.CELERY_BROKER_URL,
    redbeat_key_prefix="smartmunic:redbeat",
    redbeat_lock_timeout=300,
)

# Crontab hours are local (Africa/Johannesburg)
celery_app.conf.beat_schedule = {
    "mark-overdue-payments": {
        "task": "smartmunic.tasks.billing_tasks.mark_overdue_payments_task",
        "schedule": crontab(hour="1", minute="0"),
    },
    "expire-vouchers": {
        "task": "smartmunic.tasks.billing_tasks.expire_vouchers_task",
        "schedule": crontab(hour="1", minute="30"),
    },
}


def _task_name(sender: Any) -> str:
    return getattr(sender, "name", None) or "unknown"


@task_retry.connect  # type: ignore[misc]
def log_task_retry(sender: Any = None, request: Any = None, reason: Any = None, **kwargs: Any) -> None:  # noqa: ARG001
    logger = get_contextual_logger("celery.task", task_id=getattr(request, "id", None))
    logger.warning(f"Retrying {_task_name(sender)}: {reason}")


@task_failure.connect  # type: ignore[misc]
def log_task_failure(
    sender: Any = None,
    task_id: str | None = None,
    exception: BaseException | None = None,
    **kwargs: Any,  # noqa: ARG001
) -> None:
    get_contextual_logger("celery.task", task_id=task_id).error(f"{_task_name(sender)} failed: {exception!r}")


@task_success.connect  # type: ignore[misc]
def log_task_success(sender: Any = None, **kwargs: Any) -> None:  # noqa: ARG001
    task_id = getattr(getattr(sender, "request", None), "id", None)
    get_contextual_logger("celery.task", task_id=task_id).debug(f"{_task_name(sender)} finished")
