# Standard library imports
from typing import Any

# Local application imports
from smartmunic.core.celery.celery import celery_app
from smartmunic.core.monitoring.logging import get_contextual_logger
from smartmunic.settings import settings
from smartmunic.utils.sms_utils import SMSError, SMSNetworkError, get_sms_client
from smartmunic.utils.validators.phone_validator import mask_phone_number

STATUS_MESSAGES = {
    "open": "has been received and logged",
    "assigned": "has been assigned to a technician",
    "in_progress": "is being worked on by our technician",
    "resolved": "has been resolved. Please rate the service",
    "closed": "has been closed",
}


def build_status_message(reference_number: str, status: str) -> str:
    detail = STATUS_MESSAGES.get(status, f"is now {status.replace('_', ' ')}")
    return f"{settings.MUNICIPALITY_NAME}: your issue {reference_number} {detail}."


@celery_app.task(bind=True, max_retries=3, default_retry_delay=60)
def send_status_change_sms(self: Any, phone: str, reference_number: str, status: str) -> dict[str, Any]:
    """
    Text the reporter that their issue changed status.

    Skips quietly when SMS is disabled. Network failures are retried;
    rejected numbers and duplicates are not.
    """
    logger = get_contextual_logger(__name__, reference_number=reference_number, status=status)

    client = get_sms_client()
    if client is None:
        logger.info(f"SMS disabled, not notifying {mask_phone_number(phone)}")
        return {"status": "skipped"}

    message = build_status_message(reference_number, status)
    try:
        result = client.send(to=phone, message=message)
    except SMSNetworkError as exc:
        logger.warning(f"SMS gateway unreachable, retrying: {exc}")
        raise self.retry(exc=exc)
    except SMSError as exc:
        logger.warning(f"SMS to {mask_phone_number(phone)} not sent: {exc}")
        return {"status": "failed", "error": str(exc)}

    for failure in result.failed:
        logger.warning(f"SMS rejected for {mask_phone_number(failure.number)}: {failure.error}")

    return {"status": result.status, "sent": result.total_sent, "failed": result.total_failed}
