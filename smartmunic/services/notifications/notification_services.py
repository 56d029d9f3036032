# Local application imports
from smartmunic.core.monitoring.logging import get_contextual_logger
from smartmunic.models.issues.issue import Issue
from smartmunic.tasks.notification_tasks import send_status_change_sms
from smartmunic.utils.validators.phone_validator import mask_phone_number


def notify_status_change(issue: Issue) -> bool:
    """
    Queue an SMS telling the reporter about the issue's new status.

    Returns False when there is nobody to notify or the task could not be
    queued. A broker outage must not fail the request that changed the
    issue, so enqueue errors are logged instead of raised.
    """
    logger = get_contextual_logger(__name__, issue_id=issue.id, reference_number=issue.reference_number)

    if not issue.reporter_phone:
        logger.debug("No reporter phone on issue, skipping status notification")
        return False

    try:
        send_status_change_sms.delay(issue.reporter_phone, issue.reference_number, issue.status.value)
    except Exception:
        logger.exception(f"Could not queue status SMS for {mask_phone_number(issue.reporter_phone)}")
        return False

    return True
