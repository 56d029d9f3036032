# Local application imports
from smartmunic.services.issues.escalation_services import escalate_issue, get_escalations
from smartmunic.services.issues.history_services import get_issue_history, record_status_change
from smartmunic.services.issues.issue_services import (
    create_issue,
    delete_issue,
    get_issue,
    list_issues,
    rate_issue,
    remove_issue_photo,
    update_issue,
)
from smartmunic.services.issues.note_services import add_note, get_notes

__all__ = [
    "add_note",
    "create_issue",
    "delete_issue",
    "escalate_issue",
    "get_escalations",
    "get_issue",
    "get_issue_history",
    "get_notes",
    "list_issues",
    "rate_issue",
    "record_status_change",
    "remove_issue_photo",
    "update_issue",
]
