# Local application imports
from smartmunic.services.dispatch.dispatch_services import (
    CATEGORY_DEPARTMENTS,
    assign_technician_to_issue,
    department_for_category,
    find_nearest_technicians,
    suggest_technicians_for_issue,
)
from smartmunic.services.dispatch.work_session_services import complete_work, list_active_work_sessions, start_work

__all__ = [
    "CATEGORY_DEPARTMENTS",
    "assign_technician_to_issue",
    "complete_work",
    "department_for_category",
    "find_nearest_technicians",
    "list_active_work_sessions",
    "start_work",
    "suggest_technicians_for_issue",
]
