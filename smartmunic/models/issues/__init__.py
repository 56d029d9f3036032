# Local application imports
from smartmunic.models.issues.issue import Issue, IssueCategory, IssuePriority, IssueStatus
from smartmunic.models.issues.issue_escalation import IssueEscalation
from smartmunic.models.issues.issue_history import IssueHistory
from smartmunic.models.issues.issue_note import IssueNote

__all__ = [
    "Issue",
    "IssueCategory",
    "IssueEscalation",
    "IssueHistory",
    "IssueNote",
    "IssuePriority",
    "IssueStatus",
]
