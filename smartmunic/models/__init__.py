"""
Database models package.

Importing this package registers every table on ``Base.metadata``.
"""

# Local application imports
from smartmunic.models.base import Base
from smartmunic.models.billing import Payment, Voucher
from smartmunic.models.issues import Issue, IssueEscalation, IssueHistory, IssueNote
from smartmunic.models.technicians import Team, Technician
from smartmunic.models.users import User

__all__ = [
    "Base",
    # Issue workflow
    "Issue",
    "IssueEscalation",
    "IssueHistory",
    "IssueNote",
    # Dispatch
    "Team",
    "Technician",
    # Billing
    "Payment",
    "Voucher",
    # Users
    "User",
]
