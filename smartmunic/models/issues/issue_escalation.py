# Standard library imports
from datetime import datetime

# Third-party imports
from sqlalchemy import DateTime, Enum as SQLEnum, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

# Local application imports
from smartmunic.models.base import Base
from smartmunic.models.issues.issue import IssuePriority
from smartmunic.utils.datetime_utils import utc_now


class IssueEscalation(Base):
    """Append-only escalation record; creating one forces the issue to urgent."""

    __tablename__ = "issue_escalations"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    issue_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("issues.id", ondelete="CASCADE"), nullable=False, index=True
    )
    escalation_reason: Mapped[str] = mapped_column(Text, nullable=False)
    escalated_by: Mapped[str] = mapped_column(String(200), nullable=False)
    escalated_by_role: Mapped[str] = mapped_column(String(50), nullable=False)
    escalated_to: Mapped[str] = mapped_column(String(200), nullable=False, default="Technical Manager")
    priority: Mapped[IssuePriority] = mapped_column(
        SQLEnum(IssuePriority), nullable=False, default=IssuePriority.URGENT
    )
    status: Mapped[str] = mapped_column(String(50), nullable=False, default="pending")
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=utc_now)
