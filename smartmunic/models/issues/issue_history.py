# Standard library imports
from datetime import datetime

# Third-party imports
from sqlalchemy import DateTime, Enum as SQLEnum, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

# Local application imports
from smartmunic.models.base import Base
from smartmunic.models.issues.issue import IssueStatus
from smartmunic.utils.datetime_utils import utc_now


class IssueHistory(Base):
    """One row per status change of an issue."""

    __tablename__ = "issue_history"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    issue_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("issues.id", ondelete="CASCADE"), nullable=False, index=True
    )
    from_status: Mapped[IssueStatus | None] = mapped_column(SQLEnum(IssueStatus), nullable=True)
    to_status: Mapped[IssueStatus] = mapped_column(SQLEnum(IssueStatus), nullable=False)
    comment: Mapped[str | None] = mapped_column(Text, nullable=True)
    updated_by: Mapped[str] = mapped_column(String(200), nullable=False, default="System")
    technician_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("technicians.id", ondelete="SET NULL"), nullable=True
    )
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=utc_now)
