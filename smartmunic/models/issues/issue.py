# Standard library imports
from datetime import datetime
import enum

# Third-party imports
from sqlalchemy import JSON, DateTime, Enum as SQLEnum, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

# Local application imports
from smartmunic.models.base import Base
from smartmunic.models.mixins.int_timestamp import IntTimeStampMixin


class IssueStatus(str, enum.Enum):
    OPEN = "open"
    ASSIGNED = "assigned"
    IN_PROGRESS = "in_progress"
    RESOLVED = "resolved"
    CLOSED = "closed"


class IssuePriority(str, enum.Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    URGENT = "urgent"


class IssueCategory(str, enum.Enum):
    WATER_SANITATION = "water_sanitation"
    ELECTRICITY = "electricity"
    ROADS_TRANSPORT = "roads_transport"
    WASTE_MANAGEMENT = "waste_management"
    SAFETY_SECURITY = "safety_security"
    HOUSING = "housing"
    OTHER = "other"


class Issue(IntTimeStampMixin, Base):
    __tablename__ = "issues"

    reference_number: Mapped[str] = mapped_column(String(16), unique=True, index=True, nullable=False)

    # Issue details
    title: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    category: Mapped[IssueCategory] = mapped_column(SQLEnum(IssueCategory), nullable=False, index=True)
    priority: Mapped[IssuePriority] = mapped_column(
        SQLEnum(IssuePriority), nullable=False, default=IssuePriority.MEDIUM
    )
    status: Mapped[IssueStatus] = mapped_column(
        SQLEnum(IssueStatus), nullable=False, default=IssueStatus.OPEN, index=True
    )

    # Location information
    location: Mapped[str] = mapped_column(Text, nullable=False)
    ward: Mapped[str | None] = mapped_column(String(100), nullable=True, index=True)
    latitude: Mapped[str | None] = mapped_column(String(50), nullable=True)
    longitude: Mapped[str | None] = mapped_column(String(50), nullable=True)

    # Reporter
    reporter_name: Mapped[str | None] = mapped_column(String(200), nullable=True)
    reporter_phone: Mapped[str | None] = mapped_column(String(32), nullable=True)

    # Dispatch
    assigned_to_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("technicians.id", ondelete="SET NULL"), nullable=True, index=True
    )

    # Media: ordered storage paths
    photos: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)

    # Citizen feedback
    rating: Mapped[int | None] = mapped_column(Integer, nullable=True)
    feedback: Mapped[str | None] = mapped_column(Text, nullable=True)

    resolved_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)

    # Optimistic concurrency: stale writes raise StaleDataError on flush
    version: Mapped[int] = mapped_column(Integer, nullable=False)

    __mapper_args__ = {"version_id_col": version}

    def __str__(self) -> str:
        return f"{self.reference_number}: {self.title}"
