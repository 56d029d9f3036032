# Third-party imports
from sqlalchemy import JSON, Enum as SQLEnum, String
from sqlalchemy.orm import Mapped, mapped_column

# Local application imports
from smartmunic.models.base import Base
from smartmunic.models.mixins.int_timestamp import IntTimeStampMixin
from smartmunic.models.technicians.technician import Department, TechnicianStatus


class Team(IntTimeStampMixin, Base):
    __tablename__ = "teams"

    name: Mapped[str] = mapped_column(String(200), nullable=False)
    department: Mapped[Department] = mapped_column(SQLEnum(Department), nullable=False, index=True)
    status: Mapped[TechnicianStatus] = mapped_column(
        SQLEnum(TechnicianStatus), nullable=False, default=TechnicianStatus.AVAILABLE
    )
    current_location: Mapped[str | None] = mapped_column(String(255), nullable=True)
    members: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    equipment: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)

    def __str__(self) -> str:
        return self.name
