# Standard library imports
import enum

# Third-party imports
from sqlalchemy import JSON, Enum as SQLEnum, Float, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, validates

# Local application imports
from smartmunic.models.base import Base
from smartmunic.models.mixins.int_timestamp import IntTimeStampMixin
from smartmunic.utils.validators.phone_validator import validate_phone_number


class Department(str, enum.Enum):
    WATER_SANITATION = "Water & Sanitation"
    ELECTRICITY = "Electricity"
    ROADS_TRANSPORT = "Roads & Transport"
    WASTE_MANAGEMENT = "Waste Management"
    SAFETY_SECURITY = "Safety & Security"
    HOUSING = "Housing"


class TechnicianStatus(str, enum.Enum):
    AVAILABLE = "available"
    ON_JOB = "on_job"
    MAINTENANCE = "maintenance"
    OFFLINE = "offline"


class Technician(IntTimeStampMixin, Base):
    __tablename__ = "technicians"

    name: Mapped[str] = mapped_column(String(200), nullable=False)
    phone: Mapped[str] = mapped_column(String(32), nullable=False)
    email: Mapped[str | None] = mapped_column(String(200), nullable=True)
    department: Mapped[Department] = mapped_column(SQLEnum(Department), nullable=False, index=True)
    skills: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    status: Mapped[TechnicianStatus] = mapped_column(
        SQLEnum(TechnicianStatus), nullable=False, default=TechnicianStatus.AVAILABLE, index=True
    )

    # Last reported position
    current_location: Mapped[str | None] = mapped_column(String(255), nullable=True)
    latitude: Mapped[str | None] = mapped_column(String(50), nullable=True)
    longitude: Mapped[str | None] = mapped_column(String(50), nullable=True)

    team_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("teams.id", ondelete="SET NULL"), nullable=True, index=True
    )

    # Performance metrics
    performance_rating: Mapped[float] = mapped_column(Float, nullable=False, default=5.0)
    completed_issues: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    avg_resolution_time: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)  # hours

    version: Mapped[int] = mapped_column(Integer, nullable=False)

    __mapper_args__ = {"version_id_col": version}

    @validates("phone")
    def validate_phone(self, key: str, value: str) -> str:
        phone_value = validate_phone_number(value)
        if phone_value is None:
            raise ValueError("Invalid phone number")
        return phone_value

    def __str__(self) -> str:
        return f"{self.name} ({self.department.value})"
