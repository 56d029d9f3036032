# Local application imports
from smartmunic.models.technicians.team import Team
from smartmunic.models.technicians.technician import Department, Technician, TechnicianStatus

__all__ = ["Department", "Team", "Technician", "TechnicianStatus"]
