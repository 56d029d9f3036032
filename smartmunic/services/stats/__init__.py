# Local application imports
from smartmunic.services.stats.stats_services import (
    get_dashboard_stats,
    get_department_stats,
    get_technician_performance,
    get_ward_stats,
)

__all__ = ["get_dashboard_stats", "get_department_stats", "get_technician_performance", "get_ward_stats"]
