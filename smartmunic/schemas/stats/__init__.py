from .stats_schemas import DashboardStats, DepartmentStats, TechnicianPerformance, WardStats

__all__ = ["DashboardStats", "DepartmentStats", "TechnicianPerformance", "WardStats"]
