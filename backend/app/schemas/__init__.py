from .base import CamelModel
from .assignment import UrgencyInfo, AssignmentResponse, LocalStateUpdate, DashboardResponse

__all__ = ["CamelModel", "UrgencyInfo", "AssignmentResponse", "LocalStateUpdate", "DashboardResponse"]
