import pydantic

from src.models.db.dashboard import DashboardChart, RecentActivity, SystemAlert
from src.models.schemas.base import BaseSchemaModel


class DashboardStats(BaseSchemaModel):
    total_users: str
    active_interviews: str
    pending_evaluations: str
    system_alerts: str


class DashboardOverview(BaseSchemaModel):
    stats: DashboardStats
    charts: list[DashboardChart] = pydantic.Field(default_factory=list)
    alerts: list[SystemAlert] = pydantic.Field(default_factory=list)
    recent_activity: list[RecentActivity] = pydantic.Field(default_factory=list)
