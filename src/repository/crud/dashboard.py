from src.models.db.dashboard import DashboardChart, SystemAlert
from src.models.db.interview import InterviewStatusEnum
from src.models.schemas.dashboard import DashboardOverview, DashboardStats
from src.repository.crud.base import BaseCRUDRepository
from src.repository.query import visibility
from src.utilities.exceptions.database import EntityDoesNotExist


class DashboardCRUDRepository(BaseCRUDRepository):
    async def get_stats(self) -> DashboardStats:
        is_visible = visibility()
        users = [user for user in self.store.users if is_visible(user)]
        interviews = [interview for interview in self.store.interviews if is_visible(interview)]

        active_interviews = sum(
            1
            for interview in interviews
            if interview.status in (InterviewStatusEnum.SCHEDULED, InterviewStatusEnum.IN_PROGRESS)
        )
        pending_evaluations = sum(
            1 for interview in interviews if interview.status == InterviewStatusEnum.COMPLETED and interview.score is None
        )
        unread_alerts = sum(1 for alert in self.store.alerts if not alert.read)

        return DashboardStats(
            total_users=str(len(users)),
            active_interviews=str(active_interviews),
            pending_evaluations=str(pending_evaluations),
            system_alerts=str(unread_alerts),
        )

    async def get_charts(self, *, period: str | None = None) -> list[DashboardChart]:
        return [chart for chart in self.store.charts if period is None or chart.period == period]

    async def get_alerts(self, *, unread_only: bool = False) -> list[SystemAlert]:
        return [alert for alert in self.store.alerts if not (unread_only and alert.read)]

    async def mark_alert_as_read(self, *, alert_id: str) -> SystemAlert:
        for alert in self.store.alerts:
            if alert.id == alert_id:
                alert.read = True
                return alert
        raise EntityDoesNotExist("Avviso non trovato", code="ALERT_NOT_FOUND")

    async def get_overview(self) -> DashboardOverview:
        return DashboardOverview(
            stats=await self.get_stats(),
            charts=await self.get_charts(),
            alerts=await self.get_alerts(),
            recent_activity=list(self.store.recent_activity),
        )
