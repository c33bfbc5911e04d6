import typing

import fastapi

from src.api.dependencies.repository import get_repository
from src.models.db.dashboard import DashboardChart, SystemAlert
from src.models.schemas.dashboard import DashboardOverview, DashboardStats
from src.repository.crud.dashboard import DashboardCRUDRepository

router = fastapi.APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get(
    path="/overview",
    name="dashboard:read-overview",
    response_model=DashboardOverview,
    status_code=fastapi.status.HTTP_200_OK,
)
async def read_overview(
    dashboard_repo: DashboardCRUDRepository = fastapi.Depends(get_repository(repo_type=DashboardCRUDRepository)),
) -> DashboardOverview:
    return await dashboard_repo.get_overview()


@router.get(
    path="/stats",
    name="dashboard:read-stats",
    response_model=DashboardStats,
    status_code=fastapi.status.HTTP_200_OK,
)
async def read_stats(
    dashboard_repo: DashboardCRUDRepository = fastapi.Depends(get_repository(repo_type=DashboardCRUDRepository)),
) -> DashboardStats:
    return await dashboard_repo.get_stats()


@router.get(
    path="/charts",
    name="dashboard:read-charts",
    response_model=list[DashboardChart],
    status_code=fastapi.status.HTTP_200_OK,
)
async def read_charts(
    period: typing.Literal["week", "month", "year"] | None = None,
    dashboard_repo: DashboardCRUDRepository = fastapi.Depends(get_repository(repo_type=DashboardCRUDRepository)),
) -> list[DashboardChart]:
    return await dashboard_repo.get_charts(period=period)


@router.get(
    path="/alerts",
    name="dashboard:read-alerts",
    response_model=list[SystemAlert],
    status_code=fastapi.status.HTTP_200_OK,
)
async def read_alerts(
    unread: bool = False,
    dashboard_repo: DashboardCRUDRepository = fastapi.Depends(get_repository(repo_type=DashboardCRUDRepository)),
) -> list[SystemAlert]:
    return await dashboard_repo.get_alerts(unread_only=unread)


@router.put(
    path="/alerts/{id}/read",
    name="dashboard:mark-alert-as-read",
    response_model=SystemAlert,
    status_code=fastapi.status.HTTP_200_OK,
)
async def mark_alert_as_read(
    id: str,
    dashboard_repo: DashboardCRUDRepository = fastapi.Depends(get_repository(repo_type=DashboardCRUDRepository)),
) -> SystemAlert:
    return await dashboard_repo.mark_alert_as_read(alert_id=id)
