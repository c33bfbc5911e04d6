import datetime
import typing

from src.models.schemas.base import BaseSchemaModel


class ChartDataset(BaseSchemaModel):
    label: str
    data: list[float]
    background_color: list[str] | None = None
    border_color: str | None = None
    fill: bool | None = None


class ChartData(BaseSchemaModel):
    labels: list[str]
    datasets: list[ChartDataset]


class DashboardChart(BaseSchemaModel):
    id: str
    title: str
    type: typing.Literal["line", "bar", "doughnut", "area"]
    data: ChartData
    period: typing.Literal["week", "month", "year"]


class SystemAlert(BaseSchemaModel):
    id: str
    type: typing.Literal["info", "warning", "error", "success"]
    title: str
    message: str
    timestamp: datetime.datetime
    read: bool = False


class RecentActivity(BaseSchemaModel):
    id: str
    type: typing.Literal["interview", "user", "evaluation"]
    description: str
    timestamp: datetime.datetime
    user: str
