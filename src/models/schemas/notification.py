import datetime
import typing

import pydantic

from src.models.db.notification import (
    NotificationChannels,
    NotificationPriorityEnum,
    NotificationTypeEnum,
    NotificationTypeToggles,
    QuietHours,
)
from src.models.schemas.base import BaseSchemaModel


class NotificationInCreate(BaseSchemaModel):
    type: NotificationTypeEnum
    priority: NotificationPriorityEnum = NotificationPriorityEnum.MEDIUM
    title: str = pydantic.Field(min_length=1)
    message: str = pydantic.Field(min_length=1)
    recipients: list[str] = pydantic.Field(min_length=1)
    data: dict[str, typing.Any] | None = None
    expires_at: datetime.datetime | None = None


class NotificationInUpdate(BaseSchemaModel):
    priority: NotificationPriorityEnum | None = None
    title: str | None = pydantic.Field(default=None, min_length=1)
    message: str | None = pydantic.Field(default=None, min_length=1)
    recipients: list[str] | None = pydantic.Field(default=None, min_length=1)
    data: dict[str, typing.Any] | None = None
    is_read: bool | None = None
    expires_at: datetime.datetime | None = None
    is_active: bool | None = None


class NotificationPreferencesInUpdate(BaseSchemaModel):
    channels: NotificationChannels | None = None
    types: NotificationTypeToggles | None = None
    frequency: typing.Literal["immediate", "hourly", "daily", "weekly"] | None = None
    quiet_hours: QuietHours | None = None


class NotificationStats(BaseSchemaModel):
    total_notifications: int
    unread_notifications: int
    notifications_by_type: dict[str, int]
    notifications_by_priority: dict[str, int]
    today_notifications: int
    week_notifications: int


class UnreadCount(BaseSchemaModel):
    count: int


class MarkedCount(BaseSchemaModel):
    marked_count: int
