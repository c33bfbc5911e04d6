import datetime
import enum
import typing

import pydantic

from src.models.db.base import BaseRecordModel
from src.models.schemas.base import BaseSchemaModel


class NotificationTypeEnum(str, enum.Enum):
    INTERVIEW = "interview"
    CANDIDATE = "candidate"
    EVALUATION = "evaluation"
    SYSTEM = "system"
    REMINDER = "reminder"
    ANNOUNCEMENT = "announcement"


class NotificationPriorityEnum(str, enum.Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    URGENT = "urgent"


class NotificationSender(BaseSchemaModel):
    id: str
    name: str
    type: typing.Literal["user", "system"]


SYSTEM_SENDER = NotificationSender(id="system", name="Sistema", type="system")


class Notification(BaseRecordModel):
    type: NotificationTypeEnum
    priority: NotificationPriorityEnum = NotificationPriorityEnum.MEDIUM
    title: str
    message: str
    data: dict[str, typing.Any] | None = None
    recipients: list[str]
    is_read: bool = False
    read_at: datetime.datetime | None = None
    expires_at: datetime.datetime | None = None
    sender: NotificationSender | None = None


class NotificationChannels(BaseSchemaModel):
    email: bool = True
    push: bool = True
    in_app: bool = True


class NotificationTypeToggles(BaseSchemaModel):
    interview: bool = True
    candidate: bool = True
    evaluation: bool = True
    system: bool = True
    reminder: bool = True
    announcement: bool = True


class QuietHours(BaseSchemaModel):
    enabled: bool = False
    start_time: str = pydantic.Field(default="22:00", pattern=r"^\d{2}:\d{2}$")
    end_time: str = pydantic.Field(default="08:00", pattern=r"^\d{2}:\d{2}$")


class NotificationPreferences(BaseSchemaModel):
    user_id: str
    channels: NotificationChannels = pydantic.Field(default_factory=NotificationChannels)
    types: NotificationTypeToggles = pydantic.Field(default_factory=NotificationTypeToggles)
    frequency: typing.Literal["immediate", "hourly", "daily", "weekly"] = "immediate"
    quiet_hours: QuietHours = pydantic.Field(default_factory=QuietHours)


class NotificationTemplate(BaseRecordModel):
    name: str
    type: NotificationTypeEnum
    subject: str
    email_template: str
    push_template: str
    in_app_template: str
    variables: list[str] = pydantic.Field(default_factory=list)
