import datetime

import pydantic

from src.models.db.base import BaseRecordModel
from src.models.schemas.base import BaseSchemaModel


class AccountNotificationSettings(BaseSchemaModel):
    email: bool = True
    push: bool = True
    interview: bool = True
    evaluation: bool = True


class AccountPreferences(BaseSchemaModel):
    language: str = "it"
    timezone: str = "Europe/Rome"
    notifications: AccountNotificationSettings = pydantic.Field(default_factory=AccountNotificationSettings)


class AuthAccount(BaseRecordModel):
    """
    Login identity of the mock server.

    The password is kept in plain text; accounts are looked up by username or
    e-mail and never exposed through a response model that carries it.
    """

    username: str
    email: str
    password: str
    first_name: str
    last_name: str
    role: str
    available_roles: list[str] = pydantic.Field(default_factory=list)
    avatar: str | None = None
    last_login: datetime.datetime | None = None
    preferences: AccountPreferences = pydantic.Field(default_factory=AccountPreferences)
