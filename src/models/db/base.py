import datetime
import typing

import pydantic

from src.models.schemas.base import BaseSchemaModel
from src.utilities.formatters.datetime_formatter import ensure_aware, utc_now


class BaseRecordModel(BaseSchemaModel):
    """
    Common shape of every record kept in the in-memory store.

    ``deleted_at`` marks a soft-deleted record; it stays in its collection and
    can be restored.
    """

    id: str
    is_active: bool = True
    created_at: datetime.datetime = pydantic.Field(default_factory=utc_now)
    updated_at: datetime.datetime = pydantic.Field(default_factory=utc_now)
    deleted_at: datetime.datetime | None = None

    @pydantic.field_validator("*", mode="after")
    @classmethod
    def make_datetimes_aware(cls, value: typing.Any) -> typing.Any:
        # naive timestamps are read as UTC so every stored datetime is comparable
        if isinstance(value, datetime.datetime):
            return ensure_aware(value)
        return value

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None

    def touch(self) -> None:
        self.updated_at = utc_now()
