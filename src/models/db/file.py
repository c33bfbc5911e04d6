import datetime
import enum
import typing

import pydantic

from src.models.db.base import BaseRecordModel
from src.utilities.formatters.datetime_formatter import utc_now


class FileCategoryEnum(str, enum.Enum):
    CV = "cv"
    COVER_LETTER = "cover_letter"
    PORTFOLIO = "portfolio"
    CERTIFICATE = "certificate"
    PROFILE_PHOTO = "profile_photo"
    DOCUMENT = "document"
    OTHER = "other"


class FileEntityTypeEnum(str, enum.Enum):
    CANDIDATE = "candidate"
    USER = "user"
    INTERVIEW = "interview"
    SYSTEM = "system"


class FileUpload(BaseRecordModel):
    filename: str
    original_name: str
    mimetype: str
    size: int
    path: str
    url: str
    uploaded_by: str
    uploaded_at: datetime.datetime = pydantic.Field(default_factory=utc_now)
    category: FileCategoryEnum = FileCategoryEnum.OTHER
    entity_type: FileEntityTypeEnum = FileEntityTypeEnum.SYSTEM
    entity_id: str | None = None
    is_public: bool = False
    metadata: dict[str, typing.Any] | None = pydantic.Field(default_factory=dict)
    tags: list[str] = pydantic.Field(default_factory=list)
    description: str | None = None
    expires_at: datetime.datetime | None = None


class FileBatch(BaseRecordModel):
    name: str
    description: str | None = None
    files: list[str]
    created_by: str
