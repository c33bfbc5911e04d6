import datetime
import typing

import pydantic

from src.models.db.file import FileCategoryEnum, FileEntityTypeEnum, FileUpload
from src.models.schemas.base import BaseSchemaModel

ALLOWED_MIMETYPES: frozenset[str] = frozenset(
    {
        "application/pdf",
        "application/msword",
        "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
        "image/jpeg",
        "image/png",
        "image/gif",
        "image/webp",
        "text/plain",
        "video/mp4",
        "video/webm",
        "audio/mpeg",
        "audio/wav",
    }
)


class FileInUpdate(BaseSchemaModel):
    """Editable file metadata; identity, storage path and upload provenance are fixed."""

    original_name: str | None = None
    category: FileCategoryEnum | None = None
    entity_type: FileEntityTypeEnum | None = None
    entity_id: str | None = None
    is_public: bool | None = None
    metadata: dict[str, typing.Any] | None = None
    tags: list[str] | None = None
    description: str | None = None
    expires_at: datetime.datetime | None = None
    is_active: bool | None = None


class FileDetail(BaseSchemaModel):
    file: FileUpload
    download_url: str
    thumbnail_url: str | None = None


class FileBatchInCreate(BaseSchemaModel):
    name: str = pydantic.Field(min_length=1)
    description: str | None = None
    files: list[str] = pydantic.Field(min_length=1)


class FileStats(BaseSchemaModel):
    total_files: int
    total_size: int
    files_by_category: dict[str, int]
    files_by_type: dict[str, int]
    recent_uploads: int
    storage_used: int
    storage_limit: int
