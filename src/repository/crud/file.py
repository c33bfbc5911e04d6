import collections
import datetime
import typing

from src.config.manager import settings
from src.models.db.file import FileBatch, FileCategoryEnum, FileEntityTypeEnum, FileUpload
from src.models.schemas.file import FileBatchInCreate, FileStats
from src.repository.crud.base import SoftDeleteCRUDRepository
from src.repository.query import (
    Page,
    any_element_contains,
    by_field,
    field_contains,
    field_equals,
    in_range,
    text_search,
    visibility,
)
from src.services.file_upload import build_stored_filename, extract_metadata, file_type_of
from src.utilities.formatters.datetime_formatter import utc_now

FILE_TYPES = ("image", "pdf", "document", "video", "audio", "other")
DOWNLOAD_URL = "{prefix}/files/{file_id}/download"


class FileCRUDRepository(SoftDeleteCRUDRepository[FileUpload]):
    collection_name = "files"
    not_found_code = "FILE_NOT_FOUND"
    not_found_message = "File non trovato"
    read_only_fields = frozenset({"filename", "path", "uploaded_by", "uploaded_at", "size", "mimetype", "url"})

    async def read_files(
        self,
        *,
        category: str | None = None,
        entity_type: str | None = None,
        entity_id: str | None = None,
        uploaded_by: str | None = None,
        mimetype: str | None = None,
        min_size: int | None = None,
        max_size: int | None = None,
        uploaded_after: datetime.datetime | None = None,
        uploaded_before: datetime.datetime | None = None,
        tags: list[str] | None = None,
        search: str | None = None,
        show_deleted: bool = False,
        active_only: bool = False,
        page: int = 1,
        page_size: int = 10,
    ) -> Page[FileUpload]:
        return await self.read_page(
            predicates=[
                field_equals("category", category),
                field_equals("entity_type", entity_type),
                field_equals("entity_id", entity_id),
                field_equals("uploaded_by", uploaded_by),
                field_contains("mimetype", mimetype),
                in_range("size", minimum=min_size, maximum=max_size),
                in_range("uploaded_at", minimum=uploaded_after, maximum=uploaded_before),
                any_element_contains("tags", tags),
                text_search(("original_name", "filename", "description"), search, list_fields=("tags",)),
            ],
            sort_key=by_field("uploaded_at"),
            descending=True,
            page=page,
            page_size=page_size,
            show_deleted=show_deleted,
            active_only=active_only,
        )

    async def store_upload(
        self,
        *,
        original_name: str,
        mimetype: str,
        content: bytes,
        uploaded_by: str,
        category: str | None = None,
        entity_type: str | None = None,
        entity_id: str | None = None,
        is_public: bool = False,
        tags: list[str] | None = None,
        description: str | None = None,
        expires_at: datetime.datetime | None = None,
    ) -> FileUpload:
        file_id = self.collection.next_id()
        filename = build_stored_filename(original_name)
        entity_type = FileEntityTypeEnum(entity_type or FileEntityTypeEnum.SYSTEM)
        category = FileCategoryEnum(category or FileCategoryEnum.OTHER)

        new_file = FileUpload(
            id=file_id,
            filename=filename,
            original_name=original_name,
            mimetype=mimetype,
            size=len(content),
            path=f"/uploads/{entity_type.value}/{category.value}/{filename}",
            url=DOWNLOAD_URL.format(prefix=settings.API_PREFIX, file_id=file_id),
            uploaded_by=uploaded_by,
            category=category,
            entity_type=entity_type,
            entity_id=entity_id,
            is_public=is_public,
            metadata=extract_metadata(content, mimetype),
            tags=tags or [],
            description=description,
            expires_at=expires_at,
        )
        await self.create(record=new_file)
        self.store.file_contents[file_id] = content
        return new_file

    async def read_content(self, *, file_id: str) -> bytes:
        file = await self.read_by_id(record_id=file_id)
        content = self.store.file_contents.get(file.id)
        if content is None:
            content = (
                f"Mock file content for {file.original_name}\nFile ID: {file.id}\nSize: {file.size} bytes"
            ).encode()
        return content

    async def get_file_stats(self) -> FileStats:
        files = [file for file in self.collection if visibility()(file)]
        total_size = sum(file.size for file in files)
        yesterday = utc_now() - datetime.timedelta(days=1)
        by_category = collections.Counter(file.category for file in files)
        by_type = collections.Counter(file_type_of(file.mimetype) for file in files)

        return FileStats(
            total_files=len(files),
            total_size=total_size,
            files_by_category={category.value: by_category[category] for category in FileCategoryEnum},
            files_by_type={file_type: by_type[file_type] for file_type in FILE_TYPES},
            recent_uploads=sum(1 for file in files if file.uploaded_at > yesterday),
            storage_used=total_size,
            storage_limit=settings.STORAGE_LIMIT_BYTES,
        )

    # ------------------------------------------------------------------
    # Batches
    # ------------------------------------------------------------------
    async def read_batches(self) -> list[FileBatch]:
        is_visible = visibility()
        return [batch for batch in self.store.file_batches if is_visible(batch)]

    async def create_batch(self, *, batch_create: FileBatchInCreate, created_by: str) -> FileBatch:
        for file_id in batch_create.files:
            await self.read_by_id(record_id=file_id)

        batches = self.store.file_batches
        new_batch = FileBatch(id=batches.next_id(), created_by=created_by, **batch_create.model_dump())
        return batches.add(new_batch)

    def describe(self, file: FileUpload) -> dict[str, typing.Any]:
        thumbnail_url = f"{file.url}?size=thumbnail" if file.category == FileCategoryEnum.PROFILE_PHOTO else None
        return {"file": file, "download_url": file.url, "thumbnail_url": thumbnail_url}
