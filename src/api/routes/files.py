import datetime
import urllib.parse

import fastapi
from fastapi.responses import Response

from src.api.dependencies.auth import get_optional_account
from src.api.dependencies.listing import (
    PageParams,
    VisibilityParams,
    ensure_ordered_range,
    get_page_params,
    get_visibility_params,
)
from src.api.dependencies.repository import get_repository
from src.config.manager import settings
from src.models.db.account import AuthAccount
from src.models.db.file import FileBatch, FileCategoryEnum, FileEntityTypeEnum, FileUpload
from src.models.schemas.file import FileBatchInCreate, FileDetail, FileInUpdate, FileStats
from src.models.schemas.pagination import PaginatedResponse
from src.repository.crud.file import FileCRUDRepository
from src.services.file_upload import validate_upload_file
from src.utilities.exceptions.http.exc_400 import http_exc_400_no_files_uploaded, http_exc_400_too_many_files
from src.utilities.formatters.datetime_formatter import ensure_aware
from src.utilities.formatters.field_formatter import split_comma_separated

router = fastapi.APIRouter(prefix="/files", tags=["files"])

# Uploads made without a bearer token are attributed to the administrator account
ANONYMOUS_UPLOADER_ID = "1"


def _uploader_id(account: AuthAccount | None) -> str:
    return account.id if account else ANONYMOUS_UPLOADER_ID


@router.get(
    path="",
    name="files:read-files",
    response_model=PaginatedResponse[FileUpload],
    status_code=fastapi.status.HTTP_200_OK,
)
async def read_files(
    category: FileCategoryEnum | None = None,
    entity_type: FileEntityTypeEnum | None = fastapi.Query(default=None, alias="entityType"),
    entity_id: str | None = fastapi.Query(default=None, alias="entityId"),
    uploaded_by: str | None = fastapi.Query(default=None, alias="uploadedBy"),
    mimetype: str | None = None,
    min_size: int | None = fastapi.Query(default=None, alias="minSize", ge=0),
    max_size: int | None = fastapi.Query(default=None, alias="maxSize", ge=0),
    uploaded_after: datetime.datetime | None = fastapi.Query(default=None, alias="uploadedAfter"),
    uploaded_before: datetime.datetime | None = fastapi.Query(default=None, alias="uploadedBefore"),
    tags: str | None = fastapi.Query(default=None, description="Comma separated list"),
    search: str | None = None,
    page_params: PageParams = fastapi.Depends(get_page_params),
    visibility: VisibilityParams = fastapi.Depends(get_visibility_params),
    file_repo: FileCRUDRepository = fastapi.Depends(get_repository(repo_type=FileCRUDRepository)),
) -> PaginatedResponse[FileUpload]:
    ensure_ordered_range(min_size, max_size, field="minSize")
    uploaded_after, uploaded_before = ensure_aware(uploaded_after), ensure_aware(uploaded_before)
    ensure_ordered_range(uploaded_after, uploaded_before, field="uploadedAfter")
    page = await file_repo.read_files(
        category=category,
        entity_type=entity_type,
        entity_id=entity_id,
        uploaded_by=uploaded_by,
        mimetype=mimetype,
        min_size=min_size,
        max_size=max_size,
        uploaded_after=uploaded_after,
        uploaded_before=uploaded_before,
        tags=split_comma_separated(tags),
        search=search,
        show_deleted=visibility.show_deleted,
        active_only=visibility.active_only,
        page=page_params.page,
        page_size=page_params.page_size,
    )
    return PaginatedResponse[FileUpload].from_page(page)


@router.get(
    path="/stats",
    name="files:read-file-stats",
    response_model=FileStats,
    status_code=fastapi.status.HTTP_200_OK,
)
async def read_file_stats(
    file_repo: FileCRUDRepository = fastapi.Depends(get_repository(repo_type=FileCRUDRepository)),
) -> FileStats:
    return await file_repo.get_file_stats()


@router.get(
    path="/batches",
    name="files:read-file-batches",
    response_model=list[FileBatch],
    status_code=fastapi.status.HTTP_200_OK,
)
async def read_file_batches(
    file_repo: FileCRUDRepository = fastapi.Depends(get_repository(repo_type=FileCRUDRepository)),
) -> list[FileBatch]:
    return await file_repo.read_batches()


@router.post(
    path="/batches",
    name="files:create-file-batch",
    response_model=FileBatch,
    status_code=fastapi.status.HTTP_201_CREATED,
)
async def create_file_batch(
    payload: FileBatchInCreate,
    account: AuthAccount | None = fastapi.Depends(get_optional_account),
    file_repo: FileCRUDRepository = fastapi.Depends(get_repository(repo_type=FileCRUDRepository)),
) -> FileBatch:
    return await file_repo.create_batch(batch_create=payload, created_by=_uploader_id(account))


@router.post(
    path="/upload",
    name="files:upload-files",
    response_model=list[FileUpload],
    status_code=fastapi.status.HTTP_201_CREATED,
)
async def upload_files(
    files: list[fastapi.UploadFile] | None = fastapi.File(default=None),
    category: FileCategoryEnum | None = fastapi.Form(default=None),
    entity_type: FileEntityTypeEnum | None = fastapi.Form(default=None, alias="entityType"),
    entity_id: str | None = fastapi.Form(default=None, alias="entityId"),
    is_public: bool = fastapi.Form(default=False, alias="isPublic"),
    tags: str | None = fastapi.Form(default=None, description="Comma separated list"),
    description: str | None = fastapi.Form(default=None),
    expires_at: datetime.datetime | None = fastapi.Form(default=None, alias="expiresAt"),
    account: AuthAccount | None = fastapi.Depends(get_optional_account),
    file_repo: FileCRUDRepository = fastapi.Depends(get_repository(repo_type=FileCRUDRepository)),
) -> list[FileUpload]:
    if not files:
        raise await http_exc_400_no_files_uploaded()
    if len(files) > settings.MAX_UPLOAD_FILES:
        raise await http_exc_400_too_many_files(settings.MAX_UPLOAD_FILES)

    # validate every file before storing any of them
    accepted = []
    for upload in files:
        content, mimetype = await validate_upload_file(upload)
        accepted.append((upload, content, mimetype))

    uploaded_files = []
    for upload, content, mimetype in accepted:
        uploaded_files.append(
            await file_repo.store_upload(
                original_name=upload.filename or "file",
                mimetype=mimetype,
                content=content,
                uploaded_by=_uploader_id(account),
                category=category,
                entity_type=entity_type,
                entity_id=entity_id,
                is_public=is_public,
                tags=split_comma_separated(tags),
                description=description,
                expires_at=expires_at,
            )
        )
    return uploaded_files


@router.get(
    path="/{id}",
    name="files:read-file-by-id",
    response_model=FileDetail,
    status_code=fastapi.status.HTTP_200_OK,
)
async def read_file(
    id: str,
    file_repo: FileCRUDRepository = fastapi.Depends(get_repository(repo_type=FileCRUDRepository)),
) -> FileDetail:
    file = await file_repo.read_by_id(record_id=id)
    return FileDetail(**file_repo.describe(file))


@router.get(
    path="/{id}/download",
    name="files:download-file",
    response_class=Response,
    status_code=fastapi.status.HTTP_200_OK,
)
async def download_file(
    id: str,
    file_repo: FileCRUDRepository = fastapi.Depends(get_repository(repo_type=FileCRUDRepository)),
) -> Response:
    file = await file_repo.read_by_id(record_id=id)
    content = await file_repo.read_content(file_id=id)
    return Response(
        content=content,
        media_type=file.mimetype,
        headers={
            "Content-Disposition": f"attachment; filename*=UTF-8''{urllib.parse.quote(file.original_name)}",
        },
    )


@router.put(
    path="/{id}",
    name="files:update-file-by-id",
    response_model=FileUpload,
    status_code=fastapi.status.HTTP_200_OK,
)
async def update_file(
    id: str,
    payload: FileInUpdate,
    file_repo: FileCRUDRepository = fastapi.Depends(get_repository(repo_type=FileCRUDRepository)),
) -> FileUpload:
    return await file_repo.update_by_id(record_id=id, changes=payload.model_dump(exclude_unset=True))


@router.delete(
    path="/{id}",
    name="files:delete-file-by-id",
    status_code=fastapi.status.HTTP_204_NO_CONTENT,
)
async def delete_file(
    id: str,
    file_repo: FileCRUDRepository = fastapi.Depends(get_repository(repo_type=FileCRUDRepository)),
) -> None:
    await file_repo.delete_by_id(record_id=id)


@router.patch(
    path="/{id}/restore",
    name="files:restore-file-by-id",
    response_model=FileUpload,
    status_code=fastapi.status.HTTP_200_OK,
)
async def restore_file(
    id: str,
    file_repo: FileCRUDRepository = fastapi.Depends(get_repository(repo_type=FileCRUDRepository)),
) -> FileUpload:
    return await file_repo.restore_by_id(record_id=id)


@router.patch(
    path="/{id}/toggle-status",
    name="files:toggle-file-status",
    response_model=FileUpload,
    status_code=fastapi.status.HTTP_200_OK,
)
async def toggle_file_status(
    id: str,
    file_repo: FileCRUDRepository = fastapi.Depends(get_repository(repo_type=FileCRUDRepository)),
) -> FileUpload:
    return await file_repo.toggle_status_by_id(record_id=id)
