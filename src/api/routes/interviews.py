import fastapi

from src.api.dependencies.listing import PageParams, VisibilityParams, get_page_params, get_visibility_params
from src.api.dependencies.repository import get_repository
from src.models.db.interview import Interview, InterviewStatusEnum, InterviewTypeEnum
from src.models.schemas.interview import InterviewInCreate, InterviewInUpdate, InterviewStats
from src.models.schemas.pagination import PaginatedResponse
from src.repository.crud.interview import InterviewCRUDRepository

router = fastapi.APIRouter(prefix="/interviews", tags=["interviews"])


@router.get(
    path="",
    name="interviews:read-interviews",
    response_model=PaginatedResponse[Interview],
    status_code=fastapi.status.HTTP_200_OK,
)
async def read_interviews(
    status: InterviewStatusEnum | None = None,
    interview_type: InterviewTypeEnum | None = fastapi.Query(default=None, alias="type"),
    interviewer_id: str | None = fastapi.Query(default=None, alias="interviewerId"),
    search: str | None = None,
    page_params: PageParams = fastapi.Depends(get_page_params),
    visibility: VisibilityParams = fastapi.Depends(get_visibility_params),
    interview_repo: InterviewCRUDRepository = fastapi.Depends(get_repository(repo_type=InterviewCRUDRepository)),
) -> PaginatedResponse[Interview]:
    page = await interview_repo.read_interviews(
        status=status,
        interview_type=interview_type,
        interviewer_id=interviewer_id,
        search=search,
        show_deleted=visibility.show_deleted,
        active_only=visibility.active_only,
        page=page_params.page,
        page_size=page_params.page_size,
    )
    return PaginatedResponse[Interview].from_page(page)


@router.get(
    path="/stats",
    name="interviews:read-interview-stats",
    response_model=InterviewStats,
    status_code=fastapi.status.HTTP_200_OK,
)
async def read_interview_stats(
    interview_repo: InterviewCRUDRepository = fastapi.Depends(get_repository(repo_type=InterviewCRUDRepository)),
) -> InterviewStats:
    return await interview_repo.get_interview_stats()


@router.get(
    path="/{id}",
    name="interviews:read-interview-by-id",
    response_model=Interview,
    status_code=fastapi.status.HTTP_200_OK,
)
async def read_interview(
    id: str,
    interview_repo: InterviewCRUDRepository = fastapi.Depends(get_repository(repo_type=InterviewCRUDRepository)),
) -> Interview:
    return await interview_repo.read_by_id(record_id=id)


@router.post(
    path="",
    name="interviews:create-interview",
    response_model=Interview,
    status_code=fastapi.status.HTTP_201_CREATED,
)
async def create_interview(
    payload: InterviewInCreate,
    interview_repo: InterviewCRUDRepository = fastapi.Depends(get_repository(repo_type=InterviewCRUDRepository)),
) -> Interview:
    return await interview_repo.create_interview(interview_create=payload)


@router.put(
    path="/{id}",
    name="interviews:update-interview-by-id",
    response_model=Interview,
    status_code=fastapi.status.HTTP_200_OK,
)
async def update_interview(
    id: str,
    payload: InterviewInUpdate,
    interview_repo: InterviewCRUDRepository = fastapi.Depends(get_repository(repo_type=InterviewCRUDRepository)),
) -> Interview:
    return await interview_repo.update_by_id(record_id=id, changes=payload.model_dump(exclude_unset=True))


@router.delete(
    path="/{id}",
    name="interviews:delete-interview-by-id",
    status_code=fastapi.status.HTTP_204_NO_CONTENT,
)
async def delete_interview(
    id: str,
    interview_repo: InterviewCRUDRepository = fastapi.Depends(get_repository(repo_type=InterviewCRUDRepository)),
) -> None:
    await interview_repo.delete_by_id(record_id=id)


@router.patch(
    path="/{id}/restore",
    name="interviews:restore-interview-by-id",
    response_model=Interview,
    status_code=fastapi.status.HTTP_200_OK,
)
async def restore_interview(
    id: str,
    interview_repo: InterviewCRUDRepository = fastapi.Depends(get_repository(repo_type=InterviewCRUDRepository)),
) -> Interview:
    return await interview_repo.restore_by_id(record_id=id)


@router.patch(
    path="/{id}/toggle-status",
    name="interviews:toggle-interview-status",
    response_model=Interview,
    status_code=fastapi.status.HTTP_200_OK,
)
async def toggle_interview_status(
    id: str,
    interview_repo: InterviewCRUDRepository = fastapi.Depends(get_repository(repo_type=InterviewCRUDRepository)),
) -> Interview:
    return await interview_repo.toggle_status_by_id(record_id=id)
