import fastapi

from src.api.dependencies.auth import get_optional_account
from src.api.dependencies.listing import (
    PageParams,
    VisibilityParams,
    ensure_ordered_range,
    get_page_params,
    get_visibility_params,
)
from src.api.dependencies.repository import get_repository
from src.models.db.account import AuthAccount
from src.models.db.candidate import Candidate, CandidateNote, CandidateStatusEnum, PriorityEnum
from src.models.schemas.candidate import CandidateInCreate, CandidateInUpdate, CandidateNoteInCreate, CandidateStats
from src.models.schemas.pagination import PaginatedResponse
from src.repository.crud.candidate import CandidateCRUDRepository
from src.utilities.formatters.field_formatter import split_comma_separated

router = fastapi.APIRouter(prefix="/candidates", tags=["candidates"])

DEFAULT_NOTE_AUTHOR = "Current User"


@router.get(
    path="",
    name="candidates:read-candidates",
    response_model=PaginatedResponse[Candidate],
    status_code=fastapi.status.HTTP_200_OK,
)
async def read_candidates(
    status: CandidateStatusEnum | None = None,
    position: str | None = None,
    source: str | None = None,
    skills: str | None = fastapi.Query(default=None, description="Comma separated list"),
    min_experience: float | None = fastapi.Query(default=None, alias="minExp", ge=0),
    max_experience: float | None = fastapi.Query(default=None, alias="maxExp", ge=0),
    priority: PriorityEnum | None = None,
    tags: str | None = fastapi.Query(default=None, description="Comma separated list"),
    search: str | None = None,
    page_params: PageParams = fastapi.Depends(get_page_params),
    visibility: VisibilityParams = fastapi.Depends(get_visibility_params),
    candidate_repo: CandidateCRUDRepository = fastapi.Depends(get_repository(repo_type=CandidateCRUDRepository)),
) -> PaginatedResponse[Candidate]:
    ensure_ordered_range(min_experience, max_experience, field="minExp")
    page = await candidate_repo.read_candidates(
        status=status,
        position=position,
        source=source,
        skills=split_comma_separated(skills),
        min_experience=min_experience,
        max_experience=max_experience,
        priority=priority,
        tags=split_comma_separated(tags),
        search=search,
        show_deleted=visibility.show_deleted,
        active_only=visibility.active_only,
        page=page_params.page,
        page_size=page_params.page_size,
    )
    return PaginatedResponse[Candidate].from_page(page)


@router.get(
    path="/stats",
    name="candidates:read-candidate-stats",
    response_model=CandidateStats,
    status_code=fastapi.status.HTTP_200_OK,
)
async def read_candidate_stats(
    candidate_repo: CandidateCRUDRepository = fastapi.Depends(get_repository(repo_type=CandidateCRUDRepository)),
) -> CandidateStats:
    return await candidate_repo.get_candidate_stats()


@router.get(
    path="/{id}",
    name="candidates:read-candidate-by-id",
    response_model=Candidate,
    status_code=fastapi.status.HTTP_200_OK,
)
async def read_candidate(
    id: str,
    candidate_repo: CandidateCRUDRepository = fastapi.Depends(get_repository(repo_type=CandidateCRUDRepository)),
) -> Candidate:
    return await candidate_repo.read_by_id(record_id=id)


@router.post(
    path="",
    name="candidates:create-candidate",
    response_model=Candidate,
    status_code=fastapi.status.HTTP_201_CREATED,
)
async def create_candidate(
    payload: CandidateInCreate,
    candidate_repo: CandidateCRUDRepository = fastapi.Depends(get_repository(repo_type=CandidateCRUDRepository)),
) -> Candidate:
    return await candidate_repo.create_candidate(candidate_create=payload)


@router.put(
    path="/{id}",
    name="candidates:update-candidate-by-id",
    response_model=Candidate,
    status_code=fastapi.status.HTTP_200_OK,
)
async def update_candidate(
    id: str,
    payload: CandidateInUpdate,
    candidate_repo: CandidateCRUDRepository = fastapi.Depends(get_repository(repo_type=CandidateCRUDRepository)),
) -> Candidate:
    return await candidate_repo.update_by_id(record_id=id, changes=payload.model_dump(exclude_unset=True))


@router.delete(
    path="/{id}",
    name="candidates:delete-candidate-by-id",
    status_code=fastapi.status.HTTP_204_NO_CONTENT,
)
async def delete_candidate(
    id: str,
    candidate_repo: CandidateCRUDRepository = fastapi.Depends(get_repository(repo_type=CandidateCRUDRepository)),
) -> None:
    await candidate_repo.delete_by_id(record_id=id)


@router.patch(
    path="/{id}/restore",
    name="candidates:restore-candidate-by-id",
    response_model=Candidate,
    status_code=fastapi.status.HTTP_200_OK,
)
async def restore_candidate(
    id: str,
    candidate_repo: CandidateCRUDRepository = fastapi.Depends(get_repository(repo_type=CandidateCRUDRepository)),
) -> Candidate:
    return await candidate_repo.restore_by_id(record_id=id)


@router.patch(
    path="/{id}/toggle-status",
    name="candidates:toggle-candidate-status",
    response_model=Candidate,
    status_code=fastapi.status.HTTP_200_OK,
)
async def toggle_candidate_status(
    id: str,
    candidate_repo: CandidateCRUDRepository = fastapi.Depends(get_repository(repo_type=CandidateCRUDRepository)),
) -> Candidate:
    return await candidate_repo.toggle_status_by_id(record_id=id)


@router.get(
    path="/{id}/notes",
    name="candidates:read-candidate-notes",
    response_model=list[CandidateNote],
    status_code=fastapi.status.HTTP_200_OK,
)
async def read_candidate_notes(
    id: str,
    candidate_repo: CandidateCRUDRepository = fastapi.Depends(get_repository(repo_type=CandidateCRUDRepository)),
) -> list[CandidateNote]:
    return await candidate_repo.read_notes(candidate_id=id)


@router.post(
    path="/{id}/notes",
    name="candidates:create-candidate-note",
    response_model=CandidateNote,
    status_code=fastapi.status.HTTP_201_CREATED,
)
async def create_candidate_note(
    id: str,
    payload: CandidateNoteInCreate,
    account: AuthAccount | None = fastapi.Depends(get_optional_account),
    candidate_repo: CandidateCRUDRepository = fastapi.Depends(get_repository(repo_type=CandidateCRUDRepository)),
) -> CandidateNote:
    author = f"{account.first_name} {account.last_name}" if account else DEFAULT_NOTE_AUTHOR
    return await candidate_repo.add_note(candidate_id=id, note_create=payload, author=author)
