import fastapi

from src.api.dependencies.listing import PageParams, VisibilityParams, get_page_params, get_visibility_params
from src.api.dependencies.repository import get_repository
from src.models.db.user import User, UserStatusEnum
from src.models.schemas.pagination import PaginatedResponse
from src.models.schemas.user import (
    UserInCreate,
    UserInUpdate,
    UserSearchRequest,
    UserSearchResponse,
    UserStats,
)
from src.repository.crud.user import UserCRUDRepository

router = fastapi.APIRouter(prefix="/users", tags=["users"])


@router.get(
    path="",
    name="users:read-users",
    response_model=PaginatedResponse[User],
    status_code=fastapi.status.HTTP_200_OK,
)
async def read_users(
    role: str | None = None,
    status: UserStatusEnum | None = None,
    department: str | None = None,
    search: str | None = None,
    page_params: PageParams = fastapi.Depends(get_page_params),
    visibility: VisibilityParams = fastapi.Depends(get_visibility_params),
    user_repo: UserCRUDRepository = fastapi.Depends(get_repository(repo_type=UserCRUDRepository)),
) -> PaginatedResponse[User]:
    page = await user_repo.read_users(
        role=role,
        status=status,
        department=department,
        search=search,
        show_deleted=visibility.show_deleted,
        active_only=visibility.active_only,
        page=page_params.page,
        page_size=page_params.page_size,
    )
    return PaginatedResponse[User].from_page(page)


@router.post(
    path="/search",
    name="users:search-users",
    response_model=UserSearchResponse,
    status_code=fastapi.status.HTTP_200_OK,
)
async def search_users(
    payload: UserSearchRequest,
    user_repo: UserCRUDRepository = fastapi.Depends(get_repository(repo_type=UserCRUDRepository)),
) -> UserSearchResponse:
    filters = payload.filters
    page = await user_repo.read_users(
        role=filters.role,
        status=filters.status,
        department=filters.department,
        search=filters.search,
        show_deleted=filters.show_deleted,
        page=payload.page,
        page_size=payload.page_size,
    )
    return UserSearchResponse(
        users=page.items, total=page.total, total_pages=page.total_pages, current_page=page.page
    )


@router.get(
    path="/stats",
    name="users:read-user-stats",
    response_model=UserStats,
    status_code=fastapi.status.HTTP_200_OK,
)
async def read_user_stats(
    user_repo: UserCRUDRepository = fastapi.Depends(get_repository(repo_type=UserCRUDRepository)),
) -> UserStats:
    return await user_repo.get_user_stats()


@router.get(
    path="/{id}",
    name="users:read-user-by-id",
    response_model=User,
    status_code=fastapi.status.HTTP_200_OK,
)
async def read_user(
    id: str,
    user_repo: UserCRUDRepository = fastapi.Depends(get_repository(repo_type=UserCRUDRepository)),
) -> User:
    return await user_repo.read_by_id(record_id=id)


@router.post(
    path="",
    name="users:create-user",
    response_model=User,
    status_code=fastapi.status.HTTP_201_CREATED,
)
async def create_user(
    payload: UserInCreate,
    user_repo: UserCRUDRepository = fastapi.Depends(get_repository(repo_type=UserCRUDRepository)),
) -> User:
    return await user_repo.create_user(user_create=payload)


@router.put(
    path="/{id}",
    name="users:update-user-by-id",
    response_model=User,
    status_code=fastapi.status.HTTP_200_OK,
)
async def update_user(
    id: str,
    payload: UserInUpdate,
    user_repo: UserCRUDRepository = fastapi.Depends(get_repository(repo_type=UserCRUDRepository)),
) -> User:
    return await user_repo.update_user_by_id(user_id=id, changes=payload.model_dump(exclude_unset=True))


@router.delete(
    path="/{id}",
    name="users:delete-user-by-id",
    status_code=fastapi.status.HTTP_204_NO_CONTENT,
)
async def delete_user(
    id: str,
    user_repo: UserCRUDRepository = fastapi.Depends(get_repository(repo_type=UserCRUDRepository)),
) -> None:
    await user_repo.delete_by_id(record_id=id)


@router.patch(
    path="/{id}/restore",
    name="users:restore-user-by-id",
    response_model=User,
    status_code=fastapi.status.HTTP_200_OK,
)
async def restore_user(
    id: str,
    user_repo: UserCRUDRepository = fastapi.Depends(get_repository(repo_type=UserCRUDRepository)),
) -> User:
    return await user_repo.restore_by_id(record_id=id)


@router.patch(
    path="/{id}/toggle-status",
    name="users:toggle-user-status",
    response_model=User,
    status_code=fastapi.status.HTTP_200_OK,
)
async def toggle_user_status(
    id: str,
    user_repo: UserCRUDRepository = fastapi.Depends(get_repository(repo_type=UserCRUDRepository)),
) -> User:
    return await user_repo.toggle_status_by_id(record_id=id)
