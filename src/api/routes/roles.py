import fastapi

from src.api.dependencies.listing import VisibilityParams, get_visibility_params
from src.api.dependencies.repository import get_repository
from src.models.db.role import Role
from src.models.schemas.role import RoleInCreate, RoleInUpdate, RoleSearchRequest, RoleSearchResponse
from src.repository.crud.role import RoleCRUDRepository
from src.utilities.exceptions.http.exc_400 import http_exc_400_system_role

router = fastapi.APIRouter(prefix="/roles", tags=["roles"])


@router.get(
    path="",
    name="roles:read-roles",
    response_model=list[Role],
    status_code=fastapi.status.HTTP_200_OK,
)
async def read_roles(
    visibility: VisibilityParams = fastapi.Depends(get_visibility_params),
    role_repo: RoleCRUDRepository = fastapi.Depends(get_repository(repo_type=RoleCRUDRepository)),
) -> list[Role]:
    return await role_repo.read_all(show_deleted=visibility.show_deleted, active_only=visibility.active_only)


@router.post(
    path="/search",
    name="roles:search-roles",
    response_model=RoleSearchResponse,
    status_code=fastapi.status.HTTP_200_OK,
)
async def search_roles(
    payload: RoleSearchRequest,
    role_repo: RoleCRUDRepository = fastapi.Depends(get_repository(repo_type=RoleCRUDRepository)),
) -> RoleSearchResponse:
    page = await role_repo.search_roles(filters=payload.filters, page=payload.page, page_size=payload.page_size)
    return RoleSearchResponse(roles=page.items, total=page.total, total_pages=page.total_pages, current_page=page.page)


@router.get(
    path="/{id}",
    name="roles:read-role-by-id",
    response_model=Role,
    status_code=fastapi.status.HTTP_200_OK,
)
async def read_role(
    id: str,
    role_repo: RoleCRUDRepository = fastapi.Depends(get_repository(repo_type=RoleCRUDRepository)),
) -> Role:
    return await role_repo.read_by_id(record_id=id)


@router.post(
    path="",
    name="roles:create-role",
    response_model=Role,
    status_code=fastapi.status.HTTP_201_CREATED,
)
async def create_role(
    payload: RoleInCreate,
    role_repo: RoleCRUDRepository = fastapi.Depends(get_repository(repo_type=RoleCRUDRepository)),
) -> Role:
    return await role_repo.create_role(role_create=payload)


@router.put(
    path="/{id}",
    name="roles:update-role-by-id",
    response_model=Role,
    status_code=fastapi.status.HTTP_200_OK,
)
async def update_role(
    id: str,
    payload: RoleInUpdate,
    role_repo: RoleCRUDRepository = fastapi.Depends(get_repository(repo_type=RoleCRUDRepository)),
) -> Role:
    return await role_repo.update_by_id(record_id=id, changes=payload.model_dump(exclude_unset=True))


@router.delete(
    path="/{id}",
    name="roles:delete-role-by-id",
    status_code=fastapi.status.HTTP_204_NO_CONTENT,
)
async def delete_role(
    id: str,
    role_repo: RoleCRUDRepository = fastapi.Depends(get_repository(repo_type=RoleCRUDRepository)),
) -> None:
    role = await role_repo.read_by_id(record_id=id)
    if role.is_system:
        raise await http_exc_400_system_role()

    await role_repo.delete_by_id(record_id=id)


@router.patch(
    path="/{id}/restore",
    name="roles:restore-role-by-id",
    response_model=Role,
    status_code=fastapi.status.HTTP_200_OK,
)
async def restore_role(
    id: str,
    role_repo: RoleCRUDRepository = fastapi.Depends(get_repository(repo_type=RoleCRUDRepository)),
) -> Role:
    return await role_repo.restore_by_id(record_id=id)


@router.patch(
    path="/{id}/toggle-status",
    name="roles:toggle-role-status",
    response_model=Role,
    status_code=fastapi.status.HTTP_200_OK,
)
async def toggle_role_status(
    id: str,
    role_repo: RoleCRUDRepository = fastapi.Depends(get_repository(repo_type=RoleCRUDRepository)),
) -> Role:
    return await role_repo.toggle_status_by_id(record_id=id)
