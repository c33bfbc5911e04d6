import fastapi

from src.api.dependencies.listing import VisibilityParams, get_visibility_params
from src.api.dependencies.repository import get_repository
from src.models.db.department import Department
from src.models.schemas.department import (
    DepartmentInCreate,
    DepartmentInUpdate,
    DepartmentSearchRequest,
    DepartmentSearchResponse,
)
from src.repository.crud.department import DepartmentCRUDRepository

router = fastapi.APIRouter(prefix="/departments", tags=["departments"])


@router.get(
    path="",
    name="departments:read-departments",
    response_model=list[Department],
    status_code=fastapi.status.HTTP_200_OK,
)
async def read_departments(
    visibility: VisibilityParams = fastapi.Depends(get_visibility_params),
    department_repo: DepartmentCRUDRepository = fastapi.Depends(get_repository(repo_type=DepartmentCRUDRepository)),
) -> list[Department]:
    return await department_repo.read_all(show_deleted=visibility.show_deleted, active_only=visibility.active_only)


@router.post(
    path="/search",
    name="departments:search-departments",
    response_model=DepartmentSearchResponse,
    status_code=fastapi.status.HTTP_200_OK,
)
async def search_departments(
    payload: DepartmentSearchRequest,
    department_repo: DepartmentCRUDRepository = fastapi.Depends(get_repository(repo_type=DepartmentCRUDRepository)),
) -> DepartmentSearchResponse:
    page = await department_repo.search_departments(
        filters=payload.filters, page=payload.page, page_size=payload.page_size
    )
    return DepartmentSearchResponse(
        departments=page.items, total=page.total, total_pages=page.total_pages, current_page=page.page
    )


@router.get(
    path="/{id}",
    name="departments:read-department-by-id",
    response_model=Department,
    status_code=fastapi.status.HTTP_200_OK,
)
async def read_department(
    id: str,
    department_repo: DepartmentCRUDRepository = fastapi.Depends(get_repository(repo_type=DepartmentCRUDRepository)),
) -> Department:
    return await department_repo.read_by_id(record_id=id)


@router.post(
    path="",
    name="departments:create-department",
    response_model=Department,
    status_code=fastapi.status.HTTP_201_CREATED,
)
async def create_department(
    payload: DepartmentInCreate,
    department_repo: DepartmentCRUDRepository = fastapi.Depends(get_repository(repo_type=DepartmentCRUDRepository)),
) -> Department:
    return await department_repo.create_department(department_create=payload)


@router.put(
    path="/{id}",
    name="departments:update-department-by-id",
    response_model=Department,
    status_code=fastapi.status.HTTP_200_OK,
)
async def update_department(
    id: str,
    payload: DepartmentInUpdate,
    department_repo: DepartmentCRUDRepository = fastapi.Depends(get_repository(repo_type=DepartmentCRUDRepository)),
) -> Department:
    return await department_repo.update_by_id(record_id=id, changes=payload.model_dump(exclude_unset=True))


@router.delete(
    path="/{id}",
    name="departments:delete-department-by-id",
    status_code=fastapi.status.HTTP_204_NO_CONTENT,
)
async def delete_department(
    id: str,
    department_repo: DepartmentCRUDRepository = fastapi.Depends(get_repository(repo_type=DepartmentCRUDRepository)),
) -> None:
    await department_repo.delete_by_id(record_id=id)


@router.patch(
    path="/{id}/restore",
    name="departments:restore-department-by-id",
    response_model=Department,
    status_code=fastapi.status.HTTP_200_OK,
)
async def restore_department(
    id: str,
    department_repo: DepartmentCRUDRepository = fastapi.Depends(get_repository(repo_type=DepartmentCRUDRepository)),
) -> Department:
    return await department_repo.restore_by_id(record_id=id)


@router.patch(
    path="/{id}/toggle-status",
    name="departments:toggle-department-status",
    response_model=Department,
    status_code=fastapi.status.HTTP_200_OK,
)
async def toggle_department_status(
    id: str,
    department_repo: DepartmentCRUDRepository = fastapi.Depends(get_repository(repo_type=DepartmentCRUDRepository)),
) -> Department:
    return await department_repo.toggle_status_by_id(record_id=id)
