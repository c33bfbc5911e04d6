import fastapi

from src.api.dependencies.repository import get_repository
from src.models.schemas.datalist import (
    AccessAreaOption,
    ColorPaletteOption,
    DepartmentOption,
    RoleOption,
    UserStatusOption,
)
from src.repository.crud.datalist import DatalistCRUDRepository

router = fastapi.APIRouter(prefix="/datalist", tags=["datalist"])


@router.get(
    path="/roles",
    name="datalist:read-roles",
    response_model=list[RoleOption],
    status_code=fastapi.status.HTTP_200_OK,
)
async def read_role_options(
    datalist_repo: DatalistCRUDRepository = fastapi.Depends(get_repository(repo_type=DatalistCRUDRepository)),
) -> list[RoleOption]:
    return await datalist_repo.get_role_options()


@router.get(
    path="/departments",
    name="datalist:read-departments",
    response_model=list[DepartmentOption],
    status_code=fastapi.status.HTTP_200_OK,
)
async def read_department_options(
    datalist_repo: DatalistCRUDRepository = fastapi.Depends(get_repository(repo_type=DatalistCRUDRepository)),
) -> list[DepartmentOption]:
    return await datalist_repo.get_department_options()


@router.get(
    path="/user-statuses",
    name="datalist:read-user-statuses",
    response_model=list[UserStatusOption],
    status_code=fastapi.status.HTTP_200_OK,
)
async def read_user_statuses(
    datalist_repo: DatalistCRUDRepository = fastapi.Depends(get_repository(repo_type=DatalistCRUDRepository)),
) -> list[UserStatusOption]:
    return await datalist_repo.get_user_statuses()


@router.get(
    path="/user-access-areas",
    name="datalist:read-user-access-areas",
    response_model=list[AccessAreaOption],
    status_code=fastapi.status.HTTP_200_OK,
)
async def read_user_access_areas(
    datalist_repo: DatalistCRUDRepository = fastapi.Depends(get_repository(repo_type=DatalistCRUDRepository)),
) -> list[AccessAreaOption]:
    return await datalist_repo.get_access_areas()


@router.get(
    path="/user-color-palettes",
    name="datalist:read-user-color-palettes",
    response_model=list[ColorPaletteOption],
    status_code=fastapi.status.HTTP_200_OK,
)
async def read_user_color_palettes(
    datalist_repo: DatalistCRUDRepository = fastapi.Depends(get_repository(repo_type=DatalistCRUDRepository)),
) -> list[ColorPaletteOption]:
    return await datalist_repo.get_color_palettes()
