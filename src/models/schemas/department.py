import pydantic

from src.models.db.department import Department
from src.models.schemas.base import BaseSchemaModel
from src.models.schemas.pagination import SearchRequest
from src.models.schemas.role import HEX_COLOR_PATTERN


class DepartmentInCreate(BaseSchemaModel):
    name: str = pydantic.Field(min_length=1)
    description: str | None = None
    color: str = pydantic.Field(pattern=HEX_COLOR_PATTERN)


class DepartmentInUpdate(BaseSchemaModel):
    name: str | None = pydantic.Field(default=None, min_length=1)
    description: str | None = None
    color: str | None = pydantic.Field(default=None, pattern=HEX_COLOR_PATTERN)
    is_active: bool | None = None


class DepartmentSearchFilters(BaseSchemaModel):
    search_text: str | None = None
    is_active: bool | None = None
    show_deleted: bool = False


class DepartmentSearchRequest(SearchRequest):
    filters: DepartmentSearchFilters = pydantic.Field(default_factory=DepartmentSearchFilters)


class DepartmentSearchResponse(BaseSchemaModel):
    departments: list[Department]
    total: int
    total_pages: int
    current_page: int
