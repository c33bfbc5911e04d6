import pydantic

from src.models.db.role import Role
from src.models.schemas.base import BaseSchemaModel
from src.models.schemas.pagination import SearchRequest

HEX_COLOR_PATTERN = r"^#[0-9a-fA-F]{3}([0-9a-fA-F]{3})?$"


class RoleInCreate(BaseSchemaModel):
    name: str = pydantic.Field(min_length=1)
    code: str = pydantic.Field(min_length=1)
    description: str | None = None
    color: str = pydantic.Field(pattern=HEX_COLOR_PATTERN)
    permissions: list[str] = pydantic.Field(default_factory=list)
    has_hr_access: bool = pydantic.Field(default=False, alias="hasHRAccess")
    has_technical_access: bool = False
    has_admin_access: bool = False
    has_candidate_access: bool = False


class RoleInUpdate(BaseSchemaModel):
    name: str | None = pydantic.Field(default=None, min_length=1)
    code: str | None = pydantic.Field(default=None, min_length=1)
    description: str | None = None
    color: str | None = pydantic.Field(default=None, pattern=HEX_COLOR_PATTERN)
    permissions: list[str] | None = None
    is_active: bool | None = None
    has_hr_access: bool | None = pydantic.Field(default=None, alias="hasHRAccess")
    has_technical_access: bool | None = None
    has_admin_access: bool | None = None
    has_candidate_access: bool | None = None


class RoleSearchFilters(BaseSchemaModel):
    search_text: str | None = None
    is_active: bool | None = None
    has_hr_access: bool | None = pydantic.Field(default=None, alias="hasHRAccess")
    has_technical_access: bool | None = None
    has_admin_access: bool | None = None
    has_candidate_access: bool | None = None
    show_deleted: bool = False


class RoleSearchRequest(SearchRequest):
    filters: RoleSearchFilters = pydantic.Field(default_factory=RoleSearchFilters)


class RoleSearchResponse(BaseSchemaModel):
    roles: list[Role]
    total: int
    total_pages: int
    current_page: int
