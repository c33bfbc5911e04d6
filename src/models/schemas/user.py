import pydantic

from src.models.db.user import User, UserStatusEnum
from src.models.schemas.base import BaseSchemaModel
from src.models.schemas.pagination import SearchRequest


class UserInCreate(BaseSchemaModel):
    username: str = pydantic.Field(min_length=3)
    email: pydantic.EmailStr
    first_name: str = pydantic.Field(min_length=1)
    last_name: str = pydantic.Field(min_length=1)
    role: str = pydantic.Field(min_length=1, description="Role code, e.g. ADMIN")
    role_name: str | None = None
    department: str | None = None
    status: UserStatusEnum = UserStatusEnum.ACTIVE
    avatar_id: str | None = None

    model_config = BaseSchemaModel.model_config.copy()
    model_config["json_schema_extra"] = {
        "examples": [
            {
                "username": "sara.blu",
                "email": "sara.blu@noiintervistiamo.it",
                "firstName": "Sara",
                "lastName": "Blu",
                "role": "HR_SPECIALIST",
                "department": "Risorse Umane",
            }
        ]
    }


class UserInUpdate(BaseSchemaModel):
    username: str | None = pydantic.Field(default=None, min_length=3)
    email: pydantic.EmailStr | None = None
    first_name: str | None = None
    last_name: str | None = None
    role: str | None = None
    role_name: str | None = None
    department: str | None = None
    status: UserStatusEnum | None = None
    is_active: bool | None = None
    avatar: str | None = None
    avatar_id: str | None = None


class UserSearchFilters(BaseSchemaModel):
    search: str | None = pydantic.Field(default=None, validation_alias=pydantic.AliasChoices("search", "searchText"))
    role: str | None = pydantic.Field(default=None, validation_alias=pydantic.AliasChoices("role", "roleId"))
    status: UserStatusEnum | None = None
    department: str | None = None
    show_deleted: bool = pydantic.Field(default=False, validation_alias=pydantic.AliasChoices("showDeleted", "show_deleted"))


class UserSearchRequest(SearchRequest):
    filters: UserSearchFilters = pydantic.Field(default_factory=UserSearchFilters)


class UserSearchResponse(BaseSchemaModel):
    users: list[User]
    total: int
    total_pages: int
    current_page: int


class UserStats(BaseSchemaModel):
    total_users: int
    active_users: int
    new_users_this_month: int
    users_by_role: dict[str, int]
