import pydantic

from src.models.db.base import BaseRecordModel


class Role(BaseRecordModel):
    name: str
    code: str
    description: str | None = None
    color: str
    permissions: list[str] = pydantic.Field(default_factory=list)
    is_system: bool = False
    has_hr_access: bool = pydantic.Field(default=False, alias="hasHRAccess")
    has_technical_access: bool = False
    has_admin_access: bool = False
    has_candidate_access: bool = False
    user_count: int | None = 0
