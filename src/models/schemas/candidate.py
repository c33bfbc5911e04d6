import datetime

import pydantic

from src.models.db.candidate import (
    CandidateStatusEnum,
    Education,
    PriorityEnum,
    WorkExperience,
)
from src.models.schemas.base import BaseSchemaModel
from src.utilities.validators import validate_phone


class CandidateInCreate(BaseSchemaModel):
    first_name: str = pydantic.Field(min_length=1)
    last_name: str = pydantic.Field(min_length=1)
    email: pydantic.EmailStr
    phone: str | None = None
    position: str = pydantic.Field(min_length=1)
    experience: float = pydantic.Field(default=0, ge=0)
    source: str = "Unknown"
    skills: list[str] = pydantic.Field(default_factory=list)
    education: list[Education] = pydantic.Field(default_factory=list)
    work_history: list[WorkExperience] = pydantic.Field(default_factory=list)
    expected_salary: float | None = pydantic.Field(default=None, ge=0)
    availability_date: datetime.datetime | None = None
    tags: list[str] = pydantic.Field(default_factory=list)
    priority: PriorityEnum = PriorityEnum.MEDIUM

    @pydantic.field_validator("phone")
    @classmethod
    def check_phone(cls, value: str | None) -> str | None:
        return validate_phone(value)


class CandidateInUpdate(BaseSchemaModel):
    first_name: str | None = pydantic.Field(default=None, min_length=1)
    last_name: str | None = pydantic.Field(default=None, min_length=1)
    email: pydantic.EmailStr | None = None
    phone: str | None = None
    position: str | None = None
    experience: float | None = pydantic.Field(default=None, ge=0)
    status: CandidateStatusEnum | None = None
    source: str | None = None
    skills: list[str] | None = None
    education: list[Education] | None = None
    work_history: list[WorkExperience] | None = None
    interviews: list[str] | None = None
    tags: list[str] | None = None
    priority: PriorityEnum | None = None
    expected_salary: float | None = pydantic.Field(default=None, ge=0)
    availability_date: datetime.datetime | None = None
    is_active: bool | None = None

    @pydantic.field_validator("phone")
    @classmethod
    def check_phone(cls, value: str | None) -> str | None:
        return validate_phone(value)


class CandidateNoteInCreate(BaseSchemaModel):
    content: str = pydantic.Field(min_length=1)
    is_private: bool = False
    author: str | None = None


class CandidateStats(BaseSchemaModel):
    total_candidates: int
    active_candidates: int
    new_candidates: int
    interviewing_candidates: int
    hired_candidates: int
    rejected_candidates: int
    candidates_by_status: dict[str, int]
    candidates_by_source: dict[str, int]
    average_processing_time: float
