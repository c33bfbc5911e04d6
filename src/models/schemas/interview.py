import datetime

import pydantic

from src.models.db.interview import InterviewStatusEnum, InterviewTypeEnum
from src.models.schemas.base import BaseSchemaModel


class InterviewInCreate(BaseSchemaModel):
    title: str = pydantic.Field(min_length=1)
    candidate_name: str = pydantic.Field(min_length=1)
    candidate_email: pydantic.EmailStr
    interviewer_name: str | None = None
    interviewer_id: str = pydantic.Field(min_length=1)
    position: str = pydantic.Field(min_length=1)
    scheduled_date: datetime.datetime
    duration: int = pydantic.Field(gt=0, description="Duration in minutes")
    type: InterviewTypeEnum
    location: str | None = None
    meeting_link: str | None = None
    notes: str | None = ""


class InterviewInUpdate(BaseSchemaModel):
    title: str | None = pydantic.Field(default=None, min_length=1)
    candidate_name: str | None = None
    candidate_email: pydantic.EmailStr | None = None
    interviewer_name: str | None = None
    interviewer_id: str | None = None
    position: str | None = None
    status: InterviewStatusEnum | None = None
    scheduled_date: datetime.datetime | None = None
    duration: int | None = pydantic.Field(default=None, gt=0)
    type: InterviewTypeEnum | None = None
    location: str | None = None
    meeting_link: str | None = None
    notes: str | None = None
    score: float | None = pydantic.Field(default=None, ge=0, le=100)
    is_active: bool | None = None


class InterviewStats(BaseSchemaModel):
    total_interviews: int
    active_interviews: int
    completed_interviews: int
    scheduled_interviews: int
    pending_evaluations: int
    average_score: float
    interviews_by_type: dict[str, int]
