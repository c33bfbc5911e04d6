import datetime
import enum

from src.models.db.base import BaseRecordModel


class InterviewStatusEnum(str, enum.Enum):
    SCHEDULED = "scheduled"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class InterviewTypeEnum(str, enum.Enum):
    TECHNICAL = "technical"
    HR = "hr"
    FINAL = "final"
    SCREENING = "screening"


class Interview(BaseRecordModel):
    title: str
    candidate_name: str
    candidate_email: str
    interviewer_name: str | None = None
    interviewer_id: str
    position: str
    status: InterviewStatusEnum = InterviewStatusEnum.SCHEDULED
    scheduled_date: datetime.datetime
    duration: int  # minutes
    type: InterviewTypeEnum
    location: str | None = None
    meeting_link: str | None = None
    notes: str | None = ""
    score: float | None = None
