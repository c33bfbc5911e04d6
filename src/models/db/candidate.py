import datetime
import enum

import pydantic

from src.models.db.base import BaseRecordModel
from src.models.schemas.base import BaseSchemaModel
from src.utilities.formatters.datetime_formatter import utc_now


class CandidateStatusEnum(str, enum.Enum):
    NEW = "new"
    SCREENING = "screening"
    INTERVIEW = "interview"
    TECHNICAL = "technical"
    FINAL = "final"
    HIRED = "hired"
    REJECTED = "rejected"
    WITHDRAWN = "withdrawn"


class PriorityEnum(str, enum.Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class DocumentTypeEnum(str, enum.Enum):
    CV = "cv"
    COVER_LETTER = "cover_letter"
    PORTFOLIO = "portfolio"
    CERTIFICATE = "certificate"
    OTHER = "other"


CLOSED_CANDIDATE_STATUSES = {CandidateStatusEnum.HIRED, CandidateStatusEnum.REJECTED, CandidateStatusEnum.WITHDRAWN}
INTERVIEWING_CANDIDATE_STATUSES = {CandidateStatusEnum.INTERVIEW, CandidateStatusEnum.TECHNICAL, CandidateStatusEnum.FINAL}


class Education(BaseSchemaModel):
    degree: str
    field: str
    university: str
    year: int


class WorkExperience(BaseSchemaModel):
    company: str
    position: str
    start_date: datetime.datetime
    end_date: datetime.datetime | None = None
    description: str


class CandidateDocument(BaseSchemaModel):
    id: str
    type: DocumentTypeEnum
    filename: str
    url: str
    uploaded_at: datetime.datetime


class CandidateNote(BaseSchemaModel):
    id: str
    author: str
    content: str
    created_at: datetime.datetime = pydantic.Field(default_factory=utc_now)
    is_private: bool = False


class Evaluation(BaseSchemaModel):
    interview_id: str
    interviewer: str
    score: float
    feedback: str
    date: datetime.datetime


class Candidate(BaseRecordModel):
    first_name: str
    last_name: str
    email: str
    phone: str | None = None
    position: str
    experience: float = 0
    status: CandidateStatusEnum = CandidateStatusEnum.NEW
    source: str = "Unknown"
    skills: list[str] = pydantic.Field(default_factory=list)
    education: list[Education] = pydantic.Field(default_factory=list)
    work_history: list[WorkExperience] = pydantic.Field(default_factory=list)
    documents: list[CandidateDocument] = pydantic.Field(default_factory=list)
    notes: list[CandidateNote] = pydantic.Field(default_factory=list)
    interviews: list[str] = pydantic.Field(default_factory=list)
    evaluations: list[Evaluation] = pydantic.Field(default_factory=list)
    tags: list[str] = pydantic.Field(default_factory=list)
    priority: PriorityEnum = PriorityEnum.MEDIUM
    expected_salary: float | None = None
    availability_date: datetime.datetime | None = None
