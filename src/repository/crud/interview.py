import collections

from src.models.db.interview import Interview, InterviewStatusEnum, InterviewTypeEnum
from src.models.schemas.interview import InterviewInCreate, InterviewStats
from src.repository.crud.base import SoftDeleteCRUDRepository
from src.repository.query import Page, by_field, field_equals, text_search, visibility


class InterviewCRUDRepository(SoftDeleteCRUDRepository[Interview]):
    collection_name = "interviews"
    not_found_code = "INTERVIEW_NOT_FOUND"
    not_found_message = "Colloquio non trovato"

    async def create_interview(self, *, interview_create: InterviewInCreate) -> Interview:
        new_interview = Interview(
            id=self.collection.next_id(),
            status=InterviewStatusEnum.SCHEDULED,
            **interview_create.model_dump(),
        )
        return await self.create(record=new_interview)

    async def read_interviews(
        self,
        *,
        status: str | None = None,
        interview_type: str | None = None,
        interviewer_id: str | None = None,
        search: str | None = None,
        show_deleted: bool = False,
        active_only: bool = False,
        page: int = 1,
        page_size: int = 10,
    ) -> Page[Interview]:
        return await self.read_page(
            predicates=[
                field_equals("status", status),
                field_equals("type", interview_type),
                field_equals("interviewer_id", interviewer_id),
                text_search(("candidate_name", "candidate_email", "position", "title"), search),
            ],
            sort_key=by_field("scheduled_date"),
            descending=True,
            page=page,
            page_size=page_size,
            show_deleted=show_deleted,
            active_only=active_only,
        )

    async def get_interview_stats(self) -> InterviewStats:
        interviews = [interview for interview in self.collection if visibility()(interview)]
        by_status = collections.Counter(interview.status for interview in interviews)
        by_type = collections.Counter(interview.type for interview in interviews)
        scores = [interview.score for interview in interviews if interview.score is not None]

        return InterviewStats(
            total_interviews=len(interviews),
            active_interviews=by_status[InterviewStatusEnum.IN_PROGRESS] + by_status[InterviewStatusEnum.SCHEDULED],
            completed_interviews=by_status[InterviewStatusEnum.COMPLETED],
            scheduled_interviews=by_status[InterviewStatusEnum.SCHEDULED],
            pending_evaluations=sum(
                1
                for interview in interviews
                if interview.status == InterviewStatusEnum.COMPLETED and interview.score is None
            ),
            average_score=round(sum(scores) / len(scores), 2) if scores else 0,
            interviews_by_type={interview_type.value: by_type[interview_type] for interview_type in InterviewTypeEnum},
        )
