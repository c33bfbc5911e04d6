import collections

from src.models.db.candidate import (
    CLOSED_CANDIDATE_STATUSES,
    INTERVIEWING_CANDIDATE_STATUSES,
    Candidate,
    CandidateNote,
    CandidateStatusEnum,
)
from src.models.schemas.candidate import CandidateInCreate, CandidateNoteInCreate, CandidateStats
from src.repository.crud.base import SoftDeleteCRUDRepository
from src.repository.query import (
    Page,
    any_element_contains,
    by_field,
    field_contains,
    field_equals,
    in_range,
    text_search,
    visibility,
)

SECONDS_PER_DAY = 24 * 60 * 60


class CandidateCRUDRepository(SoftDeleteCRUDRepository[Candidate]):
    collection_name = "candidates"
    not_found_code = "CANDIDATE_NOT_FOUND"
    not_found_message = "Candidato non trovato"
    exists_code = "CANDIDATE_EXISTS"
    exists_message = "Candidato con questa email esiste già"
    unique_fields = ("email",)
    read_only_fields = frozenset({"notes", "documents", "evaluations"})

    async def create_candidate(self, *, candidate_create: CandidateInCreate) -> Candidate:
        new_candidate = Candidate(id=self.collection.next_id(), **candidate_create.model_dump())
        return await self.create(record=new_candidate)

    async def read_candidates(
        self,
        *,
        status: str | None = None,
        position: str | None = None,
        source: str | None = None,
        skills: list[str] | None = None,
        min_experience: float | None = None,
        max_experience: float | None = None,
        priority: str | None = None,
        tags: list[str] | None = None,
        search: str | None = None,
        show_deleted: bool = False,
        active_only: bool = False,
        page: int = 1,
        page_size: int = 10,
    ) -> Page[Candidate]:
        return await self.read_page(
            predicates=[
                field_equals("status", status),
                field_contains("position", position),
                field_equals("source", source),
                any_element_contains("skills", skills),
                in_range("experience", minimum=min_experience, maximum=max_experience),
                field_equals("priority", priority),
                any_element_contains("tags", tags),
                text_search(("first_name", "last_name", "email", "position"), search, list_fields=("skills",)),
            ],
            sort_key=by_field("updated_at"),
            descending=True,
            page=page,
            page_size=page_size,
            show_deleted=show_deleted,
            active_only=active_only,
        )

    async def read_notes(self, *, candidate_id: str) -> list[CandidateNote]:
        candidate = await self.read_by_id(record_id=candidate_id)
        return list(candidate.notes)

    async def add_note(self, *, candidate_id: str, note_create: CandidateNoteInCreate, author: str) -> CandidateNote:
        candidate = await self.read_by_id(record_id=candidate_id)
        note = CandidateNote(
            id=f"note{candidate_id}-{len(candidate.notes) + 1}",
            author=note_create.author or author,
            content=note_create.content,
            is_private=note_create.is_private,
        )
        candidate.notes = [*candidate.notes, note]
        candidate.touch()
        return note

    async def get_candidate_stats(self) -> CandidateStats:
        candidates = [candidate for candidate in self.collection if visibility()(candidate)]
        by_status = collections.Counter(candidate.status.value for candidate in candidates)
        hired = [candidate for candidate in candidates if candidate.status == CandidateStatusEnum.HIRED]
        processing_days = [
            (candidate.updated_at - candidate.created_at).total_seconds() / SECONDS_PER_DAY for candidate in hired
        ]

        return CandidateStats(
            total_candidates=len(candidates),
            active_candidates=sum(1 for c in candidates if c.status not in CLOSED_CANDIDATE_STATUSES),
            new_candidates=by_status[CandidateStatusEnum.NEW.value],
            interviewing_candidates=sum(1 for c in candidates if c.status in INTERVIEWING_CANDIDATE_STATUSES),
            hired_candidates=by_status[CandidateStatusEnum.HIRED.value],
            rejected_candidates=by_status[CandidateStatusEnum.REJECTED.value],
            candidates_by_status={status.value: by_status[status.value] for status in CandidateStatusEnum},
            candidates_by_source=dict(collections.Counter(candidate.source for candidate in candidates)),
            average_processing_time=round(sum(processing_days) / len(processing_days), 1) if processing_days else 0,
        )
