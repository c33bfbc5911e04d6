import logging
import typing

import pydantic

from src.models.db.base import BaseRecordModel
from src.repository.query import Page, Predicate, paginate_collection, visibility
from src.repository.store import Collection, InMemoryStore
from src.utilities.exceptions.api import ValidationError
from src.utilities.exceptions.database import EntityAlreadyExists, EntityDoesNotExist
from src.utilities.formatters.datetime_formatter import utc_now

logger = logging.getLogger(__name__)

RecordT = typing.TypeVar("RecordT", bound=BaseRecordModel)

PROTECTED_FIELDS = frozenset({"id", "created_at", "updated_at", "deleted_at"})


class BaseCRUDRepository:
    def __init__(self, store: InMemoryStore):
        self.store = store


class SoftDeleteCRUDRepository(BaseCRUDRepository, typing.Generic[RecordT]):
    """
    CRUD over one store collection where ``DELETE`` only marks records.

    Subclasses name the collection, the entity-specific error codes and the
    fields that must stay unique across the collection (soft-deleted records
    included).
    """

    collection_name: str
    not_found_code: str = "NOT_FOUND"
    not_found_message: str = "Risorsa non trovata"
    exists_code: str = "CONFLICT"
    exists_message: str = "Risorsa già esistente"
    unique_fields: tuple[str, ...] = ()
    read_only_fields: frozenset[str] = frozenset()

    @property
    def collection(self) -> Collection[RecordT]:
        return getattr(self.store, self.collection_name)

    def _raise_not_found(self) -> typing.NoReturn:
        raise EntityDoesNotExist(self.not_found_message, code=self.not_found_code)

    def _ensure_unique(self, values: dict[str, typing.Any], *, exclude_id: str | None = None) -> None:
        for record in self.collection:
            if record.id == exclude_id:
                continue
            for field in self.unique_fields:
                if field in values and values[field] is not None and getattr(record, field) == values[field]:
                    raise EntityAlreadyExists(self.exists_message, code=self.exists_code)

    def _validate_merge(self, record: RecordT, writable: dict[str, typing.Any]) -> RecordT:
        # the merged record is validated as a whole before any field is written back
        record_model = type(record)
        try:
            return record_model.model_validate({**record.model_dump(), **writable})
        except pydantic.ValidationError as merge_error:
            error = merge_error.errors()[0]
            name = str(error["loc"][0]) if error["loc"] else "body"
            field_info = record_model.model_fields.get(name)
            alias = field_info.alias if field_info is not None and field_info.alias else name
            raise ValidationError(alias, error["msg"]) from merge_error

    async def read_by_id(self, *, record_id: str) -> RecordT:
        record = self.collection.find(record_id)
        if record is None:
            self._raise_not_found()
        return record

    async def read_all(self, *, show_deleted: bool = False, active_only: bool = False) -> list[RecordT]:
        is_visible = visibility(show_deleted=show_deleted, active_only=active_only)
        return [record for record in self.collection if is_visible(record)]

    async def read_page(
        self,
        *,
        predicates: typing.Iterable[Predicate | None] = (),
        sort_key: typing.Callable[[RecordT], typing.Any] | None = None,
        descending: bool = False,
        page: int = 1,
        page_size: int = 10,
        show_deleted: bool = False,
        active_only: bool = False,
    ) -> Page[RecordT]:
        return paginate_collection(
            self.collection,
            predicates=[visibility(show_deleted=show_deleted, active_only=active_only), *predicates],
            sort_key=sort_key,
            descending=descending,
            page=page,
            page_size=page_size,
        )

    async def create(self, *, record: RecordT) -> RecordT:
        self._ensure_unique(record.model_dump())
        self.collection.add(record)
        logger.info("Created %s record %s", self.collection_name, record.id)
        return record

    async def update_by_id(self, *, record_id: str, changes: dict[str, typing.Any]) -> RecordT:
        record = await self.read_by_id(record_id=record_id)
        writable = {
            field: value
            for field, value in changes.items()
            if field not in PROTECTED_FIELDS and field not in self.read_only_fields and field in type(record).model_fields
        }
        self._ensure_unique(writable, exclude_id=record.id)
        merged = self._validate_merge(record, writable)

        for field in writable:
            setattr(record, field, getattr(merged, field))
        record.touch()
        return record

    async def delete_by_id(self, *, record_id: str) -> RecordT:
        record = await self.read_by_id(record_id=record_id)
        if record.deleted_at is None:
            record.deleted_at = utc_now()
        record.is_active = False
        record.touch()
        logger.info("Soft-deleted %s record %s", self.collection_name, record.id)
        return record

    async def restore_by_id(self, *, record_id: str) -> RecordT:
        record = await self.read_by_id(record_id=record_id)
        record.deleted_at = None
        record.is_active = True
        record.touch()
        return record

    async def toggle_status_by_id(self, *, record_id: str) -> RecordT:
        record = await self.read_by_id(record_id=record_id)
        record.is_active = not record.is_active
        record.touch()
        return record
