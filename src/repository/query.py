"""
Filtering, sorting and pagination shared by every list endpoint.

A list query is a chain of predicates over a collection, one optional sort key
and a page window. Predicate builders return ``None`` when their filter value
was not supplied, so callers can pass every filter unconditionally.
"""
import dataclasses
import datetime
import math
import typing

T = typing.TypeVar("T")
Predicate = typing.Callable[[typing.Any], bool]


@dataclasses.dataclass
class Page(typing.Generic[T]):
    items: list[T]
    total: int
    page: int
    page_size: int

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total / self.page_size) if self.page_size else 0


def filter_collection(items: typing.Iterable[T], predicates: typing.Iterable[Predicate | None] = ()) -> list[T]:
    active = [predicate for predicate in predicates if predicate is not None]
    return [item for item in items if all(predicate(item) for predicate in active)]


def paginate_collection(
    items: typing.Iterable[T],
    *,
    predicates: typing.Iterable[Predicate | None] = (),
    sort_key: typing.Callable[[T], typing.Any] | None = None,
    descending: bool = False,
    page: int = 1,
    page_size: int = 10,
) -> Page[T]:
    filtered = filter_collection(items, predicates)
    if sort_key is not None:
        filtered.sort(key=sort_key, reverse=descending)

    start = (page - 1) * page_size
    return Page(items=filtered[start : start + page_size], total=len(filtered), page=page, page_size=page_size)


# Predicate builders


def visibility(*, show_deleted: bool = False, active_only: bool = False) -> Predicate:
    def predicate(record: typing.Any) -> bool:
        if not show_deleted and record.deleted_at is not None:
            return False
        if active_only and not record.is_active:
            return False
        return True

    return predicate


def field_equals(field: str, value: typing.Any) -> Predicate | None:
    if value is None or value == "":
        return None

    def predicate(record: typing.Any) -> bool:
        current = getattr(record, field)
        if hasattr(current, "value"):
            current = current.value
        if hasattr(value, "value"):
            return current == value.value
        return current == value

    return predicate


def field_contains(field: str, value: str | None) -> Predicate | None:
    if not value:
        return None
    needle = value.lower()

    def predicate(record: typing.Any) -> bool:
        current = getattr(record, field)
        return current is not None and needle in str(current).lower()

    return predicate


def text_search(fields: typing.Sequence[str], value: str | None, *, list_fields: typing.Sequence[str] = ()) -> Predicate | None:
    """Case-insensitive substring match on any of ``fields`` or any element of ``list_fields``."""
    if not value:
        return None
    needle = value.lower()

    def predicate(record: typing.Any) -> bool:
        for field in fields:
            current = getattr(record, field)
            if current and needle in str(current).lower():
                return True
        for field in list_fields:
            if any(needle in str(element).lower() for element in getattr(record, field) or []):
                return True
        return False

    return predicate


def any_element_contains(field: str, needles: typing.Sequence[str] | None) -> Predicate | None:
    if not needles:
        return None
    lowered = [needle.lower() for needle in needles if needle]

    def predicate(record: typing.Any) -> bool:
        elements = [str(element).lower() for element in getattr(record, field) or []]
        return any(needle in element for needle in lowered for element in elements)

    return predicate


def in_range(field: str, *, minimum: typing.Any = None, maximum: typing.Any = None) -> Predicate | None:
    if minimum is None and maximum is None:
        return None

    def predicate(record: typing.Any) -> bool:
        current = getattr(record, field)
        if current is None:
            return False
        if minimum is not None and current < minimum:
            return False
        if maximum is not None and current > maximum:
            return False
        return True

    return predicate


def by_field(field: str, *, fallback: typing.Any = None) -> typing.Callable[[typing.Any], typing.Any]:
    """Sort key reading ``field``; ``None`` values sort as ``fallback``."""
    if fallback is None:
        fallback = datetime.datetime.min.replace(tzinfo=datetime.timezone.utc)

    def key(record: typing.Any) -> typing.Any:
        current = getattr(record, field)
        return fallback if current is None else current

    return key
