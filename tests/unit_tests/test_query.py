import dataclasses
import datetime

from src.repository.query import (
    any_element_contains,
    by_field,
    field_contains,
    field_equals,
    filter_collection,
    in_range,
    paginate_collection,
    text_search,
    visibility,
)

UTC = datetime.timezone.utc


@dataclasses.dataclass
class Row:
    id: str
    name: str
    tags: list[str]
    score: int | None = None
    is_active: bool = True
    deleted_at: datetime.datetime | None = None


ROWS = [
    Row(id="1", name="Alpha", tags=["python", "fastapi"], score=10),
    Row(id="2", name="Beta", tags=["angular"], score=30, is_active=False),
    Row(id="3", name="Gamma", tags=["Python"], score=20, deleted_at=datetime.datetime(2024, 1, 1, tzinfo=UTC)),
    Row(id="4", name="Delta", tags=[], score=None),
]


def test_unset_filters_are_skipped() -> None:
    assert field_equals("name", None) is None
    assert field_equals("name", "") is None
    assert field_contains("name", "") is None
    assert text_search(("name",), None) is None
    assert any_element_contains("tags", []) is None
    assert in_range("score") is None

    assert filter_collection(ROWS, [None, None]) == ROWS


def test_visibility_hides_soft_deleted_and_optionally_inactive() -> None:
    assert [row.id for row in filter_collection(ROWS, [visibility()])] == ["1", "2", "4"]
    assert [row.id for row in filter_collection(ROWS, [visibility(show_deleted=True)])] == ["1", "2", "3", "4"]
    assert [row.id for row in filter_collection(ROWS, [visibility(active_only=True)])] == ["1", "4"]


def test_substring_filters_ignore_case() -> None:
    assert [row.id for row in filter_collection(ROWS, [field_contains("name", "ALP")])] == ["1"]
    assert [row.id for row in filter_collection(ROWS, [text_search(("name",), "ta")])] == ["2", "4"]
    assert [row.id for row in filter_collection(ROWS, [any_element_contains("tags", ["pyth"])])] == ["1", "3"]


def test_text_search_also_matches_list_elements() -> None:
    predicate = text_search(("name",), "angular", list_fields=("tags",))
    assert [row.id for row in filter_collection(ROWS, [predicate])] == ["2"]


def test_in_range_excludes_missing_values() -> None:
    predicate = in_range("score", minimum=15, maximum=30)
    assert [row.id for row in filter_collection(ROWS, [predicate])] == ["2", "3"]


def test_paginate_collection_slices_after_sorting() -> None:
    page = paginate_collection(
        ROWS,
        predicates=[visibility(show_deleted=True)],
        sort_key=by_field("score", fallback=0),
        descending=True,
        page=2,
        page_size=3,
    )

    assert page.total == 4
    assert page.total_pages == 2
    assert [row.id for row in page.items] == ["4"]


def test_page_past_the_end_is_empty_but_keeps_totals() -> None:
    page = paginate_collection(ROWS, page=5, page_size=2)

    assert page.items == []
    assert page.total == 4
    assert page.total_pages == 2


def test_empty_result_has_zero_pages() -> None:
    page = paginate_collection(ROWS, predicates=[field_equals("name", "Omega")])

    assert page.total == 0
    assert page.total_pages == 0
