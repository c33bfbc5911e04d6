import dataclasses
import typing

import fastapi

from src.models.schemas.pagination import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE
from src.utilities.exceptions.api import ValidationError


@dataclasses.dataclass
class PageParams:
    page: int
    page_size: int


@dataclasses.dataclass
class VisibilityParams:
    show_deleted: bool
    active_only: bool


def get_page_params(
    page: int = fastapi.Query(default=1, ge=1),
    page_size: int = fastapi.Query(default=DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE, alias="pageSize"),
) -> PageParams:
    return PageParams(page=page, page_size=page_size)


def get_visibility_params(
    show_deleted: bool = fastapi.Query(default=False, alias="showDeleted"),
    active_only: bool = fastapi.Query(default=False, alias="activeOnly"),
) -> VisibilityParams:
    return VisibilityParams(show_deleted=show_deleted, active_only=active_only)


def ensure_ordered_range(minimum: typing.Any, maximum: typing.Any, *, field: str) -> None:
    """Reject a range filter whose lower bound is above its upper bound."""
    if minimum is not None and maximum is not None and minimum > maximum:
        raise ValidationError(field, f"{field} non può essere maggiore del limite superiore")
