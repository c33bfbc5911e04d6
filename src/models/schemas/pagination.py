import typing

import pydantic

from src.models.schemas.base import BaseSchemaModel
from src.repository.query import Page

ItemT = typing.TypeVar("ItemT")

DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 100


class PaginatedResponse(BaseSchemaModel, typing.Generic[ItemT]):
    items: list[ItemT]
    total: int
    page: int
    page_size: int
    total_pages: int

    @classmethod
    def from_page(cls, page: Page) -> "PaginatedResponse[ItemT]":
        return cls(
            items=page.items,
            total=page.total,
            page=page.page,
            page_size=page.page_size,
            total_pages=page.total_pages,
        )


class SearchRequest(BaseSchemaModel):
    page: int = pydantic.Field(default=1, ge=1)
    page_size: int = pydantic.Field(default=DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE)
