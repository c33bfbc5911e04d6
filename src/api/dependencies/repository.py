import typing

import fastapi

from src.repository.crud.base import BaseCRUDRepository
from src.repository.store import InMemoryStore

RepositoryT = typing.TypeVar("RepositoryT", bound=BaseCRUDRepository)


def get_store(request: fastapi.Request) -> InMemoryStore:
    return request.app.state.store


def get_repository(
    repo_type: type[RepositoryT],
) -> typing.Callable[[InMemoryStore], RepositoryT]:
    def _get_repo(
        store: InMemoryStore = fastapi.Depends(get_store),
    ) -> RepositoryT:
        return repo_type(store=store)

    return _get_repo
