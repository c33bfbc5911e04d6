from src.utilities.exceptions.api import ConflictError, NotFoundError


class EntityDoesNotExist(NotFoundError):
    """
    Throw an exception when the requested record is not in the in-memory store.
    """


class EntityAlreadyExists(ConflictError):
    """
    Throw an exception when a record collides with another record's unique key.
    """
