from src.models.db.base import BaseRecordModel


class Department(BaseRecordModel):
    name: str
    description: str | None = None
    color: str
