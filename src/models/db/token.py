import datetime
import enum

from src.models.schemas.base import BaseSchemaModel
from src.utilities.formatters.datetime_formatter import utc_now


class TokenKindEnum(str, enum.Enum):
    ACCESS = "access"
    REFRESH = "refresh"
    RESET = "reset"


class IssuedToken(BaseSchemaModel):
    token: str
    account_id: str
    kind: TokenKindEnum
    expires_at: datetime.datetime

    def is_expired(self, now: datetime.datetime | None = None) -> bool:
        return (now or utc_now()) >= self.expires_at
