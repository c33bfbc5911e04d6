import datetime
import secrets

from src.models.db.token import IssuedToken, TokenKindEnum
from src.utilities.formatters.datetime_formatter import utc_now

TOKEN_PREFIXES: dict[TokenKindEnum, str] = {
    TokenKindEnum.ACCESS: "mock_token_",
    TokenKindEnum.REFRESH: "mock_refresh_",
    TokenKindEnum.RESET: "reset_token_",
}


class TokenGenerator:
    """
    Opaque random tokens with an expiry.

    Tokens are not signed; they are only meaningful while an entry for them is
    held by the store.
    """

    def __init__(self, nbytes: int = 24):
        self.nbytes = nbytes

    def generate(self, *, account_id: str, kind: TokenKindEnum, expires_in_seconds: int) -> IssuedToken:
        return IssuedToken(
            token=TOKEN_PREFIXES[kind] + secrets.token_urlsafe(self.nbytes),
            account_id=account_id,
            kind=kind,
            expires_at=utc_now() + datetime.timedelta(seconds=expires_in_seconds),
        )


def get_token_generator() -> TokenGenerator:
    return TokenGenerator()


token_generator: TokenGenerator = get_token_generator()
