from src.config.manager import settings
from src.models.db.token import IssuedToken, TokenKindEnum
from src.repository.crud.base import BaseCRUDRepository
from src.securities.authorizations.token import token_generator


class TokenCRUDRepository(BaseCRUDRepository):
    def _registry(self, kind: TokenKindEnum) -> dict[str, IssuedToken]:
        if kind == TokenKindEnum.ACCESS:
            return self.store.access_tokens
        if kind == TokenKindEnum.REFRESH:
            return self.store.refresh_tokens
        return self.store.reset_tokens

    async def issue_token(self, *, account_id: str, kind: TokenKindEnum, expires_in_seconds: int) -> IssuedToken:
        issued = token_generator.generate(account_id=account_id, kind=kind, expires_in_seconds=expires_in_seconds)
        self._registry(kind)[issued.token] = issued
        return issued

    async def issue_session_tokens(self, *, account_id: str, remember_me: bool = False) -> tuple[IssuedToken, IssuedToken, int]:
        expires_in = (
            settings.REMEMBER_ME_TOKEN_EXPIRY_SECONDS if remember_me else settings.ACCESS_TOKEN_EXPIRY_SECONDS
        )
        access = await self.issue_token(account_id=account_id, kind=TokenKindEnum.ACCESS, expires_in_seconds=expires_in)
        refresh = await self.issue_token(
            account_id=account_id,
            kind=TokenKindEnum.REFRESH,
            expires_in_seconds=settings.REFRESH_TOKEN_EXPIRY_SECONDS,
        )
        return access, refresh, expires_in

    async def get_valid_token(self, *, token: str, kind: TokenKindEnum) -> IssuedToken | None:
        """Return the stored token if it exists and has not expired; expired entries are dropped."""
        registry = self._registry(kind)
        issued = registry.get(token)
        if issued is None:
            return None
        if issued.is_expired():
            del registry[token]
            return None
        return issued

    async def revoke_token(self, *, token: str, kind: TokenKindEnum) -> bool:
        return self._registry(kind).pop(token, None) is not None
