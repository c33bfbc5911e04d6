import typing

from src.models.db.account import AuthAccount
from src.repository.crud.base import BaseCRUDRepository
from src.utilities.exceptions.database import EntityDoesNotExist
from src.utilities.exceptions.password import PasswordDoesNotMatch
from src.utilities.formatters.datetime_formatter import utc_now


class AccountCRUDRepository(BaseCRUDRepository):
    async def get_account_by_id(self, *, account_id: str) -> AuthAccount:
        account = self.store.accounts.find(account_id)
        if account is None:
            raise EntityDoesNotExist("Utente non trovato", code="USER_NOT_FOUND")
        return account

    async def get_account_by_email(self, *, email: str) -> AuthAccount | None:
        for account in self.store.accounts:
            if account.email.lower() == email.lower():
                return account
        return None

    async def verify_credentials(self, *, username: str, password: str) -> AuthAccount:
        """Accepts either the account username or its e-mail as ``username``."""
        for account in self.store.accounts:
            if username in (account.username, account.email) and account.password == password:
                account.last_login = utc_now()
                return account
        raise PasswordDoesNotMatch()

    async def is_password_correct(self, *, account_id: str, password: str) -> bool:
        account = await self.get_account_by_id(account_id=account_id)
        return account.password == password

    async def update_password(self, *, account_id: str, new_password: str) -> AuthAccount:
        account = await self.get_account_by_id(account_id=account_id)
        account.password = new_password
        account.touch()
        return account

    async def update_profile(self, *, account_id: str, changes: dict[str, typing.Any]) -> AuthAccount:
        account = await self.get_account_by_id(account_id=account_id)
        if changes.get("first_name"):
            account.first_name = changes["first_name"]
        if changes.get("last_name"):
            account.last_name = changes["last_name"]
        if changes.get("preferences"):
            merged = _deep_merge(account.preferences.model_dump(by_alias=True), changes["preferences"])
            account.preferences = type(account.preferences).model_validate(merged)
        account.touch()
        return account


def _deep_merge(base: dict[str, typing.Any], updates: dict[str, typing.Any]) -> dict[str, typing.Any]:
    merged = dict(base)
    for key, value in updates.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged
