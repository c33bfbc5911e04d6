import fastapi
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from src.api.dependencies.repository import get_repository
from src.models.db.account import AuthAccount
from src.models.db.token import IssuedToken, TokenKindEnum
from src.repository.crud.account import AccountCRUDRepository
from src.repository.crud.token import TokenCRUDRepository
from src.utilities.exceptions.http.exc_401 import http_exc_401_invalid_token, http_exc_401_missing_token

# auto_error is off so a missing header maps to MISSING_TOKEN instead of FastAPI's 403
security = HTTPBearer(auto_error=False)


async def get_current_token(
    credentials: HTTPAuthorizationCredentials | None = fastapi.Depends(security),
    token_repo: TokenCRUDRepository = fastapi.Depends(get_repository(repo_type=TokenCRUDRepository)),
) -> IssuedToken:
    if credentials is None or not credentials.credentials:
        raise await http_exc_401_missing_token()

    issued = await token_repo.get_valid_token(token=credentials.credentials, kind=TokenKindEnum.ACCESS)
    if issued is None:
        raise await http_exc_401_invalid_token()
    return issued


async def get_current_account(
    issued: IssuedToken = fastapi.Depends(get_current_token),
    account_repo: AccountCRUDRepository = fastapi.Depends(get_repository(repo_type=AccountCRUDRepository)),
) -> AuthAccount:
    account = account_repo.store.accounts.find(issued.account_id)
    if account is None:
        raise await http_exc_401_invalid_token()
    return account


async def get_optional_account(
    credentials: HTTPAuthorizationCredentials | None = fastapi.Depends(security),
    token_repo: TokenCRUDRepository = fastapi.Depends(get_repository(repo_type=TokenCRUDRepository)),
) -> AuthAccount | None:
    if credentials is None:
        return None

    issued = await token_repo.get_valid_token(token=credentials.credentials, kind=TokenKindEnum.ACCESS)
    if issued is None:
        return None
    return token_repo.store.accounts.find(issued.account_id)
