import logging

import fastapi

from src.api.dependencies.auth import get_current_account, get_current_token
from src.api.dependencies.repository import get_repository
from src.config.manager import settings
from src.models.db.account import AuthAccount
from src.models.db.token import IssuedToken, TokenKindEnum
from src.models.schemas.auth import (
    AuthenticatedUser,
    AuthProfile,
    ChangePasswordRequest,
    ForgotPasswordRequest,
    LoginRequest,
    LoginResponse,
    ProfileInUpdate,
    RefreshTokenRequest,
    RefreshTokenResponse,
    ResetPasswordRequest,
)
from src.repository.crud.account import AccountCRUDRepository
from src.repository.crud.token import TokenCRUDRepository
from src.utilities.exceptions.http.exc_400 import (
    http_exc_400_invalid_current_password,
    http_exc_400_invalid_reset_token,
)
from src.utilities.exceptions.http.exc_401 import (
    http_exc_401_invalid_credentials,
    http_exc_401_invalid_refresh_token,
)
from src.utilities.exceptions.password import PasswordDoesNotMatch

logger = logging.getLogger(__name__)

router = fastapi.APIRouter(prefix="/auth", tags=["auth"])


@router.post(
    path="/login",
    name="auth:login",
    response_model=LoginResponse,
    status_code=fastapi.status.HTTP_200_OK,
)
async def login(
    payload: LoginRequest,
    account_repo: AccountCRUDRepository = fastapi.Depends(get_repository(repo_type=AccountCRUDRepository)),
    token_repo: TokenCRUDRepository = fastapi.Depends(get_repository(repo_type=TokenCRUDRepository)),
) -> LoginResponse:
    try:
        account = await account_repo.verify_credentials(username=payload.username, password=payload.password)
    except PasswordDoesNotMatch:
        raise await http_exc_401_invalid_credentials()

    access, refresh, expires_in = await token_repo.issue_session_tokens(
        account_id=account.id, remember_me=payload.remember_me
    )
    logger.info("Account %s logged in", account.username)

    return LoginResponse(
        user=AuthenticatedUser.model_validate(account),
        available_roles=account.available_roles,
        token=access.token,
        refresh_token=refresh.token,
        expires_in=expires_in,
    )


@router.post(
    path="/refresh",
    name="auth:refresh-token",
    response_model=RefreshTokenResponse,
    status_code=fastapi.status.HTTP_200_OK,
)
async def refresh_token(
    payload: RefreshTokenRequest,
    token_repo: TokenCRUDRepository = fastapi.Depends(get_repository(repo_type=TokenCRUDRepository)),
) -> RefreshTokenResponse:
    issued = await token_repo.get_valid_token(token=payload.refresh_token, kind=TokenKindEnum.REFRESH)
    if issued is None:
        raise await http_exc_401_invalid_refresh_token()

    # rotation: the presented refresh token cannot be used twice
    await token_repo.revoke_token(token=issued.token, kind=TokenKindEnum.REFRESH)
    access, refresh, expires_in = await token_repo.issue_session_tokens(account_id=issued.account_id)

    return RefreshTokenResponse(token=access.token, refresh_token=refresh.token, expires_in=expires_in)


@router.post(
    path="/logout",
    name="auth:logout",
    status_code=fastapi.status.HTTP_204_NO_CONTENT,
)
async def logout(
    issued: IssuedToken = fastapi.Depends(get_current_token),
    token_repo: TokenCRUDRepository = fastapi.Depends(get_repository(repo_type=TokenCRUDRepository)),
) -> None:
    await token_repo.revoke_token(token=issued.token, kind=TokenKindEnum.ACCESS)


@router.get(
    path="/profile",
    name="auth:read-profile",
    response_model=AuthProfile,
    status_code=fastapi.status.HTTP_200_OK,
)
async def read_profile(account: AuthAccount = fastapi.Depends(get_current_account)) -> AuthProfile:
    return AuthProfile.model_validate(account)


@router.put(
    path="/profile",
    name="auth:update-profile",
    response_model=AuthProfile,
    status_code=fastapi.status.HTTP_200_OK,
    summary="Update the authenticated account's profile",
    description="Only the provided fields are updated; `preferences` is merged into the stored preferences.",
)
async def update_profile(
    payload: ProfileInUpdate,
    account: AuthAccount = fastapi.Depends(get_current_account),
    account_repo: AccountCRUDRepository = fastapi.Depends(get_repository(repo_type=AccountCRUDRepository)),
) -> AuthProfile:
    updated = await account_repo.update_profile(account_id=account.id, changes=payload.model_dump(exclude_unset=True))
    return AuthProfile.model_validate(updated)


@router.post(
    path="/change-password",
    name="auth:change-password",
    status_code=fastapi.status.HTTP_204_NO_CONTENT,
)
async def change_password(
    payload: ChangePasswordRequest,
    account: AuthAccount = fastapi.Depends(get_current_account),
    account_repo: AccountCRUDRepository = fastapi.Depends(get_repository(repo_type=AccountCRUDRepository)),
) -> None:
    if not await account_repo.is_password_correct(account_id=account.id, password=payload.current_password):
        raise await http_exc_400_invalid_current_password()

    await account_repo.update_password(account_id=account.id, new_password=payload.new_password)
    logger.info("Password changed for account %s", account.username)


@router.post(
    path="/forgot-password",
    name="auth:forgot-password",
    status_code=fastapi.status.HTTP_204_NO_CONTENT,
)
async def forgot_password(
    payload: ForgotPasswordRequest,
    account_repo: AccountCRUDRepository = fastapi.Depends(get_repository(repo_type=AccountCRUDRepository)),
    token_repo: TokenCRUDRepository = fastapi.Depends(get_repository(repo_type=TokenCRUDRepository)),
) -> None:
    # Always 204 so the endpoint cannot be used to probe registered e-mails
    account = await account_repo.get_account_by_email(email=payload.email)
    if account is None:
        return

    issued = await token_repo.issue_token(
        account_id=account.id,
        kind=TokenKindEnum.RESET,
        expires_in_seconds=settings.RESET_TOKEN_EXPIRY_SECONDS,
    )
    logger.info("Password reset requested for %s, token %s", account.email, issued.token)


@router.post(
    path="/reset-password",
    name="auth:reset-password",
    status_code=fastapi.status.HTTP_204_NO_CONTENT,
)
async def reset_password(
    payload: ResetPasswordRequest,
    account_repo: AccountCRUDRepository = fastapi.Depends(get_repository(repo_type=AccountCRUDRepository)),
    token_repo: TokenCRUDRepository = fastapi.Depends(get_repository(repo_type=TokenCRUDRepository)),
) -> None:
    issued = await token_repo.get_valid_token(token=payload.token, kind=TokenKindEnum.RESET)
    if issued is None:
        raise await http_exc_400_invalid_reset_token()

    await account_repo.update_password(account_id=issued.account_id, new_password=payload.new_password)
    await token_repo.revoke_token(token=issued.token, kind=TokenKindEnum.RESET)
    logger.info("Password reset completed for account %s", issued.account_id)
