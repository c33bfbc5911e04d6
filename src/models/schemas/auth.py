import datetime

import pydantic

from src.models.db.account import AccountPreferences
from src.models.schemas.base import BaseSchemaModel
from src.utilities.validators import validate_password_strength


class LoginRequest(BaseSchemaModel):
    username: str = pydantic.Field(min_length=1, description="Account username or e-mail")
    password: str = pydantic.Field(min_length=1)
    remember_me: bool = False

    model_config = BaseSchemaModel.model_config.copy()
    model_config["json_schema_extra"] = {"examples": [{"username": "admin", "password": "admin123", "rememberMe": False}]}


class AuthenticatedUser(BaseSchemaModel):
    id: str
    username: str
    email: str
    first_name: str
    last_name: str
    role: str
    avatar: str | None = None


class LoginResponse(BaseSchemaModel):
    user: AuthenticatedUser
    available_roles: list[str]
    token: str
    refresh_token: str
    expires_in: int


class RefreshTokenRequest(BaseSchemaModel):
    refresh_token: str = pydantic.Field(min_length=1)


class RefreshTokenResponse(BaseSchemaModel):
    token: str
    refresh_token: str
    expires_in: int


class ChangePasswordRequest(BaseSchemaModel):
    current_password: str = pydantic.Field(min_length=1)
    new_password: str

    @pydantic.field_validator("new_password")
    @classmethod
    def check_new_password(cls, value: str) -> str:
        return validate_password_strength(value)


class ForgotPasswordRequest(BaseSchemaModel):
    email: pydantic.EmailStr


class ResetPasswordRequest(BaseSchemaModel):
    token: str = pydantic.Field(min_length=1)
    new_password: str

    @pydantic.field_validator("new_password")
    @classmethod
    def check_new_password(cls, value: str) -> str:
        return validate_password_strength(value)


class AuthProfile(BaseSchemaModel):
    id: str
    username: str
    email: str
    first_name: str
    last_name: str
    role: str
    avatar: str | None = None
    last_login: datetime.datetime | None = None
    created_at: datetime.datetime
    preferences: AccountPreferences


class ProfileInUpdate(BaseSchemaModel):
    first_name: str | None = pydantic.Field(default=None, min_length=1)
    last_name: str | None = pydantic.Field(default=None, min_length=1)
    preferences: dict | None = None
