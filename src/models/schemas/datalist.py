from src.models.schemas.base import BaseSchemaModel


class RoleOption(BaseSchemaModel):
    id: str
    name: str
    code: str
    color: str


class DepartmentOption(BaseSchemaModel):
    id: str
    name: str
    color: str


class UserStatusOption(BaseSchemaModel):
    value: str
    label: str
    icon: str
    color: str


class AccessAreaOption(BaseSchemaModel):
    id: str
    label: str
    icon: str
    color: str


class ColorPaletteOption(BaseSchemaModel):
    id: str
    name: str
    colors: list[str]
