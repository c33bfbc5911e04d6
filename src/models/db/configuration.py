from src.models.schemas.base import BaseSchemaModel


class AccessArea(BaseSchemaModel):
    id: str
    label: str
    icon: str
    color: str
    order: int
    is_active: bool = True


class UserStatusConfig(BaseSchemaModel):
    value: str
    label: str
    icon: str
    color: str
    order: int
    is_active: bool = True


class ColorPalette(BaseSchemaModel):
    id: str
    name: str
    colors: list[str]
    is_default: bool = False
    is_active: bool = True
