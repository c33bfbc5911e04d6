from src.models.schemas.datalist import (
    AccessAreaOption,
    ColorPaletteOption,
    DepartmentOption,
    RoleOption,
    UserStatusOption,
)
from src.repository.crud.base import BaseCRUDRepository
from src.repository.query import visibility


class DatalistCRUDRepository(BaseCRUDRepository):
    """Lookup lists used to populate the frontend's selects."""

    async def get_role_options(self) -> list[RoleOption]:
        is_usable = visibility(active_only=True)
        roles = sorted((role for role in self.store.roles if is_usable(role)), key=lambda role: role.name.lower())
        return [RoleOption(id=role.id, name=role.name, code=role.code, color=role.color) for role in roles]

    async def get_department_options(self) -> list[DepartmentOption]:
        is_usable = visibility(active_only=True)
        departments = sorted(
            (department for department in self.store.departments if is_usable(department)),
            key=lambda department: department.name.lower(),
        )
        return [
            DepartmentOption(id=department.id, name=department.name, color=department.color)
            for department in departments
        ]

    async def get_user_statuses(self) -> list[UserStatusOption]:
        statuses = sorted((status for status in self.store.user_statuses if status.is_active), key=lambda s: s.order)
        return [UserStatusOption.model_validate(status, from_attributes=True) for status in statuses]

    async def get_access_areas(self) -> list[AccessAreaOption]:
        areas = sorted((area for area in self.store.access_areas if area.is_active), key=lambda area: area.order)
        return [AccessAreaOption.model_validate(area, from_attributes=True) for area in areas]

    async def get_color_palettes(self) -> list[ColorPaletteOption]:
        palettes = sorted(
            (palette for palette in self.store.color_palettes if palette.is_active),
            key=lambda palette: not palette.is_default,
        )
        return [ColorPaletteOption.model_validate(palette, from_attributes=True) for palette in palettes]
