import collections
import typing

from src.models.db.user import User, UserStatusEnum, build_avatar_url
from src.models.schemas.user import UserInCreate, UserStats
from src.repository.crud.base import SoftDeleteCRUDRepository
from src.repository.query import Page, by_field, field_equals, text_search, visibility
from src.utilities.formatters.datetime_formatter import utc_now


class UserCRUDRepository(SoftDeleteCRUDRepository[User]):
    collection_name = "users"
    not_found_code = "USER_NOT_FOUND"
    not_found_message = "Utente non trovato"
    exists_code = "USER_EXISTS"
    exists_message = "Utente con questo username o email esiste già"
    unique_fields = ("username", "email")

    def _role_name_for(self, role_code: str) -> str | None:
        for role in self.store.roles:
            if role.code == role_code:
                return role.name
        return None

    async def create_user(self, *, user_create: UserInCreate) -> User:
        new_user = User(
            id=self.collection.next_id(),
            username=user_create.username,
            email=user_create.email,
            first_name=user_create.first_name,
            last_name=user_create.last_name,
            role=user_create.role,
            role_name=user_create.role_name or self._role_name_for(user_create.role),
            department=user_create.department,
            status=user_create.status,
            avatar=build_avatar_url(user_create.first_name, user_create.last_name),
            avatar_id=user_create.avatar_id,
            is_active=True,
        )
        return await self.create(record=new_user)

    async def update_user_by_id(self, *, user_id: str, changes: dict[str, typing.Any]) -> User:
        if "role" in changes and "role_name" not in changes:
            changes = {**changes, "role_name": self._role_name_for(changes["role"])}
        return await self.update_by_id(record_id=user_id, changes=changes)

    async def read_users(
        self,
        *,
        role: str | None = None,
        status: str | None = None,
        department: str | None = None,
        search: str | None = None,
        show_deleted: bool = False,
        active_only: bool = False,
        page: int = 1,
        page_size: int = 10,
    ) -> Page[User]:
        return await self.read_page(
            predicates=[
                field_equals("role", role),
                field_equals("status", status),
                field_equals("department", department),
                text_search(("first_name", "last_name", "email", "username"), search),
            ],
            sort_key=by_field("updated_at"),
            descending=True,
            page=page,
            page_size=page_size,
            show_deleted=show_deleted,
            active_only=active_only,
        )

    async def toggle_status_by_id(self, *, record_id: str) -> User:
        user = await super().toggle_status_by_id(record_id=record_id)
        user.status = UserStatusEnum.ACTIVE if user.is_active else UserStatusEnum.INACTIVE
        return user

    async def get_user_stats(self) -> UserStats:
        users = [user for user in self.collection if visibility()(user)]
        now = utc_now()
        return UserStats(
            total_users=len(users),
            active_users=sum(1 for user in users if user.status == UserStatusEnum.ACTIVE),
            new_users_this_month=sum(
                1 for user in users if (user.created_at.year, user.created_at.month) == (now.year, now.month)
            ),
            users_by_role=dict(collections.Counter(user.role for user in users)),
        )
