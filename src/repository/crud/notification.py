import collections
import datetime
import typing

from src.models.db.notification import (
    SYSTEM_SENDER,
    Notification,
    NotificationPreferences,
    NotificationPriorityEnum,
    NotificationTemplate,
    NotificationTypeEnum,
)
from src.models.schemas.notification import NotificationInCreate, NotificationStats
from src.repository.crud.base import SoftDeleteCRUDRepository
from src.repository.query import Page, Predicate, by_field, field_equals, visibility
from src.utilities.formatters.datetime_formatter import utc_now


def addressed_to(user_id: str) -> Predicate:
    def predicate(notification: Notification) -> bool:
        return user_id in notification.recipients

    return predicate


class NotificationCRUDRepository(SoftDeleteCRUDRepository[Notification]):
    """
    Notifications are always read through a recipient: a record is only visible
    to the users listed in its ``recipients``.
    """

    collection_name = "notifications"
    not_found_code = "NOTIFICATION_NOT_FOUND"
    not_found_message = "Notifica non trovata"

    async def read_notification(self, *, notification_id: str, user_id: str) -> Notification:
        notification = await self.read_by_id(record_id=notification_id)
        if user_id not in notification.recipients:
            self._raise_not_found()
        return notification

    async def read_notifications(
        self,
        *,
        user_id: str,
        notification_type: str | None = None,
        priority: str | None = None,
        is_read: bool | None = None,
        show_deleted: bool = False,
        page: int = 1,
        page_size: int = 10,
    ) -> Page[Notification]:
        return await self.read_page(
            predicates=[
                addressed_to(user_id),
                field_equals("type", notification_type),
                field_equals("priority", priority),
                field_equals("is_read", is_read),
            ],
            sort_key=by_field("created_at"),
            descending=True,
            page=page,
            page_size=page_size,
            show_deleted=show_deleted,
        )

    def _visible_for(self, user_id: str) -> list[Notification]:
        is_visible = visibility()
        is_addressed = addressed_to(user_id)
        return [notification for notification in self.collection if is_visible(notification) and is_addressed(notification)]

    async def create_notification(
        self, *, notification_create: NotificationInCreate, sender: dict[str, typing.Any] | None = None
    ) -> Notification:
        new_notification = Notification(
            id=self.collection.next_id(),
            sender=sender or SYSTEM_SENDER,
            **notification_create.model_dump(),
        )
        return await self.create(record=new_notification)

    async def mark_as_read(self, *, notification_id: str, user_id: str) -> Notification:
        notification = await self.read_notification(notification_id=notification_id, user_id=user_id)
        if not notification.is_read:
            notification.is_read = True
            notification.read_at = utc_now()
            notification.touch()
        return notification

    async def update_notification(
        self, *, notification_id: str, user_id: str, changes: dict[str, typing.Any]
    ) -> Notification:
        await self.read_notification(notification_id=notification_id, user_id=user_id)
        return await self.update_by_id(record_id=notification_id, changes=changes)

    async def delete_notification(self, *, notification_id: str, user_id: str) -> Notification:
        await self.read_notification(notification_id=notification_id, user_id=user_id)
        return await self.delete_by_id(record_id=notification_id)

    async def restore_notification(self, *, notification_id: str, user_id: str) -> Notification:
        await self.read_notification(notification_id=notification_id, user_id=user_id)
        return await self.restore_by_id(record_id=notification_id)

    async def toggle_notification_status(self, *, notification_id: str, user_id: str) -> Notification:
        await self.read_notification(notification_id=notification_id, user_id=user_id)
        return await self.toggle_status_by_id(record_id=notification_id)

    async def mark_all_as_read(self, *, user_id: str) -> int:
        now = utc_now()
        marked_count = 0
        for notification in self._visible_for(user_id):
            if not notification.is_read:
                notification.is_read = True
                notification.read_at = now
                notification.updated_at = now
                marked_count += 1
        return marked_count

    async def count_unread(self, *, user_id: str) -> int:
        return sum(1 for notification in self._visible_for(user_id) if not notification.is_read)

    async def get_notification_stats(self, *, user_id: str) -> NotificationStats:
        notifications = self._visible_for(user_id)
        now = utc_now()
        week_ago = now - datetime.timedelta(days=7)
        by_type = collections.Counter(notification.type for notification in notifications)
        by_priority = collections.Counter(notification.priority for notification in notifications)

        return NotificationStats(
            total_notifications=len(notifications),
            unread_notifications=sum(1 for notification in notifications if not notification.is_read),
            notifications_by_type={kind.value: by_type[kind] for kind in NotificationTypeEnum},
            notifications_by_priority={level.value: by_priority[level] for level in NotificationPriorityEnum},
            today_notifications=sum(1 for notification in notifications if notification.created_at.date() == now.date()),
            week_notifications=sum(1 for notification in notifications if notification.created_at >= week_ago),
        )

    # ------------------------------------------------------------------
    # Preferences and templates
    # ------------------------------------------------------------------
    async def get_preferences(self, *, user_id: str) -> NotificationPreferences:
        preferences = self.store.notification_preferences.get(user_id)
        if preferences is None:
            return NotificationPreferences(user_id=user_id)
        return preferences

    async def update_preferences(self, *, user_id: str, changes: dict[str, typing.Any]) -> NotificationPreferences:
        current = await self.get_preferences(user_id=user_id)
        updated = NotificationPreferences.model_validate({**current.model_dump(), **changes, "user_id": user_id})
        self.store.notification_preferences[user_id] = updated
        return updated

    async def read_templates(self, *, template_type: str | None = None) -> list[NotificationTemplate]:
        is_visible = visibility()
        matches_type = field_equals("type", template_type)
        return [
            template
            for template in self.store.notification_templates
            if is_visible(template) and (matches_type is None or matches_type(template))
        ]
