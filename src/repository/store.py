"""
Process-local storage for every collection served by the API.

Each application instance owns one ``InMemoryStore`` seeded from the fixtures;
nothing is persisted and all state is lost when the process stops.
"""
import logging
import typing

from src.models.db.account import AuthAccount
from src.models.db.base import BaseRecordModel
from src.models.db.candidate import Candidate
from src.models.db.configuration import AccessArea, ColorPalette, UserStatusConfig
from src.models.db.dashboard import DashboardChart, RecentActivity, SystemAlert
from src.models.db.department import Department
from src.models.db.file import FileBatch, FileUpload
from src.models.db.interview import Interview
from src.models.db.notification import Notification, NotificationPreferences, NotificationTemplate
from src.models.db.role import Role
from src.models.db.token import IssuedToken
from src.models.db.user import User
from src.repository.fixtures.accounts import seed_accounts
from src.repository.fixtures.candidates import seed_candidates
from src.repository.fixtures.configuration import seed_access_areas, seed_color_palettes, seed_user_statuses
from src.repository.fixtures.dashboard import seed_alerts, seed_charts, seed_recent_activity
from src.repository.fixtures.departments import seed_departments
from src.repository.fixtures.files import seed_file_batches, seed_files
from src.repository.fixtures.interviews import seed_interviews
from src.repository.fixtures.notifications import (
    seed_notification_preferences,
    seed_notification_templates,
    seed_notifications,
)
from src.repository.fixtures.roles import seed_roles
from src.repository.fixtures.users import seed_users
from src.utilities.formatters.datetime_formatter import utc_now

logger = logging.getLogger(__name__)

RecordT = typing.TypeVar("RecordT", bound=BaseRecordModel)


class Collection(typing.Generic[RecordT]):
    """
    Ordered list of records with a monotonic id sequence.

    Ids continue after the highest numeric id seen at seeding time and are never
    reused, even after a record is removed.
    """

    def __init__(self, name: str, records: typing.Iterable[RecordT] = ()) -> None:
        self.name = name
        self.records: list[RecordT] = list(records)
        numeric_ids = [int(record.id) for record in self.records if record.id.isdigit()]
        self._last_id = max(numeric_ids, default=0)

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> typing.Iterator[RecordT]:
        return iter(self.records)

    def next_id(self) -> str:
        self._last_id += 1
        return str(self._last_id)

    def find(self, record_id: str) -> RecordT | None:
        for record in self.records:
            if record.id == record_id:
                return record
        return None

    def add(self, record: RecordT) -> RecordT:
        self.records.append(record)
        return record

    def remove(self, record: RecordT) -> None:
        self.records.remove(record)


class InMemoryStore:
    def __init__(self) -> None:
        now = utc_now()

        self.accounts: Collection[AuthAccount] = Collection("accounts", seed_accounts(now))
        self.users: Collection[User] = Collection("users", seed_users(now))
        self.roles: Collection[Role] = Collection("roles", seed_roles())
        self.departments: Collection[Department] = Collection("departments", seed_departments())
        self.candidates: Collection[Candidate] = Collection("candidates", seed_candidates())
        self.interviews: Collection[Interview] = Collection("interviews", seed_interviews(now))
        self.notifications: Collection[Notification] = Collection("notifications", seed_notifications(now))
        self.notification_templates: Collection[NotificationTemplate] = Collection(
            "notification_templates", seed_notification_templates()
        )
        self.files: Collection[FileUpload] = Collection("files", seed_files())
        self.file_batches: Collection[FileBatch] = Collection("file_batches", seed_file_batches())

        self.notification_preferences: dict[str, NotificationPreferences] = {
            preferences.user_id: preferences for preferences in seed_notification_preferences()
        }
        self.file_contents: dict[str, bytes] = {}

        self.charts: list[DashboardChart] = seed_charts()
        self.alerts: list[SystemAlert] = seed_alerts(now)
        self.recent_activity: list[RecentActivity] = seed_recent_activity(now)

        self.access_areas: list[AccessArea] = seed_access_areas()
        self.user_statuses: list[UserStatusConfig] = seed_user_statuses()
        self.color_palettes: list[ColorPalette] = seed_color_palettes()

        self.access_tokens: dict[str, IssuedToken] = {}
        self.refresh_tokens: dict[str, IssuedToken] = {}
        self.reset_tokens: dict[str, IssuedToken] = {}

        logger.debug("In-memory store seeded: %s", self.counts())

    def counts(self) -> dict[str, int]:
        return {
            "users": len(self.users),
            "roles": len(self.roles),
            "departments": len(self.departments),
            "candidates": len(self.candidates),
            "interviews": len(self.interviews),
            "notifications": len(self.notifications),
            "files": len(self.files),
        }

    def clear_tokens(self) -> None:
        self.access_tokens.clear()
        self.refresh_tokens.clear()
        self.reset_tokens.clear()
