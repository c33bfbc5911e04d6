"""
Login identities available to the mock server.

Passwords are stored in plain text: the server only emulates the frontend's
authentication flow.
"""
import datetime

from src.models.db.account import AccountNotificationSettings, AccountPreferences, AuthAccount
from src.models.db.user import build_avatar_url

UTC = datetime.timezone.utc


def seed_accounts(now: datetime.datetime) -> list[AuthAccount]:
    return [
        AuthAccount(
            id="1",
            username="admin",
            email="giuseppe.verdi@noiintervistiamo.it",
            password="admin123",
            first_name="Giuseppe",
            last_name="Verdi",
            role="admin",
            available_roles=["ADMIN", "HR", "INTERVIEWER"],
            avatar=build_avatar_url("Giuseppe", "Verdi"),
            last_login=now - datetime.timedelta(hours=2),
            created_at=datetime.datetime(2024, 1, 15, tzinfo=UTC),
            updated_at=datetime.datetime(2024, 1, 15, tzinfo=UTC),
        ),
        AuthAccount(
            id="2",
            username="adminanna",
            email="anna.ferrari@noiintervistiamo.it",
            password="admin123",
            first_name="Anna",
            last_name="Ferrari",
            role="admin",
            available_roles=["HR", "INTERVIEWER"],
            avatar=build_avatar_url("Anna", "Ferrari", background="0a8228"),
            last_login=now - datetime.timedelta(hours=1),
            created_at=datetime.datetime(2024, 2, 20, tzinfo=UTC),
            updated_at=datetime.datetime(2024, 2, 20, tzinfo=UTC),
            preferences=AccountPreferences(
                notifications=AccountNotificationSettings(email=True, push=False, interview=True, evaluation=False)
            ),
        ),
        AuthAccount(
            id="3",
            username="hr",
            email="maria.rossi@noiintervistiamo.it",
            password="hr123",
            first_name="Maria",
            last_name="Rossi",
            role="hr",
            available_roles=["HR"],
            avatar=build_avatar_url("Maria", "Rossi", background="2c3e50"),
            last_login=now - datetime.timedelta(minutes=30),
            created_at=datetime.datetime(2024, 1, 25, tzinfo=UTC),
            updated_at=datetime.datetime(2024, 1, 25, tzinfo=UTC),
        ),
        AuthAccount(
            id="4",
            username="interviewer",
            email="marco.neri@noiintervistiamo.it",
            password="int123",
            first_name="Marco",
            last_name="Neri",
            role="interviewer",
            available_roles=["INTERVIEWER"],
            avatar=build_avatar_url("Marco", "Neri", background="e67e22"),
            last_login=now - datetime.timedelta(minutes=15),
            created_at=datetime.datetime(2024, 3, 10, tzinfo=UTC),
            updated_at=datetime.datetime(2024, 3, 10, tzinfo=UTC),
            preferences=AccountPreferences(
                notifications=AccountNotificationSettings(email=True, push=False, interview=True, evaluation=False)
            ),
        ),
    ]
