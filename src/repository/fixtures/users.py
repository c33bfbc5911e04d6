import datetime

from src.models.db.user import User, UserStatusEnum, build_avatar_url

UTC = datetime.timezone.utc


def seed_users(now: datetime.datetime) -> list[User]:
    return [
        User(
            id="1",
            username="admin",
            email="admin@noiintervistiamo.it",
            first_name="Mario",
            last_name="Rossi",
            role="ADMIN",
            role_name="Amministratore",
            department="Amministrazione",
            avatar=build_avatar_url("Mario", "Rossi"),
            avatar_id="avatar-1",
            status=UserStatusEnum.ACTIVE,
            last_login=now - datetime.timedelta(hours=2),
            created_at=datetime.datetime(2024, 1, 15, tzinfo=UTC),
            updated_at=datetime.datetime(2024, 1, 15, tzinfo=UTC),
        ),
        User(
            id="2",
            username="giovanni.bianchi",
            email="giovanni.bianchi@noiintervistiamo.it",
            first_name="Giovanni",
            last_name="Bianchi",
            role="TECH_LEAD",
            role_name="Tech Lead",
            department="Sviluppo Software",
            avatar=build_avatar_url("Giovanni", "Bianchi", background="0a8228"),
            avatar_id="avatar-2",
            status=UserStatusEnum.ACTIVE,
            last_login=now - datetime.timedelta(hours=1),
            created_at=datetime.datetime(2024, 2, 20, tzinfo=UTC),
            updated_at=datetime.datetime(2024, 2, 20, tzinfo=UTC),
        ),
        User(
            id="3",
            username="laura.verdi",
            email="laura.verdi@example.com",
            first_name="Laura",
            last_name="Verdi",
            role="CANDIDATE",
            role_name="Candidato",
            status=UserStatusEnum.PENDING,
            last_login=now - datetime.timedelta(hours=12),
            created_at=datetime.datetime(2024, 3, 10, tzinfo=UTC),
            updated_at=datetime.datetime(2024, 3, 10, tzinfo=UTC),
        ),
        User(
            id="4",
            username="marco.neri",
            email="marco.neri@noiintervistiamo.it",
            first_name="Marco",
            last_name="Neri",
            role="SENIOR_DEV",
            role_name="Senior Developer",
            department="Sviluppo Software",
            avatar=build_avatar_url("Marco", "Neri", background="2c3e50"),
            avatar_id="avatar-4",
            status=UserStatusEnum.ACTIVE,
            last_login=now - datetime.timedelta(minutes=30),
            created_at=datetime.datetime(2024, 1, 25, tzinfo=UTC),
            updated_at=datetime.datetime(2024, 1, 25, tzinfo=UTC),
        ),
        User(
            id="5",
            username="maria.rossi",
            email="maria.rossi@noiintervistiamo.it",
            first_name="Maria",
            last_name="Rossi",
            role="HR_MANAGER",
            role_name="HR Manager",
            department="Risorse Umane",
            avatar=build_avatar_url("Maria", "Rossi", background="17a2b8"),
            avatar_id="avatar-5",
            status=UserStatusEnum.ACTIVE,
            last_login=now - datetime.timedelta(days=1),
            created_at=datetime.datetime(2024, 1, 25, tzinfo=UTC),
            updated_at=datetime.datetime(2024, 2, 1, tzinfo=UTC),
        ),
        User(
            id="6",
            username="paolo.gialli",
            email="paolo.gialli@noiintervistiamo.it",
            first_name="Paolo",
            last_name="Gialli",
            role="HR_RECRUITER",
            role_name="HR Recruiter",
            department="Risorse Umane",
            status=UserStatusEnum.SUSPENDED,
            is_active=False,
            created_at=datetime.datetime(2024, 2, 5, tzinfo=UTC),
            updated_at=datetime.datetime(2024, 2, 12, tzinfo=UTC),
        ),
    ]
