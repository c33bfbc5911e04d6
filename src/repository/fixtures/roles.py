import datetime
import typing

from src.models.db.role import Role

SEEDED_AT = datetime.datetime(2023, 1, 1, tzinfo=datetime.timezone.utc)

NO_ACCESS = {
    "has_hr_access": False,
    "has_technical_access": False,
    "has_admin_access": False,
    "has_candidate_access": False,
}

ROLE_ROWS: list[dict[str, typing.Any]] = [
    {
        "id": "1",
        "name": "Amministratore",
        "code": "ADMIN",
        "description": "Accesso completo al sistema",
        "color": "#dc3545",
        "permissions": ["all"],
        "is_system": True,
        "has_hr_access": True,
        "has_technical_access": True,
        "has_admin_access": True,
        "user_count": 3,
    },
    {
        "id": "2",
        "name": "HR Manager",
        "code": "HR_MANAGER",
        "description": "Gestione completa delle risorse umane",
        "color": "#17a2b8",
        "permissions": ["hr.manage", "candidates.view", "candidates.edit", "interviews.schedule"],
        "has_hr_access": True,
        "user_count": 5,
    },
    {
        "id": "3",
        "name": "Tech Lead",
        "code": "TECH_LEAD",
        "description": "Gestione interviste tecniche e team",
        "color": "#007bff",
        "permissions": ["interviews.conduct", "interviews.evaluate", "candidates.view", "team.manage"],
        "has_technical_access": True,
        "user_count": 8,
    },
    {
        "id": "4",
        "name": "Senior Developer",
        "code": "SENIOR_DEV",
        "description": "Interviste tecniche avanzate",
        "color": "#28a745",
        "permissions": ["interviews.conduct", "interviews.evaluate", "candidates.view"],
        "has_technical_access": True,
        "user_count": 12,
    },
    {
        "id": "5",
        "name": "HR Specialist",
        "code": "HR_SPECIALIST",
        "description": "Screening iniziale e gestione candidati",
        "color": "#6f42c1",
        "permissions": ["candidates.view", "candidates.edit", "interviews.schedule"],
        "has_hr_access": True,
        "user_count": 7,
    },
    {
        "id": "6",
        "name": "HR Recruiter",
        "code": "HR_RECRUITER",
        "description": "Ricerca e selezione candidati",
        "color": "#fd7e14",
        "permissions": ["candidates.view", "candidates.create", "interviews.schedule"],
        "has_hr_access": True,
        "user_count": 4,
    },
    {
        "id": "7",
        "name": "Frontend Developer",
        "code": "FRONTEND_DEV",
        "description": "Interviste frontend e UI/UX",
        "color": "#20c997",
        "permissions": ["interviews.conduct", "candidates.view"],
        "has_technical_access": True,
        "user_count": 15,
    },
    {
        "id": "8",
        "name": "Candidato",
        "code": "CANDIDATE",
        "description": "Accesso limitato per candidati",
        "color": "#ffc107",
        "permissions": ["profile.view", "profile.edit"],
        "is_system": True,
        "has_candidate_access": True,
        "user_count": 142,
    },
]


def seed_roles() -> list[Role]:
    return [
        Role(**{**NO_ACCESS, **row, "permissions": list(row["permissions"])}, created_at=SEEDED_AT, updated_at=SEEDED_AT)
        for row in ROLE_ROWS
    ]
