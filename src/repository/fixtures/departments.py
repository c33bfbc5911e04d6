import datetime

from src.models.db.department import Department

SEEDED_AT = datetime.datetime(2023, 1, 1, tzinfo=datetime.timezone.utc)

# (id, name, description, color)
DEPARTMENT_ROWS: list[tuple[str, str, str, str]] = [
    ("1", "Sviluppo Software", "Team di sviluppo software", "#007bff"),
    ("2", "Risorse Umane", "Gestione risorse umane e recruiting", "#17a2b8"),
    ("3", "Marketing", "Marketing e comunicazione", "#e83e8c"),
    ("4", "Vendite", "Team commerciale e vendite", "#28a745"),
    ("5", "Amministrazione", "Amministrazione e finanza", "#6f42c1"),
    ("6", "IT", "Infrastruttura e supporto IT", "#20c997"),
]


def seed_departments() -> list[Department]:
    return [
        Department(
            id=department_id,
            name=name,
            description=description,
            color=color,
            created_at=SEEDED_AT,
            updated_at=SEEDED_AT,
        )
        for department_id, name, description, color in DEPARTMENT_ROWS
    ]
