from src.models.db.configuration import AccessArea, ColorPalette, UserStatusConfig


def seed_access_areas() -> list[AccessArea]:
    return [
        AccessArea(id="hasHRAccess", label="Area HR", icon="fas fa-users", color="#2563eb", order=1),
        AccessArea(id="hasTechnicalAccess", label="Area Tecnica", icon="fas fa-code", color="#7c3aed", order=2),
        AccessArea(id="hasAdminAccess", label="Area Admin", icon="fas fa-cog", color="#dc2626", order=3),
        AccessArea(id="hasCandidateAccess", label="Area Candidato", icon="fas fa-user", color="#059669", order=4),
    ]


def seed_user_statuses() -> list[UserStatusConfig]:
    return [
        UserStatusConfig(value="Attivo", label="Attivo", icon="fas fa-check-circle", color="#10b981", order=1),
        UserStatusConfig(value="Inattivo", label="Inattivo", icon="fas fa-times-circle", color="#ef4444", order=2),
        UserStatusConfig(value="In attesa", label="In attesa", icon="fas fa-clock", color="#f59e0b", order=3),
        UserStatusConfig(value="Sospeso", label="Sospeso", icon="fas fa-ban", color="#6b7280", order=4),
    ]


def seed_color_palettes() -> list[ColorPalette]:
    return [
        ColorPalette(
            id="default",
            name="Default Palette",
            colors=[
                "#2563eb",
                "#7c3aed",
                "#dc2626",
                "#059669",
                "#ea580c",
                "#0891b2",
                "#8b5cf6",
                "#ec4899",
                "#eab308",
                "#64748b",
            ],
            is_default=True,
        )
    ]
