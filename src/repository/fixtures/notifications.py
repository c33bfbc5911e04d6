import datetime

from src.models.db.notification import (
    SYSTEM_SENDER,
    Notification,
    NotificationPreferences,
    NotificationTemplate,
)

UTC = datetime.timezone.utc

INTERVIEW_REMINDER_EMAIL = (
    "Hello {{interviewerName}},\n\n"
    "This is a reminder that you have an interview scheduled with {{candidateName}} "
    "for the {{position}} position at {{interviewTime}}.\n\n"
    "Interview details:\n"
    "- Candidate: {{candidateName}}\n"
    "- Position: {{position}}\n"
    "- Date: {{interviewDate}}\n"
    "- Time: {{interviewTime}}\n"
    "- Type: {{interviewType}}\n\n"
    "Best regards,\nNoi Intervistiamo Team"
)

NEW_CANDIDATE_EMAIL = (
    "A new candidate has been added to the system:\n\n"
    "- Name: {{candidateName}}\n"
    "- Position: {{position}}\n"
    "- Source: {{source}}\n"
    "- Experience: {{experience}} years\n\n"
    "View candidate profile: {{candidateUrl}}"
)


def seed_notifications(now: datetime.datetime) -> list[Notification]:
    def ago(**delta: float) -> datetime.datetime:
        return now - datetime.timedelta(**delta)

    return [
        Notification(
            id="1",
            type="interview",
            priority="high",
            title="Colloquio in programma",
            message="Hai un colloquio con Sara Blu per la posizione Frontend Developer tra 1 ora",
            data={"candidateId": "1", "interviewId": "1", "actionUrl": "/interviews/1"},
            recipients=["2"],
            created_at=ago(minutes=30),
            updated_at=ago(minutes=30),
            sender=SYSTEM_SENDER,
        ),
        Notification(
            id="2",
            type="candidate",
            priority="medium",
            title="Nuovo candidato",
            message="È stato aggiunto un nuovo candidato: Luca Giallo per la posizione Backend Developer",
            data={"candidateId": "2", "actionUrl": "/candidates/2"},
            recipients=["1", "2"],
            is_read=True,
            read_at=ago(hours=1),
            created_at=ago(hours=2),
            updated_at=ago(hours=1),
            sender=SYSTEM_SENDER,
        ),
        Notification(
            id="3",
            type="evaluation",
            priority="medium",
            title="Valutazione completata",
            message="Marco Neri ha completato la valutazione per il candidato Roberto Viola",
            data={"candidateId": "4", "interviewId": "4", "userId": "4", "actionUrl": "/interviews/4"},
            recipients=["1"],
            created_at=ago(hours=4),
            updated_at=ago(hours=4),
            sender={"id": "4", "name": "Marco Neri", "type": "user"},
        ),
        Notification(
            id="4",
            type="system",
            priority="low",
            title="Backup completato",
            message="Il backup automatico del sistema è stato completato con successo",
            data={"actionUrl": "/system/backup"},
            recipients=["1"],
            is_read=True,
            read_at=ago(hours=8),
            created_at=ago(hours=12),
            updated_at=ago(hours=8),
            sender=SYSTEM_SENDER,
        ),
        Notification(
            id="5",
            type="reminder",
            priority="medium",
            title="Promemoria valutazione",
            message="Ricordati di completare la valutazione per il colloquio di Anna Verde",
            data={"candidateId": "3", "interviewId": "3", "actionUrl": "/interviews/3"},
            recipients=["2"],
            created_at=ago(hours=1),
            updated_at=ago(hours=1),
            expires_at=now + datetime.timedelta(hours=24),
            sender=SYSTEM_SENDER,
        ),
        Notification(
            id="6",
            type="announcement",
            priority="high",
            title="Nuova funzionalità disponibile",
            message="È ora possibile aggiungere note private ai candidati. Scopri di più nella sezione help.",
            data={"actionUrl": "/help/private-notes"},
            recipients=["1", "2", "4"],
            created_at=ago(hours=6),
            updated_at=ago(hours=6),
            sender={"id": "1", "name": "Mario Rossi", "type": "user"},
        ),
    ]


def seed_notification_preferences() -> list[NotificationPreferences]:
    return [
        NotificationPreferences(
            user_id="1",
            frequency="immediate",
            quiet_hours={"enabled": True, "start_time": "22:00", "end_time": "08:00"},
        ),
        NotificationPreferences(
            user_id="2",
            channels={"email": True, "push": False, "in_app": True},
            types={
                "interview": True,
                "candidate": True,
                "evaluation": False,
                "system": False,
                "reminder": True,
                "announcement": True,
            },
            frequency="hourly",
            quiet_hours={"enabled": False, "start_time": "23:00", "end_time": "07:00"},
        ),
    ]


def seed_notification_templates() -> list[NotificationTemplate]:
    return [
        NotificationTemplate(
            id="1",
            name="Interview Reminder",
            type="interview",
            subject="Reminder: Interview with {{candidateName}}",
            email_template=INTERVIEW_REMINDER_EMAIL,
            push_template="Interview with {{candidateName}} starts in {{timeUntil}}",
            in_app_template="You have an interview with {{candidateName}} for {{position}} at {{interviewTime}}",
            variables=[
                "candidateName",
                "interviewerName",
                "position",
                "interviewTime",
                "interviewDate",
                "interviewType",
                "timeUntil",
            ],
            created_at=datetime.datetime(2024, 1, 15, tzinfo=UTC),
            updated_at=datetime.datetime(2024, 2, 10, tzinfo=UTC),
        ),
        NotificationTemplate(
            id="2",
            name="New Candidate",
            type="candidate",
            subject="New Candidate: {{candidateName}} for {{position}}",
            email_template=NEW_CANDIDATE_EMAIL,
            push_template="New candidate: {{candidateName}} for {{position}}",
            in_app_template="New candidate {{candidateName}} applied for {{position}}",
            variables=["candidateName", "position", "source", "experience", "candidateUrl"],
            created_at=datetime.datetime(2024, 1, 15, tzinfo=UTC),
            updated_at=datetime.datetime(2024, 1, 15, tzinfo=UTC),
        ),
    ]
