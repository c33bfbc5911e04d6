import datetime

from src.models.db.interview import Interview

UTC = datetime.timezone.utc


def seed_interviews(now: datetime.datetime) -> list[Interview]:
    return [
        Interview(
            id="1",
            title="Colloquio Frontend Developer",
            candidate_name="Sara Blu",
            candidate_email="sara.blu@example.com",
            interviewer_name="Giovanni Bianchi",
            interviewer_id="2",
            position="Frontend Developer",
            status="completed",
            scheduled_date=datetime.datetime(2024, 3, 15, 10, 0, tzinfo=UTC),
            duration=60,
            type="technical",
            meeting_link="https://meet.google.com/abc-defg-hij",
            notes="Candidato molto preparato su React e TypeScript",
            score=85,
            created_at=datetime.datetime(2024, 3, 10, tzinfo=UTC),
            updated_at=datetime.datetime(2024, 3, 15, tzinfo=UTC),
        ),
        Interview(
            id="2",
            title="Colloquio Backend Developer",
            candidate_name="Luca Giallo",
            candidate_email="luca.giallo@example.com",
            interviewer_name="Marco Neri",
            interviewer_id="4",
            position="Backend Developer",
            status="scheduled",
            scheduled_date=now + datetime.timedelta(days=2),
            duration=90,
            type="technical",
            meeting_link="https://meet.google.com/xyz-uvwx-rst",
            notes="",
            created_at=datetime.datetime(2024, 3, 20, tzinfo=UTC),
            updated_at=datetime.datetime(2024, 3, 20, tzinfo=UTC),
        ),
        Interview(
            id="3",
            title="Colloquio HR Specialist",
            candidate_name="Anna Verde",
            candidate_email="anna.verde@example.com",
            interviewer_name="Giovanni Bianchi",
            interviewer_id="2",
            position="HR Specialist",
            status="in-progress",
            scheduled_date=now - datetime.timedelta(minutes=30),
            duration=45,
            type="hr",
            meeting_link="https://meet.google.com/klm-nopq-rst",
            notes="Primo colloquio conoscitivo",
            created_at=datetime.datetime(2024, 3, 18, tzinfo=UTC),
            updated_at=now,
        ),
        Interview(
            id="4",
            title="Colloquio Finale Project Manager",
            candidate_name="Roberto Viola",
            candidate_email="roberto.viola@example.com",
            interviewer_name="Mario Rossi",
            interviewer_id="1",
            position="Project Manager",
            status="completed",
            scheduled_date=datetime.datetime(2024, 3, 12, 14, 30, tzinfo=UTC),
            duration=60,
            type="final",
            location="Ufficio Milano - Sala Riunioni A",
            notes="Colloquio finale con il team management",
            score=92,
            created_at=datetime.datetime(2024, 3, 5, tzinfo=UTC),
            updated_at=datetime.datetime(2024, 3, 12, tzinfo=UTC),
        ),
    ]
