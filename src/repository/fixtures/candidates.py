import datetime

from src.models.db.candidate import Candidate

UTC = datetime.timezone.utc


def _day(year: int, month: int, day: int) -> datetime.datetime:
    return datetime.datetime(year, month, day, tzinfo=UTC)


def seed_candidates() -> list[Candidate]:
    return [
        Candidate(
            id="1",
            first_name="Sara",
            last_name="Blu",
            email="sara.blu@example.com",
            phone="+39 333 1234567",
            position="Frontend Developer",
            experience=3,
            status="interview",
            source="LinkedIn",
            skills=["React", "TypeScript", "CSS", "HTML", "JavaScript", "Angular"],
            education=[
                {
                    "degree": "Laurea in Informatica",
                    "field": "Computer Science",
                    "university": "Università di Milano",
                    "year": 2021,
                }
            ],
            work_history=[
                {
                    "company": "Tech Solutions SRL",
                    "position": "Junior Frontend Developer",
                    "start_date": _day(2021, 9, 1),
                    "end_date": _day(2024, 2, 28),
                    "description": "Sviluppo di applicazioni web con React e TypeScript",
                }
            ],
            documents=[
                {
                    "id": "doc1",
                    "type": "cv",
                    "filename": "CV_Sara_Blu.pdf",
                    "url": "/files/candidates/1/CV_Sara_Blu.pdf",
                    "uploaded_at": _day(2024, 3, 1),
                }
            ],
            notes=[
                {
                    "id": "note1",
                    "author": "Giovanni Bianchi",
                    "content": "Candidata molto preparata tecnicamente, buona comunicazione",
                    "created_at": _day(2024, 3, 10),
                    "is_private": False,
                }
            ],
            interviews=["1"],
            evaluations=[
                {
                    "interview_id": "1",
                    "interviewer": "Giovanni Bianchi",
                    "score": 85,
                    "feedback": "Ottima preparazione tecnica, da considerare per il prossimo step",
                    "date": _day(2024, 3, 15),
                }
            ],
            tags=["react", "typescript", "promettente"],
            priority="high",
            expected_salary=35000,
            availability_date=_day(2024, 4, 1),
            created_at=_day(2024, 3, 1),
            updated_at=_day(2024, 3, 15),
        ),
        Candidate(
            id="2",
            first_name="Luca",
            last_name="Giallo",
            email="luca.giallo@example.com",
            phone="+39 334 7654321",
            position="Backend Developer",
            experience=5,
            status="technical",
            source="Company Website",
            skills=["Node.js", "Python", "Docker", "AWS", "MongoDB", "PostgreSQL"],
            education=[
                {
                    "degree": "Laurea Magistrale in Ingegneria Informatica",
                    "field": "Computer Engineering",
                    "university": "Politecnico di Milano",
                    "year": 2019,
                }
            ],
            work_history=[
                {
                    "company": "DataTech Italy",
                    "position": "Backend Developer",
                    "start_date": _day(2019, 10, 1),
                    "description": "Sviluppo di API REST e microservizi con Node.js e Python",
                }
            ],
            documents=[
                {
                    "id": "doc2",
                    "type": "cv",
                    "filename": "CV_Luca_Giallo.pdf",
                    "url": "/files/candidates/2/CV_Luca_Giallo.pdf",
                    "uploaded_at": _day(2024, 3, 5),
                },
                {
                    "id": "doc3",
                    "type": "portfolio",
                    "filename": "Portfolio_Progetti.pdf",
                    "url": "/files/candidates/2/Portfolio_Progetti.pdf",
                    "uploaded_at": _day(2024, 3, 5),
                },
            ],
            notes=[
                {
                    "id": "note2",
                    "author": "Marco Neri",
                    "content": "Esperienza solida nel backend, buona conoscenza dei microservizi",
                    "created_at": _day(2024, 3, 18),
                    "is_private": False,
                }
            ],
            interviews=["2"],
            tags=["nodejs", "python", "senior"],
            priority="medium",
            expected_salary=45000,
            availability_date=_day(2024, 5, 1),
            created_at=_day(2024, 3, 5),
            updated_at=_day(2024, 3, 18),
        ),
        Candidate(
            id="3",
            first_name="Anna",
            last_name="Verde",
            email="anna.verde@example.com",
            phone="+39 335 5555555",
            position="HR Specialist",
            experience=2,
            status="new",
            source="Recruitment Agency",
            skills=["HR Management", "Recruiting", "Communication", "Team Building"],
            education=[
                {
                    "degree": "Laurea in Psicologia del Lavoro",
                    "field": "Work Psychology",
                    "university": "Università Statale Milano",
                    "year": 2022,
                }
            ],
            work_history=[
                {
                    "company": "HR Solutions",
                    "position": "Junior HR Specialist",
                    "start_date": _day(2022, 9, 1),
                    "description": "Supporto nelle attività di selezione e gestione del personale",
                }
            ],
            documents=[
                {
                    "id": "doc4",
                    "type": "cv",
                    "filename": "CV_Anna_Verde.pdf",
                    "url": "/files/candidates/3/CV_Anna_Verde.pdf",
                    "uploaded_at": _day(2024, 3, 18),
                }
            ],
            interviews=["3"],
            tags=["hr", "junior"],
            priority="low",
            expected_salary=28000,
            availability_date=_day(2024, 4, 15),
            created_at=_day(2024, 3, 18),
            updated_at=_day(2024, 3, 18),
        ),
        Candidate(
            id="4",
            first_name="Roberto",
            last_name="Viola",
            email="roberto.viola@example.com",
            phone="+39 336 9999999",
            position="Project Manager",
            experience=8,
            status="hired",
            source="Internal Referral",
            skills=["Project Management", "Agile", "Scrum", "Leadership", "Communication"],
            education=[
                {
                    "degree": "Laurea in Economia e Management",
                    "field": "Business Management",
                    "university": "Bocconi",
                    "year": 2016,
                }
            ],
            work_history=[
                {
                    "company": "Consulting Group",
                    "position": "Senior Project Manager",
                    "start_date": _day(2018, 1, 1),
                    "end_date": _day(2024, 2, 29),
                    "description": "Gestione progetti IT per clienti enterprise",
                }
            ],
            documents=[
                {
                    "id": "doc5",
                    "type": "cv",
                    "filename": "CV_Roberto_Viola.pdf",
                    "url": "/files/candidates/4/CV_Roberto_Viola.pdf",
                    "uploaded_at": _day(2024, 3, 5),
                }
            ],
            notes=[
                {
                    "id": "note3",
                    "author": "Mario Rossi",
                    "content": "Eccellente background manageriale, perfetto per il team",
                    "created_at": _day(2024, 3, 12),
                    "is_private": True,
                }
            ],
            interviews=["4"],
            evaluations=[
                {
                    "interview_id": "4",
                    "interviewer": "Mario Rossi",
                    "score": 92,
                    "feedback": "Candidato ideale per la posizione, assumere immediatamente",
                    "date": _day(2024, 3, 12),
                }
            ],
            tags=["project-management", "leadership", "hired"],
            priority="high",
            expected_salary=60000,
            created_at=_day(2024, 3, 5),
            updated_at=_day(2024, 3, 12),
        ),
    ]
