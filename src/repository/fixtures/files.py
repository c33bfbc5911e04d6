import datetime

from src.models.db.file import FileBatch, FileUpload

UTC = datetime.timezone.utc
DOWNLOAD_URL = "/noi-intervistiamo/api/files/{file_id}/download"


def seed_files() -> list[FileUpload]:
    return [
        FileUpload(
            id="1",
            filename="CV_Sara_Blu-1234567890.pdf",
            original_name="CV_Sara_Blu.pdf",
            mimetype="application/pdf",
            size=524288,
            path="/uploads/candidate/cv/CV_Sara_Blu-1234567890.pdf",
            url=DOWNLOAD_URL.format(file_id="1"),
            uploaded_by="1",
            uploaded_at=datetime.datetime(2024, 3, 1, 10, 0, tzinfo=UTC),
            category="cv",
            entity_type="candidate",
            entity_id="1",
            metadata={"pages": 2},
            tags=["sara-blu", "frontend", "cv"],
            description="CV di Sara Blu per posizione Frontend Developer",
        ),
        FileUpload(
            id="2",
            filename="Portfolio_Luca_Giallo-1234567891.pdf",
            original_name="Portfolio_Progetti.pdf",
            mimetype="application/pdf",
            size=1048576,
            path="/uploads/candidate/portfolio/Portfolio_Luca_Giallo-1234567891.pdf",
            url=DOWNLOAD_URL.format(file_id="2"),
            uploaded_by="2",
            uploaded_at=datetime.datetime(2024, 3, 5, 14, 30, tzinfo=UTC),
            category="portfolio",
            entity_type="candidate",
            entity_id="2",
            metadata={"pages": 8},
            tags=["luca-giallo", "backend", "portfolio"],
            description="Portfolio progetti di Luca Giallo",
        ),
        FileUpload(
            id="3",
            filename="photo_giovanni_bianchi-1234567892.jpg",
            original_name="profile_photo.jpg",
            mimetype="image/jpeg",
            size=204800,
            path="/uploads/user/profile_photo/photo_giovanni_bianchi-1234567892.jpg",
            url=DOWNLOAD_URL.format(file_id="3"),
            uploaded_by="2",
            uploaded_at=datetime.datetime(2024, 2, 20, 9, 15, tzinfo=UTC),
            category="profile_photo",
            entity_type="user",
            entity_id="2",
            is_public=True,
            metadata={"width": 400, "height": 400},
            tags=["profile", "giovanni-bianchi"],
            description="Foto profilo di Giovanni Bianchi",
        ),
        FileUpload(
            id="4",
            filename="certificato_aws-1234567893.pdf",
            original_name="AWS_Certified_Developer.pdf",
            mimetype="application/pdf",
            size=307200,
            path="/uploads/candidate/certificate/certificato_aws-1234567893.pdf",
            url=DOWNLOAD_URL.format(file_id="4"),
            uploaded_by="1",
            uploaded_at=datetime.datetime(2024, 3, 10, 16, 45, tzinfo=UTC),
            category="certificate",
            entity_type="candidate",
            entity_id="2",
            metadata={"pages": 1},
            tags=["aws", "certification", "luca-giallo"],
            description="Certificazione AWS Developer di Luca Giallo",
        ),
    ]


def seed_file_batches() -> list[FileBatch]:
    return [
        FileBatch(
            id="1",
            name="Documenti Sara Blu",
            description="Tutti i documenti del candidato Sara Blu",
            files=["1"],
            created_by="2",
            created_at=datetime.datetime(2024, 3, 1, 10, 0, tzinfo=UTC),
            updated_at=datetime.datetime(2024, 3, 1, 10, 0, tzinfo=UTC),
        ),
        FileBatch(
            id="2",
            name="Portfolio Luca Giallo",
            description="Portfolio e certificazioni di Luca Giallo",
            files=["2", "4"],
            created_by="1",
            created_at=datetime.datetime(2024, 3, 5, 14, 30, tzinfo=UTC),
            updated_at=datetime.datetime(2024, 3, 10, 16, 45, tzinfo=UTC),
        ),
    ]
