import io
import logging
import pathlib
import secrets
import time

import PyPDF2
from PIL import Image
from fastapi import UploadFile

from src.config.manager import settings
from src.models.schemas.file import ALLOWED_MIMETYPES
from src.utilities.exceptions.api import BadRequestError, PayloadTooLargeError

logger = logging.getLogger(__name__)

CHUNK_SIZE = 64 * 1024


def file_type_of(mimetype: str) -> str:
    """Coarse file family used by the file statistics."""
    if mimetype.startswith("image/"):
        return "image"
    if mimetype == "application/pdf":
        return "pdf"
    if mimetype.startswith("video/"):
        return "video"
    if mimetype.startswith("audio/"):
        return "audio"
    if "document" in mimetype or "word" in mimetype or "text" in mimetype:
        return "document"
    return "other"


def build_stored_filename(original_name: str) -> str:
    path = pathlib.PurePath(original_name)
    unique_suffix = f"{int(time.time() * 1000)}-{secrets.randbelow(10**9)}"
    return f"{path.stem}-{unique_suffix}{path.suffix}"


def extract_metadata(content: bytes, mimetype: str) -> dict:
    if mimetype == "application/pdf":
        try:
            return {"pages": len(PyPDF2.PdfReader(io.BytesIO(content)).pages)}
        except Exception as pdf_error:
            logger.warning("Could not read PDF metadata: %s", pdf_error)
            return {}
    if mimetype.startswith("image/"):
        try:
            with Image.open(io.BytesIO(content)) as image:
                width, height = image.size
            return {"width": width, "height": height}
        except Exception as image_error:
            logger.warning("Could not read image metadata: %s", image_error)
            return {}
    return {}


async def validate_upload_file(file: UploadFile) -> tuple[bytes, str]:
    """
    Check the mimetype of an uploaded file and read it within the size limit.

    Returns the file bytes and the accepted mimetype.
    """
    content_type = file.content_type or ""
    if content_type not in ALLOWED_MIMETYPES:
        raise BadRequestError(f"Tipo di file {content_type} non consentito", code="FILE_TYPE_NOT_ALLOWED")

    max_bytes = settings.MAX_UPLOAD_SIZE_MB * 1024 * 1024
    total_size = 0
    buffer = bytearray()

    while True:
        chunk = await file.read(CHUNK_SIZE)
        if not chunk:
            break
        total_size += len(chunk)
        if total_size > max_bytes:
            raise PayloadTooLargeError(
                f"La dimensione del file non deve superare i {settings.MAX_UPLOAD_SIZE_MB}MB",
                code="FILE_TOO_LARGE",
            )
        buffer.extend(chunk)

    logger.debug("Accepted upload %s (%s, %d bytes)", file.filename, content_type, total_size)
    return bytes(buffer), content_type
