from src.utilities.exceptions.api import BadRequestError


async def http_exc_400_invalid_current_password() -> BadRequestError:
    return BadRequestError("Password attuale non corretta", code="INVALID_CURRENT_PASSWORD")


async def http_exc_400_invalid_reset_token() -> BadRequestError:
    return BadRequestError("Token di reset non valido o scaduto", code="INVALID_RESET_TOKEN")


async def http_exc_400_system_role() -> BadRequestError:
    return BadRequestError("Non è possibile eliminare un ruolo di sistema", code="SYSTEM_ROLE")


async def http_exc_400_no_files_uploaded() -> BadRequestError:
    return BadRequestError("Nessun file è stato caricato", code="NO_FILES_UPLOADED")


async def http_exc_400_too_many_files(max_files: int) -> BadRequestError:
    return BadRequestError(f"È possibile caricare al massimo {max_files} file", code="TOO_MANY_FILES")
