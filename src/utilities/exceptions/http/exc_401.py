from src.utilities.exceptions.api import UnauthorizedError


async def http_exc_401_missing_token() -> UnauthorizedError:
    return UnauthorizedError("Token di autorizzazione è obbligatorio", code="MISSING_TOKEN")


async def http_exc_401_invalid_token() -> UnauthorizedError:
    return UnauthorizedError("Token non valido o scaduto", code="INVALID_TOKEN")


async def http_exc_401_invalid_credentials() -> UnauthorizedError:
    return UnauthorizedError("Username o password non validi", code="INVALID_CREDENTIALS")


async def http_exc_401_invalid_refresh_token() -> UnauthorizedError:
    return UnauthorizedError("Refresh token non valido o scaduto", code="INVALID_REFRESH_TOKEN")
