from src.utilities.exceptions.api import UnauthorizedError


class PasswordDoesNotMatch(UnauthorizedError):
    """
    Throw an exception when the supplied password does not match the stored one.
    """

    code = "INVALID_CREDENTIALS"
    default_message = "Username o password non validi"
