import re

PHONE_REGEX = re.compile(r"^(\+39|0039|39)?[ -]?([0-9]{2,4})[ -]?([0-9]{6,8})$")
PASSWORD_REGEX = re.compile(r"^(?=.*[a-z])(?=.*[A-Z])(?=.*\d)[a-zA-Z\d@$!%*?&]{8,}$")


def is_valid_phone(phone: str) -> bool:
    """Italian phone numbers, with or without the +39 prefix."""
    return bool(PHONE_REGEX.match(phone))


def is_valid_password(password: str) -> bool:
    # At least 8 characters, 1 uppercase, 1 lowercase, 1 number
    return bool(PASSWORD_REGEX.match(password))


def validate_phone(value: str | None) -> str | None:
    if value and not is_valid_phone(value):
        raise ValueError("Formato numero di telefono non valido")
    return value


def validate_password_strength(value: str) -> str:
    if not is_valid_password(value):
        raise ValueError(
            "La password deve essere di almeno 8 caratteri e contenere almeno una lettera maiuscola, "
            "una minuscola e un numero"
        )
    return value
