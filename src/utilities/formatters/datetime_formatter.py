import datetime


def format_datetime_into_isoformat(date_time: datetime.datetime) -> str:
    if date_time.tzinfo is None:
        date_time = date_time.replace(tzinfo=datetime.timezone.utc)
    return date_time.astimezone(datetime.timezone.utc).isoformat().replace("+00:00", "Z")


def utc_now() -> datetime.datetime:
    return datetime.datetime.now(datetime.timezone.utc)


def ensure_aware(date_time: datetime.datetime | None) -> datetime.datetime | None:
    """Treat naive datetimes coming from query strings or payloads as UTC."""
    if date_time is None or date_time.tzinfo is not None:
        return date_time
    return date_time.replace(tzinfo=datetime.timezone.utc)
