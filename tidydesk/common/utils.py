from datetime import datetime, timezone


def normalize_email(email: str) -> str:
    return (email or "").strip().lower()


def is_blank(value) -> bool:
    return not isinstance(value, str) or not value.strip()


def utcnow() -> datetime:
    return datetime.now(timezone.utc)
