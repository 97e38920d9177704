import secrets
from datetime import UTC, datetime


def generate_token() -> str:
    """Opaque, URL-safe token for signup drafts and sessions"""
    return secrets.token_urlsafe(32)


def utcnow() -> datetime:
    return datetime.now(UTC)
