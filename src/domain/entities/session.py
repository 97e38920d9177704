"""
Session Entity

Maps an opaque bearer token to a portal user.
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel


class Session(BaseModel):
    """
    Session entity - issued at login, process-local.

    Business Rules:
    - Valid only while the referenced user exists and is active
      (checked on every use, not pushed eagerly)
    - Deleted on logout, on expiry, or when its user becomes invalid
    """

    token: str
    user_id: UUID

    created_at: datetime
    expires_at: datetime

    def is_expired(self, now: datetime) -> bool:
        return now >= self.expires_at
