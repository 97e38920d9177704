from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from src.domain.entities import Session


class ISessionStore(ABC):
    """Session store interface - application layer"""

    @abstractmethod
    async def create(self, user_id: UUID) -> Session:
        """Issue a new session with a fresh opaque token"""
        pass

    @abstractmethod
    async def get(self, token: str) -> Optional[Session]:
        """Get a live session. Expired sessions are dropped and reported absent."""
        pass

    @abstractmethod
    async def delete(self, token: str) -> bool:
        """Delete a session. Returns True if it existed; absent tokens are not an error."""
        pass

    @abstractmethod
    async def delete_all_for_user(self, user_id: UUID) -> int:
        """Delete every session of a user. Returns count deleted."""
        pass

    @abstractmethod
    async def purge_expired(self) -> int:
        """Drop expired sessions. Returns count removed."""
        pass
