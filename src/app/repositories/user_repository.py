from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from src.domain.entities import PortalUser


class IUserRepository(ABC):
    """Portal user repository interface - application layer"""

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[PortalUser]:
        """Get user by normalized (lowercase) email address"""
        pass

    @abstractmethod
    async def get_by_id(self, user_id: UUID) -> Optional[PortalUser]:
        """Get user by ID"""
        pass

    @abstractmethod
    async def create(self, user: PortalUser) -> PortalUser:
        """Create a new user"""
        pass
