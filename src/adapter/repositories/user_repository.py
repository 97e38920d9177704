from typing import Optional
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.user_repository import IUserRepository
from src.domain.entities import PortalUser


class UserRepository(IUserRepository):
    """Portal user repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_email(self, email: str) -> Optional[PortalUser]:
        """Get user by email address"""
        stmt = select(PortalUser).where(PortalUser.email == email)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_id(self, user_id: UUID) -> Optional[PortalUser]:
        """Get user by ID"""
        stmt = select(PortalUser).where(PortalUser.id == user_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def create(self, user: PortalUser) -> PortalUser:
        """Create a new user. Raises IntegrityError on a duplicate email."""
        self.session.add(user)
        await self.session.flush()
        await self.session.refresh(user)
        return user
