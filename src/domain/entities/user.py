"""
PortalUser Entity

A client-side administrator who signs in to the portal.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from src.domain.base import utcnow
from .enums import UserRole


class PortalUser(SQLModel, table=True):
    """
    PortalUser entity - a login belonging to exactly one company.

    Business Rules:
    - Email is lowercase and unique across all users
    - Created together with its company, in the same transaction
    - Password stored as bcrypt hash
    - Inactive users cannot log in, and their sessions stop resolving
    """

    __tablename__ = "client_portal_users"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    company_id: UUID = Field(foreign_key="companies.id", nullable=False, index=True)
    email: str = Field(unique=True, index=True, max_length=255)
    password_hash: str = Field(max_length=60)  # Bcrypt output is 60 chars

    full_name: Optional[str] = Field(default=None, max_length=255)
    role: UserRole = Field(default=UserRole.admin)
    is_active: bool = Field(default=True)

    # Timestamps
    created_at: datetime = Field(
        default_factory=utcnow, sa_column=Column(DateTime(timezone=True))
    )

    __table_args__ = (Index("idx_portal_user_active", "is_active"),)
