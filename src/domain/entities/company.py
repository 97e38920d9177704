"""
Company Entity

A subscribing client organisation created at the end of signup.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, SQLModel

from src.domain.base import utcnow


class Company(SQLModel, table=True):
    """
    Company entity - the client organisation a portal user belongs to.

    Business Rules:
    - company_code is unique and derived from the company name
    - Display fields are stored uppercase, email and website lowercase
    - Delivery address mirrors the registered address unless overridden
    - registered_address / delivery_address are flattened display lines;
      the structured columns are the source of truth
    """

    __tablename__ = "companies"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    company_code: str = Field(unique=True, index=True, max_length=32)

    name: str = Field(max_length=255)
    enterprise_number: str = Field(max_length=64)
    website: Optional[str] = Field(default=None, max_length=255)
    estimated_user_count: int = Field(default=0)

    # Contact
    contact_first_name: Optional[str] = Field(default=None, max_length=128)
    contact_last_name: Optional[str] = Field(default=None, max_length=128)
    contact_phone: Optional[str] = Field(default=None, max_length=64)
    registered_contact_person: Optional[str] = Field(default=None, max_length=255)
    delivery_contact_person: Optional[str] = Field(default=None, max_length=255)

    # Registered address
    registered_street: str = Field(max_length=255)
    registered_box: Optional[str] = Field(default=None, max_length=32)
    registered_postal_code: str = Field(max_length=16)
    registered_city: str = Field(max_length=128)
    registered_country_code: str = Field(max_length=2)
    registered_address: str

    # Delivery address
    delivery_street: str = Field(max_length=255)
    delivery_box: Optional[str] = Field(default=None, max_length=32)
    delivery_postal_code: str = Field(max_length=16)
    delivery_city: str = Field(max_length=128)
    delivery_country_code: str = Field(max_length=2)
    delivery_address: str

    # Billing
    billing_email: str = Field(max_length=255)
    billing_reference: Optional[str] = Field(default=None, max_length=255)

    # Timestamps
    created_at: datetime = Field(
        default_factory=utcnow, sa_column=Column(DateTime(timezone=True))
    )
