"""
Company Use Case DTOs (Data Transfer Objects)
"""

from datetime import datetime
from typing import Optional

from ..base_dto import ResponseModel


class CompanyInfo(ResponseModel):
    """Company profile as captured at signup"""

    id: str
    company_code: str
    name: str
    enterprise_number: str
    website: Optional[str] = None
    estimated_user_count: int

    contact_first_name: Optional[str] = None
    contact_last_name: Optional[str] = None
    contact_phone: Optional[str] = None
    registered_contact_person: Optional[str] = None
    delivery_contact_person: Optional[str] = None

    registered_street: str
    registered_box: Optional[str] = None
    registered_postal_code: str
    registered_city: str
    registered_country_code: str
    registered_address: str

    delivery_street: str
    delivery_box: Optional[str] = None
    delivery_postal_code: str
    delivery_city: str
    delivery_country_code: str
    delivery_address: str

    billing_email: str
    billing_reference: Optional[str] = None

    created_at: Optional[datetime] = None


class CompanyResponse(ResponseModel):
    """GET /company response payload"""

    company: CompanyInfo
