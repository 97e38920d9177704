"""
SignupDraft Entity

In-progress, uncommitted signup kept in the draft store between steps.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from .enums import DraftStatus


class PostalAddress(BaseModel):
    """Structured address, already normalized to uppercase"""

    street: str
    box: str = ""
    postal_code: str
    city: str
    country_code: str


class BillingInfo(BaseModel):
    email: str
    reference: str = ""


class CompanyDraft(BaseModel):
    """
    Normalized company profile captured at step 2.

    delivery_address is None when the client did not ask for a distinct
    delivery address; the registered address is used instead.
    """

    company_name: str
    enterprise_number: str
    website: str = ""
    employees_count: int = 0

    contact_first_name: str
    contact_last_name: str
    contact_phone: str = ""
    contact_person: str

    registered_address: PostalAddress
    billing_info: BillingInfo

    delivery_address: Optional[PostalAddress] = None
    delivery_contact_person: str = ""

    @property
    def effective_delivery_address(self) -> PostalAddress:
        return self.delivery_address or self.registered_address

    @property
    def effective_delivery_contact(self) -> str:
        return self.delivery_contact_person or self.contact_person


class SignupDraft(BaseModel):
    """
    SignupDraft entity - keyed by an opaque signup token.

    Business Rules:
    - email is lowercase and immutable after step 1
    - status only advances: PENDING_STEP2 -> PENDING_STEP3
    - company_draft is None iff status is PENDING_STEP2
    - committing removes the draft; the token is unresolvable afterwards
    - expires_at bounds how long a signup can stay unfinished
    """

    token: str
    email: str
    password_hash: str
    status: DraftStatus = DraftStatus.pending_step2
    company_draft: Optional[CompanyDraft] = None

    created_at: datetime
    expires_at: datetime

    def is_expired(self, now: datetime) -> bool:
        return now >= self.expires_at
