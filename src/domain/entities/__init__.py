"""
Onboarding Domain Entities

Persisted tables (Company, PortalUser) and the process-local
records held by the draft and session stores.
"""

# Export all enums
from .enums import DraftStatus, UserRole

# Export all entities
from .company import Company
from .user import PortalUser
from .signup_draft import BillingInfo, CompanyDraft, PostalAddress, SignupDraft
from .session import Session

__all__ = [
    # Enums
    "DraftStatus",
    "UserRole",
    # Tables
    "Company",
    "PortalUser",
    # Ephemeral records
    "SignupDraft",
    "CompanyDraft",
    "PostalAddress",
    "BillingInfo",
    "Session",
]
