"""
Onboarding Domain Enums

All enumeration types used across domain entities.
"""

from enum import Enum


class DraftStatus(str, Enum):
    """Signup draft progress. Only ever advances forward."""

    pending_step2 = "PENDING_STEP2"
    pending_step3 = "PENDING_STEP3"


class UserRole(str, Enum):
    """Portal user role within their company"""

    admin = "admin"
    viewer = "viewer"
