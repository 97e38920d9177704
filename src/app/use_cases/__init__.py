"""
Use Cases

Organized by workflow:
- signup/: three-step client onboarding
- auth/: login, authentication gate, logout
- company/: the caller's company profile
"""

from .signup import (
    StartSignupUseCase,
    CaptureCompanyUseCase,
    ConfirmOrderUseCase,
    OrderPricing,
)
from .auth import (
    LoginUseCase,
    AuthenticateUseCase,
    LogoutUseCase,
)
from .company import GetCompanyUseCase

__all__ = [
    # Signup
    "StartSignupUseCase",
    "CaptureCompanyUseCase",
    "ConfirmOrderUseCase",
    "OrderPricing",
    # Auth
    "LoginUseCase",
    "AuthenticateUseCase",
    "LogoutUseCase",
    # Company
    "GetCompanyUseCase",
]
