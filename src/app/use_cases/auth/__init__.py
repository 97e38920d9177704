"""
Authentication Use Cases

Login, per-request authentication and logout over the session store.
"""

from .login_use_case import LoginUseCase
from .authenticate_use_case import AuthenticateUseCase
from .logout_use_case import LogoutUseCase
from .dtos import Identity, LoginResponse, LogoutResponse, MeResponse, UserInfo

__all__ = [
    # Use Cases
    "LoginUseCase",
    "AuthenticateUseCase",
    "LogoutUseCase",
    # DTOs
    "Identity",
    "LoginResponse",
    "LogoutResponse",
    "MeResponse",
    "UserInfo",
]
