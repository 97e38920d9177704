"""
Authentication Use Case DTOs (Data Transfer Objects)

All Command and Response classes for the session layer.
"""

from uuid import UUID

from pydantic import BaseModel

from ..base_dto import ResponseModel


class Identity(BaseModel):
    """Resolved caller of a protected route"""

    token: str
    user_id: UUID
    email: str
    role: str
    company_id: UUID


# ============================================================================
# Response DTOs
# ============================================================================


class LoginResponse(ResponseModel):
    """Response for user login use case"""

    token: str
    redirect_url: str


class LogoutResponse(ResponseModel):
    """Response for logout use case"""


class UserInfo(ResponseModel):
    """User details in /me response"""

    id: str
    email: str
    role: str
    company_id: str


class MeResponse(ResponseModel):
    """GET /me response payload"""

    user: UserInfo
