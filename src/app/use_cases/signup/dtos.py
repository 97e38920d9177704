"""
Signup Use Case DTOs (Data Transfer Objects)

Commands are built by the API layer from validated request records.
Responses are returned to the API layer and serialized as-is.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel

from ..base_dto import ResponseModel


# ============================================================================
# Commands
# ============================================================================


class StartSignupCommand(BaseModel):
    """Step 1 - credential creation"""

    email: str
    password: str
    password_confirm: str


class CaptureCompanyCommand(BaseModel):
    """Step 2 - company profile capture, with re-authentication"""

    signup_token: str
    email: str
    password: str
    company_fields: Dict[str, Any]


class ConfirmOrderCommand(BaseModel):
    """Step 3 - order confirmation, with re-authentication"""

    signup_token: str
    email: str
    password: str
    extra_plates: Optional[Any] = None
    sales_terms: bool = False


# ============================================================================
# Responses
# ============================================================================


class StartSignupResponse(ResponseModel):
    signup_token: str


class CaptureCompanyResponse(ResponseModel):
    pass


class OrderSummary(ResponseModel):
    """Computed order; nothing is charged"""

    startup_fee_excl_vat: float
    extra_plates_qty: int
    extra_plate_price_excl_vat: float
    total_today_excl_vat: float
    monthly_excl_vat: float


class CreatedIds(ResponseModel):
    user_id: str
    company_id: str


class ConfirmOrderResponse(ResponseModel):
    redirect_url: str
    order: OrderSummary
    created: CreatedIds
