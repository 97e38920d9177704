"""
Signup Use Cases

The three-step signup workflow:
PENDING_STEP2 -> PENDING_STEP3 -> committed (draft removed).
"""

from .start_signup_use_case import StartSignupUseCase
from .capture_company_use_case import CaptureCompanyUseCase
from .confirm_order_use_case import ConfirmOrderUseCase
from .pricing import OrderPricing
from .dtos import (
    StartSignupCommand,
    CaptureCompanyCommand,
    ConfirmOrderCommand,
    StartSignupResponse,
    CaptureCompanyResponse,
    ConfirmOrderResponse,
    OrderSummary,
    CreatedIds,
)

__all__ = [
    # Use Cases
    "StartSignupUseCase",
    "CaptureCompanyUseCase",
    "ConfirmOrderUseCase",
    "OrderPricing",
    # DTOs - Commands
    "StartSignupCommand",
    "CaptureCompanyCommand",
    "ConfirmOrderCommand",
    # DTOs - Responses
    "StartSignupResponse",
    "CaptureCompanyResponse",
    "ConfirmOrderResponse",
    # DTOs - Nested Models
    "OrderSummary",
    "CreatedIds",
]
