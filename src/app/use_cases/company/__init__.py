"""
Company Use Cases

Read access to the company created at the end of signup.
"""

from .get_company_use_case import GetCompanyUseCase
from .dtos import CompanyInfo, CompanyResponse

__all__ = [
    # Use Cases
    "GetCompanyUseCase",
    # DTOs
    "CompanyInfo",
    "CompanyResponse",
]
