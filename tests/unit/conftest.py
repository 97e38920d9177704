import pytest
from unittest.mock import AsyncMock, MagicMock

from config import ApplicationConfig


@pytest.fixture(autouse=True)
def fast_bcrypt(monkeypatch):
    monkeypatch.setattr(ApplicationConfig, "BCRYPT_ROUNDS", 4)


@pytest.fixture
def mock_uow():
    """Mock UnitOfWork with all repositories"""
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    uow.users = MagicMock()
    uow.users.get_by_email = AsyncMock(return_value=None)
    uow.users.get_by_id = AsyncMock(return_value=None)
    uow.users.create = AsyncMock(side_effect=lambda user: user)

    uow.companies = MagicMock()
    uow.companies.get_by_id = AsyncMock(return_value=None)
    uow.companies.get_by_code = AsyncMock(return_value=None)
    uow.companies.create = AsyncMock(side_effect=lambda company: company)

    return uow


@pytest.fixture
def company_fields():
    """Minimal valid step 2 profile with a Belgian registered address"""
    return {
        "company_name": "Acme Logistics",
        "enterprise_number": "be0123456789",
        "website": "acme.be",
        "employees_count": "25",
        "contact_first_name": "ann",
        "contact_last_name": "peeters",
        "contact_phone": "+32 2 123 45 67",
        "registered_street": "Main St",
        "registered_box": "",
        "registered_postal_code": "1000",
        "registered_city": "Brussels",
        "registered_country_code": "be",
        "billing_email": "Billing@Acme.be",
        "billing_reference": "po-42",
        "delivery_is_different": False,
    }
