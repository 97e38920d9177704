from uuid import uuid4

import pytest

from src.app.use_cases.company import GetCompanyUseCase
from src.domain.entities import Company


@pytest.fixture
def company():
    return Company(
        id=uuid4(),
        company_code="ACMELOGI-1234",
        name="ACME LOGISTICS",
        enterprise_number="BE0123456789",
        website="https://acme.be",
        estimated_user_count=12,
        contact_first_name="ANN",
        contact_last_name="PEETERS",
        registered_contact_person="ANN PEETERS",
        delivery_contact_person="WAREHOUSE DESK",
        registered_street="MAIN ST",
        registered_postal_code="1000",
        registered_city="BRUSSELS",
        registered_country_code="BE",
        registered_address="MAIN ST, 1000 BRUSSELS, BE",
        delivery_street="DOCK 4",
        delivery_postal_code="2000",
        delivery_city="ANTWERPEN",
        delivery_country_code="BE",
        delivery_address="DOCK 4, 2000 ANTWERPEN, BE",
        billing_email="billing@acme.be",
        billing_reference="PO-42",
    )


@pytest.mark.asyncio
async def test_get_company_returns_profile(mock_uow, company):
    mock_uow.companies.get_by_id.return_value = company

    result = await GetCompanyUseCase(mock_uow).execute(company.id)

    assert result.is_ok()
    info = result.value.company
    assert info.id == str(company.id)
    assert info.company_code == "ACMELOGI-1234"
    assert info.registered_address == "MAIN ST, 1000 BRUSSELS, BE"
    assert info.delivery_city == "ANTWERPEN"
    assert info.registered_box is None
    mock_uow.companies.get_by_id.assert_awaited_once_with(company.id)


@pytest.mark.asyncio
async def test_get_company_serializes_camel_case(mock_uow, company):
    mock_uow.companies.get_by_id.return_value = company

    result = await GetCompanyUseCase(mock_uow).execute(company.id)

    payload = result.value.model_dump(by_alias=True)
    assert payload["ok"] is True
    assert payload["company"]["companyCode"] == "ACMELOGI-1234"
    assert payload["company"]["deliveryAddress"] == "DOCK 4, 2000 ANTWERPEN, BE"


@pytest.mark.asyncio
async def test_get_company_missing(mock_uow):
    result = await GetCompanyUseCase(mock_uow).execute(uuid4())

    assert result.is_err()
    assert result.error.code == "COMPANY_NOT_FOUND"
