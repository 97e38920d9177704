import pytest
from sqlalchemy.exc import IntegrityError

from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.domain.entities import Company, PortalUser


def make_company(code="ACME-1234"):
    return Company(
        company_code=code,
        name="ACME",
        enterprise_number="BE0123456789",
        contact_first_name="ANN",
        contact_last_name="PEETERS",
        registered_contact_person="ANN PEETERS",
        delivery_contact_person="ANN PEETERS",
        registered_street="MAIN ST",
        registered_postal_code="1000",
        registered_city="BRUSSELS",
        registered_country_code="BE",
        registered_address="MAIN ST, 1000 BRUSSELS, BE",
        delivery_street="MAIN ST",
        delivery_postal_code="1000",
        delivery_city="BRUSSELS",
        delivery_country_code="BE",
        delivery_address="MAIN ST, 1000 BRUSSELS, BE",
        billing_email="billing@acme.be",
    )


@pytest.mark.asyncio
async def test_company_lookup_by_id_and_code(db_session):
    async with SqlAlchemyUnitOfWork(db_session) as uow:
        company = await uow.companies.create(make_company())
        await uow.commit()

    async with SqlAlchemyUnitOfWork(db_session) as uow:
        assert (await uow.companies.get_by_id(company.id)).company_code == "ACME-1234"
        assert (await uow.companies.get_by_code("ACME-1234")).id == company.id
        assert await uow.companies.get_by_code("ACME-0000") is None


@pytest.mark.asyncio
async def test_duplicate_email_violates_unique_constraint(db_session):
    async with SqlAlchemyUnitOfWork(db_session) as uow:
        company = await uow.companies.create(make_company())
        await uow.users.create(
            PortalUser(company_id=company.id, email="a@x.com", password_hash="x")
        )
        await uow.commit()

    with pytest.raises(IntegrityError):
        async with SqlAlchemyUnitOfWork(db_session) as uow:
            await uow.users.create(
                PortalUser(company_id=company.id, email="a@x.com", password_hash="y")
            )
            await uow.commit()


@pytest.mark.asyncio
async def test_uncommitted_work_is_rolled_back(db_session):
    async with SqlAlchemyUnitOfWork(db_session) as uow:
        await uow.companies.create(make_company("DRAFT-0001"))

    async with SqlAlchemyUnitOfWork(db_session) as uow:
        assert await uow.companies.get_by_code("DRAFT-0001") is None
