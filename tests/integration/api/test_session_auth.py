import pytest
from httpx import AsyncClient
from sqlmodel import select

from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.domain.entities import PortalUser


async def login(client, credentials):
    return await client.post(
        "/api/login",
        json={"email": credentials["email"], "password": credentials["password"]},
    )


@pytest.mark.asyncio
async def test_login_me_logout(client: AsyncClient, signed_up, db_session):
    """Login issues a token that resolves on /me until logout"""
    response = await login(client, signed_up)
    assert response.status_code == 200
    data = response.json()
    assert data["ok"] is True
    assert data["redirectUrl"] == "/app"
    headers = {"Authorization": f"Bearer {data['token']}"}

    response = await client.get("/api/me", headers=headers)
    assert response.status_code == 200
    user = response.json()["user"]
    stored = (await db_session.exec(select(PortalUser))).one()
    assert user["id"] == str(stored.id)
    assert user["email"] == "a@x.com"
    assert user["role"] == "admin"
    assert user["companyId"] == str(stored.company_id)

    response = await client.post("/api/logout", headers=headers)
    assert response.status_code == 200
    assert response.json() == {"ok": True}

    response = await client.get("/api/me", headers=headers)
    assert response.status_code == 401


@pytest.mark.asyncio
async def test_login_is_case_insensitive(client: AsyncClient, signed_up):
    response = await login(client, {"email": "A@X.COM", "password": signed_up["password"]})

    assert response.status_code == 200


@pytest.mark.asyncio
async def test_login_wrong_password(client: AsyncClient, signed_up):
    response = await login(client, {"email": signed_up["email"], "password": "wrongpass"})

    assert response.status_code == 401
    assert response.json()["ok"] is False
    assert response.json() == {"ok": False, "error": "Unauthorized", "code": "UNAUTHORIZED"}


@pytest.mark.asyncio
async def test_login_unknown_email(client: AsyncClient):
    response = await login(client, {"email": "ghost@x.com", "password": "longpass1"})

    assert response.status_code == 401
    assert response.json()["code"] == "UNAUTHORIZED"


@pytest.mark.asyncio
async def test_me_without_token(client: AsyncClient):
    response = await client.get("/api/me")

    assert response.status_code == 401
    assert response.json() == {"ok": False, "error": "Unauthorized", "code": "UNAUTHORIZED"}


@pytest.mark.asyncio
async def test_me_with_unknown_token(client: AsyncClient):
    response = await client.get("/api/me", headers={"Authorization": "Bearer bogus"})

    assert response.status_code == 401
    assert response.json()["error"] == "Unauthorized"


@pytest.mark.asyncio
async def test_logout_without_token(client: AsyncClient):
    response = await client.post("/api/logout")

    assert response.status_code == 401


async def set_active(db_session, is_active):
    async with SqlAlchemyUnitOfWork(db_session) as uow:
        user = await uow.users.get_by_email("a@x.com")
        user.is_active = is_active
        db_session.add(user)
        await uow.commit()


@pytest.mark.asyncio
async def test_deactivated_user_loses_session(client: AsyncClient, signed_up, db_session):
    """A session stops resolving as soon as its user is deactivated"""
    token = (await login(client, signed_up)).json()["token"]
    headers = {"Authorization": f"Bearer {token}"}
    assert (await client.get("/api/me", headers=headers)).status_code == 200

    await set_active(db_session, False)

    response = await client.get("/api/me", headers=headers)
    assert response.status_code == 401

    # Reactivating does not bring the evicted session back
    await set_active(db_session, True)
    assert (await client.get("/api/me", headers=headers)).status_code == 401

    # Login works again once reactivated
    assert (await login(client, signed_up)).status_code == 200


@pytest.mark.asyncio
async def test_health(client: AsyncClient):
    response = await client.get("/api/health")

    assert response.status_code == 200
    assert response.json() == {"ok": True}


@pytest.mark.asyncio
async def test_company_of_logged_in_user(client: AsyncClient, signed_up, db_session):
    token = (await login(client, signed_up)).json()["token"]

    response = await client.get("/api/company", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 200
    data = response.json()
    assert data["ok"] is True
    company = data["company"]
    stored = (await db_session.exec(select(PortalUser))).one()
    assert company["id"] == str(stored.company_id)
    assert company["name"] == "ACME LOGISTICS"
    assert company["companyCode"].startswith("ACMELOGI-")
    assert company["registeredStreet"] == "MAIN ST"
    assert company["registeredCountryCode"] == "BE"
    assert company["registeredAddress"] == "MAIN ST, 1000 BRUSSELS, BE"
    assert company["deliveryAddress"] == company["registeredAddress"]
    assert company["billingEmail"] == "billing@acme.be"
    assert company["estimatedUserCount"] == 12


@pytest.mark.asyncio
async def test_company_requires_token(client: AsyncClient):
    response = await client.get("/api/company")

    assert response.status_code == 401
    assert response.json() == {"ok": False, "error": "Unauthorized", "code": "UNAUTHORIZED"}
