from typing import Optional

from fastapi import Depends, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from libs.result import Error
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.api.error import ClientError
from src.app.services.unit_of_work import UnitOfWork
from src.app.stores.draft_store import ISignupDraftStore
from src.app.stores.session_store import ISessionStore
from src.app.use_cases.auth import AuthenticateUseCase, Identity

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)

# auto_error=False: a missing header must give our 401 body, not FastAPI's 403
security = HTTPBearer(auto_error=False)


async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


def get_draft_store(request: Request) -> ISignupDraftStore:
    return request.app.state.draft_store


def get_session_store(request: Request) -> ISessionStore:
    return request.app.state.session_store


async def get_current_identity(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    uow: UnitOfWork = Depends(get_unit_of_work),
    session_store: ISessionStore = Depends(get_session_store),
) -> Identity:
    """
    Dependency guarding protected routes.

    Resolves the bearer token from the Authorization header to an active
    portal user, re-checking the user on every request.

    Raises:
        ClientError: 401 if the token is missing, unknown, expired, or its
        user no longer exists or is inactive
    """
    token = credentials.credentials if credentials else ""

    result = await AuthenticateUseCase(uow, session_store).execute(token)
    if result.is_err():
        raise ClientError(
            Error("UNAUTHORIZED", "Unauthorized"),
            status_code=status.HTTP_401_UNAUTHORIZED,
        )

    return result.value
