from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, ConfigDict, Field

from src.api.error import AUTH_ERROR_STATUS, raise_for_error
from src.app.services.unit_of_work import UnitOfWork
from src.app.stores.session_store import ISessionStore
from src.app.use_cases.auth import (
    Identity,
    LoginResponse,
    LoginUseCase,
    LogoutResponse,
    LogoutUseCase,
)
from src.depends import get_current_identity, get_session_store, get_unit_of_work

router = APIRouter(tags=["Authentication"])


class LoginRequest(BaseModel):
    """
    Login HTTP request payload

    Email shape is not checked here: a malformed email is simply an
    unknown user and gets the same 401 as a wrong password.
    """

    model_config = ConfigDict(coerce_numbers_to_str=True)

    email: str = Field(..., description="User email address")
    password: str = Field(..., description="User password")


@router.post("/login", status_code=status.HTTP_200_OK, response_model=LoginResponse)
async def login(
    request: LoginRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    session_store: ISessionStore = Depends(get_session_store),
):
    """
    User Login

    Verifies credentials and issues an opaque bearer token.

    Raises:
        - 401 Unauthorized: unknown email, wrong password or inactive user
        - 500 Internal Server Error: Server error
    """
    use_case = LoginUseCase(uow, session_store)
    result = await use_case.execute(request.email, request.password)

    if result.is_err():
        raise_for_error(result.error, AUTH_ERROR_STATUS)

    return result.value


@router.post("/logout", status_code=status.HTTP_200_OK, response_model=LogoutResponse)
async def logout(
    identity: Identity = Depends(get_current_identity),
    session_store: ISessionStore = Depends(get_session_store),
):
    """
    User Logout

    Deletes the session behind the bearer token.

    Raises:
        - 401 Unauthorized: missing or invalid bearer token
    """
    result = await LogoutUseCase(session_store).execute(identity.token)

    if result.is_err():
        raise_for_error(result.error, AUTH_ERROR_STATUS)

    return result.value
