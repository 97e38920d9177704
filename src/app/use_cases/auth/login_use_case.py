"""
Login Use Case

Verifies portal credentials and issues an opaque session token.
"""

import logging

from libs.result import Error, Result, Return

from config import ApplicationConfig
from src.app.services.credentials import burn_password_check, verify_password
from src.app.services.unit_of_work import UnitOfWork
from src.app.stores.session_store import ISessionStore
from src.domain.validation import normalize_lower
from .dtos import LoginResponse

logger = logging.getLogger(__name__)

UNAUTHORIZED = Error("UNAUTHORIZED", "Unauthorized")


class LoginUseCase:
    """
    Use case for user login and session issuance.

    Business Rules:
    - Email is matched case-insensitively (stored lowercase)
    - Unknown email, inactive user and wrong password all give the same error
    - A hash comparison is spent even when the user does not exist
    - Each login issues a new session; existing sessions stay valid
    """

    def __init__(
        self,
        uow: UnitOfWork,
        session_store: ISessionStore,
        redirect_url: str = ApplicationConfig.LOGIN_REDIRECT_URL,
    ):
        self.uow = uow
        self.session_store = session_store
        self.redirect_url = redirect_url

    async def execute(self, email: str, password: str) -> Result[LoginResponse]:
        """
        Execute login use case.

        Args:
            email: User email, any case
            password: Plain text password

        Returns:
            Result with LoginResponse containing the session token, or Error
        """
        email = normalize_lower(email)
        password = password or ""

        async with self.uow:
            user = await self.uow.users.get_by_email(email) if email else None

            if user is None:
                burn_password_check(password)
                return Return.err(UNAUTHORIZED)

            if not verify_password(password, user.password_hash):
                logger.info(f"Login rejected for {email}: wrong password")
                return Return.err(UNAUTHORIZED)

            if not user.is_active:
                logger.info(f"Login rejected for {email}: user inactive")
                return Return.err(UNAUTHORIZED)

            user_id = user.id

        await self.session_store.purge_expired()
        session = await self.session_store.create(user_id)
        logger.info(f"User {user_id} logged in")

        return Return.ok(LoginResponse(token=session.token, redirect_url=self.redirect_url))
