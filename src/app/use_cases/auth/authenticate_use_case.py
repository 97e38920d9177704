"""
Authenticate Use Case

Resolves a bearer token to the active portal user behind it.
"""

import logging

from libs.result import Error, Result, Return

from src.app.services.unit_of_work import UnitOfWork
from src.app.stores.session_store import ISessionStore
from .dtos import Identity

logger = logging.getLogger(__name__)

UNAUTHORIZED = Error("UNAUTHORIZED", "Unauthorized")


class AuthenticateUseCase:
    """
    Use case backing every protected route.

    Business Rules:
    - Unknown or expired token -> UNAUTHORIZED
    - The user is re-fetched on every call, never cached
    - A missing or inactive user invalidates the session retroactively:
      every session of that user is evicted and the call fails
    """

    def __init__(self, uow: UnitOfWork, session_store: ISessionStore):
        self.uow = uow
        self.session_store = session_store

    async def execute(self, token: str) -> Result[Identity]:
        if not token:
            return Return.err(UNAUTHORIZED)

        session = await self.session_store.get(token)
        if session is None:
            return Return.err(UNAUTHORIZED)

        async with self.uow:
            user = await self.uow.users.get_by_id(session.user_id)

            if user is not None and user.is_active:
                return Return.ok(
                    Identity(
                        token=token,
                        user_id=user.id,
                        email=user.email,
                        role=user.role.value,
                        company_id=user.company_id,
                    )
                )

        evicted = await self.session_store.delete_all_for_user(session.user_id)
        logger.info(f"Evicted {evicted} session(s) of invalid user {session.user_id}")
        return Return.err(UNAUTHORIZED)
