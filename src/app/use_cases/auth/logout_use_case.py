from libs.result import Result, Return

from src.app.stores.session_store import ISessionStore
from .dtos import LogoutResponse


class LogoutUseCase:
    """Removes a session. Removing an absent token is not an error."""

    def __init__(self, session_store: ISessionStore):
        self.session_store = session_store

    async def execute(self, token: str) -> Result[LogoutResponse]:
        await self.session_store.delete(token)
        return Return.ok(LogoutResponse())
