import asyncio
import logging
from datetime import datetime, timedelta
from typing import Callable, Dict, Optional
from uuid import UUID

from src.app.stores.session_store import ISessionStore
from src.domain.base import generate_token, utcnow
from src.domain.entities import Session

logger = logging.getLogger(__name__)


class InMemorySessionStore(ISessionStore):
    """Process-local session store guarded by a single asyncio.Lock"""

    def __init__(
        self,
        ttl: timedelta = timedelta(hours=24),
        clock: Callable[[], datetime] = utcnow,
    ):
        self._ttl = ttl
        self._clock = clock
        self._sessions: Dict[str, Session] = {}
        self._lock = asyncio.Lock()

    def __len__(self) -> int:
        return len(self._sessions)

    async def create(self, user_id: UUID) -> Session:
        now = self._clock()
        session = Session(
            token=generate_token(),
            user_id=user_id,
            created_at=now,
            expires_at=now + self._ttl,
        )
        async with self._lock:
            self._sessions[session.token] = session
        return session.model_copy()

    async def get(self, token: str) -> Optional[Session]:
        async with self._lock:
            session = self._sessions.get(token)
            if session is None:
                return None
            if session.is_expired(self._clock()):
                del self._sessions[token]
                return None
            return session.model_copy()

    async def delete(self, token: str) -> bool:
        async with self._lock:
            return self._sessions.pop(token, None) is not None

    async def delete_all_for_user(self, user_id: UUID) -> int:
        async with self._lock:
            tokens = [t for t, s in self._sessions.items() if s.user_id == user_id]
            for token in tokens:
                del self._sessions[token]
        return len(tokens)

    async def purge_expired(self) -> int:
        now = self._clock()
        async with self._lock:
            expired = [t for t, s in self._sessions.items() if s.is_expired(now)]
            for token in expired:
                del self._sessions[token]
        if expired:
            logger.info(f"Purged {len(expired)} expired session(s)")
        return len(expired)
