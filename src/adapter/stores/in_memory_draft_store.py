import asyncio
import logging
from datetime import datetime, timedelta
from typing import Any, Callable, Dict, Mapping, Optional

from libs.result import Error, Result, Return
from src.app.services.credentials import reauthenticate
from src.app.stores.draft_store import ISignupDraftStore
from src.domain.base import generate_token, utcnow
from src.domain.entities import DraftStatus, SignupDraft
from src.domain.validation import ValidationError, build_company_draft

logger = logging.getLogger(__name__)

SESSION_EXPIRED = Error("SIGNUP_SESSION_EXPIRED", "Signup session expired")
INVALID_CREDENTIALS = Error("INVALID_SIGNUP_CREDENTIALS", "Invalid signup data")
INVALID_STATE = Error("INVALID_SIGNUP_STATE", "Invalid signup data")


class InMemorySignupDraftStore(ISignupDraftStore):
    """
    Process-local draft store.

    Every operation runs under one asyncio.Lock, so lookup, checks and
    mutation form a single critical section. Drafts are copied on the way
    in and out; callers never hold a reference to stored state.
    """

    def __init__(
        self,
        ttl: timedelta = timedelta(hours=2),
        clock: Callable[[], datetime] = utcnow,
    ):
        self._ttl = ttl
        self._clock = clock
        self._drafts: Dict[str, SignupDraft] = {}
        self._lock = asyncio.Lock()

    def __len__(self) -> int:
        return len(self._drafts)

    def _live(self, token: str) -> Optional[SignupDraft]:
        """Lookup with lazy expiry. Caller holds the lock."""
        draft = self._drafts.get(token)
        if draft is None:
            return None
        if draft.is_expired(self._clock()):
            del self._drafts[token]
            logger.info(f"Signup draft {token[:8]} expired")
            return None
        return draft

    async def begin(self, email: str, password_hash: str) -> Result[SignupDraft]:
        now = self._clock()
        draft = SignupDraft(
            token=generate_token(),
            email=email,
            password_hash=password_hash,
            status=DraftStatus.pending_step2,
            created_at=now,
            expires_at=now + self._ttl,
        )
        async with self._lock:
            self._drafts[draft.token] = draft
        return Return.ok(draft.model_copy(deep=True))

    async def get(self, token: str) -> Result[SignupDraft]:
        async with self._lock:
            draft = self._live(token)
            if draft is None:
                return Return.err(SESSION_EXPIRED)
            return Return.ok(draft.model_copy(deep=True))

    async def advance_to_step3(
        self, token: str, email: str, password: str, company_fields: Mapping[str, Any]
    ) -> Result[SignupDraft]:
        async with self._lock:
            draft = self._live(token)
            if draft is None:
                return Return.err(SESSION_EXPIRED)

            if not reauthenticate(draft, email, password):
                return Return.err(INVALID_CREDENTIALS)

            if draft.status != DraftStatus.pending_step2:
                return Return.err(INVALID_STATE)

            try:
                company_draft = build_company_draft(company_fields)
            except ValidationError as exc:
                return Return.err(Error("VALIDATION_ERROR", exc.reason))

            advanced = draft.model_copy(
                update={"status": DraftStatus.pending_step3, "company_draft": company_draft}
            )
            self._drafts[token] = advanced
            return Return.ok(advanced.model_copy(deep=True))

    async def commit_and_remove(
        self, token: str, email: str, password: str
    ) -> Result[SignupDraft]:
        async with self._lock:
            draft = self._live(token)
            if draft is None:
                return Return.err(SESSION_EXPIRED)

            if not reauthenticate(draft, email, password):
                return Return.err(INVALID_CREDENTIALS)

            if draft.status != DraftStatus.pending_step3 or draft.company_draft is None:
                return Return.err(INVALID_STATE)

            # Hand-off and removal are one step: nobody else can see it now
            del self._drafts[token]
            return Return.ok(draft)

    async def restore(self, draft: SignupDraft) -> bool:
        async with self._lock:
            if draft.token in self._drafts or draft.is_expired(self._clock()):
                return False
            self._drafts[draft.token] = draft.model_copy(deep=True)
            return True

    async def purge_expired(self) -> int:
        now = self._clock()
        async with self._lock:
            expired = [t for t, d in self._drafts.items() if d.is_expired(now)]
            for token in expired:
                del self._drafts[token]
        if expired:
            logger.info(f"Purged {len(expired)} expired signup draft(s)")
        return len(expired)
