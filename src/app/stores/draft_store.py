from abc import ABC, abstractmethod
from typing import Any, Mapping

from libs.result import Result
from src.domain.entities import SignupDraft


class ISignupDraftStore(ABC):
    """
    Signup draft store interface - application layer

    Holds uncommitted signups keyed by signup token. Implementations must
    make every check-then-mutate operation indivisible: two concurrent
    commit_and_remove calls for one token never both receive the draft.

    Error codes:
    - SIGNUP_SESSION_EXPIRED: token unknown, expired or already committed
    - INVALID_SIGNUP_CREDENTIALS: email/password do not match the draft
    - INVALID_SIGNUP_STATE: token used out of sequence
    - VALIDATION_ERROR: company fields rejected
    """

    @abstractmethod
    async def begin(self, email: str, password_hash: str) -> Result[SignupDraft]:
        """Create a draft in PENDING_STEP2 and return it with its new token"""
        pass

    @abstractmethod
    async def get(self, token: str) -> Result[SignupDraft]:
        """Resolve a live draft"""
        pass

    @abstractmethod
    async def advance_to_step3(
        self, token: str, email: str, password: str, company_fields: Mapping[str, Any]
    ) -> Result[SignupDraft]:
        """Re-authenticate, attach the normalized company profile, move to PENDING_STEP3"""
        pass

    @abstractmethod
    async def commit_and_remove(
        self, token: str, email: str, password: str
    ) -> Result[SignupDraft]:
        """Re-authenticate, then remove and hand off a PENDING_STEP3 draft exactly once"""
        pass

    @abstractmethod
    async def restore(self, draft: SignupDraft) -> bool:
        """Put back a draft whose commit transaction rolled back"""
        pass

    @abstractmethod
    async def purge_expired(self) -> int:
        """Drop expired drafts. Returns count removed."""
        pass
