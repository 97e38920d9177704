"""
Password hashing and re-authentication.

Signup steps 2 and 3 require the client to resubmit email and password,
proving continued control of the credential rather than mere possession
of the signup token.
"""

from functools import lru_cache

import bcrypt

from config import ApplicationConfig
from src.domain.entities import SignupDraft
from src.domain.validation import normalize_lower


@lru_cache(maxsize=None)
def _dummy_hash(rounds: int) -> str:
    """Hash compared against when no stored hash exists, at the real cost factor"""
    return bcrypt.hashpw(b"dummy_password", bcrypt.gensalt(rounds)).decode("utf-8")


def hash_password(password: str) -> str:
    password_hash = bcrypt.hashpw(
        password.encode("utf-8"), bcrypt.gensalt(ApplicationConfig.BCRYPT_ROUNDS)
    )
    return password_hash.decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        # Malformed stored hash
        return False


def burn_password_check(password: str) -> None:
    """Spend a hash comparison when there is nothing to compare against"""
    verify_password(password, _dummy_hash(ApplicationConfig.BCRYPT_ROUNDS))


def reauthenticate(draft: SignupDraft, email: str, password: str) -> bool:
    """True when email and password match the identity that began the draft"""
    if normalize_lower(email) != draft.email:
        burn_password_check(password or "")
        return False
    return verify_password(password or "", draft.password_hash)
