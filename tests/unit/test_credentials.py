import bcrypt
import pytest

from config import ApplicationConfig
from src.app.services import credentials
from src.app.services.credentials import (
    burn_password_check,
    hash_password,
    reauthenticate,
    verify_password,
)
from src.domain.base import utcnow
from src.domain.entities import SignupDraft


def cost_factor(password_hash: str) -> int:
    # $2b$<rounds>$<salt+hash>
    return int(password_hash.split("$")[2])


@pytest.fixture
def checked_hashes(monkeypatch):
    seen = []
    real_checkpw = bcrypt.checkpw

    def recording_checkpw(password, hashed):
        seen.append(hashed.decode("utf-8"))
        return real_checkpw(password, hashed)

    monkeypatch.setattr(credentials.bcrypt, "checkpw", recording_checkpw)
    return seen


def test_hash_password_uses_configured_rounds(monkeypatch):
    monkeypatch.setattr(ApplicationConfig, "BCRYPT_ROUNDS", 5)

    password_hash = hash_password("longpass1")

    assert cost_factor(password_hash) == 5
    assert verify_password("longpass1", password_hash)
    assert not verify_password("longpass2", password_hash)


def test_verify_password_malformed_hash():
    assert verify_password("longpass1", "not-a-bcrypt-hash") is False


def test_burn_password_check_costs_as_much_as_a_real_check(monkeypatch, checked_hashes):
    monkeypatch.setattr(ApplicationConfig, "BCRYPT_ROUNDS", 5)
    real_hash = hash_password("longpass1")

    burn_password_check("longpass1")

    assert len(checked_hashes) == 1
    assert cost_factor(checked_hashes[0]) == cost_factor(real_hash) == 5


def test_reauthenticate_with_wrong_email_burns_a_full_cost_check(checked_hashes):
    draft = SignupDraft(
        token="t",
        email="a@x.com",
        password_hash=hash_password("longpass1"),
        created_at=utcnow(),
        expires_at=utcnow(),
    )

    assert reauthenticate(draft, "b@x.com", "longpass1") is False
    assert cost_factor(checked_hashes[0]) == ApplicationConfig.BCRYPT_ROUNDS

    assert reauthenticate(draft, " A@X.com ", "longpass1") is True
