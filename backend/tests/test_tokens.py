from datetime import datetime, timedelta, timezone

import pytest

from healthapp.errors import MissingCredentialError, InvalidCredentialError
from healthapp.models import Account
from healthapp.services.auth_service import (
    create_access_token, verify_access_token, hash_password, verify_password,
)

T0 = datetime(2025, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


def _token(settings, now=T0):
    return create_access_token(Account(id=42, email="user@example.com"), settings, now=now)


def test_claims_round_trip(settings):
    claims = verify_access_token(_token(settings), settings, now=T0 + timedelta(minutes=1))
    assert claims.account_id == 42
    assert claims.email == "user@example.com"
    assert claims.issued_at == T0
    assert claims.expires_at == T0 + timedelta(hours=24)


def test_token_valid_just_before_24h(settings):
    token = _token(settings)
    claims = verify_access_token(token, settings, now=T0 + timedelta(hours=23, minutes=59))
    assert claims.account_id == 42


def test_token_rejected_just_after_24h(settings):
    token = _token(settings)
    with pytest.raises(InvalidCredentialError):
        verify_access_token(token, settings, now=T0 + timedelta(hours=24, minutes=1))


def test_missing_token(settings):
    with pytest.raises(MissingCredentialError):
        verify_access_token(None, settings)
    with pytest.raises(MissingCredentialError):
        verify_access_token("", settings)


def test_garbage_token(settings):
    with pytest.raises(InvalidCredentialError):
        verify_access_token("abc.def.ghi", settings)


def test_password_hash_is_salted():
    first = hash_password("s3cret")
    second = hash_password("s3cret")
    assert first != second
    assert verify_password("s3cret", first)
    assert verify_password("s3cret", second)
    assert not verify_password("wrong", first)
