# backend/tests/test_security.py
from datetime import datetime, timedelta, timezone
import pytest
from jose import jwt
from laundry_pos.core.config import settings
from laundry_pos.core.security import (
    InvalidToken, create_access_token, decode_access_token, get_password, verify_password
)


def test_token_carries_identity_and_role():
    token = create_access_token("652f1c2e9b1e8a0a1c2b3d4e", "sari", "staff")

    payload = decode_access_token(token)

    assert payload.id == "652f1c2e9b1e8a0a1c2b3d4e"
    assert payload.username == "sari"
    assert payload.role == "staff"


def test_token_expires_after_24_hours():
    before = datetime.now(timezone.utc)
    token = create_access_token("652f1c2e9b1e8a0a1c2b3d4e", "sari", "staff")

    payload = decode_access_token(token)

    expires_at = datetime.fromtimestamp(payload.exp, tz=timezone.utc)
    lifetime = expires_at - before
    assert timedelta(hours=24) - timedelta(seconds=5) <= lifetime <= timedelta(hours=24) + timedelta(seconds=5)


def test_expired_token_is_rejected():
    token = create_access_token("id", "sari", "staff", expires_delta=timedelta(seconds=-1))

    with pytest.raises(InvalidToken):
        decode_access_token(token)


def test_token_signed_with_another_secret_is_rejected():
    token = create_access_token("id", "sari", "admin", secret="old-secret")

    with pytest.raises(InvalidToken):
        decode_access_token(token, secret="rotated-secret")


def test_token_from_before_rotation_fails_against_current_secret():
    token = create_access_token("id", "sari", "admin", secret="previous-" + settings.JWT_SECRET)

    with pytest.raises(InvalidToken):
        decode_access_token(token)


def test_garbage_token_is_rejected():
    with pytest.raises(InvalidToken):
        decode_access_token("not-a-jwt")


def test_token_without_role_claim_is_rejected():
    expire = datetime.now(timezone.utc) + timedelta(hours=1)
    token = jwt.encode({"id": "x", "username": "sari", "exp": expire}, settings.JWT_SECRET, algorithm="HS256")

    with pytest.raises(InvalidToken):
        decode_access_token(token)


def test_token_without_expiry_is_rejected():
    token = jwt.encode({"id": "x", "username": "sari", "role": "admin"}, settings.JWT_SECRET, algorithm="HS256")

    with pytest.raises(InvalidToken):
        decode_access_token(token)


def test_password_hash_is_one_way_and_verifiable():
    hashed = get_password("rahasia123")

    assert hashed != "rahasia123"
    assert verify_password("rahasia123", hashed)
    assert not verify_password("salah", hashed)
