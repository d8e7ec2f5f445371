"""Tests for password hashing and JWT helpers."""

from datetime import timedelta

import pytest
from jose import JWTError

from blog_api.core import security


def test_password_hash_roundtrip():
    hashed = security.hash_password("s3cret-pass")
    assert hashed != "s3cret-pass"
    assert security.verify_password("s3cret-pass", hashed)
    assert not security.verify_password("wrong-pass", hashed)


def test_verify_password_rejects_malformed_hash():
    assert security.verify_password("anything", "not-a-bcrypt-hash") is False


def test_access_token_carries_subject_and_claims():
    token = security.create_access_token(42, {"email": "a@example.com"})
    payload = security.decode_token(token, security.ACCESS_TOKEN_TYPE)
    assert payload["sub"] == "42"
    assert payload["email"] == "a@example.com"
    assert payload["type"] == "access"


def test_decode_rejects_wrong_token_type():
    token = security.create_refresh_token(7)
    with pytest.raises(JWTError):
        security.decode_token(token, security.ACCESS_TOKEN_TYPE)


def test_decode_rejects_expired_token():
    token = security.create_token(7, security.REFRESH_TOKEN_TYPE, timedelta(seconds=-10))
    with pytest.raises(JWTError):
        security.decode_token(token, security.REFRESH_TOKEN_TYPE)


def test_decode_rejects_tampered_token():
    token = security.create_access_token(7)
    with pytest.raises(JWTError):
        security.decode_token(token[:-2] + ("AA" if token[-2:] != "AA" else "BB"), "access")
