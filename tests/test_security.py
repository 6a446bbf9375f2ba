import jwt
import pytest

from maica.core.config import settings
from maica.core.security import (
    TokenExpiredError,
    TokenValidationError,
    create_access_token,
    decode_token,
)


def test_token_roundtrip_carries_user_claims():
    token = create_access_token("abc-123", "owner@example.com")
    payload = decode_token(token)
    assert payload["userId"] == "abc-123"
    assert payload["email"] == "owner@example.com"


def test_expired_token():
    token = create_access_token("abc-123", expires_minutes=-1)
    with pytest.raises(TokenExpiredError):
        decode_token(token)


def test_wrong_secret_rejected():
    token = jwt.encode({"userId": "abc"}, "another-secret-0123456789abcdef0123", algorithm="HS256")
    with pytest.raises(TokenValidationError):
        decode_token(token)


def test_token_without_user_claim_rejected():
    token = jwt.encode({"email": "x@example.com"}, settings.JWT_SECRET, algorithm=settings.JWT_ALGORITHM)
    with pytest.raises(TokenValidationError):
        decode_token(token)


def test_prod_settings_refuse_placeholder_secret():
    from maica.core.config import ProdSettings

    with pytest.raises(ValueError):
        ProdSettings(ENV="prod", JWT_SECRET="maica_secret_key")
