"""
Tests for access-token decoding.
"""

from datetime import timedelta

import jwt
import pytest

from portfolio.auth import (
    TokenExpiredError,
    TokenInvalidError,
    create_access_token,
    decode_token,
)
from portfolio.config import Settings
from portfolio.core.utils import utc_now


@pytest.fixture
def settings():
    return Settings(jwt_secret_key="test-secret")


def sign(settings, **claims):
    return jwt.encode(claims, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)


class TestDecodeToken:
    def test_round_trip(self, settings):
        token = create_access_token("admin@my-ai.nl", "Admin", settings=settings)

        payload = decode_token(token, settings=settings)

        assert payload.sub == "admin@my-ai.nl"
        assert payload.name == "Admin"
        assert payload.type == "access"
        assert payload.exp > payload.iat

    def test_login_token_with_email_claim(self, settings):
        now = utc_now()
        token = sign(
            settings,
            email="admin@my-ai.nl",
            name="Admin",
            iat=now,
            exp=now + timedelta(days=7),
        )

        payload = decode_token(token, settings=settings)

        assert payload.sub == "admin@my-ai.nl"
        assert payload.type == "access"
        assert payload.jti == ""

    @pytest.mark.parametrize("missing", ["exp", "iat"])
    def test_missing_time_claims(self, settings, missing):
        now = utc_now()
        claims = {"sub": "a@b.c", "type": "access", "iat": now, "exp": now + timedelta(hours=1)}
        del claims[missing]

        with pytest.raises(TokenInvalidError):
            decode_token(sign(settings, **claims), settings=settings)

    def test_no_subject(self, settings):
        now = utc_now()
        token = sign(settings, type="access", iat=now, exp=now + timedelta(hours=1))

        with pytest.raises(TokenInvalidError):
            decode_token(token, settings=settings)

    def test_wrong_type(self, settings):
        now = utc_now()
        token = sign(settings, sub="a@b.c", type="refresh", iat=now, exp=now + timedelta(hours=1))

        with pytest.raises(TokenInvalidError):
            decode_token(token, settings=settings)

    def test_expired(self, settings):
        now = utc_now()
        token = sign(settings, sub="a@b.c", iat=now - timedelta(days=2), exp=now - timedelta(days=1))

        with pytest.raises(TokenExpiredError):
            decode_token(token, settings=settings)

    def test_wrong_secret(self, settings):
        token = create_access_token("admin@my-ai.nl", settings=Settings(jwt_secret_key="other"))

        with pytest.raises(TokenInvalidError):
            decode_token(token, settings=settings)
