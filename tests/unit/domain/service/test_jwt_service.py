"""Unit tests for JWTService."""

from datetime import datetime, timedelta, timezone

import jwt
import pytest

from blog.config import AuthSettings
from blog.domain.service import JWTService
from blog.domain.value import UserId
from blog.util.jwt import JWTError


@pytest.fixture
def jwt_service() -> JWTService:
    return JWTService(AuthSettings(jwt_secret="test-secret"))


class TestJWTService:
    """Tests for token creation and verification."""

    def test_round_trip_returns_user(self, jwt_service):
        """A freshly issued token resolves to its user."""
        # Arrange
        token = jwt_service.create_token(UserId(42), "Ada")

        # Act
        payload = jwt_service.verify_token(token)

        # Assert
        assert payload.user_id == 42
        assert payload.name == "Ada"
        assert jwt_service.get_user_id_from_token(token) == 42

    def test_expired_token_is_rejected(self, jwt_service):
        """Expired tokens raise JWTError and read as anonymous."""
        # Arrange
        token = jwt.encode(
            {
                "user_id": 1,
                "name": "Ada",
                "exp": datetime.now(timezone.utc) - timedelta(minutes=1),
            },
            "test-secret",
            algorithm="HS256",
        )

        # Act & Assert
        with pytest.raises(JWTError, match="expired"):
            jwt_service.verify_token(token)
        assert jwt_service.get_user_id_from_token(token) is None

    def test_token_signed_with_other_secret_is_rejected(self, jwt_service):
        """Tokens from another issuer are treated as anonymous."""
        # Arrange
        other = JWTService(AuthSettings(jwt_secret="someone-else"))
        token = other.create_token(UserId(1), "Mallory")

        # Act & Assert
        with pytest.raises(JWTError, match="Invalid"):
            jwt_service.verify_token(token)

    @pytest.mark.parametrize("token", [None, "", "garbage"])
    def test_missing_or_malformed_token_is_anonymous(self, jwt_service, token):
        """No usable token means no user."""
        assert jwt_service.get_user_id_from_token(token) is None
