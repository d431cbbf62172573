"""Unit tests for UserService and JWTService."""

from datetime import UTC, datetime, timedelta
from uuid import uuid4

import jwt
import pytest

from quorum.config import AuthSettings
from quorum.domain.service import JWTService, UserService
from quorum.domain.value import UserId
from quorum.persistence.repository.inmemory import InMemoryUserRepository
from quorum.util.jwt import JWTError
from tests.conftest import make_user


class TestGetDisplayName:
    """Tests for UserService.get_display_name()."""

    @pytest.mark.asyncio
    async def test_known_user(self):
        """Should return the stored username."""
        # Arrange
        user_repo = InMemoryUserRepository()
        service = UserService(user_repo)
        user = await user_repo.save(make_user("  carol "))

        # Act
        name = await service.get_display_name(user.id)

        # Assert
        assert name == "carol"

    @pytest.mark.asyncio
    async def test_unknown_or_missing_user(self):
        """Should return None when there is nobody to name."""
        service = UserService(InMemoryUserRepository())

        assert await service.get_display_name(UserId(uuid4())) is None
        assert await service.get_display_name(None) is None


class TestJWTService:
    """Tests for JWTService token verification."""

    @pytest.fixture
    def settings(self):
        """Auth settings with a test secret."""
        return AuthSettings(jwt_secret="test-secret")

    def test_round_trip_user_id(self, settings):
        """Should resolve the user ID from a token it issued."""
        service = JWTService(settings)
        user_id = str(uuid4())

        token = service.create_token(user_id, "dave")

        assert service.get_user_id_from_token(token) == user_id

    def test_foreign_secret_is_anonymous(self, settings):
        """Tokens signed with another secret resolve to nobody."""
        other = JWTService(AuthSettings(jwt_secret="other-secret"))
        token = other.create_token(str(uuid4()), "eve")

        assert JWTService(settings).get_user_id_from_token(token) is None

    def test_expired_token_raises(self, settings):
        """verify_token reports expiry as a JWTError."""
        token = jwt.encode(
            {
                "user_id": str(uuid4()),
                "username": "frank",
                "exp": datetime.now(UTC) - timedelta(days=1),
            },
            settings.jwt_secret,
            algorithm=settings.jwt_algorithm,
        )

        with pytest.raises(JWTError, match="expired"):
            JWTService(settings).verify_token(token)

    def test_missing_token(self, settings):
        """No cookie means no user."""
        assert JWTService(settings).get_user_id_from_token(None) is None

    def test_token_without_user_id_is_rejected(self, settings):
        """A validly signed token still needs the user_id claim."""
        token = jwt.encode(
            {"exp": datetime.now(UTC) + timedelta(hours=1)},
            settings.jwt_secret,
            algorithm=settings.jwt_algorithm,
        )

        with pytest.raises(JWTError, match="user_id"):
            JWTService(settings).verify_token(token)
