"""Session token service."""

import logfire

from quorum.config import AuthSettings
from quorum.util.jwt import JWTError, TokenPayload, create_token, verify_token

from .base import Service


class JWTService(Service):
    """Resolves the auth_token cookie to a user.

    The identity service issues tokens with the shared secret; the API
    only verifies them. create_token exists for tooling and tests.
    """

    def __init__(self, auth_settings: AuthSettings) -> None:
        self.auth_settings = auth_settings

    def create_token(self, user_id: str, username: str) -> str:
        return create_token(user_id, username, self.auth_settings)

    def verify_token(self, token: str) -> TokenPayload:
        """Verify a token and return its claims.

        Raises:
            JWTError: If the token is invalid or expired
        """
        try:
            payload = verify_token(token, self.auth_settings)
        except JWTError as e:
            logfire.warn("Session token rejected", reason=str(e))
            raise
        logfire.debug("Session token verified", user_id=payload.user_id)
        return payload

    def get_user_id_from_token(self, token: str | None) -> str | None:
        """Return the user id for a token, or None for anonymous requests.

        Any token that fails verification counts as anonymous; routes that
        need a user turn None into 401.
        """
        if not token:
            return None
        try:
            return self.verify_token(token).user_id
        except JWTError:
            return None
