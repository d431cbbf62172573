"""Session token encoding and verification.

Tokens are HS256-signed by the identity service with the shared secret and
arrive in the auth_token cookie. The API only needs user_id and exp.
"""

from datetime import UTC, datetime, timedelta

import jwt
from pydantic import BaseModel

from quorum.config import AuthSettings

REQUIRED_CLAIMS = ["exp", "user_id"]


class TokenPayload(BaseModel):
    """Claims the API reads from a session token."""

    user_id: str
    username: str = ""
    exp: datetime


class JWTError(Exception):
    """Token is missing claims, badly signed, malformed or expired."""


def create_token(user_id: str, username: str, settings: AuthSettings) -> str:
    """Issue a token the API will accept.

    The API never issues tokens itself; this is for local tooling and tests.
    """
    issued_at = datetime.now(UTC)
    claims = {
        "user_id": user_id,
        "username": username,
        "iat": issued_at,
        "exp": issued_at + timedelta(days=settings.jwt_expiry_days),
    }
    return jwt.encode(claims, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Decode a token and check its signature, expiry and required claims.

    Raises:
        JWTError: If the token cannot be trusted
    """
    try:
        claims = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            options={"require": REQUIRED_CLAIMS},
        )
    except jwt.ExpiredSignatureError as e:
        raise JWTError("Token has expired") from e
    except jwt.MissingRequiredClaimError as e:
        raise JWTError(f"Token is missing the {e.claim} claim") from e
    except jwt.InvalidTokenError as e:
        raise JWTError("Invalid token") from e
    return TokenPayload.model_validate(claims)
