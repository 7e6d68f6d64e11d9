"""
Signed access tokens: a compact codec plus the issuer used by the login flow.

A token is base64url(header).base64url(payload).base64url(HMAC) with padding
stripped, i.e. a JWT signed with an HMAC algorithm. The codec functions know
nothing about users; TokenIssuer maps a verified identity onto claims.
"""

import logging
from collections.abc import Callable
from datetime import UTC, datetime, timedelta
from typing import TYPE_CHECKING, Any

import jwt

from league.core.errors import AuthenticationError
from league.schemas.auth import TokenClaims, TokenSubject

if TYPE_CHECKING:
    from league.core.config import Settings

logger = logging.getLogger(__name__)

TOKEN_TYPE = "JWT"
DEFAULT_ALGORITHM = "HS256"


class InvalidTokenError(AuthenticationError):
    """Raised when a presented token is malformed, tampered with, or expired."""

    def __init__(self, message: str = "Invalid or expired token") -> None:
        super().__init__(message)


def encode(header: dict[str, Any], payload: dict[str, Any], secret: str) -> str:
    """
    Sign payload under header with secret and return the three-segment token.

    header must name its MAC algorithm under "alg"; "typ" defaults to JWT.
    Output is deterministic for a fixed header, payload, and secret.
    """
    algorithm = header.get("alg", DEFAULT_ALGORITHM)
    headers = {"typ": TOKEN_TYPE, **header, "alg": algorithm}
    return jwt.encode(payload, secret, algorithm=algorithm, headers=headers)


def decode_and_verify(
    token: str,
    secret: str,
    algorithms: list[str] | None = None,
    leeway: int = 0,
) -> dict[str, Any]:
    """
    Verify the signature and exp claim of token; return its payload.

    Raises InvalidTokenError on any malformed, tampered, or expired token.
    """
    try:
        return jwt.decode(
            token,
            secret,
            algorithms=algorithms or [DEFAULT_ALGORITHM],
            leeway=leeway,
            options={"require": ["exp"]},
        )
    except jwt.ExpiredSignatureError as e:
        raise InvalidTokenError("Token has expired") from e
    except jwt.PyJWTError as e:
        raise InvalidTokenError() from e


def _utcnow() -> datetime:
    return datetime.now(UTC)


class TokenIssuer:
    """Builds signed access tokens for verified users. Holds only injected configuration."""

    def __init__(
        self,
        secret: str,
        algorithm: str = DEFAULT_ALGORITHM,
        expire_minutes: int = 60,
        leeway_seconds: int = 0,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        if not secret:
            raise ValueError("Token signing secret must be non-empty")
        self._secret = secret
        self._algorithm = algorithm
        self._ttl = timedelta(minutes=expire_minutes)
        self._leeway = leeway_seconds
        self._clock = clock

    @classmethod
    def from_settings(cls, settings: "Settings") -> "TokenIssuer":
        return cls(
            secret=settings.JWT_SECRET.get_secret_value(),
            algorithm=settings.JWT_ALGORITHM,
            expire_minutes=settings.JWT_EXPIRE_MINUTES,
            leeway_seconds=settings.JWT_LEEWAY_SECONDS,
        )

    def issue(self, subject: TokenSubject) -> str:
        """Return a token carrying subject's id, username, and role, valid for the configured window."""
        now = self._clock()
        expires_at = now + self._ttl
        payload: dict[str, Any] = {
            "user_id": subject.user_id,
            "username": subject.username,
            "role": subject.role,
            "exp": int(expires_at.timestamp()),
            "iat": int(now.timestamp()),
        }
        header = {"typ": TOKEN_TYPE, "alg": self._algorithm}
        return encode(header, payload, self._secret)

    def verify(self, token: str) -> TokenClaims:
        """Decode a previously issued token. Raises InvalidTokenError if it is not valid now."""
        payload = decode_and_verify(
            token, self._secret, algorithms=[self._algorithm], leeway=self._leeway
        )
        try:
            return TokenClaims(
                user_id=payload["user_id"],
                username=payload["username"],
                role=payload["role"],
                exp=payload["exp"],
                iat=payload.get("iat"),
            )
        except (KeyError, ValueError) as e:
            logger.warning("Token with valid signature has an unexpected payload shape")
            raise InvalidTokenError("Invalid token payload") from e
