"""JWT token service (adapter).

This service implements the TokenGenerationProtocol using PyJWT with HMAC-SHA256.

Architecture:
    - Implements TokenGenerationProtocol (no inheritance required)
    - Structural typing via Protocol
    - Injected via dependency container

Security:
    - HMAC-SHA256 (HS256) algorithm
    - 256-bit secret key minimum
    - Issuer and audience pinned from settings
    - Unique JWT ID (jti) per token

Tokens are stateless: validation needs no database lookup, and a token
stays valid until ``exp`` even after logout.
"""

from datetime import UTC, datetime, timedelta
from typing import Any
from uuid import UUID

import jwt
from jwt.exceptions import ExpiredSignatureError, InvalidTokenError
from uuid_extensions import uuid7

from src.core.result import Failure, Result, Success

TOKEN_EXPIRED = "token_expired"
TOKEN_INVALID = "token_invalid"


class JWTService:
    """JWT token generation and validation service.

    Usage:
        from src.core.container import get_token_service

        token_service = get_token_service()
        token = token_service.generate_access_token(
            user_id=user.id,
            user_name=user.user_name,
            email=user.email,
            roles=user.roles,
        )
        result = token_service.validate_access_token(token)
    """

    def __init__(
        self,
        secret_key: str,
        issuer: str,
        audience: str,
        expiration_minutes: int = 60,
    ) -> None:
        """Initialize JWT service.

        Args:
            secret_key: Secret key for HMAC-SHA256 signing.
                MUST be at least 256 bits (32 bytes) for security.
            issuer: Value of the ``iss`` claim, required on validation.
            audience: Value of the ``aud`` claim, required on validation.
            expiration_minutes: Token lifetime in minutes (default: 60).

        Raises:
            ValueError: If secret_key is too short (< 32 bytes).
        """
        if len(secret_key) < 32:
            msg = "JWT secret key must be at least 32 bytes (256 bits)"
            raise ValueError(msg)

        self._secret_key = secret_key
        self._issuer = issuer
        self._audience = audience
        self._expiration_minutes = expiration_minutes
        self._algorithm = "HS256"  # HMAC-SHA256

    @property
    def expires_in_seconds(self) -> int:
        return self._expiration_minutes * 60

    def generate_access_token(
        self,
        user_id: UUID,
        user_name: str,
        email: str,
        roles: list[str],
    ) -> str:
        """Generate JWT access token.

        Args:
            user_id: User's unique identifier (``sub``).
            user_name: Login name (``name``).
            email: User's email address.
            roles: Role names currently held.

        Returns:
            JWT access token string.

        Example:
            >>> service = JWTService("x" * 32, issuer="poseidon-api", audience="clients")
            >>> token = service.generate_access_token(
            ...     user_id=uuid7(),
            ...     user_name="jdoe",
            ...     email="user@example.com",
            ...     roles=["Admin"],
            ... )
            >>> len(token.split("."))
            3
        """
        now = datetime.now(UTC)
        expires_at = now + timedelta(minutes=self._expiration_minutes)

        payload = {
            "sub": str(user_id),  # Subject (user ID)
            "name": user_name,
            "email": email,
            "roles": list(roles),
            "iss": self._issuer,
            "aud": self._audience,
            "iat": int(now.timestamp()),  # Issued at
            "exp": int(expires_at.timestamp()),  # Expires at
            "jti": str(uuid7()),  # JWT ID (unique identifier)
        }

        token: str = jwt.encode(payload, self._secret_key, algorithm=self._algorithm)
        return token

    def validate_access_token(self, token: str) -> Result[dict[str, Any], str]:
        """Validate JWT access token and extract payload.

        Checks signature, expiry, issuer and audience. ``sub`` and ``exp``
        must be present.

        Returns:
            Success with the claims, or Failure with ``token_expired`` /
            ``token_invalid``.

        Example:
            >>> match service.validate_access_token(token):
            ...     case Success(value=payload):
            ...         user_id = payload["sub"]
            ...     case Failure(error=error):
            ...         pass
        """
        try:
            payload: dict[str, Any] = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self._algorithm],
                issuer=self._issuer,
                audience=self._audience,
                options={"require": ["exp", "sub", "iss", "aud"]},
            )
            return Success(value=payload)

        except ExpiredSignatureError:
            return Failure(error=TOKEN_EXPIRED)
        except InvalidTokenError:
            # Bad signature, wrong issuer/audience, or malformed
            return Failure(error=TOKEN_INVALID)
