"""Token generation protocol (port).

Issues and validates signed bearer tokens carrying identity and role claims.
Implemented by ``src.infrastructure.security.JWTService``.
"""

from typing import Any, Protocol
from uuid import UUID

from src.core.result import Result


class TokenGenerationProtocol(Protocol):
    """Access token issuance and validation interface."""

    @property
    def expires_in_seconds(self) -> int:
        """Validity window of issued tokens, in seconds."""
        ...

    def generate_access_token(
        self,
        user_id: UUID,
        user_name: str,
        email: str,
        roles: list[str],
    ) -> str:
        """Generate a signed access token.

        Args:
            user_id: Subject of the token.
            user_name: Login name (``name`` claim).
            email: Email address (``email`` claim).
            roles: Role names held at issuance (``roles`` claim).

        Returns:
            Encoded token string.
        """
        ...

    def validate_access_token(self, token: str) -> Result[dict[str, Any], str]:
        """Validate signature, issuer, audience and expiry.

        Args:
            token: Encoded token string.

        Returns:
            Success with the decoded claims, or Failure with an error reason.
        """
        ...
