"""Bcrypt password hashing service (adapter).

This service implements the PasswordHashingProtocol using bcrypt.

Architecture:
    - Implements PasswordHashingProtocol (no inheritance required)
    - Injected via dependency container (cost factor from settings)

Security:
    - Random salt per hash, constant-time verification
    - bcrypt only reads the first 72 bytes of a password; longer input is
      truncated identically on hash and verify
"""

import bcrypt

BCRYPT_MAX_BYTES = 72


class BcryptPasswordService:
    """Bcrypt password hashing service.

    Usage:
        from src.core.container import get_password_service

        password_service = get_password_service()
        password_hash = password_service.hash_password("SecurePass123!")
        is_valid = password_service.verify_password("SecurePass123!", password_hash)
    """

    def __init__(self, cost_factor: int = 12) -> None:
        """Initialize bcrypt password service.

        Args:
            cost_factor: Bcrypt cost factor (default: 12).
                Logarithmic: each +1 doubles computation time. Tests use 4.

        Raises:
            ValueError: If cost_factor is outside bcrypt's range (4-31).
        """
        if not 4 <= cost_factor <= 31:
            msg = "Cost factor must be between 4 and 31"
            raise ValueError(msg)

        self._cost_factor = cost_factor

    def hash_password(self, password: str) -> str:
        """Hash a plaintext password using bcrypt.

        Returns:
            Hashed password string (bcrypt format: $2b$12$...).

        Example:
            >>> service = BcryptPasswordService(cost_factor=4)
            >>> service.hash_password("SecurePass123!") != service.hash_password("SecurePass123!")
            True
        """
        salt = bcrypt.gensalt(rounds=self._cost_factor)
        password_hash = bcrypt.hashpw(self._encode(password), salt)
        return password_hash.decode("utf-8")

    def verify_password(self, password: str, password_hash: str) -> bool:
        """Verify a plaintext password against a bcrypt hash.

        Returns:
            True if password matches hash, False otherwise (including
            malformed hashes).
        """
        try:
            return bcrypt.checkpw(self._encode(password), password_hash.encode("utf-8"))
        except (ValueError, AttributeError):
            # Invalid hash format; fail closed
            return False

    @staticmethod
    def _encode(password: str) -> bytes:
        return password.encode("utf-8")[:BCRYPT_MAX_BYTES]
