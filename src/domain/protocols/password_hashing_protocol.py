"""Password hashing protocol (port).

Infrastructure provides the concrete adapter (``BcryptPasswordService``).
The auth handlers only see this interface, so unit tests can pass a Mock.
"""

from typing import Protocol


class PasswordHashingProtocol(Protocol):
    """Password hashing and verification interface.

    Usage:
        password_hash = password_service.hash_password("Str0ng!Pass")
        ok = password_service.verify_password("Str0ng!Pass", password_hash)
    """

    def hash_password(self, password: str) -> str:
        """Hash a plaintext password (random salt, one-way).

        Args:
            password: Plaintext password to hash.

        Returns:
            Hashed password string.
        """
        ...

    def verify_password(self, password: str, password_hash: str) -> bool:
        """Verify a plaintext password against a stored hash.

        Args:
            password: Plaintext password to verify.
            password_hash: Hash loaded from the credential store.

        Returns:
            True if password matches hash, False otherwise (including
            malformed hashes).
        """
        ...
