"""Centralized validation functions (DRY principle).

All validation logic defined once, reused everywhere via Annotated types.
Validators are pure functions that raise ValueError on validation failure.
"""

import re

MIN_PASSWORD_LENGTH = 9
MAX_USER_NAME_LENGTH = 50

_EMAIL_PATTERN = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")
_USER_NAME_PATTERN = re.compile(r"^[A-Za-z0-9\-._@]+$")


def validate_email(v: str) -> str:
    """Validate email format.

    Args:
        v: Email address to validate.

    Returns:
        Normalized email (trimmed, lowercase).

    Raises:
        ValueError: If email format is invalid.

    Example:
        >>> validate_email("User@Example.COM")
        'user@example.com'
        >>> validate_email("invalid")
        ValueError: Invalid email format
    """
    v = v.strip()
    if not _EMAIL_PATTERN.match(v):
        raise ValueError("Invalid email format")
    return v.lower()


def validate_strong_password(v: str) -> str:
    """Validate password strength.

    Requirements:
        - At least 9 characters
        - Uppercase, lowercase and digit
        - At least one non-alphanumeric character

    Args:
        v: Password to validate.

    Returns:
        Password unchanged (validation only).

    Raises:
        ValueError: If password doesn't meet requirements.

    Example:
        >>> validate_strong_password("SecurePass123!")
        'SecurePass123!'
        >>> validate_strong_password("weak")
        ValueError: Password must be at least 9 characters
    """
    if len(v) < MIN_PASSWORD_LENGTH:
        raise ValueError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters")
    if not any(c.isupper() for c in v):
        raise ValueError("Password must contain uppercase letter")
    if not any(c.islower() for c in v):
        raise ValueError("Password must contain lowercase letter")
    if not any(c.isdigit() for c in v):
        raise ValueError("Password must contain digit")
    if all(c.isalnum() for c in v):
        raise ValueError("Password must contain a non-alphanumeric character")
    return v


def validate_user_name(v: str) -> str:
    """Validate a login name.

    Allowed characters are letters, digits and ``- . _ @``.

    Raises:
        ValueError: If empty, too long, or containing other characters.
    """
    if not v:
        raise ValueError("User name cannot be empty")
    if len(v) > MAX_USER_NAME_LENGTH:
        raise ValueError(
            f"User name must be at most {MAX_USER_NAME_LENGTH} characters"
        )
    if not _USER_NAME_PATTERN.match(v):
        raise ValueError(
            "User name may only contain letters, digits and the characters - . _ @"
        )
    return v
