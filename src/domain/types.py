"""Annotated types with centralized validation (DRY principle).

Define validation once, use everywhere.
All custom types use Pydantic's Annotated with Field constraints and AfterValidator.

Usage:
    from src.domain.types import Email, Password, UserName

    class RegisterRequest(BaseModel):
        user_name: UserName
        email: Email
        password: Password
"""

from typing import Annotated

from pydantic import AfterValidator, Field

from src.domain.validators import (
    validate_email,
    validate_strong_password,
    validate_user_name,
)

Email = Annotated[
    str,
    Field(
        min_length=5,
        max_length=255,
        description="Email address",
        examples=["user@example.com"],
    ),
    AfterValidator(validate_email),
]
"""Email address with validation and normalization.

Examples:
    >>> from pydantic import BaseModel
    >>> class UserCreate(BaseModel):
    ...     email: Email
    >>> UserCreate(email="User@Example.COM").email
    'user@example.com'
"""

Password = Annotated[
    str,
    Field(
        min_length=9,
        max_length=128,
        description="Password with strength requirements",
        examples=["SecurePass123!"],
    ),
    AfterValidator(validate_strong_password),
]
"""Password with strength validation.

Requirements:
- At least 9 characters
- At least one uppercase letter, one lowercase letter and one digit
- At least one non-alphanumeric character
"""

UserName = Annotated[
    str,
    Field(
        min_length=1,
        max_length=50,
        description="Login name (letters, digits, - . _ @)",
        examples=["jdoe"],
    ),
    AfterValidator(validate_user_name),
]
"""Login name, unique across users."""
