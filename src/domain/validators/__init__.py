"""Validators package exports."""

from src.domain.validators.functions import (
    validate_email,
    validate_strong_password,
    validate_user_name,
)

__all__ = [
    "validate_email",
    "validate_strong_password",
    "validate_user_name",
]
