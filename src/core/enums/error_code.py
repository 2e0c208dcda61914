"""Domain-level error codes (machine-readable).

Error codes follow ENTITY_ACTION_REASON naming convention.
Used with Result types for railway-oriented programming.

Categories:
- Validation errors (ID_MISMATCH; field errors come from the request schemas)
- Resource errors (*_NOT_FOUND)
- Conflict errors (*_ALREADY_EXISTS, *_CONFLICT)
- Authentication errors (INVALID_CREDENTIALS, ACCOUNT_LOCKED)
- Authorization errors (PERMISSION_DENIED)
"""

from enum import Enum


class ErrorCode(Enum):
    """Domain-level error codes (machine-readable).

    Error codes follow ENTITY_ACTION_REASON naming convention.
    """

    # Validation errors
    ID_MISMATCH = "id_mismatch"

    # Resource errors
    USER_NOT_FOUND = "user_not_found"
    ROLE_NOT_FOUND = "role_not_found"
    RESOURCE_NOT_FOUND = "resource_not_found"

    # Conflict errors
    USER_ALREADY_EXISTS = "user_already_exists"
    EMAIL_ALREADY_EXISTS = "email_already_exists"
    ROLE_ALREADY_EXISTS = "role_already_exists"
    RESOURCE_ALREADY_EXISTS = "resource_already_exists"
    RESOURCE_CONFLICT = "resource_conflict"

    # Authentication errors
    INVALID_CREDENTIALS = "invalid_credentials"
    ACCOUNT_LOCKED = "account_locked"

    # Authorization errors
    PERMISSION_DENIED = "permission_denied"
