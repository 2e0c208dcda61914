"""Domain protocols (ports) package.

This package contains protocol definitions that the domain layer needs.
Infrastructure adapters implement these protocols without inheritance.

Usage:
    from src.domain.protocols import PasswordHashingProtocol, UserRepository
"""

# Service protocols
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.password_hashing_protocol import PasswordHashingProtocol
from src.domain.protocols.token_generation_protocol import TokenGenerationProtocol

# Repository protocols
from src.domain.protocols.entity_repository import EntityRepository, StaleRecordError
from src.domain.protocols.role_repository import RoleRepository
from src.domain.protocols.user_repository import (
    DuplicateUserError,
    UserRepository,
)

__all__ = [
    # Service protocols
    "LoggerProtocol",
    "PasswordHashingProtocol",
    "TokenGenerationProtocol",
    # Repository protocols
    "DuplicateUserError",
    "EntityRepository",
    "RoleRepository",
    "StaleRecordError",
    "UserRepository",
]
