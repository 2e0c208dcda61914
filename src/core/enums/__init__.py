"""Core enums: deployment environment and machine-readable error codes."""

from src.core.enums.environment import Environment
from src.core.enums.error_code import ErrorCode

__all__ = ["Environment", "ErrorCode"]
