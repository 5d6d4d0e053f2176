"""Domain Enums - Constant values used across the domain."""

from .error_code import ErrorCode

__all__ = ["ErrorCode"]
