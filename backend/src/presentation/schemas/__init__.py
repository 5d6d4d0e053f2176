"""Pydantic schemas for request/response validation."""

from .user_schemas import CreateUserRequest, UserResponse, ErrorResponse, FieldErrorResponse
from .health_schemas import HealthResponse

__all__ = [
    "CreateUserRequest",
    "UserResponse",
    "ErrorResponse",
    "FieldErrorResponse",
    "HealthResponse",
]
