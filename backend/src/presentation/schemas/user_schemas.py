"""User-related Pydantic schemas."""

from datetime import datetime
from pydantic import BaseModel, Field

from domain.entities import User
from domain.exceptions import DomainError, ValidationError


class CreateUserRequest(BaseModel):
    """Request schema for registering a user. Documents the body shape only."""

    email: str = Field(..., description="User email address")
    name: str = Field(..., description="User display name, 2 to 100 characters")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "email": "jane@example.com",
                    "name": "Jane Doe"
                }
            ]
        }
    }


class UserResponse(BaseModel):
    """Response schema for a registered user."""

    id: str = Field(..., description="User identifier")
    email: str = Field(..., description="User email address")
    name: str = Field(..., description="User display name")
    created_at: datetime = Field(..., description="Registration timestamp")

    @classmethod
    def from_entity(cls, user: User) -> "UserResponse":
        return cls(
            id=user.id,
            email=user.email,
            name=user.name,
            created_at=user.created_at,
        )


class FieldErrorResponse(BaseModel):
    """One invalid input field."""

    field: str
    message: str


class ErrorResponse(BaseModel):
    """Error body shared by every failing endpoint."""

    error: str = Field(..., description="Error code")
    message: str = Field(..., description="Human readable description")
    details: list[FieldErrorResponse] = Field(default_factory=list)

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "error": "validation_error",
                    "message": "Invalid input: name: String should have at least 2 characters",
                    "details": [
                        {"field": "name", "message": "String should have at least 2 characters"}
                    ]
                }
            ]
        }
    }

    @classmethod
    def from_error(cls, error: DomainError) -> "ErrorResponse":
        details = []
        if isinstance(error, ValidationError):
            details = [
                FieldErrorResponse(**e.to_dict())
                for e in error.field_errors
            ]
        return cls(error=error.code.value, message=error.message, details=details)
