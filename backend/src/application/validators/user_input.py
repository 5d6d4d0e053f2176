"""Validation of user registration input coming from the boundary."""

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, EmailStr, Field, ValidatorFunctionWrapHandler, field_validator
from pydantic import ValidationError as PydanticValidationError

from domain.exceptions import ValidationError
from domain.shared import Result, failure, success
from domain.value_objects import FieldError, NewUser, NAME_MIN_LENGTH, NAME_MAX_LENGTH


class CreateUserInput(BaseModel):
    """Well-formed registration input."""

    email: EmailStr = Field(..., description="User email address")
    name: str = Field(
        ...,
        description="User display name",
        min_length=NAME_MIN_LENGTH,
        max_length=NAME_MAX_LENGTH,
    )

    model_config = ConfigDict(
        strict=True,
        extra="ignore",
        frozen=True,
        str_strip_whitespace=True,
    )

    @field_validator("email", mode="wrap")
    @classmethod
    def plain_address(cls, value: Any, handler: ValidatorFunctionWrapHandler) -> Any:
        """
        Accept only a bare address and keep it exactly as typed.

        EmailStr alone would accept ``Name <addr>`` and normalise the domain.
        """
        if isinstance(value, str) and (value != value.strip() or "<" in value or ">" in value):
            raise ValueError("value is not a plain email address")
        handler(value)
        return value

    def to_new_user(self) -> NewUser:
        """Convert the validated input to the domain payload."""
        return NewUser(email=str(self.email), name=self.name)


def parse_create_user_input(raw: Any) -> Result[NewUser, ValidationError]:
    """
    Parse untyped boundary data into a NewUser.

    Names are stripped of surrounding whitespace before the length check;
    emails are taken verbatim.

    Args:
        raw: Mapping with ``email`` and ``name`` keys, or a CreateUserInput

    Returns:
        Success with the NewUser, or Failure with a ValidationError listing
        every invalid field
    """
    if isinstance(raw, CreateUserInput):
        return success(raw.to_new_user())

    if not isinstance(raw, Mapping):
        return failure(
            ValidationError(
                [FieldError("body", "Expected an object with 'email' and 'name' fields")]
            )
        )

    try:
        parsed = CreateUserInput.model_validate(dict(raw))
    except PydanticValidationError as e:
        return failure(ValidationError(_to_field_errors(e)))

    return success(parsed.to_new_user())


def _to_field_errors(error: PydanticValidationError) -> list[FieldError]:
    """Flatten pydantic errors into domain field errors."""
    field_errors = []
    for item in error.errors():
        location = item.get("loc") or ("body",)
        field_errors.append(
            FieldError(
                field=".".join(str(part) for part in location),
                message=item.get("msg", "Invalid value"),
            )
        )
    return field_errors
