"""FieldError value object describing one invalid input field."""

from dataclasses import dataclass


@dataclass(frozen=True)
class FieldError:
    """
    A single validation failure.

    Attributes:
        field: Name of the offending input field
        message: Expected constraint, human readable
    """

    field: str
    message: str

    def to_dict(self) -> dict:
        return {"field": self.field, "message": self.message}

    def __str__(self) -> str:
        return f"{self.field}: {self.message}"
