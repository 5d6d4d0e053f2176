"""NewUser value object - the caller-supplied part of a user."""

from dataclasses import dataclass

NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 100
EMAIL_MAX_LENGTH = 255


@dataclass(frozen=True)
class NewUser:
    """
    Immutable creation payload for a user.

    Carries no identifier and no timestamp: both are assigned by the
    persistence layer when the user is created.

    Attributes:
        email: Validated email address
        name: Display name
    """

    email: str
    name: str

    def __str__(self) -> str:
        return f"{self.name} <{self.email}>"
