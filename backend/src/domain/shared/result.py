"""Result type for operations with expected failure outcomes."""

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True)
class Success(Generic[T]):
    """Successful outcome carrying a value."""

    value: T

    @property
    def is_success(self) -> bool:
        return True

    @property
    def is_failure(self) -> bool:
        return False

    def unwrap(self) -> T:
        """Return the carried value."""
        return self.value

    def unwrap_or(self, default: T) -> T:
        return self.value


@dataclass(frozen=True)
class Failure(Generic[E]):
    """Failed outcome carrying one named error."""

    error: E

    @property
    def is_success(self) -> bool:
        return False

    @property
    def is_failure(self) -> bool:
        return True

    def unwrap(self):
        """
        Raise the carried error.

        Raises:
            The carried error if it is an exception, RuntimeError otherwise
        """
        if isinstance(self.error, BaseException):
            raise self.error
        raise RuntimeError(f"Called unwrap() on a failure: {self.error!r}")

    def unwrap_or(self, default):
        return default


Result = Union[Success[T], Failure[E]]


def success(value: T) -> Success[T]:
    """Wrap a value as a successful result."""
    return Success(value)


def failure(error: E) -> Failure[E]:
    """Wrap an error as a failed result."""
    return Failure(error)
