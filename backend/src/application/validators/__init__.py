"""Input validators - Parse boundary data into domain values."""

from .user_input import CreateUserInput, parse_create_user_input

__all__ = ["CreateUserInput", "parse_create_user_input"]
