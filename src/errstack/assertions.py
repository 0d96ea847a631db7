"""Assertion helpers raising generic or structured errors."""

from __future__ import annotations

from typing import Any, Optional, Type, Union

from .errors import StackError

DEFAULT_ASSERT_MESSAGE = "Assertion failed"


def assert_condition(condition: bool, message: str = DEFAULT_ASSERT_MESSAGE) -> None:
    """Raise ``AssertionError(message)`` unless ``condition`` holds."""
    if not condition:
        raise AssertionError(message)


def assert_as(
    condition: bool, error_class: Type[StackError], *args: Any, **kwargs: Any
) -> None:
    """Raise ``error_class(*args, **kwargs)`` unless ``condition`` holds."""
    if not condition:
        raise error_class(*args, **kwargs)


class Asserter:
    """Assertion function bound to one error class."""

    def __init__(self, error_class: Type[StackError]) -> None:
        self.error_class = error_class

    def __call__(
        self,
        condition: bool,
        code: Union[str, int],
        message: str = DEFAULT_ASSERT_MESSAGE,
    ) -> None:
        """Raise the bound error class with ``code`` unless ``condition`` holds."""
        assert_as(condition, self.error_class, code, message)

    def equal(
        self, a: Any, b: Any, code: Union[str, int] = 11, message: Optional[str] = None
    ) -> None:
        """Assert ``a == b``, defaulting to code 11."""
        if message is None:
            message = f"{a} must be equal to {b}"
        self(a == b, code, message)

    def not_equal(
        self, a: Any, b: Any, code: Union[str, int] = 12, message: Optional[str] = None
    ) -> None:
        """Assert ``a != b``, defaulting to code 12."""
        if message is None:
            message = f"{a} must not be equal to {b}"
        self(a != b, code, message)


def create_assert(error_class: Type[StackError]) -> Asserter:
    """Create an Asserter raising ``error_class``."""
    return Asserter(error_class)
