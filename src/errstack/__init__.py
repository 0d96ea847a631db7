"""Structured errors with namespaced codes, cause chains and JSON round-trip."""

from .assertions import Asserter, assert_as, assert_condition, create_assert
from .errors import StackError, StackErrorJSON
from .models import StackErrorPayload
from .namespace import NamespaceError, create_namespace_error

__version__ = "0.1.0"

__all__ = [
    "Asserter",
    "NamespaceError",
    "StackError",
    "StackErrorJSON",
    "StackErrorPayload",
    "assert_as",
    "assert_condition",
    "create_assert",
    "create_namespace_error",
]
