"""Structured error type with a flattened cause chain and JSON round-trip."""

from __future__ import annotations

import json
import logging
import traceback
from typing import Any, Dict, List, Mapping, Optional, Union

from .models import DEFAULT_ERROR_NAME, StackErrorPayload

logger = logging.getLogger(__name__)

StackErrorJSON = Dict[str, Any]

DEFAULT_CAST_CODE = "SE0"


class StackError(Exception):
    """
    Error carrying a code, a message, metadata and the chain of errors it wraps.

    Wrapping flattens: the wrapped error becomes the head of ``error_stack``,
    followed by everything it already wrapped. ``error_stack`` never contains
    the error itself.

    Args:
        code: Opaque identifier, conventionally ``<NAMESPACE><NUMBER>``.
        message: Human-readable description.
        wrap_error: Optional error being wrapped. Foreign errors are cast first.
    """

    def __init__(
        self,
        code: str,
        message: str,
        wrap_error: Optional[BaseException] = None,
    ) -> None:
        super().__init__(message)
        self._message = message
        self._diagnostic_trace: Optional[str] = None
        self.code = code
        self.metadata: Dict[str, Any] = {}
        self.name = DEFAULT_ERROR_NAME
        self.error_stack: List[StackError] = []
        if wrap_error is not None:
            self.error_stack = StackError.cast(wrap_error).to_error_stack()
            self.__cause__ = wrap_error

    @property
    def message(self) -> str:
        return self._message

    @property
    def diagnostic_trace(self) -> Optional[str]:
        """Formatted traceback for humans; not serialized or compared."""
        if self._diagnostic_trace is not None:
            return self._diagnostic_trace
        if self.__traceback__ is not None:
            return _format_trace(self)
        return None

    @diagnostic_trace.setter
    def diagnostic_trace(self, value: Optional[str]) -> None:
        self._diagnostic_trace = value

    @staticmethod
    def cast(error: BaseException, code: str = DEFAULT_CAST_CODE) -> StackError:
        """
        Cast any exception to a StackError.

        A StackError is returned unchanged and ``code`` is ignored. Other
        exceptions become a new StackError with ``code`` and the foreign
        error's message.
        """
        if isinstance(error, StackError):
            return error

        logger.debug("Casting %s to StackError %s", type(error).__name__, code)

        cast_error = StackError(code, str(error))
        cast_error.diagnostic_trace = _format_trace(error)
        return cast_error

    @staticmethod
    def from_json(
        data: Union[StackErrorPayload, Mapping[str, Any], str, bytes],
    ) -> StackError:
        """
        Rebuild a StackError from its serialized form.

        Accepts a mapping, a JSON document or a validated payload. Missing
        ``metadata``, ``name`` and ``stack`` fall back to their defaults;
        a missing ``code`` or ``message`` raises ``pydantic.ValidationError``.
        """
        if isinstance(data, StackErrorPayload):
            payload = data
        elif isinstance(data, (str, bytes)):
            payload = StackErrorPayload.model_validate_json(data)
        else:
            payload = StackErrorPayload.model_validate(data)

        error = _from_payload(payload)
        logger.debug(
            "Rebuilt StackError %s with %d chained errors",
            error.code,
            len(error.error_stack),
        )
        return error

    def to_error_stack(self) -> List[StackError]:
        """Return the full chain, self first and root cause last."""
        return [self, *self.error_stack]

    def to_json(self, with_stack: bool = True) -> StackErrorJSON:
        """
        Serialize to a JSON-compatible dict.

        The chain is emitted as a single flat level: each entry of ``stack``
        is serialized with an empty ``stack`` of its own. Pass
        ``with_stack=False`` to drop the chain entirely.
        """
        return {
            "code": self.code,
            "message": self.message,
            "metadata": self.metadata,
            "name": self.name,
            "stack": [e.to_json(False) for e in self.error_stack] if with_stack else [],
        }

    def to_json_string(self, indent: Optional[int] = None) -> str:
        """Serialize to a JSON document."""
        return json.dumps(self.to_json(), indent=indent, default=str)

    def is_equivalent(self, other: object) -> bool:
        """
        Compare by code, message, metadata, name and chain, recursively.

        The concrete class and the diagnostic trace are ignored, so an error
        is equivalent to its JSON round-trip.
        """
        if not isinstance(other, StackError):
            return False
        if (self.code, self.message, self.name) != (other.code, other.message, other.name):
            return False
        if self.metadata != other.metadata:
            return False
        if len(self.error_stack) != len(other.error_stack):
            return False
        return all(
            mine.is_equivalent(theirs)
            for mine, theirs in zip(self.error_stack, other.error_stack)
        )

    def __reduce__(self):
        # Constructor args are not recoverable from self.args; restore from state.
        return (_restore, (type(self), self.args), self.__dict__)

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"


def _restore(cls: type, args: tuple) -> StackError:
    error = cls.__new__(cls)
    Exception.__init__(error, *args)
    return error


def _from_payload(payload: StackErrorPayload) -> StackError:
    error = StackError(payload.code, payload.message)

    # Fold right to left so each rebuilt entry wraps the entries after it.
    chain: List[StackError] = []
    for entry in reversed(payload.stack):
        wrapped = _from_payload(entry)
        wrapped.error_stack = chain
        chain = [wrapped, *chain]

    error.error_stack = chain
    error.metadata = payload.metadata
    error.name = payload.name
    return error


def _format_trace(error: BaseException) -> str:
    return "".join(
        traceback.format_exception(type(error), error, error.__traceback__)
    )
