"""Factory for StackError subclasses bound to a code namespace."""

from __future__ import annotations

from typing import Any, ClassVar, Dict, Optional, Type, Union

from .errors import StackError


class NamespaceError(StackError):
    """
    StackError whose code is prefixed with the class ``namespace``.

    Every instance gets ``default_metadata`` as its metadata. The dict is
    shared by all instances of the class, not copied: mutating one instance's
    metadata is visible through the others. Without ``default_metadata``
    each instance keeps its own empty dict.
    """

    namespace: ClassVar[str] = ""
    default_metadata: ClassVar[Optional[Dict[str, Any]]] = None

    def __init__(
        self,
        code: Union[str, int],
        message: str,
        wrap_error: Optional[BaseException] = None,
    ) -> None:
        super().__init__(f"{self.namespace}{code}", message, wrap_error)
        if self.default_metadata is not None:
            self.metadata = self.default_metadata


def create_namespace_error(
    namespace: str, metadata: Optional[Dict[str, Any]] = None
) -> Type[NamespaceError]:
    """
    Create a NamespaceError subclass for ``namespace``.

    Omitting ``metadata`` creates one empty dict for this call, which all
    instances of the returned class then share. The returned class can be
    subclassed further, e.g. to add protocol-specific serializers.
    """
    return type(
        f"{namespace}Error",
        (NamespaceError,),
        {
            "namespace": namespace,
            "default_metadata": {} if metadata is None else metadata,
            "__doc__": f"StackError in the {namespace!r} namespace.",
        },
    )
