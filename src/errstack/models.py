"""Pydantic model for the serialized error record."""

from __future__ import annotations

from typing import Any, Dict, List

from pydantic import BaseModel, Field, ValidationInfo, field_validator

DEFAULT_ERROR_NAME = "StackError"


class StackErrorPayload(BaseModel):
    """Serialized form of a StackError and its flattened cause chain."""

    code: str = Field(..., description="Opaque error code, e.g. LIB123")
    message: str = Field(..., description="Human-readable description")
    metadata: Dict[str, Any] = Field(
        default_factory=dict, description="Arbitrary structured metadata"
    )
    name: str = Field(default=DEFAULT_ERROR_NAME, description="Display/type tag")
    stack: List[StackErrorPayload] = Field(
        default_factory=list,
        description="Wrapped errors, outermost first; each entry has an empty stack",
    )

    model_config = {"extra": "ignore"}

    @field_validator("metadata", "name", "stack", mode="before")
    @classmethod
    def null_as_missing(cls, v: Any, info: ValidationInfo) -> Any:
        """Treat explicit nulls from minimal producers as absent fields."""
        if v is not None:
            return v
        if info.field_name == "name":
            return DEFAULT_ERROR_NAME
        return {} if info.field_name == "metadata" else []
