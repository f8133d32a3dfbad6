# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Per-invocation context model.

Created when an adapted function is called and discarded once the call
settles. Nothing in it is shared between invocations.
"""

from __future__ import annotations

from typing import Any
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field

from omnibase_defer.enums import EnumInvocationMode
from omnibase_defer.errors import ModelDeferErrorContext


class ModelInvocationContext(BaseModel):
    """Arguments, receiver and resolved mode of one adapted-function call.

    Attributes:
        operation: Qualified name of the original function
        mode: Resolved calling convention
        args: Leading positional arguments forwarded to the original function
        kwargs: Keyword arguments forwarded to the original function
        receiver: Bound instance when the adapted function was accessed as a method
        correlation_id: Correlation ID for log records and error context
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        arbitrary_types_allowed=True,
    )

    operation: str = Field(description="Qualified name of the original function")
    mode: EnumInvocationMode = Field(description="Resolved calling convention")
    args: tuple[Any, ...] = Field(default=())
    kwargs: dict[str, Any] = Field(default_factory=dict)
    receiver: Any = Field(default=None)
    correlation_id: UUID = Field(default_factory=uuid4)

    def error_context(self) -> ModelDeferErrorContext:
        """Project this invocation onto an error context."""
        return ModelDeferErrorContext(
            operation=self.operation,
            mode=self.mode,
            correlation_id=self.correlation_id,
        )

    def log_extra(self) -> dict[str, object]:
        """Structured fields for ``logger.*(..., extra=...)``."""
        return {
            "operation": self.operation,
            "mode": self.mode.value,
            "correlation_id": str(self.correlation_id),
        }


__all__ = ["ModelInvocationContext"]
