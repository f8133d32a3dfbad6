# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Defer Error Context Configuration Model.

Bundles the structured fields attached to every DeferError so that error
constructors keep a short parameter list.
"""

from __future__ import annotations

from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field

from omnibase_defer.enums import EnumInvocationMode


class ModelDeferErrorContext(BaseModel):
    """Structured context for adapter errors.

    Attributes:
        operation: Qualified name of the adapted function
        mode: Invocation mode resolved for the failing call
        correlation_id: Correlation ID of the invocation

    Example:
        >>> context = ModelDeferErrorContext(
        ...     operation="read_config",
        ...     mode=EnumInvocationMode.PROMISE,
        ...     correlation_id=uuid4(),
        ... )
        >>> raise PromiseProviderNotConfiguredError("No provider", context=context)
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    operation: str | None = Field(
        default=None,
        description="Qualified name of the adapted function",
    )
    mode: EnumInvocationMode | None = Field(
        default=None,
        description="Invocation mode resolved for the call",
    )
    correlation_id: UUID | None = Field(
        default=None,
        description="Correlation ID of the invocation",
    )

    @classmethod
    def with_correlation(
        cls,
        correlation_id: UUID | None = None,
        **kwargs: object,
    ) -> ModelDeferErrorContext:
        """Build a context, generating a correlation ID when none is given."""
        return cls(correlation_id=correlation_id or uuid4(), **kwargs)


__all__ = ["ModelDeferErrorContext"]
