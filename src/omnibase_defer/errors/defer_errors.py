# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Adapter Error Classes.

Error Hierarchy:
    DeferError (base adapter error)
    ├── DeferConfigurationError
    │   ├── PromiseProviderNotConfiguredError
    │   └── SchedulerUnavailableError
    └── OperationFailedError

Configuration errors are raised synchronously to whoever called the adapted
function, except a SchedulerUnavailableError for an awaitable returned by a
callback-mode body with no running loop, which goes through the callback.

OperationFailedError is never raised by the adapter itself: it is the value
delivered through the completion channel when a non-exception failure value
is normalized.
"""

from __future__ import annotations

from uuid import UUID

from omnibase_defer.errors.model_defer_error_context import ModelDeferErrorContext


class DeferError(Exception):
    """Base error class for omnibase_defer.

    Structured Fields (via ModelDeferErrorContext):
        operation: Qualified name of the adapted function
        mode: Invocation mode of the failing call
        correlation_id: Invocation correlation ID

    Example:
        >>> context = ModelDeferErrorContext.with_correlation(operation="fetch")
        >>> raise DeferError("Adapter failure", context=context, attempt=1)
    """

    def __init__(
        self,
        message: str,
        context: ModelDeferErrorContext | None = None,
        **extra_context: object,
    ) -> None:
        """Initialize DeferError with structured fields.

        Args:
            message: Human-readable error message
            context: Bundled adapter context (operation, mode, correlation_id)
            **extra_context: Additional context information
        """
        super().__init__(message)
        self.message = message
        self.context = context
        self.extra_context: dict[str, object] = dict(extra_context)

    @property
    def correlation_id(self) -> UUID | None:
        """Correlation ID from the bundled context, if any."""
        return self.context.correlation_id if self.context is not None else None


class DeferConfigurationError(DeferError):
    """Raised when the adapter is used without the configuration it needs.

    Raised synchronously at call time. The one subclass instance delivered
    through the completion channel is the SchedulerUnavailableError reported
    when a callback-mode body returns an awaitable and no loop is running.
    """


class PromiseProviderNotConfiguredError(DeferConfigurationError):
    """Raised when promise mode is selected and no promise provider is set.

    Example:
        >>> configure_promise_provider(None)
        >>> defer(lambda next: next.ok())()
        Traceback (most recent call last):
        ...
        PromiseProviderNotConfiguredError: No promise provider configured ...
    """


class SchedulerUnavailableError(DeferConfigurationError):
    """Raised when deferred work cannot be scheduled.

    The default scheduler needs a running asyncio event loop.
    """


class OperationFailedError(DeferError):
    """Normalized form of a failure value that was not an exception.

    The original value is kept on ``value`` and rendered as the message.

    Example:
        >>> error = OperationFailedError("oops")
        >>> error.message, error.value
        ('oops', 'oops')
    """

    def __init__(
        self,
        value: object = None,
        context: ModelDeferErrorContext | None = None,
        **extra_context: object,
    ) -> None:
        """Initialize OperationFailedError.

        Args:
            value: The raw failure value that was signalled or raised
            context: Bundled adapter context
            **extra_context: Additional context information
        """
        super().__init__(
            "" if value is None else str(value),
            context=context,
            **extra_context,
        )
        self.value = value


__all__ = [
    "DeferConfigurationError",
    "DeferError",
    "OperationFailedError",
    "PromiseProviderNotConfiguredError",
    "SchedulerUnavailableError",
]
