# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""omnibase_defer Errors Module.

Exports:
    ModelDeferErrorContext: Configuration model for bundled error context
    DeferError: Base adapter error class
    DeferConfigurationError: Misconfiguration raised synchronously to the caller
    PromiseProviderNotConfiguredError: Promise mode used with no provider set
    SchedulerUnavailableError: Deferred work could not be scheduled
    OperationFailedError: Normalized non-exception failure value

Error Propagation:
    Failures raised or signalled inside an adapted function are delivered
    through exactly one of:

    - the first parameter of the caller's callback (callback mode)
    - the rejection of the returned promise-like (promise mode)

    DeferConfigurationError subclasses are raised directly, before any
    deferred work starts. One exception: a SchedulerUnavailableError built
    when a callback-mode body returns an awaitable with no running event
    loop is delivered through the callback, since the body already ran.

    KeyboardInterrupt, SystemExit and raises after the invocation settled
    propagate to the caller.
"""

from omnibase_defer.errors.defer_errors import (
    DeferConfigurationError,
    DeferError,
    OperationFailedError,
    PromiseProviderNotConfiguredError,
    SchedulerUnavailableError,
)
from omnibase_defer.errors.model_defer_error_context import ModelDeferErrorContext

__all__: list[str] = [
    "DeferConfigurationError",
    "DeferError",
    "ModelDeferErrorContext",
    "OperationFailedError",
    "PromiseProviderNotConfiguredError",
    "SchedulerUnavailableError",
]
