# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""omnibase_defer - dual-mode callback/promise adapter.

Turns a function written against a single completion handle into a callable
that works both callback-style and promise-style, with every raised or
signalled failure funneled into one error channel.

Key Components:
    - defer: Adapt a function with the process-wide default Deferrer,
      configured from DEFER_* environment variables at import time
    - Deferrer: Adapter factory with an explicit provider, scheduler and config
    - CompletionHandle: The ``next`` handle (ok / err / wrap)
    - errify: Normalization of failure values into exceptions
    - configure_promise_provider: Process-wide promise provider slot

Example:
    >>> from omnibase_defer import defer
    >>> @defer
    ... def greet(name, next):
    ...     next.ok(f"hello {name}")
    >>> greet("ada", lambda err, msg: print(err, msg))
    None hello ada
"""

from collections.abc import Callable

from omnibase_defer.enums import EnumInvocationMode, EnumWrapPolicy
from omnibase_defer.errors import (
    DeferConfigurationError,
    DeferError,
    ModelDeferErrorContext,
    OperationFailedError,
    PromiseProviderNotConfiguredError,
    SchedulerUnavailableError,
)
from omnibase_defer.models import ModelDeferConfig, ModelInvocationContext
from omnibase_defer.providers import AsyncioFuturePromiseProvider
from omnibase_defer.runtime import (
    AdaptedFunction,
    CompletionHandle,
    Deferrer,
    configure_promise_provider,
    get_promise_provider,
    reset_promise_provider,
)
from omnibase_defer.utils import errify, is_error_kind

# DEFER_WRAP_POLICY and DEFER_WARN_ON_DUPLICATE_SETTLEMENT are read once, at import.
default_deferrer = Deferrer.from_env()


def defer(fn: Callable[..., object]) -> AdaptedFunction:
    """Adapt ``fn`` with the process-wide default Deferrer."""
    return default_deferrer.adapt(fn)


__all__: list[str] = [
    "AdaptedFunction",
    "AsyncioFuturePromiseProvider",
    "CompletionHandle",
    "DeferConfigurationError",
    "DeferError",
    "Deferrer",
    "EnumInvocationMode",
    "EnumWrapPolicy",
    "ModelDeferConfig",
    "ModelDeferErrorContext",
    "ModelInvocationContext",
    "OperationFailedError",
    "PromiseProviderNotConfiguredError",
    "SchedulerUnavailableError",
    "configure_promise_provider",
    "default_deferrer",
    "defer",
    "errify",
    "get_promise_provider",
    "is_error_kind",
    "reset_promise_provider",
]
