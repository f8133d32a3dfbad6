# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Process-wide promise provider slot.

Used by Deferrer instances that were created without an explicit provider.
The slot is read once per promise-mode invocation, at the moment a promise is
needed, so it can be reconfigured between calls.

Initial value: AsyncioFuturePromiseProvider. Setting it to None makes every
promise-mode call through the slot fail with
PromiseProviderNotConfiguredError.

Tests should prefer ``Deferrer(promise_provider=...)`` over mutating this
slot.
"""

from __future__ import annotations

import logging

from omnibase_defer.protocols import ProtocolPromiseProvider
from omnibase_defer.providers import AsyncioFuturePromiseProvider

logger = logging.getLogger(__name__)

DEFAULT_PROMISE_PROVIDER: ProtocolPromiseProvider = AsyncioFuturePromiseProvider()

_promise_provider: ProtocolPromiseProvider | None = DEFAULT_PROMISE_PROVIDER


def configure_promise_provider(provider: ProtocolPromiseProvider | None) -> None:
    """Set the process-wide promise provider (None to unset it)."""
    global _promise_provider  # noqa: PLW0603
    _promise_provider = provider
    logger.debug(
        f"Process-wide promise provider set to {provider!r}",
        extra={"provider": repr(provider)},
    )


def get_promise_provider() -> ProtocolPromiseProvider | None:
    """Return the process-wide promise provider, or None when unset."""
    return _promise_provider


def reset_promise_provider() -> None:
    """Restore the default AsyncioFuturePromiseProvider."""
    configure_promise_provider(DEFAULT_PROMISE_PROVIDER)


__all__: list[str] = [
    "DEFAULT_PROMISE_PROVIDER",
    "configure_promise_provider",
    "get_promise_provider",
    "reset_promise_provider",
]
