# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Promise Provider Protocols.

The adapter never builds promises itself. In promise mode it asks a
provider for one, passing a setup function that receives the provider's
resolve and reject entry points.

Contract:
    provider(setup) -> promise-like
    setup(resolve, reject) is called by the provider, typically synchronously
    resolve(*values) settles the promise successfully
    reject(error) settles the promise with a failure

Related:
    - AsyncioFuturePromiseProvider: default provider backed by asyncio.Future
    - PromiseBridge: consumer of this protocol
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol, runtime_checkable

ResolveFn = Callable[..., None]
RejectFn = Callable[[BaseException], None]
SetupFn = Callable[[ResolveFn, RejectFn], None]


@runtime_checkable
class ProtocolThenable(Protocol):
    """Minimal promise-like interface."""

    def then(
        self,
        on_fulfilled: Callable[..., object] | None = None,
        on_rejected: Callable[[BaseException], object] | None = None,
    ) -> object:
        """Register fulfillment and rejection reactions."""
        ...


@runtime_checkable
class ProtocolPromiseProvider(Protocol):
    """Constructor-like callable producing promise-likes."""

    def __call__(self, setup: SetupFn) -> object:
        """Create a promise-like and hand its resolve/reject to ``setup``."""
        ...


__all__: list[str] = [
    "ProtocolPromiseProvider",
    "ProtocolThenable",
    "RejectFn",
    "ResolveFn",
    "SetupFn",
]
