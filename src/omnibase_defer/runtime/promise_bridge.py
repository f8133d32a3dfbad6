# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Promise Bridge.

In promise mode the adapter asks the configured provider for exactly one
promise-like and keeps the provider's resolve/reject functions. The
CompletionHandle then reports into the bridge, which forwards the first
outcome and drops the rest.

The provider is supplied by the caller at the moment the promise is needed.
A missing provider is a configuration error raised synchronously, before any
work is scheduled.
"""

from __future__ import annotations

import logging

from omnibase_defer.errors import (
    DeferConfigurationError,
    PromiseProviderNotConfiguredError,
)
from omnibase_defer.mixins import MixinSingleSettlement
from omnibase_defer.models import ModelInvocationContext
from omnibase_defer.protocols import ProtocolPromiseProvider, RejectFn, ResolveFn

logger = logging.getLogger(__name__)


class PromiseBridge(MixinSingleSettlement):
    """Owns the promise-like of one promise-mode invocation.

    Attributes:
        promise: Value returned by the provider, handed back to the caller
    """

    def __init__(
        self,
        provider: ProtocolPromiseProvider,
        context: ModelInvocationContext,
        warn_on_duplicate: bool = True,
    ) -> None:
        self._init_single_settlement(context, warn_on_duplicate)
        self._provider_resolve: ResolveFn | None = None
        self._provider_reject: RejectFn | None = None

        self.promise: object = provider(self._setup)

        if self._provider_resolve is None or self._provider_reject is None:
            raise DeferConfigurationError(
                f"Promise provider {provider!r} did not call setup(resolve, reject) "
                "while constructing the promise",
                context=context.error_context(),
            )

    @classmethod
    def create(
        cls,
        provider: ProtocolPromiseProvider | None,
        context: ModelInvocationContext,
        warn_on_duplicate: bool = True,
    ) -> PromiseBridge:
        """Build a bridge, failing fast when no provider is configured.

        Raises:
            PromiseProviderNotConfiguredError: If ``provider`` is None.
        """
        if provider is None:
            raise PromiseProviderNotConfiguredError(
                f"No promise provider configured for promise-mode call to "
                f"{context.operation}; pass a callback or configure a provider",
                context=context.error_context(),
            )
        bridge = cls(provider, context, warn_on_duplicate)
        logger.debug(
            f"Promise created for {context.operation}",
            extra={**context.log_extra(), "provider": repr(provider)},
        )
        return bridge

    def _setup(self, resolve: ResolveFn, reject: RejectFn) -> None:
        self._provider_resolve = resolve
        self._provider_reject = reject

    def resolve(self, *values: object) -> None:
        if self._claim_settlement("ok"):
            self._provider_resolve(*values)  # type: ignore[misc]

    def reject(self, error: BaseException) -> None:
        if self._claim_settlement("err"):
            self._provider_reject(error)  # type: ignore[misc]


__all__: list[str] = ["PromiseBridge"]
