# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Single-settlement guard for completion sinks.

The completion handle itself may be fired any number of times. The sinks
behind it (the caller's callback, the provider's resolve/reject) must be
reached at most once per invocation. This mixin holds that state.

Settlement States:
    - PENDING: No outcome delivered yet
    - SETTLED: An outcome was delivered; later signals are dropped

Usage:
    ```python
    class CallbackSink(MixinSingleSettlement):
        def __init__(self, callback, context, config):
            self._init_single_settlement(context, config.warn_on_duplicate_settlement)
            self._callback = callback

        def ok(self, *values):
            if self._claim_settlement("ok"):
                self._callback(None, *values)
    ```

Concurrency Safety:
    Invocations run on a single event loop thread. The claim is a plain
    check-and-set with no await in between, so no lock is needed.
"""

from __future__ import annotations

import logging

from omnibase_defer.models import ModelInvocationContext

logger = logging.getLogger(__name__)


class MixinSingleSettlement:
    """At-most-once delivery of an invocation outcome.

    State Variables:
        _settled: True once an outcome has been delivered
        _settled_by: Name of the signal that settled ("ok" or "err")
        _duplicate_signals: Count of dropped signals after settlement

    Configuration Variables:
        _settlement_context: Invocation context used in log records
        _warn_on_duplicate: Log dropped signals at WARNING instead of DEBUG
    """

    def _init_single_settlement(
        self,
        context: ModelInvocationContext,
        warn_on_duplicate: bool = True,
    ) -> None:
        """Initialize settlement state.

        Must be called during class initialization before any signal is
        claimed.

        Args:
            context: Invocation context of the owning call
            warn_on_duplicate: Log dropped signals at WARNING (default: True)
        """
        self._settled = False
        self._settled_by: str | None = None
        self._duplicate_signals = 0
        self._settlement_context = context
        self._warn_on_duplicate = warn_on_duplicate

    @property
    def settled(self) -> bool:
        """True once an outcome has been delivered."""
        return self._settled

    def _claim_settlement(self, signal: str) -> bool:
        """Claim the right to deliver an outcome.

        Args:
            signal: Name of the signal attempting delivery ("ok" or "err")

        Returns:
            True for the first claim of this invocation, False afterwards.
        """
        if not self._settled:
            self._settled = True
            self._settled_by = signal
            return True

        self._duplicate_signals += 1
        level = logging.WARNING if self._warn_on_duplicate else logging.DEBUG
        logger.log(
            level,
            f"Dropping duplicate {signal} for {self._settlement_context.operation}, "
            f"already settled by {self._settled_by}",
            extra={
                **self._settlement_context.log_extra(),
                "signal": signal,
                "settled_by": self._settled_by,
                "duplicate_signals": self._duplicate_signals,
            },
        )
        return False


__all__ = ["MixinSingleSettlement"]
