# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Callback-mode completion sink.

Delivers the outcome of a callback-mode invocation to the caller's
``callback(error, *results)`` exactly once:

    success -> callback(None, *values)
    failure -> callback(error)

Exceptions raised by the caller's callback are not captured here; they
propagate to whoever fired the handle.
"""

from __future__ import annotations

from collections.abc import Callable

from omnibase_defer.mixins import MixinSingleSettlement
from omnibase_defer.models import ModelInvocationContext


class CallbackSink(MixinSingleSettlement):
    """Forward outcomes to a Node-style callback, at most once."""

    def __init__(
        self,
        callback: Callable[..., object],
        context: ModelInvocationContext,
        warn_on_duplicate: bool = True,
    ) -> None:
        self._init_single_settlement(context, warn_on_duplicate)
        self._callback = callback

    def resolve(self, *values: object) -> None:
        if self._claim_settlement("ok"):
            self._callback(None, *values)

    def reject(self, error: BaseException) -> None:
        if self._claim_settlement("err"):
            self._callback(error)


__all__: list[str] = ["CallbackSink"]
