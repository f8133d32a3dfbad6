# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Completion sink protocol.

A sink is the destination a CompletionHandle forwards outcomes to: the
caller's callback in callback mode, the PromiseBridge in promise mode.
Sinks deliver at most one outcome per invocation.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class ProtocolCompletionSink(Protocol):
    """Destination of an invocation outcome."""

    @property
    def settled(self) -> bool:
        """True once an outcome has been delivered."""
        ...

    def resolve(self, *values: object) -> None:
        """Deliver a successful outcome."""
        ...

    def reject(self, error: BaseException) -> None:
        """Deliver a normalized failure."""
        ...


__all__: list[str] = ["ProtocolCompletionSink"]
