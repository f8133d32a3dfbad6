# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Deferred-work scheduler protocol.

Promise-mode invocations run on the next scheduler tick so the caller always
holds the returned promise before any outcome is observable.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol, runtime_checkable


@runtime_checkable
class ProtocolScheduler(Protocol):
    """Callable that runs ``work`` later, never before returning."""

    def __call__(self, work: Callable[[], object]) -> None:
        """Schedule ``work`` for the next tick."""
        ...


__all__: list[str] = ["ProtocolScheduler"]
