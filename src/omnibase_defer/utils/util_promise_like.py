# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Promise-like detection.

A value returned by an original function is promise-like when it is
awaitable (coroutine, ``asyncio.Future``, task) or exposes a callable
``then(on_fulfilled, on_rejected)`` attribute.
"""

from __future__ import annotations

import inspect


def is_thenable(value: object) -> bool:
    """Return True if ``value`` exposes a callable ``then`` attribute."""
    if value is None or isinstance(value, type):
        return False
    return callable(getattr(value, "then", None))


def is_promise_like(value: object) -> bool:
    """Return True if ``value`` is awaitable or thenable."""
    return inspect.isawaitable(value) or is_thenable(value)


__all__: list[str] = ["is_promise_like", "is_thenable"]
