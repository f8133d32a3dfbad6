# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Default scheduler: run deferred work on the next event loop iteration."""

from __future__ import annotations

import asyncio
from collections.abc import Callable

from omnibase_defer.errors import SchedulerUnavailableError


def call_soon_scheduler(work: Callable[[], object]) -> None:
    """Schedule ``work`` with ``loop.call_soon`` on the running loop.

    Raises:
        SchedulerUnavailableError: If no event loop is running.
    """
    try:
        loop = asyncio.get_running_loop()
    except RuntimeError as e:
        raise SchedulerUnavailableError(
            "Promise-mode calls must be made while an event loop is running"
        ) from e
    loop.call_soon(work)


__all__ = ["call_soon_scheduler"]
