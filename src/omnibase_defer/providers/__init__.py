# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Built-in promise provider and scheduler backed by asyncio."""

from omnibase_defer.providers.provider_asyncio_future import (
    AsyncioFuturePromiseProvider,
    collapse_resolution_values,
)
from omnibase_defer.providers.scheduler_call_soon import call_soon_scheduler

__all__: list[str] = [
    "AsyncioFuturePromiseProvider",
    "call_soon_scheduler",
    "collapse_resolution_values",
]
