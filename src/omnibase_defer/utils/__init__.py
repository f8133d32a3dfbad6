# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Utility modules for omnibase_defer.

    - util_errify: Failure value normalization into exception instances
    - util_promise_like: Awaitable / thenable detection for returned values
"""

from omnibase_defer.utils.util_errify import errify, is_error_kind
from omnibase_defer.utils.util_promise_like import is_promise_like, is_thenable

__all__: list[str] = [
    "errify",
    "is_error_kind",
    "is_promise_like",
    "is_thenable",
]
