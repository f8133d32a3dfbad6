# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Wrap policy enumeration for nested-callback protection."""

from enum import Enum


class EnumWrapPolicy(str, Enum):
    """How a callback decorated by ``CompletionHandle.wrap`` treats its arguments.

    Attributes:
        CATCH_ONLY: Only exceptions raised by the callback are routed to ``err``.
            Arguments are passed through untouched.
        ERROR_FIRST: The first positional argument is the error slot. A truthy
            value is routed to ``err`` and the callback is skipped; otherwise
            the callback receives the remaining arguments.
    """

    CATCH_ONLY = "catch_only"
    ERROR_FIRST = "error_first"


__all__ = ["EnumWrapPolicy"]
