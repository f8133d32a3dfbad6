# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Invocation Mode Enumeration.

Defines the two calling conventions an adapted function supports.
"""

from enum import Enum


class EnumInvocationMode(str, Enum):
    """Calling convention resolved for a single invocation.

    Attributes:
        CALLBACK: The caller supplied a trailing ``callback(error, *results)``.
        PROMISE: No trailing callable was supplied; a promise-like is returned.
    """

    CALLBACK = "callback"
    PROMISE = "promise"


__all__ = ["EnumInvocationMode"]
