# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Enumerations shared across omnibase_defer."""

from omnibase_defer.enums.enum_invocation_mode import EnumInvocationMode
from omnibase_defer.enums.enum_wrap_policy import EnumWrapPolicy

__all__: list[str] = ["EnumInvocationMode", "EnumWrapPolicy"]
