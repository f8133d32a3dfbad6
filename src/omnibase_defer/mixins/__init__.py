# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Reusable mixins for omnibase_defer completion sinks."""

from omnibase_defer.mixins.mixin_single_settlement import MixinSingleSettlement

__all__: list[str] = ["MixinSingleSettlement"]
