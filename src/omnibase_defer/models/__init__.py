# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Pydantic models for omnibase_defer."""

from omnibase_defer.models.model_defer_config import ModelDeferConfig
from omnibase_defer.models.model_invocation_context import ModelInvocationContext

__all__: list[str] = ["ModelDeferConfig", "ModelInvocationContext"]
