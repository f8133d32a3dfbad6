# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Adapter configuration model.

Environment Variables:
    DEFER_WRAP_POLICY: Default wrap policy ("catch_only" or "error_first")
    DEFER_WARN_ON_DUPLICATE_SETTLEMENT: "true"/"false", log duplicate
        ok/err signals at WARNING instead of DEBUG

The variables are read by ``ModelDeferConfig.from_env()`` and
``Deferrer.from_env()``. The default Deferrer behind ``defer()`` is built
with ``Deferrer.from_env()`` when omnibase_defer is imported.
"""

from __future__ import annotations

import os

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from omnibase_defer.enums import EnumWrapPolicy
from omnibase_defer.errors import DeferConfigurationError

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


class ModelDeferConfig(BaseModel):
    """Behavioural configuration shared by every function a Deferrer adapts.

    Attributes:
        wrap_policy: Policy used by ``next.wrap`` and ``next(callable)`` when
            no explicit policy is passed
        warn_on_duplicate_settlement: Log dropped duplicate signals at WARNING
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    wrap_policy: EnumWrapPolicy = Field(
        default=EnumWrapPolicy.CATCH_ONLY,
        description="Default policy for nested-callback wrapping",
    )
    warn_on_duplicate_settlement: bool = Field(
        default=True,
        description="Log duplicate ok/err signals at WARNING level",
    )

    @classmethod
    def from_env(cls) -> ModelDeferConfig:
        """Build a configuration from DEFER_* environment variables.

        Raises:
            DeferConfigurationError: If a variable holds an unrecognized value.
        """
        values: dict[str, object] = {}

        policy = os.getenv("DEFER_WRAP_POLICY")
        if policy:
            values["wrap_policy"] = policy.strip().lower()

        warn = os.getenv("DEFER_WARN_ON_DUPLICATE_SETTLEMENT")
        if warn:
            normalized = warn.strip().lower()
            if normalized in _TRUE_VALUES:
                values["warn_on_duplicate_settlement"] = True
            elif normalized in _FALSE_VALUES:
                values["warn_on_duplicate_settlement"] = False
            else:
                raise DeferConfigurationError(
                    f"Invalid DEFER_WARN_ON_DUPLICATE_SETTLEMENT value: {warn!r}",
                    variable="DEFER_WARN_ON_DUPLICATE_SETTLEMENT",
                )

        try:
            return cls(**values)
        except ValidationError as e:
            raise DeferConfigurationError(
                f"Invalid DEFER_WRAP_POLICY value: {policy!r}",
                variable="DEFER_WRAP_POLICY",
            ) from e


__all__ = ["ModelDeferConfig"]
