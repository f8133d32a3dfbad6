# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Pytest configuration and shared fixtures for omnibase_defer tests."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from omnibase_defer import Deferrer, ModelDeferConfig
from omnibase_defer.runtime import provider_registry
from tests.helpers import (
    CallbackRecorder,
    ManualScheduler,
    RecordingThenableProvider,
)

# =============================================================================
# Duck Typing Conformance Helpers
# =============================================================================


def assert_has_methods(
    obj: object,
    required_methods: list[str],
    *,
    protocol_name: str | None = None,
) -> None:
    """Assert that an object has all required methods (duck typing conformance).

    Args:
        obj: The object to check for method presence.
        required_methods: List of method names that must be present and callable.
        protocol_name: Optional protocol name for clearer error messages.

    Raises:
        AssertionError: If any required method is missing or not callable.

    Example:
        >>> assert_has_methods(
        ...     handle,
        ...     ["ok", "err", "wrap", "__call__"],
        ...     protocol_name="CompletionHandle",
        ... )
    """
    name = protocol_name or obj.__class__.__name__
    for method_name in required_methods:
        assert hasattr(obj, method_name), f"{name} must have '{method_name}' method"
        if not method_name.startswith("__"):
            assert callable(
                getattr(obj, method_name)
            ), f"{name}.{method_name} must be callable"


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def isolated_provider_slot() -> Iterator[None]:
    """Restore the process-wide promise provider after every test."""
    previous = provider_registry.get_promise_provider()
    yield
    provider_registry.configure_promise_provider(previous)


@pytest.fixture
def recorder() -> CallbackRecorder:
    """Fresh Node-style callback recorder."""
    return CallbackRecorder()


@pytest.fixture
def manual_scheduler() -> ManualScheduler:
    """Scheduler that runs deferred work only on demand."""
    return ManualScheduler()


@pytest.fixture
def thenable_provider() -> RecordingThenableProvider:
    """Loop-free promise provider recording every promise it creates."""
    return RecordingThenableProvider()


@pytest.fixture
def thenable_deferrer(
    thenable_provider: RecordingThenableProvider,
    manual_scheduler: ManualScheduler,
) -> Deferrer:
    """Deferrer isolated from the process-wide slot and from asyncio."""
    return Deferrer(
        promise_provider=thenable_provider,
        scheduler=manual_scheduler,
        config=ModelDeferConfig(),
    )
