# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Shared pytest configuration for all unit tests.

Marks every test under tests/unit/ with ``pytest.mark.unit`` so the suite
can be selected with ``pytest -m unit``. Markers are declared in
pyproject.toml.
"""

import pytest


def pytest_collection_modifyitems(
    config: pytest.Config,
    items: list[pytest.Item],
) -> None:
    """Add the unit marker to every collected test in the unit directory.

    Args:
        config: Pytest configuration object.
        items: List of collected test items.
    """
    unit_marker = pytest.mark.unit

    for item in items:
        if "tests/unit" in str(item.path).replace("\\", "/"):
            if not any(marker.name == "unit" for marker in item.iter_markers()):
                item.add_marker(unit_marker)
