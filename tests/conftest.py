"""Pytest configuration and shared fixtures for boxmaker tests."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from boxmaker.application.dtos import LayoutOutput
    from boxmaker.domain.value_objects import BoxSettings


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "integration: end-to-end tests that write files or drive the CLI"
    )
    config.addinivalue_line("markers", "slow: tests that take a long time to run")


# =============================================================================
# Shared settings fixtures
# =============================================================================


@pytest.fixture
def default_box_settings() -> "BoxSettings":
    """100 x 60 x 80 mm inside-referenced box in 3 mm stock, fingers 5..15 mm."""
    from boxmaker.domain.value_objects import BoxSettings

    return BoxSettings(
        width=100.0,
        height=60.0,
        depth=80.0,
        material_thickness=3.0,
        finger_min=5.0,
        finger_max=15.0,
    )


# =============================================================================
# Shared layout fixtures
# =============================================================================


@pytest.fixture
def box_output(default_box_settings: "BoxSettings") -> "LayoutOutput":
    """Generated and packed layout for the default box."""
    from boxmaker.application.commands import GenerateBoxCommand

    return GenerateBoxCommand().execute(default_box_settings)
