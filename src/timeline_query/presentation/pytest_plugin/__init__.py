"""pytest plugin for timeline_query.

Provides fixtures for headless timeline tests:
    timeline_config: Timeline configuration (ini-driven, override in conftest.py)
    timeline_providers: Initial provider list (override in conftest.py)
    timeline_registry: ProviderRegistry built from timeline_providers
    timeline: Timeline session

Enable in conftest.py:
    pytest_plugins = ["timeline_query.presentation.pytest_plugin"]

Configuration (pytest.ini or pyproject.toml):
    timeline_items_per_page: Initial page size (default: 25)
    timeline_items_per_page_options: Page size options (default: "10 25 50 100")
"""

from __future__ import annotations

from typing import TYPE_CHECKING

# Register fixtures from fixtures module
from timeline_query.presentation.pytest_plugin.fixtures import (
    timeline,
    timeline_config,
    timeline_providers,
    timeline_registry,
)

if TYPE_CHECKING:
    import pytest

# Export fixtures for pytest discovery
__all__ = [
    "timeline",
    "timeline_config",
    "timeline_providers",
    "timeline_registry",
]


def pytest_addoption(parser: pytest.Parser) -> None:
    """Register ini options."""
    parser.addini(
        "timeline_items_per_page",
        "Initial timeline page size",
        default="",
    )
    parser.addini(
        "timeline_items_per_page_options",
        "Timeline page size options, space or comma separated",
        default="",
    )


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest plugin with markers."""
    config.addinivalue_line(
        "markers",
        "timeline: mark test as timeline composition test",
    )
