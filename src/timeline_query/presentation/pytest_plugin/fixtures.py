"""pytest fixtures for headless timeline testing.

Provides fixtures that drive the composition model without a UI.
User overrides timeline_providers (and optionally timeline_config) in
their conftest.py.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from timeline_query.application.services import Timeline
from timeline_query.domain.model.configuration import (
    DEFAULT_ITEMS_PER_PAGE,
    DEFAULT_ITEMS_PER_PAGE_OPTIONS,
    TimelineConfig,
)
from timeline_query.domain.model.registry import ProviderRegistry

if TYPE_CHECKING:
    from timeline_query.domain.model.provider import Provider


def _get_ini_value(config: pytest.Config, name: str, default: str) -> str:
    """Get ini value from pytest config with fallback.

    Args:
        config: pytest Config object
        name: ini option name
        default: default value if not set

    Returns:
        String value of ini option
    """
    value = config.getini(name)
    if value:
        return str(value)
    return default


def _parse_options(raw: str) -> tuple[int, ...]:
    """Parse "10, 25, 50" or "10 25 50" into a tuple of ints."""
    try:
        return tuple(int(part) for part in raw.replace(",", " ").split())
    except ValueError as e:
        raise pytest.UsageError(f"timeline_items_per_page_options: {e}") from e


@pytest.fixture
def timeline_config(request: pytest.FixtureRequest) -> TimelineConfig:
    """Timeline configuration.

    Reads timeline_items_per_page and timeline_items_per_page_options from
    pytest.ini / pyproject.toml. Override in conftest.py for anything else.

    Returns:
        TimelineConfig
    """
    options = _parse_options(
        _get_ini_value(
            request.config,
            "timeline_items_per_page_options",
            " ".join(str(n) for n in DEFAULT_ITEMS_PER_PAGE_OPTIONS),
        )
    )
    raw_size = _get_ini_value(
        request.config, "timeline_items_per_page", str(DEFAULT_ITEMS_PER_PAGE)
    )
    try:
        items_per_page = int(raw_size)
    except ValueError as e:
        raise pytest.UsageError(f"timeline_items_per_page: {e}") from e
    return TimelineConfig(items_per_page=items_per_page, items_per_page_options=options)


@pytest.fixture
def timeline_providers() -> tuple[Provider, ...]:
    """Initial provider list.

    User overrides this fixture in their conftest.py.

    Returns:
        Empty tuple (no providers)
    """
    return ()


@pytest.fixture
def timeline_registry(timeline_providers: tuple[Provider, ...]) -> ProviderRegistry:
    """Registry built from timeline_providers.

    Returns:
        ProviderRegistry
    """
    return ProviderRegistry.from_providers(timeline_providers)


@pytest.fixture
def timeline(timeline_registry: ProviderRegistry, timeline_config: TimelineConfig) -> Timeline:
    """Fresh Timeline session per test.

    Returns:
        Timeline with no subscribers
    """
    return Timeline(timeline_registry, config=timeline_config)
