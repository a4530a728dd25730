"""Tests for domain/model/registry.py.

Tests:
- Construction and scoped uniqueness
- Lookups (find, contains, index_of, keys)
- Copy-on-write helpers
"""

import pytest

from timeline_query.domain.exceptions import DuplicateProviderIdError, ProviderNotFoundError
from timeline_query.domain.model.provider_key import ProviderKey
from timeline_query.domain.model.registry import ProviderRegistry
from tests.factories import (
    make_and_provider_registry,
    make_provider,
    make_registry,
    mock_data_providers,
)


class TestConstruction:
    """Tests for ProviderRegistry construction."""

    def test_empty(self) -> None:
        registry = ProviderRegistry.empty()
        assert registry.is_empty is True
        assert registry.list() == ()
        assert len(registry) == 0

    def test_from_providers_keeps_order(self) -> None:
        providers = mock_data_providers()
        registry = ProviderRegistry.from_providers(iter(providers))
        assert registry.list() == providers
        assert [p.id for p in registry] == [p.id for p in providers]

    def test_duplicate_top_level_ids_raise(self) -> None:
        with pytest.raises(DuplicateProviderIdError) as exc_info:
            make_registry(make_provider("a"), make_provider("a"))
        assert exc_info.value.scope is None

    def test_same_id_in_different_groups_allowed(self) -> None:
        """Ids are not globally unique: two groups may share a member id."""
        shared = make_provider("shared")
        registry = make_registry(
            make_provider("a", and_providers=(shared,)),
            make_provider("b", and_providers=(shared,)),
        )
        assert registry.find("id-a", "id-shared") == registry.find("id-b", "id-shared")

    def test_top_level_id_may_reappear_in_group(self) -> None:
        registry = make_registry(
            make_provider("a", and_providers=(make_provider("b"),)),
            make_provider("b"),
        )
        assert registry.find("id-b") is registry.providers[1]
        assert registry.find("id-a", "id-b") is registry.providers[0].and_providers[0]

    def test_frozen(self) -> None:
        registry = make_registry(make_provider("a"))
        with pytest.raises(AttributeError):
            registry.providers = ()  # type: ignore[misc]

    def test_counts(self) -> None:
        registry = make_and_provider_registry()
        assert registry.provider_count == 1
        assert registry.total_count == 3


class TestLookup:
    """Tests for find/contains/index_of/keys."""

    def test_find_top_level(self) -> None:
        registry = make_and_provider_registry()
        assert registry.find("id-Provider 1").name == "Provider 1"

    def test_find_and_provider(self) -> None:
        registry = make_and_provider_registry()
        assert registry.find("id-Provider 1", "id-Provider 2").name == "Provider 2"

    def test_and_provider_not_addressable_as_top_level(self) -> None:
        registry = make_and_provider_registry()
        with pytest.raises(ProviderNotFoundError) as exc_info:
            registry.find("id-Provider 2")
        assert exc_info.value.provider_id == "id-Provider 2"

    def test_find_missing_and_provider(self) -> None:
        registry = make_and_provider_registry()
        with pytest.raises(ProviderNotFoundError) as exc_info:
            registry.find("id-Provider 1", "id-Provider 9")
        assert exc_info.value.and_provider_id == "id-Provider 9"

    def test_find_missing_parent(self) -> None:
        registry = make_and_provider_registry()
        with pytest.raises(ProviderNotFoundError):
            registry.find("id-Provider 9", "id-Provider 2")

    def test_find_key(self) -> None:
        registry = make_and_provider_registry()
        assert registry.find_key(ProviderKey.of("id-Provider 1")).name == "Provider 1"
        assert registry.find_key(ProviderKey.of("id-Provider 1", "id-Provider 3")).name == (
            "Provider 3"
        )

    def test_contains(self) -> None:
        registry = make_and_provider_registry()
        assert registry.contains("id-Provider 1") is True
        assert registry.contains("id-Provider 1", "id-Provider 2") is True
        assert registry.contains("id-Provider 2") is False
        assert registry.contains("id-Provider 1", "id-Provider 4") is False
        assert registry.contains("nope", "id-Provider 2") is False

    def test_index_of(self) -> None:
        registry = ProviderRegistry.from_providers(mock_data_providers())
        assert registry.index_of("id-Provider 1") == 0
        assert registry.index_of("id-Provider 10") == 9
        assert registry.index_of("missing") is None

    def test_keys_parent_before_members(self) -> None:
        registry = make_and_provider_registry()
        assert list(registry.keys()) == [
            ProviderKey(None, "id-Provider 1"),
            ProviderKey("id-Provider 1", "id-Provider 2"),
            ProviderKey("id-Provider 1", "id-Provider 3"),
        ]


class TestCopyOnWrite:
    """Tests for replace_at/without_index."""

    def test_replace_at_shares_other_providers(self) -> None:
        registry = ProviderRegistry.from_providers(mock_data_providers()[:3])
        updated = registry.replace_at(1, make_provider("X"))

        assert updated.providers[1].name == "X"
        assert updated.providers[0] is registry.providers[0]
        assert updated.providers[2] is registry.providers[2]
        assert registry.providers[1].name == "Provider 2"

    def test_without_index(self) -> None:
        registry = ProviderRegistry.from_providers(mock_data_providers()[:3])
        updated = registry.without_index(0)

        assert [p.id for p in updated] == ["id-Provider 2", "id-Provider 3"]
        assert len(registry) == 3
