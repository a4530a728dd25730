"""Tests for domain/model/intents.py, payloads.py and reduction.py.

Tests:
- Intent validation and scoped keys
- Payload callback shapes (compatibility contract)
- Reduction invariants
"""

import pytest

from timeline_query.domain.model.enums import ToggleField
from timeline_query.domain.model.intents import (
    RemoveAndProvider,
    RemoveProvider,
    ToggleEnabled,
    ToggleExcluded,
)
from timeline_query.domain.model.payloads import (
    AndProviderRemoved,
    NestedToggle,
    ProviderRemoved,
    TopLevelToggle,
    UnresolvedReference,
)
from timeline_query.domain.model.provider_key import ProviderKey
from timeline_query.domain.model.reduction import Reduction
from timeline_query.domain.model.registry import ProviderRegistry


class TestIntents:
    """Tests for intent value objects."""

    def test_remove_provider_key(self) -> None:
        assert RemoveProvider("p1").key == ProviderKey(None, "p1")

    def test_remove_and_provider_key(self) -> None:
        assert RemoveAndProvider("p1", "a1").key == ProviderKey("p1", "a1")

    def test_toggle_key(self) -> None:
        assert ToggleEnabled("p1").key == ProviderKey(None, "p1")
        assert ToggleExcluded("p1", "a1").key == ProviderKey("p1", "a1")

    def test_toggle_fields(self) -> None:
        assert ToggleEnabled("p1").toggle_field is ToggleField.ENABLED
        assert ToggleExcluded("p1").toggle_field is ToggleField.EXCLUDED

    def test_toggle_kinds_not_equal(self) -> None:
        assert ToggleEnabled("p1") != ToggleExcluded("p1")
        assert ToggleEnabled("p1") == ToggleEnabled("p1")

    @pytest.mark.parametrize(
        "factory",
        [
            lambda: RemoveProvider(""),
            lambda: RemoveAndProvider("", "a"),
            lambda: RemoveAndProvider("p", ""),
            lambda: ToggleEnabled(""),
            lambda: ToggleExcluded("p", ""),
        ],
    )
    def test_empty_ids_raise(self, factory) -> None:  # noqa: ANN001
        with pytest.raises(ValueError, match="must"):
            factory()

    def test_frozen(self) -> None:
        intent = ToggleEnabled("p1")
        with pytest.raises(AttributeError):
            intent.provider_id = "p2"  # type: ignore[misc]


class TestPayloads:
    """Tests for callback payload shapes."""

    def test_provider_removed_args(self) -> None:
        assert ProviderRemoved("id-Provider 1").as_args() == ("id-Provider 1",)

    def test_and_provider_removed_args_order(self) -> None:
        payload = AndProviderRemoved("id-Provider 1", "id-Provider 2")
        assert payload.as_args() == ("id-Provider 1", "id-Provider 2")

    def test_top_level_enabled_dict(self) -> None:
        payload = TopLevelToggle("id-Provider 1", ToggleField.ENABLED, False)
        assert payload.to_dict() == {"providerId": "id-Provider 1", "enabled": False}

    def test_top_level_excluded_dict(self) -> None:
        payload = TopLevelToggle("id-Provider 1", ToggleField.EXCLUDED, True)
        assert payload.to_dict() == {"providerId": "id-Provider 1", "excluded": True}

    def test_nested_dict_has_and_provider_id(self) -> None:
        payload = NestedToggle("id-Provider 1", "id-Provider 2", ToggleField.ENABLED, False)
        assert payload.to_dict() == {
            "andProviderId": "id-Provider 2",
            "enabled": False,
            "providerId": "id-Provider 1",
        }

    def test_top_level_dict_has_no_and_provider_id(self) -> None:
        payload = TopLevelToggle("p", ToggleField.EXCLUDED, True)
        assert "andProviderId" not in payload.to_dict()

    def test_unresolved_str(self) -> None:
        assert str(UnresolvedReference("p1")) == "p1"
        assert str(UnresolvedReference("p1", "a1")) == "p1/a1"


class TestReduction:
    """Tests for Reduction."""

    def test_applied(self) -> None:
        result = Reduction(registry=ProviderRegistry.empty(), payload=ProviderRemoved("p"))
        assert result.applied is True

    def test_unresolved(self) -> None:
        result = Reduction(registry=ProviderRegistry.empty(), unresolved=UnresolvedReference("p"))
        assert result.applied is False

    def test_neither_raises(self) -> None:
        with pytest.raises(ValueError, match="exactly one"):
            Reduction(registry=ProviderRegistry.empty())

    def test_both_raise(self) -> None:
        with pytest.raises(ValueError, match="exactly one"):
            Reduction(
                registry=ProviderRegistry.empty(),
                payload=ProviderRemoved("p"),
                unresolved=UnresolvedReference("p"),
            )
