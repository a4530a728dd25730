"""User intents accepted by the composition reducer.

Ids originate from user interaction on possibly-stale rendered state,
so intents are plain value objects and may address providers that no
longer exist.
"""

from __future__ import annotations

from dataclasses import dataclass

from timeline_query.domain.model.enums import ToggleField
from timeline_query.domain.model.provider_key import ProviderKey


@dataclass(frozen=True, slots=True)
class RemoveProvider:
    """Delete a top-level provider together with its AND-group."""

    provider_id: str

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.provider_id:
            raise ValueError("provider_id must not be empty")

    @property
    def key(self) -> ProviderKey:
        """Scoped key of the addressed provider."""
        return ProviderKey.of(self.provider_id)


@dataclass(frozen=True, slots=True)
class RemoveAndProvider:
    """Delete one member of a provider's AND-group."""

    provider_id: str
    and_provider_id: str

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.provider_id:
            raise ValueError("provider_id must not be empty")
        if not self.and_provider_id:
            raise ValueError("and_provider_id must not be empty")

    @property
    def key(self) -> ProviderKey:
        """Scoped key of the addressed AND-member."""
        return ProviderKey.of(self.provider_id, self.and_provider_id)


@dataclass(frozen=True, slots=True)
class _Toggle:
    provider_id: str
    and_provider_id: str | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.provider_id:
            raise ValueError("provider_id must not be empty")
        if self.and_provider_id is not None and not self.and_provider_id:
            raise ValueError("and_provider_id must be None or non-empty")

    @property
    def key(self) -> ProviderKey:
        """Scoped key of the addressed provider or AND-member."""
        return ProviderKey.of(self.provider_id, self.and_provider_id)


@dataclass(frozen=True, slots=True)
class ToggleEnabled(_Toggle):
    """Flip `enabled` on a provider (and_provider_id None) or an AND-member."""

    toggle_field = ToggleField.ENABLED


@dataclass(frozen=True, slots=True)
class ToggleExcluded(_Toggle):
    """Flip `excluded` on a provider (and_provider_id None) or an AND-member."""

    toggle_field = ToggleField.EXCLUDED


Intent = RemoveProvider | RemoveAndProvider | ToggleEnabled | ToggleExcluded
