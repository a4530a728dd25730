"""Callback payloads emitted by the reducer.

The dict/argument shapes are a compatibility contract with the
presentation layer: consumers pattern-match on the presence or absence
of `andProviderId`.
"""

from __future__ import annotations

from dataclasses import dataclass

from timeline_query.domain.model.enums import ToggleField


@dataclass(frozen=True, slots=True)
class ProviderRemoved:
    """A top-level provider (and its AND-group) was removed."""

    provider_id: str

    def as_args(self) -> tuple[str, ...]:
        """Positional callback arguments: (provider_id,)."""
        return (self.provider_id,)


@dataclass(frozen=True, slots=True)
class AndProviderRemoved:
    """One AND-member was removed."""

    provider_id: str
    and_provider_id: str

    def as_args(self) -> tuple[str, ...]:
        """Positional callback arguments: (provider_id, and_provider_id)."""
        return (self.provider_id, self.and_provider_id)


@dataclass(frozen=True, slots=True)
class TopLevelToggle:
    """A top-level provider's enabled/excluded flag changed.

    Attributes:
        provider_id: Addressed provider
        toggle_field: Which flag changed
        value: New value of the flag
    """

    provider_id: str
    toggle_field: ToggleField
    value: bool

    def to_dict(self) -> dict[str, object]:
        """Callback shape: {"providerId", "<field>"}."""
        return {"providerId": self.provider_id, self.toggle_field.value: self.value}


@dataclass(frozen=True, slots=True)
class NestedToggle:
    """An AND-member's enabled/excluded flag changed.

    Attributes:
        provider_id: Parent provider
        and_provider_id: Addressed AND-member
        toggle_field: Which flag changed
        value: New value of the flag
    """

    provider_id: str
    and_provider_id: str
    toggle_field: ToggleField
    value: bool

    def to_dict(self) -> dict[str, object]:
        """Callback shape: {"providerId", "andProviderId", "<field>"}."""
        return {
            "providerId": self.provider_id,
            "andProviderId": self.and_provider_id,
            self.toggle_field.value: self.value,
        }


RemovalPayload = ProviderRemoved | AndProviderRemoved
TogglePayload = TopLevelToggle | NestedToggle
Payload = RemovalPayload | TogglePayload


@dataclass(frozen=True, slots=True)
class UnresolvedReference:
    """An intent addressed an id (or id pair) absent from the registry.

    Expected transient UI state, never raised.
    """

    provider_id: str
    and_provider_id: str | None = None

    def __str__(self) -> str:
        """Format as provider_id or provider_id/and_provider_id."""
        if self.and_provider_id is None:
            return self.provider_id
        return f"{self.provider_id}/{self.and_provider_id}"
