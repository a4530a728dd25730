"""Provider identity: (scope, local_id)."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ProviderKey:
    """Scoped provider identity.

    Provider ids are unique only inside their containing list, so a
    provider is addressed by the list it lives in plus its local id.

    Attributes:
        scope: Parent provider id. None = top-level list
        local_id: Provider id inside that scope
    """

    scope: str | None
    local_id: str

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.local_id:
            raise ValueError("local_id must not be empty")
        if self.scope is not None and not self.scope:
            raise ValueError("scope must be None or non-empty")

    @classmethod
    def of(cls, provider_id: str, and_provider_id: str | None = None) -> ProviderKey:
        """Build key from the external (provider_id, and_provider_id) pair."""
        if and_provider_id is None:
            return cls(scope=None, local_id=provider_id)
        return cls(scope=provider_id, local_id=and_provider_id)

    @property
    def is_top_level(self) -> bool:
        """True for keys in the top-level list."""
        return self.scope is None

    def __str__(self) -> str:
        """Format as local_id or scope/local_id."""
        if self.scope is None:
            return self.local_id
        return f"{self.scope}/{self.local_id}"
