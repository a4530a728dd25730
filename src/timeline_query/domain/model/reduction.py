"""Result of applying one intent to a registry."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from timeline_query.domain.model.payloads import Payload, UnresolvedReference
    from timeline_query.domain.model.registry import ProviderRegistry


@dataclass(frozen=True, slots=True)
class Reduction:
    """New registry plus what the transition emitted.

    Exactly one of payload / unresolved is set.

    Attributes:
        registry: Registry after the intent (same object on no-op)
        payload: Callback payload of an applied intent
        unresolved: Reference that did not resolve (intent was a no-op)
    """

    registry: ProviderRegistry
    payload: Payload | None = None
    unresolved: UnresolvedReference | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if (self.payload is None) == (self.unresolved is None):
            raise ValueError("exactly one of payload/unresolved must be set")

    @property
    def applied(self) -> bool:
        """True if the intent changed the registry."""
        return self.payload is not None
