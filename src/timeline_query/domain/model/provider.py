"""Data provider entity."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING

from timeline_query.domain.exceptions import DuplicateProviderIdError, InvalidProviderError
from timeline_query.domain.model.enums import ToggleField

if TYPE_CHECKING:
    from timeline_query.domain.model.query_match import QueryMatch


@dataclass(frozen=True, slots=True)
class Provider:
    """A single filter criterion.

    Top-level providers may own a flat AND-group. Members of that group
    never own a group themselves (nesting depth <= 2).

    Attributes:
        id: Unique within its containing list (not globally)
        name: Display label
        query_match: Predicate contributed to the query
        enabled: False = contributes nothing, stays stored
        excluded: True = contribution is negated
        kql_query: Saved free-text KQL. Round-tripped through provider
            documents only; the compiler does not read it
        and_providers: AND-group members, in order
    """

    id: str
    name: str
    query_match: QueryMatch
    enabled: bool = True
    excluded: bool = False
    kql_query: str = ""
    and_providers: tuple[Provider, ...] = field(default=())

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.id:
            raise InvalidProviderError(self.id, "id must not be empty")

        seen: set[str] = set()
        for member in self.and_providers:
            if member.and_providers:
                raise InvalidProviderError(
                    member.id,
                    f"and provider of '{self.id}' must not have its own and providers",
                )
            if member.id in seen:
                raise DuplicateProviderIdError(member.id, scope=self.id)
            seen.add(member.id)

    @property
    def has_and_providers(self) -> bool:
        """Check if provider owns a non-empty AND-group."""
        return bool(self.and_providers)

    def find_and_provider(self, and_provider_id: str) -> Provider | None:
        """Get AND-member by id. O(k). None if absent."""
        for member in self.and_providers:
            if member.id == and_provider_id:
                return member
        return None

    def with_and_providers(self, and_providers: tuple[Provider, ...]) -> Provider:
        """Copy with a different AND-group."""
        return replace(self, and_providers=and_providers)

    def flag(self, toggle_field: ToggleField) -> bool:
        """Current value of the addressed boolean attribute."""
        match toggle_field:
            case ToggleField.ENABLED:
                return self.enabled
            case ToggleField.EXCLUDED:
                return self.excluded

    def toggled(self, toggle_field: ToggleField) -> Provider:
        """Copy with the addressed boolean attribute flipped."""
        match toggle_field:
            case ToggleField.ENABLED:
                return replace(self, enabled=not self.enabled)
            case ToggleField.EXCLUDED:
                return replace(self, excluded=not self.excluded)
