"""Provider registry: canonical store of providers and their AND-groups."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from timeline_query.domain.exceptions import DuplicateProviderIdError, ProviderNotFoundError
from timeline_query.domain.model.provider_key import ProviderKey

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from timeline_query.domain.model.provider import Provider


@dataclass(frozen=True, slots=True)
class ProviderRegistry:
    """Ordered, immutable list of top-level providers.

    Persistent value: transitions build a new registry that reuses every
    unchanged Provider object. Old registries stay valid and readable.

    Identity is scoped (see ProviderKey): ids are unique among top-level
    providers and among the members of each AND-group, not globally.

    Attributes:
        providers: Top-level providers, in display order
    """

    providers: tuple[Provider, ...] = ()

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        seen: set[str] = set()
        for provider in self.providers:
            if provider.id in seen:
                raise DuplicateProviderIdError(provider.id, scope=None)
            seen.add(provider.id)

    @classmethod
    def from_providers(cls, providers: Iterable[Provider]) -> ProviderRegistry:
        """Create registry from an externally supplied initial list."""
        return cls(providers=tuple(providers))

    @classmethod
    def empty(cls) -> ProviderRegistry:
        """Create registry with no providers."""
        return cls()

    def list(self) -> tuple[Provider, ...]:
        """All top-level providers, in order."""
        return self.providers

    def find(self, provider_id: str, and_provider_id: str | None = None) -> Provider:
        """Resolve a provider by its compound id.

        Args:
            provider_id: Top-level provider id
            and_provider_id: AND-member id inside provider_id's group.
                None = address the top-level provider itself

        Returns:
            The addressed provider

        Raises:
            ProviderNotFoundError: If the id (or id pair) does not resolve
        """
        provider = self._find_top_level(provider_id)
        if provider is None:
            raise ProviderNotFoundError(provider_id, and_provider_id)
        if and_provider_id is None:
            return provider
        member = provider.find_and_provider(and_provider_id)
        if member is None:
            raise ProviderNotFoundError(provider_id, and_provider_id)
        return member

    def find_key(self, key: ProviderKey) -> Provider:
        """Resolve a provider by scoped key."""
        if key.scope is None:
            return self.find(key.local_id)
        return self.find(key.scope, key.local_id)

    def contains(self, provider_id: str, and_provider_id: str | None = None) -> bool:
        """Check if the compound id resolves."""
        provider = self._find_top_level(provider_id)
        if provider is None:
            return False
        if and_provider_id is None:
            return True
        return provider.find_and_provider(and_provider_id) is not None

    def index_of(self, provider_id: str) -> int | None:
        """Position of a top-level provider. None if absent."""
        for i, provider in enumerate(self.providers):
            if provider.id == provider_id:
                return i
        return None

    def keys(self) -> Iterator[ProviderKey]:
        """All scoped keys in display order (parent before its members)."""
        for provider in self.providers:
            yield ProviderKey(scope=None, local_id=provider.id)
            for member in provider.and_providers:
                yield ProviderKey(scope=provider.id, local_id=member.id)

    def replace_at(self, index: int, provider: Provider) -> ProviderRegistry:
        """New registry with the provider at index swapped out."""
        providers = self.providers[:index] + (provider,) + self.providers[index + 1 :]
        return ProviderRegistry(providers=providers)

    def without_index(self, index: int) -> ProviderRegistry:
        """New registry with the provider at index dropped."""
        return ProviderRegistry(providers=self.providers[:index] + self.providers[index + 1 :])

    @property
    def is_empty(self) -> bool:
        """True when there are no top-level providers."""
        return not self.providers

    @property
    def provider_count(self) -> int:
        """Number of top-level providers."""
        return len(self.providers)

    @property
    def total_count(self) -> int:
        """Number of providers including AND-members."""
        return sum(1 + len(p.and_providers) for p in self.providers)

    def __len__(self) -> int:
        """Number of top-level providers."""
        return len(self.providers)

    def __iter__(self) -> Iterator[Provider]:
        """Iterate top-level providers."""
        return iter(self.providers)

    def _find_top_level(self, provider_id: str) -> Provider | None:
        for provider in self.providers:
            if provider.id == provider_id:
                return provider
        return None
