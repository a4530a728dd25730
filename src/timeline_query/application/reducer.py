"""Composition reducer.

Pure function: (registry, intent) -> Reduction
No side effects. No IO. Deterministic.

Every applied intent returns a new registry that shares all unchanged
providers with the old one. The input registry is never modified.
Intents addressing unknown ids are no-ops: the same registry object is
returned along with an UnresolvedReference, nothing is raised.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

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
from timeline_query.domain.model.reduction import Reduction

if TYPE_CHECKING:
    from collections.abc import Iterable

    from timeline_query.domain.model.intents import Intent
    from timeline_query.domain.model.registry import ProviderRegistry

logger = logging.getLogger(__name__)


def reduce(registry: ProviderRegistry, intent: Intent) -> Reduction:
    """Apply one intent to the registry.

    Args:
        registry: Current registry (never modified)
        intent: User intent

    Returns:
        Reduction with the new registry and the emitted payload, or the
        unchanged registry and the unresolved reference
    """
    match intent:
        case RemoveProvider():
            result = remove_provider(registry, intent.provider_id)
        case RemoveAndProvider():
            result = remove_and_provider(registry, intent.provider_id, intent.and_provider_id)
        case ToggleEnabled():
            result = toggle_enabled(registry, intent.provider_id, intent.and_provider_id)
        case ToggleExcluded():
            result = toggle_excluded(registry, intent.provider_id, intent.and_provider_id)

    if result.unresolved is not None:
        logger.debug("%s ignored: %s not in registry", type(intent).__name__, result.unresolved)
    else:
        logger.debug("%s applied: %s", type(intent).__name__, result.payload)
    return result


def replay(registry: ProviderRegistry, intents: Iterable[Intent]) -> ProviderRegistry:
    """Fold a sequence of intents over a registry.

    replay(r, [i1, i2]) == reduce(reduce(r, i1).registry, i2).registry
    """
    for intent in intents:
        registry = reduce(registry, intent).registry
    return registry


def remove_provider(registry: ProviderRegistry, provider_id: str) -> Reduction:
    """Delete a top-level provider and its whole AND-group."""
    index = registry.index_of(provider_id)
    if index is None:
        return _unresolved(registry, provider_id)
    return Reduction(
        registry=registry.without_index(index),
        payload=ProviderRemoved(provider_id=provider_id),
    )


def remove_and_provider(
    registry: ProviderRegistry,
    provider_id: str,
    and_provider_id: str,
) -> Reduction:
    """Delete one AND-member. The parent persists, even with an empty group."""
    index = registry.index_of(provider_id)
    if index is None:
        return _unresolved(registry, provider_id, and_provider_id)

    parent = registry.providers[index]
    members = tuple(m for m in parent.and_providers if m.id != and_provider_id)
    if len(members) == len(parent.and_providers):
        return _unresolved(registry, provider_id, and_provider_id)

    return Reduction(
        registry=registry.replace_at(index, parent.with_and_providers(members)),
        payload=AndProviderRemoved(provider_id=provider_id, and_provider_id=and_provider_id),
    )


def toggle_enabled(
    registry: ProviderRegistry,
    provider_id: str,
    and_provider_id: str | None = None,
) -> Reduction:
    """Flip `enabled` on a provider, or on an AND-member when and_provider_id is given."""
    return _toggle(registry, ToggleEnabled(provider_id, and_provider_id))


def toggle_excluded(
    registry: ProviderRegistry,
    provider_id: str,
    and_provider_id: str | None = None,
) -> Reduction:
    """Flip `excluded` on a provider, or on an AND-member when and_provider_id is given."""
    return _toggle(registry, ToggleExcluded(provider_id, and_provider_id))


def _toggle(registry: ProviderRegistry, intent: ToggleEnabled | ToggleExcluded) -> Reduction:
    toggle_field = intent.toggle_field
    index = registry.index_of(intent.provider_id)
    if index is None:
        return _unresolved(registry, intent.provider_id, intent.and_provider_id)

    parent = registry.providers[index]

    if intent.and_provider_id is None:
        updated = parent.toggled(toggle_field)
        return Reduction(
            registry=registry.replace_at(index, updated),
            payload=TopLevelToggle(
                provider_id=intent.provider_id,
                toggle_field=toggle_field,
                value=updated.flag(toggle_field),
            ),
        )

    for position, member in enumerate(parent.and_providers):
        if member.id != intent.and_provider_id:
            continue
        updated = member.toggled(toggle_field)
        members = (
            parent.and_providers[:position] + (updated,) + parent.and_providers[position + 1 :]
        )
        return Reduction(
            registry=registry.replace_at(index, parent.with_and_providers(members)),
            payload=NestedToggle(
                provider_id=intent.provider_id,
                and_provider_id=intent.and_provider_id,
                toggle_field=toggle_field,
                value=updated.flag(toggle_field),
            ),
        )

    return _unresolved(registry, intent.provider_id, intent.and_provider_id)


def _unresolved(
    registry: ProviderRegistry,
    provider_id: str,
    and_provider_id: str | None = None,
) -> Reduction:
    return Reduction(
        registry=registry,
        unresolved=UnresolvedReference(provider_id=provider_id, and_provider_id=and_provider_id),
    )
