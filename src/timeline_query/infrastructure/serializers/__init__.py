"""Serializers for compiled expressions and provider lists.

KQL text for query execution, JSON-compatible dicts for persistence
and transport.
"""

from timeline_query.infrastructure.serializers.json import (
    dumps,
    expression_from_dict,
    expression_to_dict,
    loads,
    provider_from_dict,
    provider_to_dict,
    providers_from_dicts,
    providers_to_dicts,
)
from timeline_query.infrastructure.serializers.kql import quote, to_kql

__all__ = [
    "dumps",
    "expression_from_dict",
    "expression_to_dict",
    "loads",
    "provider_from_dict",
    "provider_to_dict",
    "providers_from_dicts",
    "providers_to_dicts",
    "quote",
    "to_kql",
]
