"""timeline_query domain layer.

Pure domain logic with no external dependencies.
Only imports: typing, dataclasses, enum, collections.abc
"""

from timeline_query.domain.exceptions import (
    CallbackError,
    DuplicateProviderIdError,
    InvalidExpressionError,
    InvalidProviderError,
    InvalidWindowError,
    ProviderNotFoundError,
    TimelineQueryError,
)

__all__ = [
    "CallbackError",
    "DuplicateProviderIdError",
    "InvalidExpressionError",
    "InvalidProviderError",
    "InvalidWindowError",
    "ProviderNotFoundError",
    "TimelineQueryError",
]
