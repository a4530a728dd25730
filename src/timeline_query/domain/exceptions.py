"""Domain exceptions: all public errors of timeline_query.

Hexagonal architecture: all exceptions visible to users defined in domain.
Application/Infrastructure use these, not define their own public exceptions.

Unresolved provider references and out-of-range window parameters are NOT
errors here: the reducer treats the former as a no-op and the window
manager clamps the latter.
"""

from __future__ import annotations


class TimelineQueryError(Exception):
    """Base for all timeline_query exceptions.

    Allows: except TimelineQueryError to catch all library errors.
    """


class ProviderNotFoundError(TimelineQueryError, LookupError):
    """Registry lookup did not resolve.

    Inherits LookupError for semantic correctness (like KeyError).

    Attributes:
        provider_id: Top-level provider id that was looked up.
        and_provider_id: AND-member id, None for top-level lookups.
    """

    def __init__(self, provider_id: str, and_provider_id: str | None = None) -> None:
        """Initialize with the unresolved id pair."""
        self.provider_id = provider_id
        self.and_provider_id = and_provider_id
        if and_provider_id is None:
            msg = f"provider '{provider_id}' not found"
        else:
            msg = f"and provider '{and_provider_id}' not found in provider '{provider_id}'"
        super().__init__(msg)


class InvalidProviderError(TimelineQueryError, ValueError):
    """Provider violates a structural invariant.

    FAIL-FIRST: raised at construction time.

    Attributes:
        provider_id: Id of the offending provider (may be empty).
        reason: Why the provider is invalid.
    """

    def __init__(self, provider_id: str, reason: str) -> None:
        """Initialize with provider id and reason."""
        if not reason:
            raise ValueError("reason must not be empty")
        self.provider_id = provider_id
        self.reason = reason
        super().__init__(f"Invalid provider '{provider_id}': {reason}")


class DuplicateProviderIdError(InvalidProviderError):
    """Two providers share an id inside the same scope.

    Attributes:
        scope: Parent provider id, None for the top-level list.
    """

    def __init__(self, provider_id: str, scope: str | None) -> None:
        """Initialize with duplicated id and its scope."""
        self.scope = scope
        where = "top-level providers" if scope is None else f"and group of '{scope}'"
        super().__init__(provider_id, f"duplicate id in {where}")


class InvalidWindowError(TimelineQueryError, ValueError):
    """Window configuration is malformed.

    Raised for configuration that can never be clamped into shape
    (no page size options, non-positive sizes). Out-of-range requests
    against a valid configuration are clamped instead.
    """


class InvalidExpressionError(TimelineQueryError, ValueError):
    """Serialized expression or provider document is malformed.

    Attributes:
        reason: What is wrong with the document.
    """

    def __init__(self, reason: str) -> None:
        """Initialize with reason."""
        self.reason = reason
        super().__init__(reason)


class CallbackError(TimelineQueryError):
    """Exception from a subscriber callback.

    Wraps the original exception. Preserves original traceback via __cause__.

    Attributes:
        callback: Name of the callback that raised.
        original: Original exception from callback.
    """

    def __init__(self, callback: str, original: BaseException) -> None:
        """Initialize with callback name and original exception."""
        self.callback = callback
        self.original = original
        super().__init__(f"{callback} raised: {type(original).__name__}: {original}")
        self.__cause__ = original
