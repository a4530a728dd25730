"""Domain enumerations."""

from enum import Enum


class ToggleField(Enum):
    """Boolean provider attribute addressed by a toggle intent."""

    ENABLED = "enabled"
    EXCLUDED = "excluded"


class Direction(Enum):
    """Sort direction."""

    ASC = "asc"
    DESC = "desc"


class KqlMode(Enum):
    """How the free-text query combines with the providers.

    FILTER: providers AND text
    SEARCH: providers OR text
    """

    FILTER = "filter"
    SEARCH = "search"
