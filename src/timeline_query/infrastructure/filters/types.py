"""Filter type alias.

Python 3.12+ PEP 695 type alias syntax.
Filter function: takes a result row, returns True to include.
"""

from collections.abc import Callable

from timeline_query.domain.model.window import Row

type Filter = Callable[[Row], bool]
