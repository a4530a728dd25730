"""Reporters for query views.

PlainTextReporter uses stdlib only; ConsoleReporter renders with rich.
"""

from timeline_query.application.reporters._base import BaseReporter
from timeline_query.application.reporters.console import ConsoleConfig, ConsoleReporter
from timeline_query.application.reporters.json import JsonReporter
from timeline_query.application.reporters.plain_text import PlainTextReporter

__all__ = [
    "BaseReporter",
    "ConsoleConfig",
    "ConsoleReporter",
    "JsonReporter",
    "PlainTextReporter",
]
