"""Application services."""

from timeline_query.application.services.timeline import Timeline, TimelineCallbacks

__all__ = ["Timeline", "TimelineCallbacks"]
