"""Root conftest: enable the timeline_query pytest plugin."""

pytest_plugins = ["timeline_query.presentation.pytest_plugin"]
