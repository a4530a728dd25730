"""Tests for application/services/timeline.py.

Tests:
- Subscriber callback shapes
- Unresolved intents are silent
- CallbackError wrapping (transition stays committed)
- Undo/redo history
- Window state changes and free text
"""

from typing import Any

import pytest

from timeline_query.application.services.timeline import Timeline, TimelineCallbacks
from timeline_query.domain.exceptions import CallbackError
from timeline_query.domain.model.configuration import TimelineConfig
from timeline_query.domain.model.enums import Direction, KqlMode
from timeline_query.domain.model.expression import And, Match, RawQuery
from timeline_query.domain.model.intents import ToggleEnabled
from timeline_query.domain.model.registry import ProviderRegistry
from timeline_query.domain.model.window import Sort
from tests.factories import make_and_provider_registry, make_result_set, mock_data_providers


class Recorder:
    """Collects callback invocations as (name, args) pairs."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, tuple[Any, ...]]] = []

    def callbacks(self) -> TimelineCallbacks:
        return TimelineCallbacks(
            on_data_provider_removed=self._record("removed"),
            on_toggle_data_provider_enabled=self._record("enabled"),
            on_toggle_data_provider_excluded=self._record("excluded"),
            on_change_items_per_page=self._record("items_per_page"),
            on_change_sort=self._record("sort"),
        )

    def _record(self, name: str):  # noqa: ANN202
        def _callback(*args: Any) -> None:
            self.calls.append((name, args))

        return _callback


@pytest.fixture
def recorder() -> Recorder:
    return Recorder()


@pytest.fixture
def small_config() -> TimelineConfig:
    return TimelineConfig(items_per_page=5, items_per_page_options=(5, 10, 20))


@pytest.fixture
def and_timeline(recorder: Recorder, small_config: TimelineConfig) -> Timeline:
    return Timeline(
        make_and_provider_registry(),
        config=small_config,
        callbacks=recorder.callbacks(),
    )


class TestConstruction:
    """Tests for Timeline construction."""

    def test_defaults(self) -> None:
        timeline = Timeline()
        assert timeline.registry.is_empty
        assert timeline.state.items_per_page == 25
        assert timeline.state.page == 0
        assert timeline.kql_mode is KqlMode.FILTER
        assert timeline.show_pagination is False
        assert timeline.compiled_query.is_empty is True

    def test_accepts_provider_list(self) -> None:
        timeline = Timeline(mock_data_providers())
        assert len(timeline.registry) == 10
        assert timeline.show_pagination is True

    def test_accepts_registry_as_is(self) -> None:
        registry = make_and_provider_registry()
        assert Timeline(registry).registry is registry


class TestProviderCallbacks:
    """Tests for provider intents and their callback payloads."""

    def test_remove_provider(self, and_timeline: Timeline, recorder: Recorder) -> None:
        and_timeline.remove_provider("id-Provider 1")

        assert recorder.calls == [("removed", ("id-Provider 1",))]
        assert and_timeline.registry.is_empty
        assert and_timeline.show_pagination is False

    def test_remove_and_provider(self, and_timeline: Timeline, recorder: Recorder) -> None:
        and_timeline.remove_and_provider("id-Provider 1", "id-Provider 2")
        assert recorder.calls == [("removed", ("id-Provider 1", "id-Provider 2"))]

    def test_toggle_enabled_nested(self, and_timeline: Timeline, recorder: Recorder) -> None:
        and_timeline.toggle_enabled("id-Provider 1", "id-Provider 2")
        assert recorder.calls == [
            (
                "enabled",
                ({"providerId": "id-Provider 1", "andProviderId": "id-Provider 2", "enabled": False},),
            )
        ]

    def test_toggle_excluded_top_level(self, and_timeline: Timeline, recorder: Recorder) -> None:
        and_timeline.toggle_excluded("id-Provider 1")
        assert recorder.calls == [("excluded", ({"providerId": "id-Provider 1", "excluded": True},))]

    def test_unresolved_is_silent(self, and_timeline: Timeline, recorder: Recorder) -> None:
        before = and_timeline.registry
        result = and_timeline.toggle_enabled("id-Provider 2")

        assert result.applied is False
        assert and_timeline.registry is before
        assert recorder.calls == []
        assert and_timeline.can_undo is False

    def test_missing_callbacks_are_skipped(self) -> None:
        timeline = Timeline(make_and_provider_registry())
        result = timeline.remove_provider("id-Provider 1")
        assert result.applied is True

    def test_dispatch(self, and_timeline: Timeline, recorder: Recorder) -> None:
        and_timeline.dispatch(ToggleEnabled("id-Provider 1"))
        assert recorder.calls == [("enabled", ({"providerId": "id-Provider 1", "enabled": False},))]


class TestCallbackError:
    """Subscriber failures are wrapped, the transition stays committed."""

    def test_wraps_and_commits(self) -> None:
        def _fail(*args: Any) -> None:
            raise RuntimeError("subscriber down")

        timeline = Timeline(
            make_and_provider_registry(),
            callbacks=TimelineCallbacks(on_data_provider_removed=_fail),
        )

        with pytest.raises(CallbackError) as exc_info:
            timeline.remove_provider("id-Provider 1")

        assert exc_info.value.callback == "on_data_provider_removed"
        assert isinstance(exc_info.value.original, RuntimeError)
        assert timeline.registry.is_empty

    def test_names_toggle_slot(self) -> None:
        timeline = Timeline(
            make_and_provider_registry(),
            callbacks=TimelineCallbacks(on_toggle_data_provider_excluded=lambda payload: 1 / 0),
        )

        with pytest.raises(CallbackError, match="on_toggle_data_provider_excluded"):
            timeline.toggle_excluded("id-Provider 1", "id-Provider 3")


class TestHistory:
    """Tests for undo/redo."""

    def test_undo_restores_previous_registry(self, and_timeline: Timeline) -> None:
        original = and_timeline.registry
        and_timeline.remove_provider("id-Provider 1")

        assert and_timeline.undo() is True
        assert and_timeline.registry is original
        assert and_timeline.can_undo is False

    def test_redo(self, and_timeline: Timeline) -> None:
        and_timeline.toggle_enabled("id-Provider 1")
        toggled = and_timeline.registry
        and_timeline.undo()

        assert and_timeline.redo() is True
        assert and_timeline.registry is toggled
        assert and_timeline.can_redo is False

    def test_new_intent_truncates_redo(self, and_timeline: Timeline) -> None:
        and_timeline.toggle_enabled("id-Provider 1")
        and_timeline.undo()
        and_timeline.toggle_excluded("id-Provider 1")

        assert and_timeline.can_redo is False
        assert and_timeline.registry.find("id-Provider 1").excluded is True
        assert and_timeline.registry.find("id-Provider 1").enabled is True

    def test_undo_redo_at_bounds(self) -> None:
        timeline = Timeline()
        assert timeline.undo() is False
        assert timeline.redo() is False

    def test_undo_does_not_notify(self, and_timeline: Timeline, recorder: Recorder) -> None:
        and_timeline.remove_provider("id-Provider 1")
        and_timeline.undo()
        assert len(recorder.calls) == 1


class TestWindow:
    """Tests for window state changes."""

    def test_change_items_per_page_reports_clamped(
        self, and_timeline: Timeline, recorder: Recorder
    ) -> None:
        and_timeline.go_to_page(3)
        state = and_timeline.change_items_per_page(7)

        assert state.items_per_page == 5
        assert state.page == 0
        assert recorder.calls == [("items_per_page", (5,))]

    def test_change_sort(self, and_timeline: Timeline, recorder: Recorder) -> None:
        sort = Sort("host.name", Direction.ASC)
        state = and_timeline.change_sort(sort)

        assert state.sort == sort
        assert recorder.calls == [("sort", (sort,))]

    def test_go_to_page_clamped(self, and_timeline: Timeline) -> None:
        assert and_timeline.go_to_page(99, row_count=23).page == 4

    def test_window(self, and_timeline: Timeline) -> None:
        and_timeline.change_sort(Sort("@timestamp", Direction.ASC))
        and_timeline.go_to_page(4)
        window = and_timeline.window(make_result_set(23))

        assert [r["seq"] for r in window.rows] == [20, 21, 22]

    def test_view(self, and_timeline: Timeline) -> None:
        view = and_timeline.view(make_result_set(3))

        assert view.registry is and_timeline.registry
        assert view.state is and_timeline.state
        assert view.window is not None
        assert view.show_pagination is True

    def test_view_without_results(self, and_timeline: Timeline) -> None:
        assert and_timeline.view().window is None


class TestFreeText:
    """Tests for change_kql_query."""

    def test_filter_mode(self) -> None:
        timeline = Timeline([mock_data_providers()[0]])
        timeline.change_kql_query("host.name: web-1")

        assert timeline.compiled_query.expression == And(
            (Match("name", "Provider 1"), RawQuery("host.name: web-1"))
        )

    def test_switch_mode(self) -> None:
        timeline = Timeline(ProviderRegistry.empty())
        timeline.change_kql_query("x: 1", KqlMode.SEARCH)

        assert timeline.kql_mode is KqlMode.SEARCH
        assert timeline.kql_expression == "x: 1"
        assert timeline.compiled_query.expression == RawQuery("x: 1")

    def test_mode_kept_when_not_given(self) -> None:
        timeline = Timeline(config=TimelineConfig(kql_mode=KqlMode.SEARCH))
        timeline.change_kql_query("x: 1")
        assert timeline.kql_mode is KqlMode.SEARCH
