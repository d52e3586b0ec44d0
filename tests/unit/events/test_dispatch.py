"""Tests for trigger under mutation and failure."""

from unittest.mock import MagicMock

import pytest


class ListenerFailed(Exception):
    pass


class TestDispatchErrors:
    def test_listener_exception_propagates(self, events):
        error = ListenerFailed("boom")

        def failing():
            raise error

        events.on("x", failing)

        with pytest.raises(ListenerFailed) as exc_info:
            events.trigger("x")

        assert exc_info.value is error

    def test_exception_aborts_remaining_listeners(self, events, callback1, callback2):
        events.on("x", callback1)
        events.on("x", MagicMock(side_effect=ListenerFailed()))
        events.on("x", callback2)
        events.on("all", callback2)

        with pytest.raises(ListenerFailed):
            events.trigger("x")

        callback1.assert_called_once_with()
        callback2.assert_not_called()

    def test_table_survives_failed_dispatch(self, events, callback1):
        events.on("x", MagicMock(side_effect=ListenerFailed()))
        events.on("x", callback1)

        with pytest.raises(ListenerFailed):
            events.trigger("x")

        assert len(events._events["x"]) == 2


class TestDispatchMutation:
    def test_listener_removing_itself(self, events, callback1):
        def once_by_hand():
            events.off("x", once_by_hand)

        events.on("x", once_by_hand)
        events.on("x", callback1)

        events.trigger("x")
        events.trigger("x")

        assert callback1.call_count == 2
        assert len(events._events["x"]) == 1

    def test_removed_listener_not_invoked_in_flight(self, events, callback1):
        events.on("x", lambda: events.off("x", callback1))
        events.on("x", callback1)

        events.trigger("x")

        callback1.assert_not_called()

    def test_reset_in_flight_stops_remaining(self, events, callback1):
        events.on("x", lambda: events.off())
        events.on("x", callback1)
        events.on("all", callback1)

        events.trigger("x")

        callback1.assert_not_called()

    def test_added_listener_waits_for_next_trigger(self, events, callback1):
        events.on("x", lambda: events.on("x", callback1))

        events.trigger("x")
        callback1.assert_not_called()

        events.trigger("x")
        callback1.assert_called_once_with()

    def test_nested_trigger_of_other_event(self, events):
        order = []
        events.on("outer", lambda: (order.append("outer"), events.trigger("inner")))
        events.on("inner", lambda: order.append("inner"))
        events.on("all", lambda name: order.append(f"all:{name}"))

        events.trigger("outer")

        assert order == ["outer", "inner", "all:inner", "all:outer"]

    def test_once_not_refired_by_reentrant_trigger(self, events):
        calls = []

        def handler():
            calls.append(1)
            events.trigger("y")

        events.once("y", handler)
        events.on("y", lambda: None)

        events.trigger("y")

        assert calls == [1]

    def test_all_event_triggered_directly(self, events, callback1):
        events.on("all", callback1)

        events.trigger("all", 1)

        assert callback1.call_count == 2
        callback1.assert_any_call(1)
        callback1.assert_any_call("all", 1)


class TestScenarios:
    def test_on_trigger_off(self, events, callback1):
        events.on("x", callback1)
        events.trigger("x", 1, 2)
        callback1.assert_called_once_with(1, 2)

        events.off("x", callback1)
        events.trigger("x")
        callback1.assert_called_once_with(1, 2)

    def test_once(self, events, callback1):
        events.once("y", callback1)

        events.trigger("y", "a")
        events.trigger("y", "b")

        callback1.assert_called_once_with("a")

    def test_all(self, events, callback1):
        events.on("all", callback1)

        events.trigger("q", 7)

        callback1.assert_called_once_with("q", 7)

    def test_event_map_equivalent_to_single_calls(self, events, target1, callback1):
        events.on("a b", callback1)
        target1.on("a", callback1)
        target1.on("b", callback1)

        assert list(events._events) == list(target1._events)

        events.trigger({"a": 1, "b": 2}, "x")
        assert [c.args for c in callback1.call_args_list] == [(1, "x"), (2, "x")]
