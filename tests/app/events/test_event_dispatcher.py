"""Testes para app/events/dispatcher.py.

Ordem de chamada, prioridade, subscribers, stop_propagation e erros.
"""

from __future__ import annotations

import pytest

from app.events import EmailValidationEvent, Event, EventDispatcher

EVENT = "test.event"


class RecordingSubscriber:
    """Subscriber com dois eventos e prioridades distintas."""

    def __init__(self) -> None:
        self.calls: list[str] = []

    def get_subscribed_events(self):
        return {
            EVENT: [("on_first", 10), ("on_last", -10)],
            "other.event": "on_other",
        }

    def on_first(self, event: Event) -> None:
        self.calls.append("first")

    def on_last(self, event: Event) -> None:
        self.calls.append("last")

    def on_other(self, event: Event) -> None:
        self.calls.append("other")


class TestDispatch:
    """Testes de dispatch."""

    def test_dispatch_returns_same_event(self) -> None:
        dispatcher = EventDispatcher()
        event = Event()
        assert dispatcher.dispatch(event, EVENT) is event

    def test_listeners_called_in_registration_order(self) -> None:
        dispatcher = EventDispatcher()
        calls: list[int] = []
        for i in range(3):
            dispatcher.add_listener(EVENT, lambda e, i=i: calls.append(i))

        dispatcher.dispatch(Event(), EVENT)

        assert calls == [0, 1, 2]

    def test_higher_priority_first_then_registration_order(self) -> None:
        dispatcher = EventDispatcher()
        calls: list[str] = []
        dispatcher.add_listener(EVENT, lambda e: calls.append("a0"))
        dispatcher.add_listener(EVENT, lambda e: calls.append("b5"), priority=5)
        dispatcher.add_listener(EVENT, lambda e: calls.append("c0"))
        dispatcher.add_listener(EVENT, lambda e: calls.append("d-1"), priority=-1)

        dispatcher.dispatch(Event(), EVENT)

        assert calls == ["b5", "a0", "c0", "d-1"]

    def test_only_listeners_of_event_name_called(self) -> None:
        dispatcher = EventDispatcher()
        calls: list[str] = []
        dispatcher.add_listener("a", lambda e: calls.append("a"))
        dispatcher.add_listener("b", lambda e: calls.append("b"))

        dispatcher.dispatch(Event(), "a")

        assert calls == ["a"]

    def test_stop_propagation_skips_remaining_listeners(self) -> None:
        dispatcher = EventDispatcher()
        calls: list[str] = []

        def stopper(event: Event) -> None:
            calls.append("stopper")
            event.stop_propagation()

        dispatcher.add_listener(EVENT, stopper)
        dispatcher.add_listener(EVENT, lambda e: calls.append("never"))

        event = dispatcher.dispatch(Event(), EVENT)

        assert calls == ["stopper"]
        assert event.is_propagation_stopped() is True

    def test_listeners_mutate_event_in_place(self) -> None:
        dispatcher = EventDispatcher()
        dispatcher.add_listener(EVENT, lambda e: e.set_invalid("first"))
        dispatcher.add_listener(EVENT, lambda e: e.set_invalid("second"))

        event = dispatcher.dispatch(EmailValidationEvent("john@gmail.com"), EVENT)

        assert event.is_valid() is False
        assert event.invalid_reason == "second"

    def test_listener_exception_propagates(self) -> None:
        dispatcher = EventDispatcher()

        def broken(event: Event) -> None:
            raise KeyError("boom")

        dispatcher.add_listener(EVENT, broken)

        with pytest.raises(KeyError):
            dispatcher.dispatch(Event(), EVENT)


class TestRegistration:
    """Testes de add/remove de listeners e subscribers."""

    def test_has_listeners(self) -> None:
        dispatcher = EventDispatcher()
        assert dispatcher.has_listeners() is False
        assert dispatcher.has_listeners(EVENT) is False

        dispatcher.add_listener(EVENT, print)

        assert dispatcher.has_listeners() is True
        assert dispatcher.has_listeners(EVENT) is True
        assert dispatcher.has_listeners("other") is False

    def test_remove_listener(self) -> None:
        dispatcher = EventDispatcher()
        listener = lambda e: None  # noqa: E731
        dispatcher.add_listener(EVENT, listener)

        assert dispatcher.remove_listener(EVENT, listener) is True
        assert dispatcher.has_listeners(EVENT) is False
        assert dispatcher.remove_listener(EVENT, listener) is False

    def test_add_subscriber_registers_with_priorities(self) -> None:
        dispatcher = EventDispatcher()
        subscriber = RecordingSubscriber()
        dispatcher.add_listener(EVENT, lambda e: subscriber.calls.append("plain"))
        dispatcher.add_subscriber(subscriber)

        dispatcher.dispatch(Event(), EVENT)
        dispatcher.dispatch(Event(), "other.event")

        assert subscriber.calls == ["first", "plain", "last", "other"]

    def test_get_listeners_order(self) -> None:
        dispatcher = EventDispatcher()
        subscriber = RecordingSubscriber()
        dispatcher.add_subscriber(subscriber)

        assert dispatcher.get_listeners(EVENT) == [subscriber.on_first, subscriber.on_last]
        assert dispatcher.get_listeners("missing") == []

    def test_remove_subscriber(self) -> None:
        dispatcher = EventDispatcher()
        subscriber = RecordingSubscriber()
        dispatcher.add_subscriber(subscriber)

        dispatcher.remove_subscriber(subscriber)

        assert dispatcher.has_listeners() is False
