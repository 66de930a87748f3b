"""Barramento de eventos síncrono em memória.

Listeners são chamados em ordem de prioridade (maior primeiro) e, dentro
da mesma prioridade, em ordem de registro. O dispatch bloqueia até o
último listener e devolve o próprio evento para inspeção.

Exceções levantadas por listeners propagam para o caller.
"""

from __future__ import annotations

import itertools
import logging
from collections import defaultdict
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any, Protocol, TypeVar

from app.events.base import Event
from app.protocols.event_dispatcher import EventDispatcherProtocol

logger = logging.getLogger(__name__)

EventT = TypeVar("EventT", bound=Event)
Listener = Callable[[Any], None]

# Valor aceito por subscriber: "metodo", ("metodo", prioridade) ou lista deles
SubscriptionSpec = str | tuple[str, int] | list[tuple[str, int]]


class EventSubscriber(Protocol):
    """Objeto que declara seus próprios listeners.

    get_subscribed_events() mapeia nome do evento para o nome do método
    (ou tupla método/prioridade, ou lista de tuplas).
    """

    def get_subscribed_events(self) -> Mapping[str, SubscriptionSpec]: ...


@dataclass(frozen=True)
class _Registration:
    listener: Listener
    priority: int
    sequence: int


class EventDispatcher(EventDispatcherProtocol):
    """Implementação padrão de EventDispatcherProtocol."""

    def __init__(self) -> None:
        self._registrations: dict[str, list[_Registration]] = defaultdict(list)
        self._sequence = itertools.count()

    def add_listener(self, event_name: str, listener: Listener, priority: int = 0) -> None:
        """Registra listener para o evento."""
        self._registrations[event_name].append(
            _Registration(listener=listener, priority=priority, sequence=next(self._sequence))
        )
        logger.debug(
            "event_listener_added",
            extra={"event_name": str(event_name), "priority": priority},
        )

    def remove_listener(self, event_name: str, listener: Listener) -> bool:
        """Remove listener; retorna False se não estava registrado."""
        registrations = self._registrations.get(event_name, [])
        kept = [r for r in registrations if r.listener != listener]
        if len(kept) == len(registrations):
            return False
        if kept:
            self._registrations[event_name] = kept
        else:
            del self._registrations[event_name]
        return True

    def add_subscriber(self, subscriber: EventSubscriber) -> None:
        """Registra todos os listeners declarados pelo subscriber."""
        for event_name, spec in subscriber.get_subscribed_events().items():
            for method_name, priority in _normalize_spec(spec):
                self.add_listener(event_name, getattr(subscriber, method_name), priority)

    def remove_subscriber(self, subscriber: EventSubscriber) -> None:
        for event_name, spec in subscriber.get_subscribed_events().items():
            for method_name, _ in _normalize_spec(spec):
                self.remove_listener(event_name, getattr(subscriber, method_name))

    def get_listeners(self, event_name: str) -> list[Listener]:
        """Listeners do evento na ordem em que serão chamados."""
        ordered = sorted(
            self._registrations.get(event_name, []),
            key=lambda r: (-r.priority, r.sequence),
        )
        return [r.listener for r in ordered]

    def has_listeners(self, event_name: str | None = None) -> bool:
        if event_name is None:
            return any(self._registrations.values())
        return bool(self._registrations.get(event_name))

    def dispatch(self, event: EventT, event_name: str) -> EventT:
        """Chama os listeners do evento e devolve o evento (mutado)."""
        listeners = self.get_listeners(event_name)
        called = 0
        for listener in listeners:
            if event.is_propagation_stopped():
                break
            listener(event)
            called += 1

        logger.debug(
            "event_dispatched",
            extra={
                "event_name": str(event_name),
                "listeners_total": len(listeners),
                "listeners_called": called,
            },
        )
        return event


def _normalize_spec(spec: SubscriptionSpec) -> list[tuple[str, int]]:
    if isinstance(spec, str):
        return [(spec, 0)]
    if isinstance(spec, tuple):
        return [spec]
    return list(spec)
