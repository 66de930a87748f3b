"""Protocolo do barramento de eventos síncrono."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TypeVar

EventT = TypeVar("EventT")


class EventDispatcherProtocol(ABC):
    """Contrato mínimo: despacha o evento e devolve o mesmo objeto.

    Listeners mutam o evento in-place; o caller inspeciona o retorno.
    """

    @abstractmethod
    def dispatch(self, event: EventT, event_name: str) -> EventT: ...
