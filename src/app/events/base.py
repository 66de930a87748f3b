"""Evento base com controle de propagação."""

from __future__ import annotations


class Event:
    """Base de todos os eventos despachados pelo EventDispatcher.

    Um listener pode interromper a propagação: os listeners seguintes
    (menor prioridade ou registrados depois) não são chamados.
    """

    _propagation_stopped: bool = False

    def is_propagation_stopped(self) -> bool:
        return self._propagation_stopped

    def stop_propagation(self) -> None:
        self._propagation_stopped = True
