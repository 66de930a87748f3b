"""Constantes da aplicação."""

from app.constants.events import CoreEvents, EmailEvents

__all__ = ["CoreEvents", "EmailEvents"]
