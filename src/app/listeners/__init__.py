"""Listeners/subscribers registrados no EventDispatcher pelo bootstrap."""

from __future__ import annotations

from app.listeners.domain_denylist import DomainDenylistSubscriber

__all__ = ["DomainDenylistSubscriber"]
