"""Eventos e barramento síncrono da aplicação.

Uso:
    from app.events import EventDispatcher, EmailValidationEvent
    from app.constants import EmailEvents

    dispatcher = EventDispatcher()
    dispatcher.add_listener(EmailEvents.ON_EMAIL_VALIDATION, my_listener)
    event = dispatcher.dispatch(EmailValidationEvent("john@gmail.com"), EmailEvents.ON_EMAIL_VALIDATION)
"""

from app.events.base import Event
from app.events.custom_content import CustomContentEvent
from app.events.dispatcher import EventDispatcher, EventSubscriber
from app.events.email_validation import EmailValidationEvent

__all__ = [
    "CustomContentEvent",
    "EmailValidationEvent",
    "Event",
    "EventDispatcher",
    "EventSubscriber",
]
