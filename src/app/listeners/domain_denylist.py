"""Veto de endereços por lista de domínios bloqueados.

Um domínio bloqueado também bloqueia seus subdomínios
(``mailinator.com`` bloqueia ``eu.mailinator.com``).
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Final

from app.constants.events import EmailEvents
from app.events.email_validation import EmailValidationEvent
from app.protocols.translator import TranslatorProtocol

logger = logging.getLogger(__name__)

MSG_DENIED_DOMAIN: Final[str] = "mailguard.email.address.denied_domain"


class DomainDenylistSubscriber:
    """Marca como inválido todo endereço de domínio bloqueado."""

    def __init__(self, denied_domains: Iterable[str], translator: TranslatorProtocol) -> None:
        self._denied = frozenset(d.strip().lower().rstrip(".") for d in denied_domains if d.strip())
        self._translator = translator

    def get_subscribed_events(self) -> Mapping[str, str]:
        return {EmailEvents.ON_EMAIL_VALIDATION: "on_email_validation"}

    def is_denied(self, domain: str) -> bool:
        labels = domain.strip().lower().rstrip(".").split(".")
        return any(".".join(labels[i:]) in self._denied for i in range(len(labels)))

    def on_email_validation(self, event: EmailValidationEvent) -> None:
        if not event.is_valid():
            return
        _, _, domain = event.address.rpartition("@")
        if domain and self.is_denied(domain):
            logger.info("email_domain_denied", extra={"domain": domain.lower()})
            event.set_invalid(self._translator.trans(MSG_DENIED_DOMAIN, {"%domain%": domain}))
