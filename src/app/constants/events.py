"""Nomes de eventos despachados pelo barramento da aplicação."""

from __future__ import annotations

from enum import StrEnum


class EmailEvents(StrEnum):
    """Eventos do domínio de e-mail."""

    # Payload: EmailValidationEvent. Listeners podem vetar o endereço.
    ON_EMAIL_VALIDATION = "mailguard.email.on_email_validation"


class CoreEvents(StrEnum):
    """Eventos de núcleo (views/conteúdo)."""

    # Payload: CustomContentEvent. Listeners injetam conteúdo/templates.
    VIEW_INJECT_CUSTOM_CONTENT = "mailguard.core.view_inject_custom_content"
