"""Factories — criação de implementações concretas a partir das settings.

Único ponto onde protocolos são ligados às implementações de infra.
"""

from __future__ import annotations

import logging

from app.events.dispatcher import EventDispatcher
from app.infra.dns import DnsMxResolver
from app.infra.i18n import YamlTranslator
from app.infra.templating import FileTemplateRenderer
from app.listeners import DomainDenylistSubscriber
from app.protocols.domain_resolver import DomainResolverProtocol
from app.protocols.event_dispatcher import EventDispatcherProtocol
from app.protocols.template_renderer import TemplateRendererProtocol
from app.protocols.translator import TranslatorProtocol
from app.services.content_helper import ContentHelper
from app.services.email_validator import EmailValidator
from config.settings import (
    ContentSettings,
    EmailValidationSettings,
    get_content_settings,
    get_email_validation_settings,
)

logger = logging.getLogger(__name__)


def create_translator(settings: ContentSettings | None = None) -> TranslatorProtocol:
    """Cria YamlTranslator no locale configurado."""
    settings = settings or get_content_settings()
    translator = YamlTranslator(
        settings.translations_dir,
        locale=settings.locale,
        fallback_locale=settings.fallback_locale,
    )
    logger.info("translator_created", extra={"locale": settings.locale})
    return translator


def create_event_dispatcher(
    translator: TranslatorProtocol,
    settings: EmailValidationSettings | None = None,
) -> EventDispatcher:
    """Cria EventDispatcher com os subscribers padrão registrados.

    DomainDenylistSubscriber só é registrado se EMAIL_DENIED_DOMAINS
    tiver algum domínio.
    """
    settings = settings or get_email_validation_settings()
    dispatcher = EventDispatcher()
    if settings.denied_domains:
        dispatcher.add_subscriber(DomainDenylistSubscriber(settings.denied_domains, translator))
    logger.info(
        "event_dispatcher_created",
        extra={"denied_domains": len(settings.denied_domains)},
    )
    return dispatcher


def create_domain_resolver(
    settings: EmailValidationSettings | None = None,
) -> DomainResolverProtocol:
    """Cria DnsMxResolver com timeout/nameservers configurados."""
    settings = settings or get_email_validation_settings()
    return DnsMxResolver(
        timeout_seconds=settings.dns_timeout_seconds,
        nameservers=settings.dns_nameservers,
        fallback_to_a_record=settings.fallback_to_a_record,
    )


def create_template_renderer(settings: ContentSettings | None = None) -> TemplateRendererProtocol:
    settings = settings or get_content_settings()
    return FileTemplateRenderer(settings.templates_dir)


def create_email_validator(
    translator: TranslatorProtocol,
    dispatcher: EventDispatcherProtocol,
    resolver: DomainResolverProtocol,
    settings: EmailValidationSettings | None = None,
) -> EmailValidator:
    settings = settings or get_email_validation_settings()
    return EmailValidator(
        translator,
        dispatcher,
        resolver,
        check_dns_default=settings.check_dns,
    )


def create_content_helper(
    renderer: TemplateRendererProtocol,
    dispatcher: EventDispatcherProtocol,
) -> ContentHelper:
    return ContentHelper(renderer, dispatcher)
