"""Protocolos e contratos do core da aplicação."""

from .domain_resolver import DomainResolverProtocol
from .event_dispatcher import EventDispatcherProtocol
from .template_renderer import TemplateRendererProtocol
from .translator import TranslatorProtocol

__all__ = [
    "DomainResolverProtocol",
    "EventDispatcherProtocol",
    "TemplateRendererProtocol",
    "TranslatorProtocol",
]
