"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    InfrastructureError,
    InvalidEmailError,
    ResolverNotConfiguredError,
    TemplateNotFoundError,
    TranslationCatalogError,
)

__all__ = [
    "InfrastructureError",
    "InvalidEmailError",
    "ResolverNotConfiguredError",
    "TemplateNotFoundError",
    "TranslationCatalogError",
]
