"""Agregador de settings do mailguard.

Re-exporta todas as settings e funções de cada módulo.
"""

from __future__ import annotations

from config.settings.base import (
    BaseSettings,
    Environment,
    get_base_settings,
)
from config.settings.content import (
    ContentSettings,
    get_content_settings,
)
from config.settings.email import (
    EmailValidationSettings,
    get_email_validation_settings,
)

__all__ = [
    "BaseSettings",
    "ContentSettings",
    "EmailValidationSettings",
    "Environment",
    "get_base_settings",
    "get_content_settings",
    "get_email_validation_settings",
]
