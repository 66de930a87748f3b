"""Serviços de aplicação: validação de e-mail e helpers de conteúdo."""

from app.services.content_helper import ContentHelper, escape_script_tags
from app.services.email_validator import EmailValidator

__all__ = ["ContentHelper", "EmailValidator", "escape_script_tags"]
