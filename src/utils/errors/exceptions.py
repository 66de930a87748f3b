"""Exceções compartilhadas entre serviços e infraestrutura."""

from __future__ import annotations


class InvalidEmailError(ValueError):
    """Endereço de e-mail rejeitado por qualquer estágio de validação.

    Attributes:
        email_address: Endereço avaliado (como recebido).
        message: Motivo legível (já traduzido).
    """

    def __init__(self, email_address: str, message: str) -> None:
        super().__init__(message)
        self.email_address = email_address
        self.message = message


class InfrastructureError(RuntimeError):
    """Base para falhas de infraestrutura (arquivos, catálogos, templates)."""


class TranslationCatalogError(InfrastructureError):
    """Catálogo de traduções ausente ou YAML inválido."""


class TemplateNotFoundError(InfrastructureError):
    """Template solicitado não existe no diretório configurado."""


class ResolverNotConfiguredError(InfrastructureError):
    """Estágio DNS pedido sem DomainResolver configurado."""
