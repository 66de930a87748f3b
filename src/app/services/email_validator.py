"""Validador de endereços de e-mail em três estágios.

Ordem fixa, cada estágio encerra a validação na primeira falha:

1. Sintaxe: formato RFC (email-validator, sem DNS), TLD obrigatório,
   sem pontos consecutivos e sem caracteres proibidos.
2. Plugins: despacha EmailValidationEvent em
   EmailEvents.ON_EMAIL_VALIDATION; qualquer listener pode vetar.
3. DNS (opt-in): o domínio precisa ter MX (ou A/AAAA em fallback).

Todas as falhas levantam InvalidEmailError com motivo traduzido.
"""

from __future__ import annotations

import logging
from typing import Final

from email_validator import EmailNotValidError, validate_email

from app.constants.events import EmailEvents
from app.events.email_validation import EmailValidationEvent
from app.protocols.domain_resolver import DomainResolverProtocol
from app.protocols.event_dispatcher import EventDispatcherProtocol
from app.protocols.translator import TranslatorProtocol
from config.logging import log_validation_rejected
from utils.errors import InvalidEmailError, ResolverNotConfiguredError

logger = logging.getLogger(__name__)

MSG_INVALID: Final[str] = "mailguard.email.address.invalid"
MSG_INVALID_CHARACTERS: Final[str] = "mailguard.email.address.invalid_characters"
MSG_INVALID_DOMAIN: Final[str] = "mailguard.email.verification.invalid_domain"
PLUGIN_VETO: Final[str] = "plugin_veto"

# Aceitos pela RFC 5322 na parte local, mas recusados pela plataforma
INVALID_CHARACTERS: Final[frozenset[str]] = frozenset("^';&*%")


class EmailValidator:
    """Valida endereços de e-mail.

    Args:
        translator: Traduz os motivos de rejeição.
        dispatcher: Barramento onde listeners de validação estão registrados.
        resolver: Verificação DNS; obrigatório apenas se o estágio DNS for usado.
        check_dns_default: Valor de check_dns quando o caller passa None.
    """

    def __init__(
        self,
        translator: TranslatorProtocol,
        dispatcher: EventDispatcherProtocol,
        resolver: DomainResolverProtocol | None = None,
        *,
        check_dns_default: bool = False,
    ) -> None:
        self._translator = translator
        self._dispatcher = dispatcher
        self._resolver = resolver
        self._check_dns_default = check_dns_default

    def validate(self, address: str, check_dns: bool | None = None) -> None:
        """Valida o endereço; retorna None em caso de sucesso.

        Args:
            address: Endereço bruto.
            check_dns: Executa o estágio DNS. None usa o default configurado.

        Raises:
            InvalidEmailError: Em qualquer falha (sintaxe, plugin ou DNS).
        """
        if check_dns is None:
            check_dns = self._check_dns_default

        if not self.is_valid_format(address):
            self._reject(address, "syntax", MSG_INVALID, self._translator.trans(MSG_INVALID))

        if not self.has_valid_characters(address):
            self._reject(
                address,
                "syntax",
                MSG_INVALID_CHARACTERS,
                self._translator.trans(MSG_INVALID_CHARACTERS, {"%email%": address}),
            )

        self.do_plugin_validation(address)

        if check_dns:
            domain = self.get_domain(address)
            if not self.is_valid_domain(domain):
                self._reject(
                    address,
                    "dns",
                    MSG_INVALID_DOMAIN,
                    self._translator.trans(MSG_INVALID_DOMAIN, {"%domain%": domain}),
                )

        logger.debug("email_validated", extra={"domain": self.get_domain(address)})

    def do_plugin_validation(self, address: str) -> None:
        """Executa apenas o estágio de plugins (dispatch + veto).

        Raises:
            InvalidEmailError: Se algum listener marcou o evento como inválido.
        """
        event = self._dispatcher.dispatch(
            EmailValidationEvent(address=address),
            EmailEvents.ON_EMAIL_VALIDATION,
        )
        if not event.is_valid():
            reason = event.invalid_reason or self._translator.trans(MSG_INVALID)
            self._reject(address, "plugin", PLUGIN_VETO, reason)

    def is_valid_format(self, address: str) -> bool:
        """Formato RFC, TLD presente e sem pontos consecutivos.

        Domínios reservados (.test, .local, .onion...) passam: a sintaxe
        só exige que exista um TLD.
        """
        if not address or ".." in address:
            return False
        try:
            validated = validate_email(
                address, check_deliverability=False, globally_deliverable=False
            )
        except EmailNotValidError:
            return False
        return _has_tld(validated.ascii_domain)

    def has_valid_characters(self, address: str) -> bool:
        """False se houver espaço em branco ou caractere proibido."""
        return not any(ch.isspace() or ch in INVALID_CHARACTERS for ch in address)

    def is_valid_domain(self, domain: str) -> bool:
        """Verifica via DNS se o domínio recebe e-mail."""
        if self._resolver is None:
            raise ResolverNotConfiguredError(
                "EmailValidator sem DomainResolver: estágio DNS indisponível"
            )
        return self._resolver.has_mail_exchanger(domain)

    @staticmethod
    def get_domain(address: str) -> str:
        """Parte após o último '@' (vazio se não houver)."""
        _, sep, domain = (address or "").rpartition("@")
        return domain if sep else ""

    def _reject(self, address: str, stage: str, reason_key: str, reason: str) -> None:
        log_validation_rejected(logger, stage, self.get_domain(address), reason_key)
        raise InvalidEmailError(address, reason)


def _has_tld(ascii_domain: str) -> bool:
    """Exige ao menos um ponto e TLD não numérico."""
    _, sep, tld = ascii_domain.rstrip(".").rpartition(".")
    return bool(sep and tld) and not tld.isdigit()
