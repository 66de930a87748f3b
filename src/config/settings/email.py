"""Settings de validação de e-mail.

Controla o estágio DNS do EmailValidator (opt-in) e o resolver usado.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from functools import lru_cache


@dataclass(frozen=True)
class EmailValidationSettings:
    """Configurações do EmailValidator.

    Attributes:
        check_dns: Default do estágio DNS quando o caller não informa
        dns_timeout_seconds: Tempo total máximo (lifetime) de uma consulta
        dns_nameservers: Nameservers explícitos (vazio = /etc/resolv.conf)
        fallback_to_a_record: Aceita domínio sem MX mas com A/AAAA
        denied_domains: Domínios vetados pelo DomainDenylistSubscriber
    """

    check_dns: bool = False
    dns_timeout_seconds: float = 5.0
    dns_nameservers: tuple[str, ...] = field(default_factory=tuple)
    fallback_to_a_record: bool = True
    denied_domains: tuple[str, ...] = field(default_factory=tuple)

    def validate(self) -> list[str]:
        """Valida configurações do validador de e-mail."""
        errors: list[str] = []
        if self.dns_timeout_seconds <= 0:
            errors.append("EMAIL_DNS_TIMEOUT_SECONDS deve ser > 0")
        if any(not ns.strip() for ns in self.dns_nameservers):
            errors.append("EMAIL_DNS_NAMESERVERS contém entrada vazia")
        return errors


def _parse_csv(raw: str) -> tuple[str, ...]:
    if not raw.strip():
        return ()
    return tuple(part.strip() for part in raw.split(","))


def _load_from_env() -> EmailValidationSettings:
    """Carrega EmailValidationSettings de variáveis de ambiente."""
    return EmailValidationSettings(
        check_dns=os.getenv("EMAIL_VALIDATION_CHECK_DNS", "false").lower() in ("true", "1"),
        dns_timeout_seconds=float(os.getenv("EMAIL_DNS_TIMEOUT_SECONDS", "5")),
        dns_nameservers=_parse_csv(os.getenv("EMAIL_DNS_NAMESERVERS", "")),
        fallback_to_a_record=(
            os.getenv("EMAIL_DNS_FALLBACK_TO_A_RECORD", "true").lower() in ("true", "1")
        ),
        denied_domains=_parse_csv(os.getenv("EMAIL_DENIED_DOMAINS", "")),
    )


@lru_cache(maxsize=1)
def get_email_validation_settings() -> EmailValidationSettings:
    """Retorna instância cacheada de EmailValidationSettings."""
    return _load_from_env()
