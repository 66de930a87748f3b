"""Resolver de MX (com fallback A/AAAA) baseado em dnspython.

Um domínio é considerado apto a receber e-mail quando:
- possui ao menos um MX que não seja "null MX" (RFC 7505), ou
- não possui MX mas possui A/AAAA (RFC 5321 § 5.1), se o fallback
  estiver habilitado.

NXDOMAIN encerra a verificação imediatamente. Timeout e ausência de
nameservers contam como falha: não há retry.
"""

from __future__ import annotations

import logging
from typing import Any

import dns.exception
import dns.name
import dns.resolver

from app.protocols.domain_resolver import DomainResolverProtocol

logger = logging.getLogger(__name__)

_MX = "MX"
_ADDRESS_RECORD_TYPES = ("A", "AAAA")


class _DomainNotFound(Exception):
    """NXDOMAIN: nenhuma outra consulta faz sentido."""


class DnsMxResolver(DomainResolverProtocol):
    """Implementação de DomainResolverProtocol com dnspython.

    Args:
        timeout_seconds: Tempo total máximo por consulta (lifetime).
        nameservers: Nameservers explícitos; vazio usa o resolv.conf do host.
        fallback_to_a_record: Aceita domínio sem MX que tenha A/AAAA.
        resolver: Resolver pronto (testes); ignora nameservers/timeout.
    """

    def __init__(
        self,
        *,
        timeout_seconds: float = 5.0,
        nameservers: tuple[str, ...] = (),
        fallback_to_a_record: bool = True,
        resolver: dns.resolver.Resolver | None = None,
    ) -> None:
        self._timeout_seconds = timeout_seconds
        self._nameservers = nameservers
        self._fallback_to_a_record = fallback_to_a_record
        self._resolver = resolver

    def _get_resolver(self) -> dns.resolver.Resolver:
        # Lazy: Resolver() lê /etc/resolv.conf na construção
        if self._resolver is None:
            resolver = dns.resolver.Resolver(configure=not self._nameservers)
            if self._nameservers:
                resolver.nameservers = list(self._nameservers)
            resolver.lifetime = self._timeout_seconds
            resolver.timeout = self._timeout_seconds
            self._resolver = resolver
        return self._resolver

    def has_mail_exchanger(self, domain: str) -> bool:
        """True se o domínio aceita e-mail (MX ou, em fallback, A/AAAA)."""
        normalized = _to_ascii_domain(domain)
        if not normalized:
            return False

        try:
            mx_records = self._query(normalized, _MX)
            if mx_records:
                return any(str(record.exchange) != "." for record in mx_records)

            if not self._fallback_to_a_record:
                return False

            return any(self._query(normalized, rtype) for rtype in _ADDRESS_RECORD_TYPES)
        except _DomainNotFound:
            logger.info("dns_domain_not_found", extra={"domain": normalized})
            return False

    def _query(self, domain: str, record_type: str) -> list[Any]:
        """Retorna registros do tipo pedido; [] quando não há resposta útil."""
        try:
            answer = self._get_resolver().resolve(domain, record_type)
        except dns.resolver.NXDOMAIN as exc:
            raise _DomainNotFound(domain) from exc
        except (dns.resolver.NoAnswer, dns.resolver.NoNameservers):
            return []
        except dns.exception.Timeout:
            logger.warning(
                "dns_lookup_timeout",
                extra={"domain": domain, "record_type": record_type},
            )
            return []
        return list(answer)


def _to_ascii_domain(domain: str) -> str:
    """Normaliza o domínio para consulta (minúsculo, sem ponto final, IDNA)."""
    candidate = (domain or "").strip().rstrip(".").lower()
    if not candidate:
        return ""
    try:
        return dns.name.from_text(candidate).to_text(omit_final_dot=True)
    except (dns.exception.DNSException, UnicodeError):
        return ""
