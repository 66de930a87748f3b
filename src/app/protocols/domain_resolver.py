"""Protocolo de verificação DNS de domínios de e-mail."""

from __future__ import annotations

from abc import ABC, abstractmethod


class DomainResolverProtocol(ABC):
    """Verifica se um domínio pode receber e-mail (MX, com fallback A/AAAA)."""

    @abstractmethod
    def has_mail_exchanger(self, domain: str) -> bool: ...
