"""Filters de logging para injeção de contexto e mascaramento.

Campos injetados:
- correlation_id: ID de rastreamento da requisição
- service: Nome do serviço (ex: mailguard)

Endereços de e-mail nunca devem chegar aos handlers em claro:
EmailMaskingFilter substitui qualquer endereço na mensagem final.
"""

from __future__ import annotations

import logging
import re
from re import Pattern
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from collections.abc import Callable

_EMAIL_PATTERN: Final[Pattern[str]] = re.compile(
    r"\b[A-Za-z0-9._%+'-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}\b"
)
EMAIL_MASK: Final[str] = "[EMAIL]"


class CorrelationIdFilter(logging.Filter):
    """Injeta correlation_id e service em cada record de log.

    Args:
        service_name: Nome do serviço para identificação nos logs.
        correlation_id_getter: Função que retorna o correlation_id atual.
            Se não fornecida, usa string vazia como fallback.
    """

    def __init__(
        self,
        service_name: str,
        correlation_id_getter: Callable[[], str] | None = None,
    ) -> None:
        super().__init__()
        self._service_name = service_name
        self._get_correlation_id = correlation_id_getter or (lambda: "")

    def filter(self, record: logging.LogRecord) -> bool:
        """Adiciona correlation_id e service ao record.

        Se correlation_id já foi passado via `extra`, preserva o valor.
        """
        existing = getattr(record, "correlation_id", None)
        record.correlation_id = existing if existing else self._get_correlation_id()
        record.service = self._service_name
        return True


class EmailMaskingFilter(logging.Filter):
    """Mascara endereços de e-mail na mensagem formatada do record."""

    def filter(self, record: logging.LogRecord) -> bool:
        message = record.getMessage()
        masked = _EMAIL_PATTERN.sub(EMAIL_MASK, message)
        if masked != message:
            # args já foram aplicados em getMessage()
            record.msg = masked
            record.args = None
        return True
