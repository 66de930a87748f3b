"""Configuração centralizada de logging.

Uso:
    from config.logging import configure_logging, get_logger

    # Uma vez, no bootstrap
    configure_logging(level="INFO", service_name="mailguard")

    # Em qualquer módulo
    logger = get_logger(__name__)
    logger.info("email_validated", extra={"domain": "gmail.com"})
"""

from __future__ import annotations

import logging
from typing import IO, TYPE_CHECKING

from config.logging.filters import CorrelationIdFilter, EmailMaskingFilter
from config.logging.formatters import create_json_formatter, create_plain_formatter

if TYPE_CHECKING:
    from collections.abc import Callable

VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

DEFAULT_SERVICE_NAME = "mailguard"


def configure_logging(
    level: str = "INFO",
    service_name: str = DEFAULT_SERVICE_NAME,
    correlation_id_getter: Callable[[], str] | None = None,
    *,
    json_output: bool = True,
    stream: IO[str] | None = None,
) -> None:
    """Instala um único handler no root logger.

    Chamadas repetidas substituem o handler anterior (sem duplicar saída).

    Args:
        level: DEBUG, INFO, WARNING, ERROR ou CRITICAL (case-insensitive).
        service_name: Valor do campo `service`.
        correlation_id_getter: Fonte do correlation_id do contexto atual
            (ex: app.observability.get_correlation_id).
        json_output: False usa o formatter texto (dev/testes).
        stream: Destino do handler; None usa sys.stderr.

    Raises:
        ValueError: Nível de log inválido.
    """
    level_name = level.upper()
    if level_name not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Nível de log inválido: {level}. Válidos: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )

    root = logging.getLogger()
    root.setLevel(level_name)
    for previous in root.handlers[:]:
        root.removeHandler(previous)
        previous.close()
    root.addHandler(
        _build_handler(level_name, service_name, correlation_id_getter, json_output, stream)
    )


def _build_handler(
    level_name: str,
    service_name: str,
    correlation_id_getter: Callable[[], str] | None,
    json_output: bool,
    stream: IO[str] | None,
) -> logging.Handler:
    handler = logging.StreamHandler(stream)
    handler.setLevel(level_name)
    handler.setFormatter(create_json_formatter() if json_output else create_plain_formatter())
    # Ordem importa: contexto primeiro, máscara por último
    handler.addFilter(CorrelationIdFilter(service_name, correlation_id_getter))
    handler.addFilter(EmailMaskingFilter())
    return handler


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def log_validation_rejected(
    logger: logging.Logger,
    stage: str,
    domain: str,
    reason_key: str | None = None,
) -> None:
    """Log observável de rejeição de e-mail (sem PII).

    Registra apenas o domínio e a chave do motivo; nem a parte local do
    endereço nem a mensagem traduzida (que pode contê-lo) são logadas.

    Args:
        logger: Logger do módulo que rejeitou.
        stage: "syntax", "plugin" ou "dns".
        domain: Domínio do endereço rejeitado (pode ser vazio).
        reason_key: Chave de mensagem ou identificador do motivo.
    """
    extra: dict[str, object] = {
        "component": "email_validator",
        "stage": stage,
        "domain": domain,
    }
    if reason_key:
        extra["reason_key"] = reason_key

    logger.info("email_validation_rejected stage=%s", stage, extra=extra)
