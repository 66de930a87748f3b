"""Formatters: JSON em produção, texto em desenvolvimento/testes.

Os dois expõem os mesmos campos; no JSON, `levelname` e `name` saem
como `level` e `logger`.
"""

from __future__ import annotations

import logging

from pythonjsonlogger.json import JsonFormatter

REQUIRED_LOG_FIELDS = frozenset(
    {"asctime", "levelname", "name", "message", "correlation_id", "service"}
)

FIELD_RENAME_MAP = {"levelname": "level", "name": "logger"}

PLAIN_FORMAT = "%(asctime)s %(levelname)s [%(service)s:%(correlation_id)s] %(name)s: %(message)s"


def create_json_formatter() -> JsonFormatter:
    """Formatter JSON para o handler raiz.

    Exemplo de linha:
        {"asctime": "...", "correlation_id": "abc-123", "level": "INFO",
         "logger": "app.services.email_validator",
         "message": "email_validation_rejected stage=dns",
         "service": "mailguard", "stage": "dns", "domain": "doe.shouldneverexist"}

    Campos passados via `extra` entram no JSON ao lado dos obrigatórios.
    """
    fields = " ".join(f"%({name})s" for name in sorted(REQUIRED_LOG_FIELDS))
    return JsonFormatter(fields, rename_fields=FIELD_RENAME_MAP)


def create_plain_formatter() -> logging.Formatter:
    return logging.Formatter(PLAIN_FORMAT)
