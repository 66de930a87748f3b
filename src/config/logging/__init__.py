"""Configuração de logging estruturado.

Uso:
    from config.logging import configure_logging, get_logger

    configure_logging(level="INFO", service_name="mailguard")
    logger = get_logger(__name__)

Campos obrigatórios em todo log:
- correlation_id
- service
- level
- logger
- message
- asctime
"""

from config.logging.config import (
    configure_logging,
    get_logger,
    log_validation_rejected,
)
from config.logging.filters import EMAIL_MASK, CorrelationIdFilter, EmailMaskingFilter
from config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
    create_plain_formatter,
)

__all__ = [
    "EMAIL_MASK",
    "FIELD_RENAME_MAP",
    "REQUIRED_LOG_FIELDS",
    "CorrelationIdFilter",
    "EmailMaskingFilter",
    "configure_logging",
    "create_json_formatter",
    "create_plain_formatter",
    "get_logger",
    "log_validation_rejected",
]
