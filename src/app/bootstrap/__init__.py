"""Bootstrap da aplicação — inicialização e wiring.

Composition root: configura logging, valida settings e conecta
implementações concretas aos protocolos.

Uso:
    from app.bootstrap import initialize_app, get_email_validator

    # Na inicialização do serviço
    initialize_app()

    validator = get_email_validator()
    validator.validate("john@gmail.com", check_dns=True)
"""

from __future__ import annotations

import logging
from functools import lru_cache

from app.observability import get_correlation_id
from config.logging import configure_logging
from config.settings import (
    get_base_settings,
    get_content_settings,
    get_email_validation_settings,
)

logger = logging.getLogger(__name__)


def initialize_app() -> None:
    """Inicializa logging JSON e valida settings obrigatórias."""
    base = get_base_settings()
    configure_logging(
        level=base.log_level,
        service_name=base.service_name,
        correlation_id_getter=get_correlation_id,
    )
    validate_runtime_settings()


def initialize_test_app() -> None:
    """Inicializa a aplicação para testes: DEBUG, formatter texto."""
    base = get_base_settings()
    configure_logging(
        level="DEBUG",
        service_name=f"{base.service_name}_test",
        correlation_id_getter=get_correlation_id,
        json_output=False,
    )


def validate_runtime_settings() -> None:
    """Valida settings obrigatórias no startup.

    Em `staging`/`production` falha rápido para impedir boot inválido.
    Em `development`/`test` mantém alerta sem bloquear execução local.
    """
    base = get_base_settings()
    errors: list[str] = []

    errors.extend(f"base: {error}" for error in base.validate())
    errors.extend(f"email: {error}" for error in get_email_validation_settings().validate())
    errors.extend(f"content: {error}" for error in get_content_settings().validate())

    if not errors:
        logger.info(
            "settings_validated",
            extra={"component": "bootstrap", "result": "ok", "environment": base.environment},
        )
        return

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "result": "failed",
            "environment": base.environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    if base.is_strict:
        details = "\n".join(f"- {error}" for error in errors)
        raise RuntimeError(f"Configuração inválida para {base.environment}:\n{details}")


# ──────────────────────────────────────────────────────────────────────────────
# Getters (lazy initialization com cache)
# ──────────────────────────────────────────────────────────────────────────────


@lru_cache(maxsize=1)
def get_translator():
    """Obtém translator (singleton)."""
    from app.bootstrap.dependencies import create_translator
    return create_translator()


@lru_cache(maxsize=1)
def get_event_dispatcher():
    """Obtém EventDispatcher compartilhado (singleton)."""
    from app.bootstrap.dependencies import create_event_dispatcher
    return create_event_dispatcher(get_translator())


@lru_cache(maxsize=1)
def get_domain_resolver():
    from app.bootstrap.dependencies import create_domain_resolver
    return create_domain_resolver()


@lru_cache(maxsize=1)
def get_template_renderer():
    from app.bootstrap.dependencies import create_template_renderer
    return create_template_renderer()


@lru_cache(maxsize=1)
def get_email_validator():
    """Obtém EmailValidator ligado ao dispatcher compartilhado."""
    from app.bootstrap.dependencies import create_email_validator
    return create_email_validator(get_translator(), get_event_dispatcher(), get_domain_resolver())


@lru_cache(maxsize=1)
def get_content_helper():
    """Obtém ContentHelper ligado ao dispatcher compartilhado."""
    from app.bootstrap.dependencies import create_content_helper
    return create_content_helper(get_template_renderer(), get_event_dispatcher())


def reset_singletons() -> None:
    """Limpa caches de getters e settings (testes)."""
    for getter in (
        get_translator,
        get_event_dispatcher,
        get_domain_resolver,
        get_template_renderer,
        get_email_validator,
        get_content_helper,
        get_base_settings,
        get_content_settings,
        get_email_validation_settings,
    ):
        getter.cache_clear()
