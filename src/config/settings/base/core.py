"""Settings comuns do mailguard: ambiente, nome do serviço e logging."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Final, Literal, get_args

Environment = Literal["development", "test", "staging", "production"]

_ENVIRONMENTS: Final[frozenset[str]] = frozenset(get_args(Environment))
_ENVIRONMENT_ALIASES: Final[dict[str, Environment]] = {
    "prod": "production",
    "stage": "staging",
    "dev": "development",
}
_STRICT_ENVIRONMENTS: Final[frozenset[str]] = frozenset({"staging", "production"})
_LOG_LEVELS: Final[frozenset[str]] = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


@dataclass(frozen=True)
class BaseSettings:
    """Configurações lidas por todo o processo.

    Attributes:
        environment: development|test|staging|production
        service_name: Campo `service` dos logs
        debug: Modo debug ativo
        log_level: Nível aplicado por initialize_app()
    """

    environment: Environment = "development"
    service_name: str = "mailguard"
    debug: bool = False
    log_level: str = "INFO"

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @property
    def is_strict(self) -> bool:
        """Staging e produção não sobem com configuração inválida."""
        return self.environment in _STRICT_ENVIRONMENTS

    def validate(self) -> list[str]:
        """Lista de erros de configuração (vazia = OK)."""
        errors: list[str] = []
        if self.environment not in _ENVIRONMENTS:
            errors.append(f"ENVIRONMENT inválido: {self.environment}")
        if not self.service_name:
            errors.append("SERVICE_NAME não pode ser vazio")
        if self.log_level not in _LOG_LEVELS:
            errors.append(f"LOG_LEVEL inválido: {self.log_level}")
        return errors


def _parse_environment(raw: str) -> Environment:
    """Normaliza ENVIRONMENT; valores desconhecidos viram development."""
    value = raw.strip().lower()
    if value in _ENVIRONMENT_ALIASES:
        return _ENVIRONMENT_ALIASES[value]
    if value in _ENVIRONMENTS:
        return value  # type: ignore[return-value]
    return "development"


def _load_base_from_env() -> BaseSettings:
    return BaseSettings(
        environment=_parse_environment(os.getenv("ENVIRONMENT", "development")),
        service_name=os.getenv("SERVICE_NAME", "mailguard"),
        debug=os.getenv("DEBUG", "").lower() in ("true", "1", "yes"),
        log_level=os.getenv("LOG_LEVEL", "INFO").strip().upper(),
    )


@lru_cache(maxsize=1)
def get_base_settings() -> BaseSettings:
    """Retorna instância cacheada de BaseSettings."""
    return _load_base_from_env()
