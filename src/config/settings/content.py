"""Settings de conteúdo: idioma das mensagens e diretórios de assets."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

_APP_DIR = Path(__file__).resolve().parents[2] / "app"
DEFAULT_TEMPLATES_DIR = _APP_DIR / "templates"
DEFAULT_TRANSLATIONS_DIR = _APP_DIR / "infra" / "i18n" / "translations"


@dataclass(frozen=True)
class ContentSettings:
    """Configurações de conteúdo.

    Attributes:
        locale: Locale das mensagens de erro (ex: "en", "pt_BR")
        fallback_locale: Locale usado quando a chave falta no principal
        templates_dir: Diretório raiz dos templates de conteúdo customizado
        translations_dir: Diretório dos catálogos messages.<locale>.yaml
    """

    locale: str = "en"
    fallback_locale: str = "en"
    templates_dir: Path = DEFAULT_TEMPLATES_DIR
    translations_dir: Path = DEFAULT_TRANSLATIONS_DIR

    def validate(self) -> list[str]:
        """Valida configurações de conteúdo."""
        errors: list[str] = []
        if not self.locale:
            errors.append("CONTENT_LOCALE não pode ser vazio")
        if not self.translations_dir.is_dir():
            errors.append(f"CONTENT_TRANSLATIONS_DIR inexistente: {self.translations_dir}")
        if not self.templates_dir.is_dir():
            errors.append(f"CONTENT_TEMPLATES_DIR inexistente: {self.templates_dir}")
        return errors


def _load_from_env() -> ContentSettings:
    """Carrega ContentSettings de variáveis de ambiente."""
    return ContentSettings(
        locale=os.getenv("CONTENT_LOCALE", "en"),
        fallback_locale=os.getenv("CONTENT_FALLBACK_LOCALE", "en"),
        templates_dir=Path(os.getenv("CONTENT_TEMPLATES_DIR", str(DEFAULT_TEMPLATES_DIR))),
        translations_dir=Path(
            os.getenv("CONTENT_TRANSLATIONS_DIR", str(DEFAULT_TRANSLATIONS_DIR))
        ),
    )


@lru_cache(maxsize=1)
def get_content_settings() -> ContentSettings:
    """Retorna instância cacheada de ContentSettings."""
    return _load_from_env()
