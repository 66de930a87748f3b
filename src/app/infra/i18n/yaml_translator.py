"""Translator baseado em catálogos YAML.

Cada locale tem um arquivo ``messages.<locale>.yaml`` no diretório de
traduções. Chaves aninhadas são achatadas com ponto::

    mailguard:
      email:
        address:
          invalid: "Email address is invalid"

vira ``mailguard.email.address.invalid``.

Chave ausente nos dois locales (ativo e fallback) devolve a própria chave.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from app.protocols.translator import TranslatorProtocol
from utils.errors import TranslationCatalogError

logger = logging.getLogger(__name__)

CATALOG_PREFIX = "messages"


class YamlTranslator(TranslatorProtocol):
    """Implementação de TranslatorProtocol com PyYAML.

    Args:
        translations_dir: Diretório com messages.<locale>.yaml.
        locale: Locale ativo.
        fallback_locale: Locale consultado quando a chave falta no ativo.
    """

    def __init__(
        self,
        translations_dir: Path,
        locale: str = "en",
        fallback_locale: str = "en",
    ) -> None:
        self._translations_dir = Path(translations_dir)
        self._locale = locale
        self._fallback_locale = fallback_locale
        self._catalogs: dict[str, dict[str, str]] = {}

    @property
    def locale(self) -> str:
        return self._locale

    def trans(self, key: str, parameters: Mapping[str, object] | None = None) -> str:
        message = self._lookup(key)
        if message is None:
            logger.debug("translation_missing", extra={"key": key, "locale": self._locale})
            message = key

        for placeholder, value in (parameters or {}).items():
            message = message.replace(placeholder, str(value))
        return message

    def _lookup(self, key: str) -> str | None:
        for locale in dict.fromkeys((self._locale, self._fallback_locale)):
            message = self._catalog(locale).get(key)
            if message is not None:
                return message
        return None

    def _catalog(self, locale: str) -> dict[str, str]:
        if locale not in self._catalogs:
            self._catalogs[locale] = self._load_catalog(locale)
        return self._catalogs[locale]

    def _load_catalog(self, locale: str) -> dict[str, str]:
        """Carrega e achata o catálogo do locale.

        Raises:
            TranslationCatalogError: YAML inválido ou raiz que não é mapa.
        """
        path = self._translations_dir / f"{CATALOG_PREFIX}.{locale}.yaml"
        if not path.is_file():
            logger.warning(
                "translation_catalog_not_found",
                extra={"locale": locale, "path": str(path)},
            )
            return {}

        try:
            with path.open("r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as exc:
            raise TranslationCatalogError(f"YAML inválido em {path.name}: {exc}") from exc

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise TranslationCatalogError(f"Catálogo {path.name} deve ser um dicionário")

        catalog = _flatten(data)
        logger.debug(
            "translation_catalog_loaded",
            extra={"locale": locale, "messages": len(catalog)},
        )
        return catalog


def _flatten(data: Mapping[str, Any], prefix: str = "") -> dict[str, str]:
    flat: dict[str, str] = {}
    for key, value in data.items():
        full_key = f"{prefix}.{key}" if prefix else str(key)
        if isinstance(value, Mapping):
            flat.update(_flatten(value, full_key))
        elif value is not None:
            flat[full_key] = str(value)
    return flat
