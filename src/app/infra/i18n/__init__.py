"""i18n — catálogos YAML de mensagens."""

from __future__ import annotations

from app.infra.i18n.yaml_translator import YamlTranslator

__all__ = ["YamlTranslator"]
