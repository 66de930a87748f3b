"""Templating — delegate de renderização baseado em arquivos."""

from __future__ import annotations

from app.infra.templating.file_renderer import FileTemplateRenderer

__all__ = ["FileTemplateRenderer"]
