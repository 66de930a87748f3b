"""Renderer de templates em arquivo (string.Template).

Templates usam placeholders ``$nome``/``${nome}``; chaves e sinais de
HTML/CSS/JS não precisam de escape. Placeholders sem valor ficam
intactos no resultado.

IO local (filesystem) restrito ao diretório de templates configurado.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from string import Template

from app.protocols.template_renderer import TemplateRendererProtocol
from utils.errors import TemplateNotFoundError

logger = logging.getLogger(__name__)


class FileTemplateRenderer(TemplateRendererProtocol):
    """Implementação de TemplateRendererProtocol sobre um diretório."""

    def __init__(self, templates_dir: Path) -> None:
        self._templates_dir = Path(templates_dir).resolve()
        self._cache: dict[Path, Template] = {}

    def render(self, template_name: str, variables: Mapping[str, object] | None = None) -> str:
        """Renderiza o template com as variáveis.

        Raises:
            TemplateNotFoundError: Nome inválido ou arquivo inexistente.
        """
        template = self._load(self._resolve(template_name))
        return template.safe_substitute({k: str(v) for k, v in (variables or {}).items()})

    def _resolve(self, template_name: str) -> Path:
        if not template_name:
            raise TemplateNotFoundError("template_name vazio")
        rel = Path(template_name)
        # Path.is_absolute() não reconhece "/x" no Windows; validar por prefixo
        if rel.is_absolute() or template_name.startswith(("/", "\\")):
            raise TemplateNotFoundError("template_name deve ser relativo")
        if ".." in rel.parts:
            raise TemplateNotFoundError("template_name invalido (..) não permitido")
        path = (self._templates_dir / rel).resolve()
        if not path.is_file():
            raise TemplateNotFoundError(f"Template nao encontrado: {template_name}")
        return path

    def _load(self, path: Path) -> Template:
        template = self._cache.get(path)
        if template is None:
            template = Template(path.read_text(encoding="utf-8"))
            self._cache[path] = template
            logger.debug("template_loaded", extra={"template": path.name})
        return template
