"""Protocolo do delegate de templates."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping


class TemplateRendererProtocol(ABC):
    """Renderiza um template nomeado com as variáveis informadas."""

    @abstractmethod
    def render(self, template_name: str, variables: Mapping[str, object] | None = None) -> str: ...
