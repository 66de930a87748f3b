"""Evento de injeção de conteúdo customizado em views."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from app.events.base import Event


@dataclass
class CustomContentEvent(Event):
    """Permite que listeners acrescentem blocos de conteúdo a uma view.

    Attributes:
        view_name: Nome da view/template sendo renderizado
        context: Ponto da view onde o conteúdo será inserido (ex: "head")
        variables: Variáveis da view, repassadas aos templates injetados
    """

    view_name: str
    context: str | None = None
    variables: dict[str, Any] = field(default_factory=dict)
    _content: list[str] = field(default_factory=list, init=False, repr=False)
    _templates: list[tuple[str, dict[str, Any]]] = field(
        default_factory=list, init=False, repr=False
    )

    def check_context(self, view_name: str, context: str | None) -> bool:
        """True se o evento corresponde à view e ao contexto informados."""
        return self.view_name == view_name and self.context == context

    def add_content(self, content: str) -> None:
        self._content.append(content)

    def add_template(
        self, template_name: str, variables: Mapping[str, Any] | None = None
    ) -> None:
        """Agenda um template para renderização com variáveis extras."""
        self._templates.append((template_name, dict(variables or {})))

    @property
    def content(self) -> list[str]:
        return list(self._content)

    @property
    def templates(self) -> list[tuple[str, dict[str, Any]]]:
        return list(self._templates)
