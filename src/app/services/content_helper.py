"""Helper de conteúdo para views.

- show_script_tags: troca os delimitadores de <script>/<style> por
  colchetes, para exibir o markup como texto sem executá-lo.
- get_custom_content: injeção de conteúdo por listeners
  (CoreEvents.VIEW_INJECT_CUSTOM_CONTENT).
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from re import Match, Pattern
from typing import Any, Final

from app.constants.events import CoreEvents
from app.events.custom_content import CustomContentEvent
from app.protocols.event_dispatcher import EventDispatcherProtocol
from app.protocols.template_renderer import TemplateRendererProtocol

logger = logging.getLogger(__name__)

ESCAPED_TAG_TYPES: Final[tuple[str, ...]] = ("script", "style")

# Somente pares completos <tag ...>...</tag>, em uma única passada: o corpo
# de um bloco casado (ex: <style> dentro de <script>) fica intacto. Tag
# aberta sem fechamento (ou fechamento solto) também. Nome da tag
# case-insensitive, grafia original preservada. <scripts>/<styles> não casam.
_TAG_PATTERN: Final[Pattern[str]] = re.compile(
    rf"<(?P<open>{'|'.join(ESCAPED_TAG_TYPES)})(?P<attrs>(?:\s[^>]*)?)>"
    r"(?P<body>.*?)</(?P<close>(?P=open))\s*>",
    re.IGNORECASE | re.DOTALL,
)

CONTENT_SEPARATOR: Final[str] = "\n\n"
TEMPLATE_VARIABLE: Final[str] = "template"


def _bracket_tag(match: Match[str]) -> str:
    return (
        f"[{match.group('open')}{match.group('attrs')}]"
        f"{match.group('body')}"
        f"[/{match.group('close')}]"
    )


def escape_script_tags(html: str) -> str:
    """Reescreve <script>/<style> como [script]/[style].

    Atributos e conteúdo interno ficam byte a byte iguais.

    Exemplos:
        >>> escape_script_tags('Hi <script>console.log("x");</script>')
        'Hi [script]console.log("x");[/script]'

        >>> escape_script_tags('<style type="text/css">p{}</style>')
        '[style type="text/css"]p{}[/style]'
    """
    if not html:
        return html

    return _TAG_PATTERN.sub(_bracket_tag, html)


class ContentHelper:
    """Helper de views com delegate de templates e dispatcher injetados."""

    def __init__(
        self,
        renderer: TemplateRendererProtocol,
        dispatcher: EventDispatcherProtocol,
    ) -> None:
        self._renderer = renderer
        self._dispatcher = dispatcher

    def show_script_tags(self, html: str) -> str:
        return escape_script_tags(html)

    def get_custom_content(
        self,
        context: str | None = None,
        variables: Mapping[str, Any] | None = None,
        view_name: str | None = None,
    ) -> str:
        """Coleta conteúdo injetado por listeners para a view/contexto.

        Sem view_name, usa variables["template"]; sem nenhum dos dois,
        retorna "" sem despachar evento.

        Args:
            context: Ponto da view (ex: "head", "footer").
            variables: Variáveis da view, repassadas aos templates.
            view_name: Nome da view sendo renderizada.

        Returns:
            Blocos de conteúdo seguidos dos templates renderizados,
            separados por linha em branco.
        """
        view_variables = dict(variables or {})
        if view_name is None:
            view_name = view_variables.get(TEMPLATE_VARIABLE)
            if not view_name:
                return ""

        event = self._dispatcher.dispatch(
            CustomContentEvent(view_name=view_name, context=context, variables=view_variables),
            CoreEvents.VIEW_INJECT_CUSTOM_CONTENT,
        )

        content = event.content
        for template_name, template_variables in event.templates:
            content.append(
                self._renderer.render(template_name, {**view_variables, **template_variables})
            )

        logger.debug(
            "custom_content_collected",
            extra={"view_name": view_name, "context": context, "blocks": len(content)},
        )
        return CONTENT_SEPARATOR.join(content)
