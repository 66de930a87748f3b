"""Protocolo de tradução de mensagens."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping


class TranslatorProtocol(ABC):
    """Traduz chaves de mensagem para texto legível no locale ativo.

    Placeholders seguem o formato ``%nome%`` e são substituídos pelos
    valores de ``parameters``.
    """

    @abstractmethod
    def trans(self, key: str, parameters: Mapping[str, object] | None = None) -> str: ...

    def translate(self, key: str, parameters: Mapping[str, object] | None = None) -> str:
        """Alias de trans()."""
        return self.trans(key, parameters)
