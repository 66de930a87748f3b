"""Evento de validação extensível de endereços de e-mail."""

from __future__ import annotations

from dataclasses import dataclass

from app.events.base import Event


@dataclass
class EmailValidationEvent(Event):
    """Carrega o endereço candidato e o resultado mutável da validação.

    Nasce válido; qualquer listener pode marcá-lo inválido com um motivo.
    O EmailValidator lê o estado final depois que todos os listeners rodaram.

    Attributes:
        address: Endereço avaliado (texto bruto)
        valid: Resultado corrente
        invalid_reason: Motivo da rejeição (quando valid=False)
    """

    address: str
    valid: bool = True
    invalid_reason: str | None = None

    def is_valid(self) -> bool:
        return self.valid

    def set_invalid(self, reason: str | None = None) -> None:
        """Marca o endereço como inválido."""
        self.valid = False
        self.invalid_reason = reason
