"""Estado de la calculadora e historial de operaciones."""

from dataclasses import dataclass, field
from typing import Optional


HISTORY_LIMIT = 5


@dataclass(frozen=True)
class CalculatorState:
    """Instantánea completa de la calculadora entre dos pulsaciones.

    Atributos:
        display: texto mostrado; también es el siguiente operando.
        operand: primer operando capturado al elegir un operador binario.
        operator: operador binario pendiente.
        waiting: la próxima cifra empieza un número nuevo.
        history: operaciones completadas, la más reciente primero.
    """

    display: str = "0"
    operand: Optional[str] = None
    operator: Optional[str] = None
    waiting: bool = False
    history: tuple = field(default_factory=tuple)


def initial_state(history: tuple = ()) -> CalculatorState:
    return CalculatorState(history=tuple(history))


def push_history(history: tuple, entry: str, limit: int = HISTORY_LIMIT) -> tuple:
    """Inserta ``entry`` al principio y descarta las entradas más antiguas."""
    return ((entry,) + tuple(history))[:limit]
