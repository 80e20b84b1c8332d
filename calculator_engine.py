"""
Motor de cálculo de la calculadora.

Este módulo provee la clase CalculatorEngine, que aplica operaciones
binarias y funciones especiales sobre los valores de la pantalla.
Los errores nunca se lanzan como excepciones: se devuelven como
cadenas que pasan a ocupar la pantalla.

Contrato de interfaz:
    - apply_binary(a: str, b: str, op: str) -> str
    - apply_special(op: str, value: str) -> str
"""

from math_provider import PythonMathProvider
from number_formatter import format_number, parse_float


DIVISION_BY_ZERO = "Error: division by zero"
NEGATIVE_ROOT = "Error: square root of negative number"

BINARY_OPERATORS = ("+", "-", "×", "÷")
SPECIAL_FUNCTIONS = ("√", "x²", "1/x")


class CalculatorEngine:
    """Evalúa operaciones de la calculadora y formatea el resultado."""

    def __init__(self, provider=None):
        self._provider = provider if provider is not None else PythonMathProvider()
        self._binary = self._provider.binary_operations()
        self._special = self._provider.special_functions()

    # ── Operaciones binarias ─────────────────────────────────────

    def apply_binary(self, a: str, b: str, op: str) -> str:
        """Aplica ``op`` a los dos operandos.

        Un operador desconocido devuelve ``b`` sin cambios.
        """
        fn = self._binary.get(op)
        if fn is None:
            return b

        x = parse_float(a)
        y = parse_float(b)
        if op == "÷" and y == 0:
            return DIVISION_BY_ZERO
        return format_number(fn(x, y))

    # ── Funciones especiales ─────────────────────────────────────

    def apply_special(self, op: str, value: str) -> str:
        fn = self._special.get(op)
        if fn is None:
            return value

        num = parse_float(value)
        if op == "√" and num < 0:
            return NEGATIVE_ROOT
        if op == "1/x" and num == 0:
            return DIVISION_BY_ZERO
        return format_number(fn(num))
