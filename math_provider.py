"""Operaciones aritméticas disponibles para el motor de la calculadora."""

import math


class PythonMathProvider:
    """Provee las operaciones de la calculadora sobre floats de Python."""

    def binary_operations(self) -> dict:
        return {
            "+": lambda x, y: x + y,
            "-": lambda x, y: x - y,
            "×": lambda x, y: x * y,
            "÷": lambda x, y: x / y,
        }

    def special_functions(self) -> dict:
        # x * x en lugar de x ** 2: la potencia lanza OverflowError
        return {
            "√": math.sqrt,
            "x²": lambda x: x * x,
            "1/x": lambda x: 1 / x,
        }
