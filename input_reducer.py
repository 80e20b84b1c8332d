"""
Máquina de estados de la calculadora.

``reduce`` es una función pura: recibe el estado actual y un token de
entrada y devuelve el estado siguiente. ``project`` extrae de un estado
lo que necesita un renderizador (pantalla e historial).

Tokens reconocidos:
    - cifras "0"-"9" y punto decimal "."
    - operadores binarios "+", "-", "×", "÷"
    - control "C", "DEL", "="
    - modificadores "±", "%"
    - funciones especiales "√", "x²", "1/x"

Los tokens desconocidos dejan el estado sin cambios.
"""

from dataclasses import replace
from typing import NamedTuple

from calculator_engine import BINARY_OPERATORS, SPECIAL_FUNCTIONS, CalculatorEngine
from calculator_state import CalculatorState, initial_state, push_history
from number_formatter import MAX_DISPLAY_LENGTH, format_number, parse_float


DIGIT_TOKENS = frozenset("0123456789.")

_DEFAULT_ENGINE = CalculatorEngine()


class CalculatorView(NamedTuple):
    display: str
    history: list


def project(state: CalculatorState) -> CalculatorView:
    return CalculatorView(display=state.display, history=list(state.history))


def reduce(state: CalculatorState, token: str, engine=None) -> CalculatorState:
    """Devuelve el estado que resulta de aplicar ``token`` a ``state``."""
    engine = engine if engine is not None else _DEFAULT_ENGINE

    if token in DIGIT_TOKENS:
        return _enter_digit(state, token)
    if token == "C":
        return initial_state(state.history)
    if token == "DEL":
        return _delete_last(state)
    if token == "±":
        return replace(state, display=format_number(-parse_float(state.display)))
    if token == "%":
        # Divide entre 10, no entre 100
        return replace(state, display=format_number(parse_float(state.display) / 10))
    if token in BINARY_OPERATORS:
        return _choose_operator(state, token, engine)
    if token == "=":
        return _equals(state, engine)
    if token in SPECIAL_FUNCTIONS:
        return _special(state, token, engine)
    return state


# ── Entrada de cifras ────────────────────────────────────────────

def _enter_digit(state: CalculatorState, digit: str) -> CalculatorState:
    display = state.display

    if state.waiting:
        return replace(state, display="0." if digit == "." else digit, waiting=False)

    if display == "0" and digit != ".":
        return replace(state, display=digit)

    if digit == "." and "." in display:
        return state

    new_display = display + digit
    if len(new_display) > MAX_DISPLAY_LENGTH:
        return state
    return replace(state, display=new_display)


def _delete_last(state: CalculatorState) -> CalculatorState:
    display = state.display
    if len(display) == 1 or (len(display) == 2 and display.startswith("-")):
        return replace(state, display="0")
    return replace(state, display=display[:-1])


# ── Operaciones ──────────────────────────────────────────────────

def _choose_operator(state: CalculatorState, op: str, engine) -> CalculatorState:
    display = state.display
    operand = state.operand

    if operand is None:
        operand = display
    elif state.operator:
        # Cálculo encadenado: el paso anterior se resuelve antes de seguir
        display = engine.apply_binary(operand, display, state.operator)
        operand = display

    return replace(state, display=display, operand=operand, operator=op, waiting=True)


def _equals(state: CalculatorState, engine) -> CalculatorState:
    if not state.operator or state.operand is None:
        return state

    result = engine.apply_binary(state.operand, state.display, state.operator)
    entry = f"{state.operand} {state.operator} {state.display} = {result}"
    return replace(
        state,
        display=result,
        operand=None,
        operator=None,
        history=push_history(state.history, entry),
    )


def _special(state: CalculatorState, fn: str, engine) -> CalculatorState:
    result = engine.apply_special(fn, state.display)
    entry = f"{fn}({state.display}) = {result}"
    return replace(state, display=result, history=push_history(state.history, entry))
