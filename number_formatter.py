"""
Formato de números para la pantalla de la calculadora.

La pantalla trabaja con cadenas. Este módulo convierte valores float en
cadenas con el mismo aspecto que muestra un navegador (``String(x)``,
``toFixed``, ``toExponential``) y recorta el resultado para que quepa en
MAX_DISPLAY_LENGTH caracteres.

Contrato de interfaz:
    - format_number(value: float | str) -> str
    - parse_float(text: str) -> float
"""

import math
import re
from decimal import Decimal, ROUND_HALF_UP, localcontext


MAX_DISPLAY_LENGTH = 16
EXPONENT_PRECISION = MAX_DISPLAY_LENGTH - 6
ERROR_TOKEN = "Error"

# Prefijo numérico más largo, igual que parseFloat
_FLOAT_PREFIX_RE = re.compile(
    r"^\s*(?P<num>[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?))"
)

# Dígitos suficientes para representar exactamente cualquier double
_EXACT_PREC = 1100


# ── Lectura ──────────────────────────────────────────────────────

def parse_float(text: str) -> float:
    """Interpreta el prefijo numérico de ``text``; NaN si no hay ninguno."""
    match = _FLOAT_PREFIX_RE.match(text)
    if not match:
        return math.nan
    return float(match.group("num"))


# ── Representación de floats ─────────────────────────────────────

def _shortest_digits(value: float) -> tuple[str, int]:
    """Dígitos mínimos de ``abs(value)`` y posición del punto decimal.

    El valor es ``0.d1d2...dk × 10^n``.
    """
    normalized = Decimal(repr(abs(value))).normalize()
    sign, digits, exponent = normalized.as_tuple()
    text = "".join(str(d) for d in digits)
    return text, len(text) + exponent


def number_to_string(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"

    sign = "-" if value < 0 else ""
    digits, n = _shortest_digits(value)
    k = len(digits)

    if k <= n <= 21:
        return sign + digits + "0" * (n - k)
    if 0 < n <= 21:
        return f"{sign}{digits[:n]}.{digits[n:]}"
    if -6 < n <= 0:
        return f"{sign}0.{'0' * -n}{digits}"

    exp = n - 1
    exp_text = f"e+{exp}" if exp >= 0 else f"e-{-exp}"
    mantissa = digits[0] if k == 1 else f"{digits[0]}.{digits[1:]}"
    return f"{sign}{mantissa}{exp_text}"


def to_fixed(value: float, digits: int) -> str:
    """Notación de punto fijo con ``digits`` decimales (redondeo a la mitad hacia arriba)."""
    if not 0 <= digits <= 100:
        raise ValueError("digits debe estar entre 0 y 100")
    if not math.isfinite(value) or abs(value) >= 1e21:
        return number_to_string(value)
    if value == 0:
        value = 0.0

    with localcontext() as ctx:
        ctx.prec = _EXACT_PREC
        quantum = Decimal(1).scaleb(-digits)
        rounded = Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP)
    return format(rounded, "f")


def to_exponential(value: float, precision: int) -> str:
    """Notación científica con ``precision`` dígitos tras el punto."""
    if not math.isfinite(value):
        return number_to_string(value)

    sign = "-" if value < 0 else ""
    if value == 0:
        mantissa = "0" * (precision + 1)
        exponent = 0
    else:
        with localcontext() as ctx:
            ctx.prec = precision + 1
            ctx.rounding = ROUND_HALF_UP
            rounded = ctx.plus(Decimal(abs(value)))
        _, digit_tuple, _ = rounded.as_tuple()
        mantissa = "".join(str(d) for d in digit_tuple).ljust(precision + 1, "0")
        exponent = rounded.adjusted()

    body = mantissa[0] if precision == 0 else f"{mantissa[0]}.{mantissa[1:]}"
    exp_text = f"e+{exponent}" if exponent >= 0 else f"e-{-exponent}"
    return f"{sign}{body}{exp_text}"


# ── Formato de pantalla ──────────────────────────────────────────

def _fit_exponential(value: float) -> str:
    precision = EXPONENT_PRECISION
    text = to_exponential(value, precision)
    # Exponentes de tres cifras o signo negativo no caben con la precisión base
    while len(text) > MAX_DISPLAY_LENGTH and precision > 0:
        precision = max(0, precision - (len(text) - MAX_DISPLAY_LENGTH))
        text = to_exponential(value, precision)
    return text


def format_number(value) -> str:
    """Convierte un número (o cadena numérica) en texto apto para la pantalla."""
    num_str = value if isinstance(value, str) else number_to_string(value)
    if num_str == "NaN":
        return ERROR_TOKEN

    if "." in num_str:
        integer_part, decimal_part = num_str.split(".", 1)
        allowed = MAX_DISPLAY_LENGTH - len(integer_part) - 1
        if len(decimal_part) > allowed:
            fixed = to_fixed(parse_float(num_str), max(0, allowed))
            if len(fixed) <= MAX_DISPLAY_LENGTH:
                return fixed
            num_str = fixed

    if len(num_str) > MAX_DISPLAY_LENGTH:
        return _fit_exponential(parse_float(num_str))

    return num_str
