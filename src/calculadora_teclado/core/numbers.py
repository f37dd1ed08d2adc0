"""
Aritmética y conversión texto <-> número de la calculadora.

Este módulo contiene las funciones puras que usa CalculatorEngine:
aplicar un operador binario, formatear un resultado como texto de display
y volver a leer ese texto como número.
"""

import math
import re
from decimal import Decimal


OPERATORS = ("+", "-", "*", "/")

# Prefijo numérico aceptado al leer texto; lo que sigue se ignora
_NUMBER_PREFIX = re.compile(
    r"\s*([+-]?(?:NaN|Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?))"
)


class InvalidInputError(ValueError):
    """Entrada fuera del alfabeto de la calculadora (dígito u operador inválido)."""


# ============================================================================
# OPERACIONES BINARIAS
# ============================================================================
def apply_operator(op, left, right):
    """
    Aplica un operador binario sobre dos floats.

    Args:
        op (str): Operador ("+", "-", "*", "/")
        left (float): Operando izquierdo
        right (float): Operando derecho

    Returns:
        float: Resultado en doble precisión

    Casos especiales:
        - División entre 0 → 0 (sin error, sin infinito)
        - Operador desconocido → se devuelve el operando derecho
    """
    if op == "+":
        return left + right
    if op == "-":
        return left - right
    if op == "*":
        return left * right
    if op == "/":
        return 0.0 if right == 0 else left / right
    return right


# ============================================================================
# FORMATEO DE RESULTADOS
# Algoritmo: dígitos más cortos que reproducen el float (los de repr()),
# en notación posicional si 1e-6 <= |x| < 1e21 y exponencial fuera de ese rango.
# ============================================================================
def format_number(value):
    """
    Convierte un resultado numérico al texto canónico del display.

    Args:
        value (float): Número a formatear

    Returns:
        str: Representación más corta que vuelve al mismo float

    Ejemplos:
        7.0   → "7"
        0.5   → "0.5"
        1e21  → "1e+21"
        1e-7  → "1e-7"
        -0.0  → "0"
    """
    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"

    sign = "-" if value < 0 else ""
    digits, point = _shortest_digits(abs(value))
    k = len(digits)

    # Notación posicional: el punto cae dentro de [-6, 21]
    if k <= point <= 21:
        return sign + digits + "0" * (point - k)
    if 0 < point <= 21:
        return sign + digits[:point] + "." + digits[point:]
    if -6 < point <= 0:
        return sign + "0." + "0" * (-point) + digits

    # Notación exponencial
    exponent = point - 1
    exp_text = ("+" if exponent >= 0 else "-") + str(abs(exponent))
    if k == 1:
        return sign + digits + "e" + exp_text
    return sign + digits[0] + "." + digits[1:] + "e" + exp_text


def _shortest_digits(value):
    """
    Dígitos significativos más cortos de un float positivo finito.

    Returns:
        tuple: (dígitos sin ceros finales, posición del punto decimal)
               de forma que value == 0.<dígitos> * 10**posición
    """
    _, digit_tuple, exponent = Decimal(repr(value)).as_tuple()
    digits = "".join(str(d) for d in digit_tuple).lstrip("0")
    stripped = digits.rstrip("0")
    exponent += len(digits) - len(stripped)
    return stripped, exponent + len(stripped)


# ============================================================================
# LECTURA DE TEXTO
# ============================================================================
def parse_number(text):
    """
    Lee el prefijo numérico de un texto como float.

    Args:
        text (str): Texto del display, por ejemplo "12.", "0.5", "1e+21" o "NaN"

    Returns:
        float: Valor leído; lo que sigue al prefijo numérico se ignora

    Raises:
        InvalidInputError: Si el texto no empieza por un número
    """
    match = _NUMBER_PREFIX.match(text)
    if not match:
        raise InvalidInputError(f"Texto no numérico: {text!r}")
    number = match.group(1)
    if number.lstrip("+-") == "NaN":
        return math.nan
    if number.lstrip("+-") == "Infinity":
        return float(number.replace("Infinity", "inf"))
    return float(number)
