"""
Módulo core con la lógica principal de la calculadora.
Contiene la máquina de estados y la aritmética de números.
"""

from .calculator import CalculatorEngine, IdleState, OperatorPendingState
from .numbers import InvalidInputError, apply_operator, format_number, parse_number

__all__ = [
    'CalculatorEngine',
    'IdleState',
    'OperatorPendingState',
    'InvalidInputError',
    'apply_operator',
    'format_number',
    'parse_number',
]
