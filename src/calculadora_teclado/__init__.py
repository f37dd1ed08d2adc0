"""
Calculadora de teclado: un operando en edición y una operación pendiente.

Paquetes:
    - core: máquina de estados y aritmética
    - keyboard: teclas → eventos
    - ui: display con OpenCV
    - voice: feedback por voz
    - config: configuración
    - app: bucle principal
"""

from .core import CalculatorEngine, InvalidInputError

__version__ = "0.1.0"

__all__ = ['CalculatorEngine', 'InvalidInputError']
