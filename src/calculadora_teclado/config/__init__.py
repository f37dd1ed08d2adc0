"""
Módulo de configuración para la calculadora de teclado.
Contiene la clase de configuración de voz, ventana y display.
"""

from .settings import CalculatorConfig

__all__ = ['CalculatorConfig']
