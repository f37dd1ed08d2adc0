"""
Módulo de la aplicación principal.
Contiene la clase que integra teclado, calculadora, ventana y voz.
"""

from .keyboard_app import KeyboardCalculatorApp

__all__ = ['KeyboardCalculatorApp']
