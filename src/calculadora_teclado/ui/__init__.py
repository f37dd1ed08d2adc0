"""
Módulo de interfaz de usuario.
Contiene el renderizador de la ventana (display e historial).
"""

from .renderer import UIRenderer

__all__ = ['UIRenderer']
