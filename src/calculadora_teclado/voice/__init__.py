"""
Módulo de síntesis de voz.
Contiene el anuncio por voz de teclas y resultados.
"""

from .feedback import VoiceFeedback

__all__ = ['VoiceFeedback']
