"""
Módulo de entrada por teclado.
Contiene la tabla de teclas y la fuente de eventos con suscripción.
"""

from .adapter import (
    KEY_EVENTS,
    KeyboardInputSource,
    Subscription,
    event_for_key,
    key_name_from_code,
)

__all__ = [
    'KEY_EVENTS',
    'KeyboardInputSource',
    'Subscription',
    'event_for_key',
    'key_name_from_code',
]
