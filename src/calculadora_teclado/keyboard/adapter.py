"""
Adaptador de teclado: traduce teclas a eventos de la calculadora.

Este módulo contiene la tabla de teclas reconocidas, la conversión de
códigos de cv2.waitKey a nombres de tecla y la fuente de eventos a la que
se suscribe la aplicación.
"""

# ============================================================================
# TABLA DE TECLAS → EVENTOS
# Los IDs de evento son los mismos que procesa KeyboardCalculatorApp:
#   num_0..num_9, decimal, add, subtract, multiply, divide,
#   equal, backspace, clear_all
# ============================================================================
KEY_EVENTS = {str(d): f"num_{d}" for d in range(10)}
KEY_EVENTS.update({
    ".": "decimal",
    "+": "add",
    "-": "subtract",
    "*": "multiply",
    "/": "divide",
    "Enter": "equal",
    "=": "equal",
    "Backspace": "backspace",
    "Escape": "clear_all",
})

# Códigos especiales de cv2.waitKey (tras aplicar & 0xFF)
_SPECIAL_KEY_CODES = {
    13: "Enter",        # Retorno de carro (Windows/Linux)
    10: "Enter",        # Salto de línea (algunos backends GTK)
    8: "Backspace",
    127: "Backspace",   # macOS envía DEL
    27: "Escape",
}


def key_name_from_code(code):
    """
    Convierte un código de cv2.waitKey en nombre de tecla.

    Args:
        code (int): Código devuelto por cv2.waitKey (-1 si no hubo tecla)

    Returns:
        str | None: "Enter", "Backspace", "Escape", el carácter imprimible,
                    o None si no hay tecla o no es reconocible
    """
    if code < 0:
        return None
    code &= 0xFF
    if code in _SPECIAL_KEY_CODES:
        return _SPECIAL_KEY_CODES[code]
    if 32 <= code < 127:
        return chr(code)
    return None


def event_for_key(key):
    """Evento asociado a una tecla, o None si la tecla se ignora."""
    return KEY_EVENTS.get(key)


# ============================================================================
# CLASE: Subscription
# Propósito: Suscripción con alcance; al cerrarla se da de baja el listener
# ============================================================================
class Subscription:
    """Suscripción a KeyboardInputSource utilizable como context manager."""

    def __init__(self, source, listener):
        self._source = source
        self._listener = listener
        self.active = True

    def close(self):
        """Da de baja el listener. Llamarlo varias veces no tiene efecto."""
        if self.active:
            self._source.unsubscribe(self._listener)
            self.active = False

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False


# ============================================================================
# CLASE: KeyboardInputSource
# Propósito: Fuente de eventos simbólicos a partir de teclas
# Responsabilidades:
#   - Mapear teclas reconocidas a IDs de evento
#   - Entregar cada evento a los listeners suscritos, en orden de llegada
#   - Ignorar teclas fuera de la tabla
# ============================================================================
class KeyboardInputSource:
    """
    Fuente de eventos de teclado.

    Uso:
        source = KeyboardInputSource()
        with source.subscribe(app.process):
            source.feed_key_code(cv2.waitKey(30))

    Las teclas consumidas (las de KEY_EVENTS) no deben reenviarse a otros
    manejadores; por eso feed_key devuelve True cuando la tecla se usó.
    Enter queda consumida aquí y nunca llega a la lógica de la ventana.
    """

    def __init__(self):
        self._listeners = []

    def subscribe(self, listener):
        """
        Suscribe un listener que recibe el ID de cada evento.

        Args:
            listener (callable): Función listener(event_id)

        Returns:
            Subscription: Al cerrarla (o al salir del bloque with) se da de baja
        """
        self._listeners.append(listener)
        return Subscription(self, listener)

    def unsubscribe(self, listener):
        if listener in self._listeners:
            self._listeners.remove(listener)

    @property
    def listener_count(self):
        return len(self._listeners)

    def feed_key(self, key):
        """
        Entrega una tecla por nombre ("5", "+", "Enter", "Escape"...).

        Returns:
            bool: True si la tecla estaba en la tabla y se despachó
        """
        event_id = event_for_key(key)
        if event_id is None:
            return False
        for listener in list(self._listeners):
            listener(event_id)
        return True

    def feed_key_code(self, code):
        """Entrega un código de cv2.waitKey. Devuelve True si se consumió."""
        key = key_name_from_code(code)
        if key is None:
            return False
        return self.feed_key(key)
