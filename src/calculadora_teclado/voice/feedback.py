"""
Sistema de feedback por voz usando pyttsx3.

Este módulo anuncia en voz alta las teclas pulsadas y los resultados,
ejecutándose de forma asíncrona para no bloquear el bucle de la ventana.
"""

import threading
import pyttsx3
from collections import deque


NUMBERS_ES = {
    "0": "cero", "1": "uno", "2": "dos", "3": "tres", "4": "cuatro",
    "5": "cinco", "6": "seis", "7": "siete", "8": "ocho", "9": "nueve"
}

OPERATIONS_ES = {
    "+": "más",
    "-": "menos",
    "*": "por",
    "/": "dividido entre"
}

# Voces en español preferidas (naturales de Apple primero, luego Eloquence)
PREFERRED_VOICES = ['monica', 'paulina', 'jorge', 'juan', 'diego',
                    'eddy', 'flo', 'reed', 'sandy', 'shelley']


# ============================================================================
# CLASE: VoiceFeedback
# Propósito: Síntesis de voz para feedback auditivo
# Responsabilidades:
#   - Anunciar dígitos, operadores y resultados en español
#   - Ejecutar en hilo separado para no bloquear la ventana
#   - Gestionar cola de mensajes para evitar solapamiento
# ============================================================================
class VoiceFeedback:
    """
    Sistema de feedback por voz usando pyttsx3.

    Características:
        - Inicialización perezosa: el motor solo se crea al primer mensaje
          con la voz activada
        - Ejecución asíncrona con cola de máximo 5 mensajes
        - Configuración de volumen y velocidad desde CalculatorConfig
    """

    def __init__(self, config):
        """
        Args:
            config (CalculatorConfig): Configuración de la aplicación
        """
        self.config = config
        self.engine = None
        self.is_speaking = False
        self.message_queue = deque(maxlen=5)
        self._lock = threading.Lock()

    def _ensure_engine(self):
        """
        Crea el motor de voz si aún no existe.

        Returns:
            bool: True si hay motor disponible. Si falla la inicialización
                  se avisa por consola y se desactiva la voz.
        """
        if self.engine:
            return True
        try:
            self.engine = pyttsx3.init()
        except Exception as e:
            print(f"⚠ Advertencia: No se pudo inicializar el sistema de voz: {e}")
            self.config.voice_enabled = False
            return False
        self._configure_engine()
        print("✓ Sistema de voz inicializado correctamente")
        return True

    def _configure_engine(self):
        """Aplica volumen, velocidad y busca una voz en el idioma configurado."""
        try:
            self.engine.setProperty('volume', self.config.voice_volume)
            self.engine.setProperty('rate', self.config.voice_rate)

            language = self.config.voice_language.lower()
            voices = self.engine.getProperty('voices') or []
            candidates = [
                v for v in voices
                if f"{language}-" in v.id.lower() or f"{language}_" in v.id.lower()
                or any(name in v.name.lower() for name in PREFERRED_VOICES)
            ]
            if candidates:
                self.engine.setProperty('voice', candidates[0].id)
                print(f"✓ Voz seleccionada: {candidates[0].name}")
            else:
                print("⚠ No se encontró voz en el idioma configurado. Usando voz predeterminada.")
        except Exception as e:
            print(f"⚠ Error al configurar voz: {e}")

    def speak(self, text):
        """
        Reproduce un mensaje de voz de forma asíncrona.

        Args:
            text (str): Texto a sintetizar

        Si la voz está desactivada el mensaje se descarta.
        """
        if not self.config.voice_enabled or not self._ensure_engine():
            return

        with self._lock:
            self.message_queue.append(text)
            if self.is_speaking:
                return
            self.is_speaking = True

        thread = threading.Thread(target=self._process_queue, daemon=True)
        thread.start()

    def _process_queue(self):
        """Procesa la cola de mensajes uno por uno."""
        while True:
            with self._lock:
                if not self.message_queue:
                    self.is_speaking = False
                    return
                message = self.message_queue.popleft()
            try:
                self.engine.say(message)
                self.engine.runAndWait()
            except Exception as e:
                print(f"⚠ Error al reproducir voz: {e}")

    def speak_digit(self, digit):
        self.speak(NUMBERS_ES.get(str(digit), str(digit)))

    def speak_operation(self, operation):
        self.speak(OPERATIONS_ES.get(operation, operation))

    def speak_result(self, result):
        """
        Reproduce un resultado de forma natural ("igual a menos 2 coma 5").

        Args:
            result (str): Texto del display tras el cálculo
        """
        self.speak(f"igual a {spoken_number(result)}")


def spoken_number(text):
    """Texto del display legible por voz: signo como "menos", punto como "coma"."""
    if text.startswith("-"):
        text = "menos " + text[1:]
    return text.replace(".", " coma ")
