"""
Aplicación principal que integra todos los componentes.

Este módulo contiene la clase KeyboardCalculatorApp.
"""

import cv2

from ..config.settings import CalculatorConfig
from ..core.calculator import CalculatorEngine
from ..ui.renderer import UIRenderer
from ..voice.feedback import VoiceFeedback
from ..keyboard.adapter import KeyboardInputSource


OPERATOR_EVENTS = {
    "add": ("+", "+ SUMA", (0, 255, 0)),
    "subtract": ("-", "- RESTA", (255, 150, 0)),
    "multiply": ("*", "x MULTIPLICAR", (255, 100, 255)),
    "divide": ("/", "/ DIVIDIR", (150, 100, 255)),
}


# ============================================================================
class KeyboardCalculatorApp:
    """
    Aplicación de calculadora controlada por teclado.

    Arquitectura:
        - KeyboardInputSource: Traduce teclas a eventos
        - CalculatorEngine: Lógica aritmética y estado
        - UIRenderer: Renderizado de la ventana
        - VoiceFeedback: Anuncios por voz (opcional)
        - KeyboardCalculatorApp: Coordinador y bucle principal

    Cada evento se procesa completo antes del siguiente y la ventana se
    vuelve a dibujar con los dos textos de salida tras cada frame.
    """

    def __init__(self, config=None, voice=None):
        """
        Args:
            config (CalculatorConfig): Configuración (opcional)
            voice (VoiceFeedback): Sistema de voz; por defecto se crea uno
                                   con la configuración
        """
        self.config = config if config else CalculatorConfig()
        self.calc = CalculatorEngine()
        self.ui = UIRenderer(self.config.window_width, self.config.window_height, self.config)
        self.voice = voice if voice else VoiceFeedback(self.config)
        self.keys = KeyboardInputSource()

    def process(self, event_id):
        """
        Procesa un evento y actualiza el estado de la calculadora.

        Args:
            event_id (str): ID del evento (ej: "num_5", "add", "equal")

        Returns:
            bool: True si el evento cambió el estado

        Los IDs desconocidos se ignoran.
        """
        # ====================================================================
        # NÚMEROS (0-9)
        # ====================================================================
        if event_id.startswith("num_"):
            digit = event_id.split("_")[1]
            changed = self.calc.input_digit(digit)
            self.voice.speak_digit(digit)
            return changed

        # ====================================================================
        # PUNTO DECIMAL
        # ====================================================================
        if event_id == "decimal":
            changed = self.calc.input_decimal_point()
            if changed:
                self.voice.speak("coma")
            return changed

        # ====================================================================
        # OPERADORES (+ - * /)
        # ====================================================================
        if event_id in OPERATOR_EVENTS:
            op, label, color = OPERATOR_EVENTS[event_id]
            changed = self.calc.input_operator(op)
            self.ui.show_feedback(label, color)
            self.voice.speak_operation(op)
            return changed

        # ====================================================================
        # IGUAL (=): Resolver la operación pendiente
        # ====================================================================
        if event_id == "equal":
            changed = self.calc.equals()
            if changed:
                result = self.calc.display
                self.ui.show_feedback(f"= {result}", (0, 255, 255), 60)
                self.voice.speak_result(result)
            return changed

        # ====================================================================
        # BORRAR TODO (Esc)
        # ====================================================================
        if event_id == "clear_all":
            changed = self.calc.clear()
            self.ui.show_feedback("TODO BORRADO", (255, 50, 50))
            self.voice.speak("todo borrado")
            return changed

        # ====================================================================
        # BACKSPACE (←)
        # ====================================================================
        if event_id == "backspace":
            changed = self.calc.delete()
            if changed:
                self.ui.show_feedback("<- BORRADO", (255, 200, 0), self.config.feedback_duration // 2)
                self.voice.speak("borrado")
            return changed

        return False

    def frame(self):
        """Frame actual de la ventana a partir del estado de la calculadora."""
        return self.ui.render(
            self.calc.history_text,
            self.calc.display,
            editing=not self.calc.awaiting_fresh_operand,
        )

    def toggle_voice(self):
        self.config.voice_enabled = not self.config.voice_enabled
        status = "ACTIVADA" if self.config.voice_enabled else "DESACTIVADA"
        print(f"🔊 Voz: {status}")
        self.ui.show_feedback(f"VOZ {status}", (0, 255, 255), 60)
        if self.config.voice_enabled:
            self.voice.speak("voz activada")

    def handle_key_code(self, code):
        """
        Procesa un código de cv2.waitKey.

        Returns:
            bool: False si el usuario pidió salir ('q'), True en otro caso

        Las teclas de la calculadora se consumen en KeyboardInputSource;
        solo las demás llegan a los atajos de la ventana.
        """
        if self.keys.feed_key_code(code):
            return True
        key = code & 0xFF if code >= 0 else -1
        if key == ord('q'):
            return False
        if key == ord('v'):
            self.toggle_voice()
        return True

    def _window_closed(self):
        return cv2.getWindowProperty(self.config.window_name, cv2.WND_PROP_VISIBLE) < 1

    def run(self):
        """
        Bucle principal de la aplicación.

        Ciclo de ejecución:
            1. Dibujar frame con historial y display
            2. Mostrar frame y esperar tecla (frame_delay_ms)
            3. Traducir la tecla a evento y procesarlo
            4. Repetir hasta 'q' o cerrar la ventana

        La suscripción al teclado se da de baja al salir, incluso si hay error.
        """
        print("\n" + "="*70)
        print("CALCULADORA DE TECLADO")
        print("="*70)
        print("\nNumeros: 0-9 y punto decimal")
        print("Operaciones: + - * /")
        print("Calcular: Enter o =")
        print("Borrar: Backspace | Borrar todo: Esc")
        if self.config.voice_enabled:
            print("\n🔊 FEEDBACK POR VOZ: Activado")
        print("\nPresiona 'q' o cierra la ventana para salir")
        print("Presiona 'v' para activar/desactivar voz\n")
        print("="*70 + "\n")

        cv2.namedWindow(self.config.window_name, cv2.WINDOW_AUTOSIZE)
        try:
            with self.keys.subscribe(self.process):
                while True:
                    cv2.imshow(self.config.window_name, self.frame())
                    code = cv2.waitKey(self.config.frame_delay_ms)
                    if not self.handle_key_code(code):
                        break
                    if self._window_closed():
                        break
        finally:
            cv2.destroyAllWindows()
        print("\nOK Aplicacion cerrada correctamente")
