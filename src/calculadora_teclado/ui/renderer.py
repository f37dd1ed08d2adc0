"""
Interfaz de usuario y renderizado.

Este módulo contiene la clase UIRenderer, que dibuja el historial y el
display de la calculadora sobre un lienzo de OpenCV.
"""

import cv2
import numpy as np
import time

from ..config.settings import CalculatorConfig


BACKGROUND = (30, 30, 30)
MIN_FONT_SCALE = 1.2
MAX_FONT_SCALE = 3.5

KEY_GUIDE = [
    ("NUMEROS", ""),
    ("  0-9", "digito"),
    ("  .", "punto decimal"),
    ("", ""),
    ("OPERACIONES", ""),
    ("  + - * /", "operador"),
    ("  Enter / =", "calcular"),
    ("", ""),
    ("CONTROL", ""),
    ("  Backspace", "borrar"),
    ("  Esc", "borrar todo"),
    ("  v", "voz on/off"),
    ("  q", "salir"),
]


# ============================================================================
class UIRenderer:
    """
    Renderizador de la ventana de la calculadora.

    Componentes visuales:
        1. Display: historial pequeño arriba y número grande abajo
        2. Guía lateral: teclas disponibles
        3. Feedback: mensajes temporales de confirmación

    El renderizador solo lee los dos textos de salida; nunca modifica el
    estado de la calculadora.
    """

    def __init__(self, width, height, config=None):
        """
        Args:
            width (int): Ancho de la ventana en píxeles
            height (int): Alto de la ventana en píxeles
            config (CalculatorConfig): Configuración (opcional)
        """
        self.width = width
        self.height = height
        self.config = config if config else CalculatorConfig()
        self.feedback_msg = ""
        self.feedback_timer = 0
        self.feedback_color = (0, 255, 0)

    def new_frame(self):
        """Lienzo vacío BGR del tamaño de la ventana."""
        frame = np.zeros((self.height, self.width, 3), dtype=np.uint8)
        frame[:] = BACKGROUND
        return frame

    def render(self, history_text, display, editing=True):
        """
        Dibuja un frame completo a partir de los dos textos de salida.

        Args:
            history_text (str): Operación pendiente ("7 +") o ""
            display (str): Número mostrado
            editing (bool): True mientras se teclea un operando (muestra cursor)

        Returns:
            np.array: Frame listo para cv2.imshow
        """
        frame = self.new_frame()
        self.draw_display(frame, history_text, display, editing)
        if self.config.show_key_guide:
            self.draw_guide(frame)
        self.draw_feedback(frame)
        return frame

    def show_feedback(self, msg, color=(0, 255, 0), duration=None):
        """
        Muestra mensaje de feedback temporal.

        Args:
            msg (str): Mensaje a mostrar
            color (tuple): Color BGR del mensaje
            duration (int): Duración en frames (por defecto la de la config)
        """
        self.feedback_msg = msg
        self.feedback_color = color
        self.feedback_timer = duration if duration is not None else self.config.feedback_duration

    def fit_display_text(self, display, max_width):
        """
        Ajusta el texto del display al ancho disponible.

        Args:
            display (str): Texto a mostrar
            max_width (int): Ancho máximo en píxeles

        Returns:
            tuple: (texto, escala de fuente)

        Primero reduce la fuente hasta MIN_FONT_SCALE; si aún no cabe,
        muestra solo el final del número (como un display desplazado).
        """
        scale = MAX_FONT_SCALE
        while scale > MIN_FONT_SCALE and self._text_width(display, scale) > max_width:
            scale = round(scale - 0.1, 2)

        text = display
        while len(text) > 1 and self._text_width(text, scale) > max_width:
            text = text[1:]
        if text != display:
            text = "..." + text[3:] if len(text) > 3 else text
        return text, scale

    @staticmethod
    def _text_width(text, scale):
        return cv2.getTextSize(text, cv2.FONT_HERSHEY_DUPLEX, scale, 4)[0][0]

    def draw_display(self, img, history_text, display, editing=True):
        """
        Dibuja el display principal de la calculadora.

        Componentes:
            1. Fondo oscuro con borde
            2. Título
            3. Historial "<valor> <operador>" (gris, pequeño)
            4. Número actual o resultado (grande)
            5. Cursor parpadeante mientras se teclea

        Colores del display:
            - Blanco: operando en edición
            - Verde: resultado u operando a la espera del siguiente
        """
        x, y = 30, 30
        w, h = self.config.display_width() - 60, 220

        cv2.rectangle(img, (x, y), (x + w, y + h), (35, 35, 35), -1)
        cv2.rectangle(img, (x, y), (x + w, y + h), (100, 200, 255), 4)

        cv2.putText(img, "CALCULADORA", (x + 20, y + 40),
                   cv2.FONT_HERSHEY_DUPLEX, 1.1, (200, 200, 200), 2)

        if history_text:
            cv2.putText(img, history_text, (x + 20, y + 85),
                       cv2.FONT_HERSHEY_SIMPLEX, 0.9, (180, 180, 180), 2)

        text, scale = self.fit_display_text(display, w - 60)
        color = (255, 255, 255) if editing else (100, 255, 100)
        cv2.putText(img, text, (x + 20, y + 170),
                   cv2.FONT_HERSHEY_DUPLEX, scale, color, 4)

        # Cursor parpadeante a 1Hz
        if editing and int(time.time() * 2) % 2 == 0:
            cx = x + 30 + self._text_width(text, scale)
            cv2.line(img, (cx, y + 130), (cx, y + 175), (0, 255, 0), 4)

    def draw_guide(self, img):
        x, y = self.width - 320, 30
        w, h = 290, self.height - 60

        cv2.rectangle(img, (x, y), (x + w, y + h), (25, 25, 25), -1)
        cv2.rectangle(img, (x, y), (x + w, y + h), (100, 100, 100), 3)

        cv2.putText(img, "TECLAS", (x + 20, y + 40),
                   cv2.FONT_HERSHEY_DUPLEX, 1.0, (255, 255, 255), 2)

        cy = y + 80
        for label, action in KEY_GUIDE:
            if not label:
                cy += 10
                continue

            # Encabezados de sección
            if not label.startswith(" "):
                cv2.putText(img, label, (x + 20, cy),
                           cv2.FONT_HERSHEY_DUPLEX, 0.7, (100, 200, 255), 2)
            else:
                cv2.putText(img, f"{label.strip()}: {action}", (x + 30, cy),
                           cv2.FONT_HERSHEY_SIMPLEX, 0.6, (200, 200, 200), 1)
            cy += 30

    def draw_feedback(self, img):
        """
        Dibuja el mensaje de feedback con fade-out en la parte inferior.

        Cada llamada consume un frame de feedback_timer.
        """
        if self.feedback_timer > 0:
            self.feedback_timer -= 1
            alpha = min(self.feedback_timer / 20.0, 1.0)

            x, y = 50, self.height - 60

            overlay = img.copy()
            cv2.rectangle(overlay, (x - 20, y - 50), (x + 480, y + 10), (40, 40, 40), -1)
            cv2.addWeighted(overlay, alpha * 0.88, img, 1 - alpha * 0.88, 0, img)

            color = tuple(int(c * alpha) for c in self.feedback_color)
            cv2.putText(img, self.feedback_msg, (x, y),
                       cv2.FONT_HERSHEY_DUPLEX, 1.2, color, 3)
