"""
Configuración de la calculadora de teclado.

Este módulo contiene la configuración centralizada de voz, ventana y
display que comparten la aplicación, el renderizador y el sistema de voz.
"""

# ============================================================================
# CLASE: CalculatorConfig
# Propósito: Configuración de la aplicación y de accesibilidad
# Responsabilidades:
#   - Almacenar preferencias de voz (volumen, velocidad, idioma)
#   - Definir tamaño y nombre de la ventana
#   - Configurar ayudas visuales (guía de teclas, feedback)
# ============================================================================
class CalculatorConfig:
    """
    Configuración de la calculadora.

    Opciones disponibles:
        - Feedback por voz configurable (volumen, velocidad, idioma)
        - Tamaño de ventana y retardo entre frames
        - Ayudas visuales (guía de teclas, duración del feedback)
    """

    def __init__(self):
        """Inicializa configuración con valores por defecto."""
        # ====================================================================
        # CONFIGURACIÓN DE VOZ
        # ====================================================================
        self.voice_enabled = True           # Activar/desactivar feedback por voz
        self.voice_volume = 0.8             # Volumen (0.0-1.0)
        self.voice_rate = 150               # Velocidad de habla (palabras por minuto)
        self.voice_language = 'es'          # Idioma ('es', 'en', etc.)

        # ====================================================================
        # VENTANA
        # ====================================================================
        self.window_name = 'Calculadora'
        self.window_width = 900
        self.window_height = 600
        self.frame_delay_ms = 30            # Espera de cv2.waitKey por frame

        # ====================================================================
        # AYUDAS VISUALES
        # ====================================================================
        self.show_key_guide = True          # Mostrar panel con las teclas
        self.feedback_duration = 40         # Frames que dura el mensaje de feedback

    def display_width(self):
        """Ancho disponible para el display (sin el panel de teclas)."""
        if self.show_key_guide:
            return self.window_width - 340
        return self.window_width
