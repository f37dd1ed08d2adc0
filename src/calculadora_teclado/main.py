# ============================================================================
# PUNTO DE ENTRADA - Calculadora de teclado
# Ejecución:
#     calculadora-teclado [--no-voice] [--width 900] [--height 600]
#     python -m calculadora_teclado
# ============================================================================
import argparse
import sys
import traceback

from .config.settings import CalculatorConfig


def build_parser():
    parser = argparse.ArgumentParser(description="Calculadora de teclado con display OpenCV")
    parser.add_argument("--no-voice", action="store_true", help="Desactivar feedback por voz")
    parser.add_argument("--width", type=int, default=900, help="Ancho de la ventana en píxeles")
    parser.add_argument("--height", type=int, default=600, help="Alto de la ventana en píxeles")
    parser.add_argument("--no-guide", action="store_true", help="Ocultar el panel de teclas")
    parser.add_argument("--rate", type=int, default=150, help="Velocidad de voz (palabras por minuto)")
    parser.add_argument("--volume", type=float, default=0.8, help="Volumen de voz (0.0-1.0)")
    return parser


def config_from_args(args):
    """Crea la configuración aplicando las opciones de línea de comandos."""
    config = CalculatorConfig()
    config.voice_enabled = not args.no_voice
    config.window_width = args.width
    config.window_height = args.height
    config.show_key_guide = not args.no_guide
    config.voice_rate = args.rate
    config.voice_volume = min(max(args.volume, 0.0), 1.0)
    return config


def main(argv=None):
    """
    Punto de entrada de la aplicación.

    Manejo de errores:
        - KeyboardInterrupt (Ctrl+C): Cierre por el usuario
        - Exception general: Muestra el error y el traceback, sale con código 1
    """
    args = build_parser().parse_args(argv)
    config = config_from_args(args)
    try:
        # Import diferido: OpenCV solo se carga al abrir la ventana
        from .app.keyboard_app import KeyboardCalculatorApp
        app = KeyboardCalculatorApp(config)
        app.run()
    except KeyboardInterrupt:
        print("\nInterrumpido por el usuario")
    except Exception as e:
        print(f"\nError: {e}")
        traceback.print_exc()
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
