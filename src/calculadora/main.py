# ============================================================================
# PUNTO DE ENTRADA PRINCIPAL
# ============================================================================
import traceback

from .app.calculator_app import CalculatorApp
from .config.accessibility import AccessibilityConfig


def main():
    """
    Punto de entrada de la aplicación.

    Manejo de errores:
        - KeyboardInterrupt (Ctrl+C): Cierre graceful por usuario
        - Exception general: Captura errores inesperados y muestra traceback

    Ejecución:
        calculadora
        python -m calculadora
    """
    try:
        app = CalculatorApp(config=AccessibilityConfig())
        app.run()
    except KeyboardInterrupt:
        print("\nInterrumpido por el usuario")
    except Exception as e:
        print(f"\nError: {e}")
        traceback.print_exc()


if __name__ == "__main__":
    main()
