"""
Aplicación principal que integra todos los componentes.

Este módulo contiene la clase CalculatorApp y el mapeo de teclas a botones.
"""

import cv2

from ..config.accessibility import AccessibilityConfig
from ..core.controller import CalculatorController
from ..core.events import (
    DecimalPoint,
    Digit,
    FunctionCommand,
    FunctionPress,
    Operator,
    OperatorPress,
)
from ..ui.renderer import KeypadRenderer, WHITE, ORANGE, LIGHT_GRAY
from ..voice.feedback import VoiceFeedback


WINDOW_NAME = 'Calculadora'

KEY_ESC = 27
KEY_ENTER = (10, 13)
KEY_BACKSPACE = (8, 127)

KEY_EVENTS = {
    ord('.'): DecimalPoint(),
    ord(','): DecimalPoint(),
    ord('+'): OperatorPress(Operator.ADD),
    ord('-'): OperatorPress(Operator.SUBTRACT),
    ord('*'): OperatorPress(Operator.MULTIPLY),
    ord('x'): OperatorPress(Operator.MULTIPLY),
    ord('/'): OperatorPress(Operator.DIVIDE),
    ord('='): OperatorPress(Operator.EQUALS),
    ord('c'): FunctionPress(FunctionCommand.ALL_CLEAR),
    ord('n'): FunctionPress(FunctionCommand.TOGGLE_SIGN),
    ord('%'): FunctionPress(FunctionCommand.PERCENT),
}


def event_for_key(key):
    """
    Traduce una tecla de cv2.waitKey a un evento de botón.

    Args:
        key (int): Código de tecla (ya enmascarado con 0xFF)

    Returns:
        Evento de botón, o None si la tecla no corresponde a ningún botón
    """
    if ord('0') <= key <= ord('9'):
        return Digit(key - ord('0'))
    if key in KEY_ENTER:
        return OperatorPress(Operator.EQUALS)
    if key in KEY_BACKSPACE:
        return FunctionPress(FunctionCommand.ALL_CLEAR)
    return KEY_EVENTS.get(key)


# ============================================================================
class CalculatorApp:
    """
    Aplicación principal de la calculadora.

    Arquitectura:
        - CalculatorController: Máquina de estados y aritmética
        - KeypadRenderer: Dibujo de pantalla y teclado
        - VoiceFeedback: Anuncio por voz de teclas y resultados
        - CalculatorApp: Coordinador, ratón, teclado y bucle principal
    """

    def __init__(self, config=None, controller=None, renderer=None, voice=None):
        """
        Inicializa la aplicación.

        Args:
            config (AccessibilityConfig): Configuración de accesibilidad (opcional)
            controller (CalculatorController): Controlador (opcional)
            renderer (KeypadRenderer): Renderizador (opcional)
            voice (VoiceFeedback): Sistema de voz (opcional)
        """
        self.config = config if config else AccessibilityConfig()
        self.controller = controller if controller else CalculatorController()
        self.ui = renderer if renderer else KeypadRenderer(self.config)
        self.voice = voice if voice else VoiceFeedback(self.config)
        self.running = False

        if self.config.large_buttons:
            print("✓ Modo teclas grandes ACTIVADO")
        if self.config.voice_enabled:
            print("✓ Feedback por voz ACTIVADO")

    def press(self, event):
        """
        Procesa la pulsación de un botón (ratón o teclado).

        Args:
            event: Evento de botón

        Feedback:
            - Texto de la tecla en pantalla (naranja para operadores)
            - Voz: la tecla pulsada, o el resultado tras "="
        """
        had_pending = self.controller.active_operator is not Operator.NONE
        self.controller.dispatch(event)

        if isinstance(event, OperatorPress) and event.operator is Operator.EQUALS:
            if had_pending:
                self.ui.show_feedback(f"= {self.controller.display_text}", ORANGE)
                self.voice.speak_result(self.controller.display_text)
            return

        color = ORANGE if isinstance(event, OperatorPress) else (
            LIGHT_GRAY if isinstance(event, FunctionPress) else WHITE)
        self.ui.show_feedback(event.label, color, duration=10)
        self.voice.speak_event(event)

    def handle_key(self, key):
        """
        Procesa una tecla de cv2.waitKey.

        Controles:
            - Teclas de la calculadora (ver event_for_key)
            - 'v': activar/desactivar voz
            - 'g': activar/desactivar teclas grandes
            - ESC o 'q': salir
        """
        if key == KEY_ESC or key == ord('q'):
            self.running = False
            return

        if key == ord('v'):
            self.config.voice_enabled = not self.config.voice_enabled
            status = "ACTIVADA" if self.config.voice_enabled else "DESACTIVADA"
            print(f"🔊 Voz: {status}")
            self.ui.show_feedback(f"VOZ {status}", LIGHT_GRAY)
            if self.config.voice_enabled:
                self.voice.speak("voz activada")
            return

        if key == ord('g'):
            self.config.large_buttons = not self.config.large_buttons
            status = "ACTIVADO" if self.config.large_buttons else "DESACTIVADO"
            print(f"Modo teclas grandes: {status}")
            self.ui.resize()
            self.ui.show_feedback(f"TECLAS GRANDES {status}", LIGHT_GRAY)
            return

        event = event_for_key(key)
        if event is not None:
            self.press(event)

    def on_mouse(self, mouse_event, x, y, flags, param):
        """Callback de ratón de OpenCV: clic izquierdo pulsa el botón bajo el cursor."""
        if mouse_event != cv2.EVENT_LBUTTONDOWN:
            return
        event = self.ui.hit_test(x, y)
        if event is not None:
            self.press(event)

    def run(self):
        """
        Bucle principal de la aplicación.

        Ciclo de ejecución:
            1. Renderizar pantalla y teclado
            2. Mostrar frame y procesar teclado
            3. Repetir hasta ESC, 'q' o cerrar la ventana
        """
        print("\n" + "=" * 50)
        print("CALCULADORA")
        print("=" * 50)
        print("\nRatón: pulsa los botones")
        print("Teclado: 0-9 . + - * / = Enter | c: AC | n: ± | %")
        print("Presiona 'v' para activar/desactivar voz")
        print("Presiona 'g' para activar/desactivar teclas grandes")
        print("Presiona ESC o 'q' para salir\n")

        cv2.namedWindow(WINDOW_NAME, cv2.WINDOW_AUTOSIZE)
        cv2.setMouseCallback(WINDOW_NAME, self.on_mouse)
        self.running = True

        while self.running:
            frame = self.ui.render(self.controller)
            cv2.imshow(WINDOW_NAME, frame)

            key = cv2.waitKey(30) & 0xFF
            if key != 0xFF:
                self.handle_key(key)

            # Ventana cerrada con el ratón
            if cv2.getWindowProperty(WINDOW_NAME, cv2.WND_PROP_VISIBLE) < 1:
                self.running = False

        cv2.destroyAllWindows()
        print("\nOK Aplicacion cerrada correctamente")
