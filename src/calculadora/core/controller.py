"""
Controlador de entrada y pantalla de la calculadora.

Este módulo contiene la clase CalculatorController, la máquina de estados
que interpreta las pulsaciones de botones, mantiene el texto de la pantalla
y delega la aritmética en el Evaluator.
"""

from .evaluator import Evaluator
from .events import (
    DecimalPoint,
    Digit,
    FunctionCommand,
    FunctionPress,
    Operator,
    OperatorPress,
    keypad_layout,
)


def format_number(number):
    """
    Convierte un número en el texto mostrado en pantalla.

    Args:
        number (float): Valor a mostrar

    Returns:
        str: Enteros sin decimales ("2", no "2.0"); resto con su
             representación decimal más corta ("0.5", "0.1")
    """
    number = float(number)
    if number.is_integer():
        return f"{number:.0f}"
    return repr(number)


def parse_number(text):
    """Interpreta el texto de la pantalla; 0 si no es un número válido."""
    try:
        return float(text)
    except ValueError:
        return 0.0


# ============================================================================
# CLASE: CalculatorController
# Propósito: Máquina de estados sobre los eventos de botón
# Responsabilidades:
#   - Construir el número en pantalla dígito a dígito
#   - Encadenar operaciones de izquierda a derecha (5 + 3 × → 8 ×)
#   - Publicar el texto principal, la vista previa y el operador resaltado
# ============================================================================
class CalculatorController:
    """
    Controlador de la calculadora.

    Variables de estado:
        - display_text: Texto de la pantalla principal (nunca vacío)
        - operation_preview: Línea secundaria (ej: "12 +")
        - active_operator: Operador resaltado en el teclado
        - current_number: Valor numérico de display_text
        - awaiting_fresh_entry: El siguiente dígito empieza un número nuevo
        - is_entering_number: El usuario está escribiendo un número

    Uso:
        controller.dispatch(Digit(5))
        controller.display_text  → "5"
    """

    def __init__(self, evaluator=None):
        self.evaluator = evaluator if evaluator else Evaluator()
        self._reset_state()

    def _reset_state(self):
        self._display_text = "0"
        self._operation_preview = ""
        self._active_operator = Operator.NONE
        self._pending_operator = Operator.NONE
        self.current_number = 0.0
        self.awaiting_fresh_entry = False
        self.is_entering_number = False

    # ========================================================================
    # CAMPOS PUBLICADOS (la interfaz los relee tras cada dispatch)
    # ========================================================================
    @property
    def display_text(self):
        return self._display_text

    @property
    def operation_preview(self):
        return self._operation_preview

    @property
    def active_operator(self):
        return self._active_operator

    def is_highlighted(self, event):
        """
        Indica si el botón de un evento debe mostrarse resaltado.

        Solo se resalta el operador binario activo; "=" nunca queda resaltado.
        """
        if not isinstance(event, OperatorPress):
            return False
        if event.operator in (Operator.EQUALS, Operator.NONE):
            return False
        return event.operator is self._active_operator

    @staticmethod
    def layout():
        """Distribución fija del teclado (ver keypad_layout)."""
        return keypad_layout()

    # ========================================================================
    # PUNTO DE ENTRADA ÚNICO
    # ========================================================================
    def dispatch(self, event):
        """
        Procesa una pulsación de botón.

        Args:
            event: Digit, DecimalPoint, OperatorPress o FunctionPress

        Todas las transiciones son totales: nunca lanza excepción y la
        pantalla siempre queda con un número válido.
        """
        if isinstance(event, Digit):
            self._handle_digit(event.value)
        elif isinstance(event, DecimalPoint):
            self._handle_decimal()
        elif isinstance(event, OperatorPress):
            self._handle_operator(event.operator)
        elif isinstance(event, FunctionPress):
            self._handle_function(event.command)

    def _handle_digit(self, digit):
        if self.awaiting_fresh_entry:
            # Número nuevo tras un operador o "="
            self._display_text = str(digit)
            self.awaiting_fresh_entry = False
            self.is_entering_number = True
        elif self._display_text == "0" or not self.is_entering_number:
            self._display_text = str(digit)
            self.is_entering_number = True
        else:
            self._display_text += str(digit)

        self.current_number = parse_number(self._display_text)

    def _handle_decimal(self):
        if self.awaiting_fresh_entry:
            self._display_text = "0."
            self.awaiting_fresh_entry = False
            self.is_entering_number = True
        elif "." not in self._display_text:
            self._display_text += "."
            self.is_entering_number = True

        self.current_number = parse_number(self._display_text)

    def _handle_operator(self, operator):
        if operator is Operator.NONE:
            return

        if operator is Operator.EQUALS:
            if self._pending_operator is Operator.NONE:
                return
            result = self.evaluator.apply(Operator.EQUALS, self.current_number)
            self._show_result(result)
            self._operation_preview = ""
            self._pending_operator = Operator.NONE
            self._active_operator = Operator.NONE
        else:
            # Encadenado: 5 + 3 × → primero se calcula 5 + 3
            if self._pending_operator is not Operator.NONE and self.is_entering_number:
                result = self.evaluator.apply(Operator.EQUALS, self.current_number)
                self._show_result(result)

            first_number = self.current_number
            self._pending_operator = operator
            self._active_operator = operator
            self._operation_preview = format_number(first_number) + " " + operator.symbol
            self.evaluator.apply(operator, first_number)

        self.awaiting_fresh_entry = True
        self.is_entering_number = False

    def _handle_function(self, command):
        if command is FunctionCommand.ALL_CLEAR:
            self.evaluator.reset()
            self._reset_state()

        elif command is FunctionCommand.TOGGLE_SIGN:
            # En 0 no cambia nada (no se muestra "-0")
            if self.current_number != 0:
                self.current_number = -self.current_number
                self._display_text = format_number(self.current_number)

        elif command is FunctionCommand.PERCENT:
            self.current_number = self.current_number / 100
            self._display_text = format_number(self.current_number)

    def _show_result(self, result):
        self._display_text = format_number(result)
        self.current_number = result
