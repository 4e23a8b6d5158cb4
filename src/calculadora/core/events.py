"""
Eventos de pulsación de botones y distribución fija del teclado.

Este módulo define los tipos que la capa de presentación envía al
controlador: dígitos, punto decimal, operadores y funciones (AC, ±, %).
"""

from dataclasses import dataclass
from enum import Enum


# ============================================================================
# ENUM: Operator
# Propósito: Operadores aritméticos disponibles en el teclado
# ============================================================================
class Operator(Enum):
    """
    Operadores de la calculadora.

    NONE indica que no hay ninguna operación pendiente.
    El valor de cada miembro es el símbolo mostrado en pantalla.
    """

    ADD = "+"
    SUBTRACT = "−"      # Signo menos (U+2212), no guion
    MULTIPLY = "×"      # Signo de multiplicación, no la letra x
    DIVIDE = "÷"
    EQUALS = "="
    NONE = ""

    @property
    def symbol(self):
        return self.value


class FunctionCommand(Enum):
    """Acciones que no son operadores: borrar todo, cambio de signo y porcentaje."""

    ALL_CLEAR = "AC"
    TOGGLE_SIGN = "±"
    PERCENT = "%"


class ButtonKind(Enum):
    """Categoría visual de un botón (colores y fuente)."""

    NUMBER = "number"
    OPERATOR = "operator"
    FUNCTION = "function"


# ============================================================================
# EVENTOS DE BOTÓN
# Unión etiquetada: Digit | DecimalPoint | OperatorPress | FunctionPress
# ============================================================================
@dataclass(frozen=True)
class Digit:
    """Pulsación de un dígito 0-9."""

    value: int

    def __post_init__(self):
        if not isinstance(self.value, int) or not 0 <= self.value <= 9:
            raise ValueError(f"Dígito fuera de rango: {self.value!r}")

    @property
    def label(self):
        return str(self.value)

    @property
    def kind(self):
        return ButtonKind.NUMBER


@dataclass(frozen=True)
class DecimalPoint:
    """Pulsación del punto decimal."""

    @property
    def label(self):
        return "."

    @property
    def kind(self):
        return ButtonKind.NUMBER


@dataclass(frozen=True)
class OperatorPress:
    """Pulsación de un operador (+, −, ×, ÷, =)."""

    operator: Operator

    @property
    def label(self):
        return self.operator.symbol

    @property
    def kind(self):
        return ButtonKind.OPERATOR


@dataclass(frozen=True)
class FunctionPress:
    """Pulsación de una función (AC, ±, %)."""

    command: FunctionCommand

    @property
    def label(self):
        return self.command.value

    @property
    def kind(self):
        return ButtonKind.FUNCTION


# ============================================================================
# DISTRIBUCIÓN DEL TECLADO
# 5 filas fijas, igual que una calculadora de bolsillo:
#   AC  ±  %  ÷
#   7   8  9  ×
#   4   5  6  −
#   1   2  3  +
#   0      .  =
# ============================================================================
KEYPAD_LAYOUT = (
    (FunctionPress(FunctionCommand.ALL_CLEAR), FunctionPress(FunctionCommand.TOGGLE_SIGN),
     FunctionPress(FunctionCommand.PERCENT), OperatorPress(Operator.DIVIDE)),
    (Digit(7), Digit(8), Digit(9), OperatorPress(Operator.MULTIPLY)),
    (Digit(4), Digit(5), Digit(6), OperatorPress(Operator.SUBTRACT)),
    (Digit(1), Digit(2), Digit(3), OperatorPress(Operator.ADD)),
    (Digit(0), DecimalPoint(), OperatorPress(Operator.EQUALS)),
)


def keypad_layout():
    """
    Retorna la distribución fija del teclado.

    Returns:
        tuple: Filas de eventos de botón, de arriba a abajo
    """
    return KEYPAD_LAYOUT
