"""
Módulo core con la lógica principal de la calculadora.
Contiene los eventos de botón, el motor aritmético y el controlador.
"""

from .events import (
    ButtonKind,
    DecimalPoint,
    Digit,
    FunctionCommand,
    FunctionPress,
    Operator,
    OperatorPress,
    keypad_layout,
)
from .evaluator import Evaluator
from .controller import CalculatorController, format_number, parse_number

__all__ = [
    'ButtonKind', 'DecimalPoint', 'Digit', 'FunctionCommand', 'FunctionPress',
    'Operator', 'OperatorPress', 'keypad_layout',
    'Evaluator', 'CalculatorController', 'format_number', 'parse_number',
]
