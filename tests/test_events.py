"""
Tests de los eventos de botón y la distribución del teclado.
"""

import pytest

from calculadora.core import (
    ButtonKind,
    DecimalPoint,
    Digit,
    FunctionCommand,
    FunctionPress,
    Operator,
    OperatorPress,
    keypad_layout,
)


def test_digit_range():
    assert Digit(0).value == 0
    assert Digit(9).label == "9"
    with pytest.raises(ValueError):
        Digit(10)
    with pytest.raises(ValueError):
        Digit(-1)


def test_events_are_hashable_values():
    assert Digit(3) == Digit(3)
    assert DecimalPoint() == DecimalPoint()
    assert len({OperatorPress(Operator.ADD), OperatorPress(Operator.ADD)}) == 1


def test_labels():
    labels = [[event.label for event in row] for row in keypad_layout()]
    assert labels == [
        ["AC", "±", "%", "÷"],
        ["7", "8", "9", "×"],
        ["4", "5", "6", "−"],
        ["1", "2", "3", "+"],
        ["0", ".", "="],
    ]


def test_kinds():
    assert Digit(1).kind is ButtonKind.NUMBER
    assert DecimalPoint().kind is ButtonKind.NUMBER
    assert OperatorPress(Operator.EQUALS).kind is ButtonKind.OPERATOR
    assert FunctionPress(FunctionCommand.PERCENT).kind is ButtonKind.FUNCTION


def test_subtract_symbol_is_minus_sign():
    assert Operator.SUBTRACT.symbol == "−"
    assert Operator.NONE.symbol == ""


def test_layout_contains_every_digit_once():
    events = [event for row in keypad_layout() for event in row]
    digits = sorted(event.value for event in events if isinstance(event, Digit))
    assert digits == list(range(10))
    assert len(events) == 19
