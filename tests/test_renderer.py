"""
Tests del renderizador: geometría del teclado, hit testing y dibujo.
"""

import numpy as np
import pytest

from calculadora.config import AccessibilityConfig
from calculadora.core import (
    CalculatorController,
    DecimalPoint,
    Digit,
    FunctionCommand,
    FunctionPress,
    Operator,
    OperatorPress,
)
from calculadora.ui import KeypadRenderer
from calculadora.ui.renderer import ORANGE, WHITE, ascii_label


@pytest.fixture
def renderer():
    return KeypadRenderer(AccessibilityConfig())


def center(rect):
    x, y, w, h = rect
    return x + w // 2, y + h // 2


def rect_of(renderer, event):
    return dict(renderer.button_rects())[event]


def test_one_rect_per_key(renderer):
    assert len(renderer.button_rects()) == 19


def test_zero_key_is_double_width(renderer):
    zero = rect_of(renderer, Digit(0))
    one = rect_of(renderer, Digit(1))
    assert zero[2] == 2 * one[2] + 12
    # "." queda bajo el 3 y "=" bajo el +
    assert rect_of(renderer, DecimalPoint())[0] == rect_of(renderer, Digit(3))[0]
    assert (rect_of(renderer, OperatorPress(Operator.EQUALS))[0]
            == rect_of(renderer, OperatorPress(Operator.ADD))[0])


def test_buttons_inside_window(renderer):
    for _, (x, y, w, h) in renderer.button_rects():
        assert 0 <= x and x + w <= renderer.width
        assert 0 <= y and y + h <= renderer.height


def test_hit_test_finds_every_button(renderer):
    for event, rect in renderer.button_rects():
        assert renderer.hit_test(*center(rect)) == event


def test_hit_test_outside_keypad(renderer):
    assert renderer.hit_test(5, 5) is None
    assert renderer.hit_test(renderer.width + 10, renderer.height + 10) is None


def test_render_returns_bgr_image(renderer):
    img = renderer.render(CalculatorController())
    assert img.shape == (renderer.height, renderer.width, 3)
    assert img.dtype == np.uint8
    assert img.any()


def test_highlighted_operator_is_white(renderer):
    controller = CalculatorController()
    divide = OperatorPress(Operator.DIVIDE)
    x, y = center(rect_of(renderer, divide))
    # Muestra un punto del fondo del botón, lejos de la etiqueta
    sample = (y - 30, x)

    img = renderer.render(controller)
    assert tuple(img[sample]) == ORANGE

    controller.dispatch(Digit(8))
    controller.dispatch(divide)
    img = renderer.render(controller)
    assert tuple(img[sample]) == WHITE


def test_resize_after_large_mode(renderer):
    width = renderer.width
    renderer.config.large_buttons = True
    renderer.resize()
    assert renderer.width > width
    img = renderer.render(CalculatorController())
    assert img.shape[1] == renderer.width


def test_feedback_expires(renderer):
    renderer.show_feedback("OK", duration=2)
    controller = CalculatorController()
    renderer.render(controller)
    renderer.render(controller)
    assert renderer.feedback_timer == 0


def test_long_number_renders(renderer):
    controller = CalculatorController()
    for _ in range(20):
        controller.dispatch(Digit(9))
    controller.dispatch(FunctionPress(FunctionCommand.TOGGLE_SIGN))
    img = renderer.render(controller)
    assert img.shape == (renderer.height, renderer.width, 3)


def test_ascii_label():
    assert ascii_label("12 ×") == "12 x"
    assert ascii_label("±") == "+/-"
    assert ascii_label("−÷") == "-/"
