"""
Tests de la configuración de accesibilidad.
"""

from calculadora.config import AccessibilityConfig


def test_defaults():
    config = AccessibilityConfig()
    assert config.voice_enabled
    assert not config.large_buttons
    assert config.get_button_size() == 85
    assert config.get_button_spacing() == 12


def test_large_buttons_scale_sizes():
    config = AccessibilityConfig()
    config.large_buttons = True
    assert config.get_button_size() == int(85 * 1.4)
    assert config.get_button_spacing() == int(12 * 1.4)


def test_window_size_fits_keypad():
    config = AccessibilityConfig()
    width, height = config.get_window_size()
    # 4 columnas, 5 filas
    assert width == 2 * 20 + 4 * 85 + 3 * 12
    assert height == 200 + 2 * 20 + 5 * 85 + 4 * 12 + 30


def test_window_grows_in_large_mode():
    config = AccessibilityConfig()
    normal = config.get_window_size()
    config.large_buttons = True
    large = config.get_window_size()
    assert large[0] > normal[0]
    assert large[1] > normal[1]


def test_window_without_key_hints():
    config = AccessibilityConfig()
    with_hints = config.get_window_size()
    config.show_key_hints = False
    assert config.get_window_size()[1] == with_hints[1] - 30
