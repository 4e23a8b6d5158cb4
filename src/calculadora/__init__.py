"""
Calculadora básica de cuatro operaciones con teclado en pantalla.
"""

__version__ = "1.0.0"
