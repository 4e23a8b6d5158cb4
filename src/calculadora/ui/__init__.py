"""
Módulo de interfaz de usuario.
Contiene el renderizador de la pantalla y el teclado.
"""

from .renderer import KeypadRenderer

__all__ = ['KeypadRenderer']
