"""
Módulo de configuración para la calculadora.
Contiene clases de configuración de accesibilidad y preferencias.
"""

from .accessibility import AccessibilityConfig

__all__ = ['AccessibilityConfig']
