"""
Módulo de la aplicación principal.
Contiene la clase que integra todos los componentes.
"""

from .calculator_app import CalculatorApp, event_for_key

__all__ = ['CalculatorApp', 'event_for_key']
