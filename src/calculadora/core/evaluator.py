"""
Motor aritmético de la calculadora.

Este módulo contiene la clase Evaluator: guarda un acumulador y la
operación pendiente, y combina ambos operandos al pulsar "=".
No sabe nada de textos ni de formato de pantalla.
"""

from .events import Operator


# ============================================================================
# CLASE: Evaluator
# Propósito: Aritmética pura de izquierda a derecha (una operación pendiente)
# Responsabilidades:
#   - Registrar el primer operando y el operador elegido
#   - Calcular el resultado al recibir "=" con el segundo operando
#   - División por cero devuelve 0 (no lanza excepción)
# ============================================================================
class Evaluator:
    """
    Motor aritmético con una única operación pendiente.

    Modelo de operación:
        1. apply(ADD, 5)    → acumulador = 5, operación pendiente = ADD
        2. apply(EQUALS, 3) → 5 + 3 = 8, acumulador = 8, sin operación pendiente

    El controlador siempre pasa el segundo operando de forma explícita;
    el evaluador nunca guarda un segundo operando sin aplicar.
    """

    def __init__(self):
        """Inicializa el evaluador con acumulador 0 y sin operación pendiente."""
        self._accumulator = 0.0
        self._pending_operator = Operator.NONE

    @property
    def accumulator(self):
        return self._accumulator

    @property
    def pending_operator(self):
        return self._pending_operator

    def apply(self, operator, operand):
        """
        Aplica un operador con el operando indicado.

        Args:
            operator (Operator): Operador pulsado
            operand (float): Número actual en pantalla

        Returns:
            float: Acumulador registrado, resultado calculado u operando sin cambios

        Comportamiento:
            - ADD/SUBTRACT/MULTIPLY/DIVIDE: registra operando y operador
            - EQUALS: combina acumulador y operando con la operación pendiente
            - NONE: devuelve el operando tal cual
        """
        if operator is Operator.EQUALS:
            result = self._combine(self._accumulator, operand, self._pending_operator)
            self._accumulator = result
            self._pending_operator = Operator.NONE
            return result

        if operator is Operator.NONE:
            return operand

        self._accumulator = operand
        self._pending_operator = operator
        return self._accumulator

    @staticmethod
    def _combine(first, second, operator):
        """Calcula first <operator> second."""
        if operator is Operator.ADD:
            return first + second
        if operator is Operator.SUBTRACT:
            return first - second
        if operator is Operator.MULTIPLY:
            return first * second
        if operator is Operator.DIVIDE:
            # Dividir entre cero muestra 0 en vez de error
            if second == 0:
                return 0.0
            return first / second
        # Sin operación pendiente: se queda el segundo número
        return second

    def reset(self):
        """Vuelve al estado inicial (botón AC)."""
        self._accumulator = 0.0
        self._pending_operator = Operator.NONE
