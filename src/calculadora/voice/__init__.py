"""
Módulo de síntesis de voz.
Contiene el sistema de feedback auditivo.
"""

from .feedback import VoiceFeedback, describe_event, describe_number

__all__ = ['VoiceFeedback', 'describe_event', 'describe_number']
