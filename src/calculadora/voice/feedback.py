"""
Sistema de feedback por voz usando pyttsx3.

Este módulo proporciona síntesis de voz para anunciar las teclas pulsadas y
los resultados, ejecutándose de forma asíncrona para no bloquear la interfaz.
"""

import threading
import pyttsx3
from collections import deque

from ..core.events import (
    DecimalPoint,
    Digit,
    FunctionCommand,
    FunctionPress,
    Operator,
    OperatorPress,
)


NUMBERS_ES = {
    0: "cero", 1: "uno", 2: "dos", 3: "tres", 4: "cuatro",
    5: "cinco", 6: "seis", 7: "siete", 8: "ocho", 9: "nueve"
}

OPERATIONS_ES = {
    Operator.ADD: "más",
    Operator.SUBTRACT: "menos",
    Operator.MULTIPLY: "por",
    Operator.DIVIDE: "dividido entre",
    Operator.EQUALS: "igual",
}

FUNCTIONS_ES = {
    FunctionCommand.ALL_CLEAR: "borrar todo",
    FunctionCommand.TOGGLE_SIGN: "cambio de signo",
    FunctionCommand.PERCENT: "por ciento",
}


def describe_event(event):
    """
    Texto hablado para una tecla pulsada.

    Args:
        event: Evento de botón

    Returns:
        str: Descripción en español (ej: "cinco", "más", "coma")
    """
    if isinstance(event, Digit):
        return NUMBERS_ES[event.value]
    if isinstance(event, DecimalPoint):
        return "coma"
    if isinstance(event, OperatorPress):
        return OPERATIONS_ES.get(event.operator, "")
    if isinstance(event, FunctionPress):
        return FUNCTIONS_ES[event.command]
    return ""


def describe_number(text):
    """
    Convierte el texto de la pantalla en una lectura natural.

    Ejemplos:
        "2.5" → "2 coma 5"
        "-3"  → "menos 3"
    """
    spoken = text
    if spoken.startswith("-"):
        spoken = "menos " + spoken[1:]
    return spoken.replace(".", " coma ")


# ============================================================================
# CLASE: VoiceFeedback
# Propósito: Síntesis de voz para feedback auditivo
# Responsabilidades:
#   - Anunciar teclas y resultados en español
#   - Ejecutar en hilo separado para no bloquear UI
#   - Gestionar cola de mensajes para evitar solapamiento
# ============================================================================
class VoiceFeedback:
    """
    Sistema de feedback por voz usando pyttsx3.

    Características:
        - Ejecución asíncrona (no bloquea la aplicación)
        - Cola de mensajes (un mensaje a la vez)
        - Configuración de volumen y velocidad
    """

    def __init__(self, config):
        """
        Inicializa el motor de síntesis de voz.

        Args:
            config (AccessibilityConfig): Configuración de accesibilidad
        """
        self.config = config
        self.engine = None
        self.is_speaking = False
        self.message_queue = deque(maxlen=5)  # Cola de máximo 5 mensajes
        self._lock = threading.Lock()

        try:
            self.engine = pyttsx3.init()
            self._configure_engine()
            print("✓ Sistema de voz inicializado correctamente")
        except Exception as e:
            print(f"⚠ Advertencia: No se pudo inicializar el sistema de voz: {e}")
            self.config.voice_enabled = False

    def _configure_engine(self):
        """
        Configura el motor de voz con las preferencias del usuario.
        Selecciona la primera voz cuyo identificador coincide con el idioma.
        """
        if not self.engine:
            return

        try:
            self.engine.setProperty('volume', self.config.voice_volume)
            self.engine.setProperty('rate', self.config.voice_rate)

            language = self.config.voice_language.lower()
            for voice in self.engine.getProperty('voices') or []:
                languages = [str(lang).lower() for lang in getattr(voice, 'languages', None) or []]
                voice_id = voice.id.lower()
                if any(language in lang for lang in languages) or f"{language}-" in voice_id \
                        or f"{language}_" in voice_id:
                    self.engine.setProperty('voice', voice.id)
                    print(f"✓ Voz seleccionada: {voice.name}")
                    return

            print(f"⚠ No se encontró voz para '{language}'. Usando voz predeterminada.")
        except Exception as e:
            print(f"⚠ Error al configurar voz: {e}")

    @property
    def available(self):
        return self.engine is not None

    def speak(self, text):
        """
        Reproduce un mensaje de voz de forma asíncrona.

        Args:
            text (str): Texto a sintetizar
        """
        if not text or not self.config.voice_enabled or not self.engine:
            return

        with self._lock:
            self.message_queue.append(text)
            if self.is_speaking:
                return
            self.is_speaking = True

        thread = threading.Thread(target=self._process_queue, daemon=True)
        thread.start()

    def _process_queue(self):
        """Procesa la cola de mensajes uno por uno."""
        while True:
            with self._lock:
                if not self.message_queue:
                    self.is_speaking = False
                    return
                message = self.message_queue.popleft()
            try:
                self.engine.say(message)
                self.engine.runAndWait()
            except Exception as e:
                print(f"⚠ Error al reproducir voz: {e}")

    def speak_event(self, event):
        """Anuncia la tecla pulsada (ej: "siete", "por")."""
        self.speak(describe_event(event))

    def speak_result(self, display_text):
        """Anuncia un resultado: "igual a 2 coma 5"."""
        self.speak(f"igual a {describe_number(display_text)}")
