"""
Configuración de opciones de accesibilidad para usuarios.

Este módulo contiene la configuración centralizada para adaptar la calculadora
a diferentes necesidades de accesibilidad (voz, teclas grandes, ayudas visuales).
"""

from ..core.events import keypad_layout


# ============================================================================
# CLASE: AccessibilityConfig
# Propósito: Configuración de opciones de accesibilidad para usuarios
# Responsabilidades:
#   - Almacenar preferencias de voz (volumen, velocidad, idioma)
#   - Gestionar modo teclas grandes (visión reducida o poca precisión)
#   - Calcular el tamaño de la ventana a partir del teclado
# ============================================================================
class AccessibilityConfig:
    """
    Configuración de accesibilidad para adaptar la calculadora a diferentes necesidades.

    Opciones disponibles:
        - Feedback por voz configurable (volumen, velocidad, idioma)
        - Modo teclas grandes (botones y separación ampliados)
        - Ayudas visuales (vista previa de la operación, operador resaltado)
    """

    def __init__(self):
        """Inicializa configuración con valores por defecto."""
        # ====================================================================
        # CONFIGURACIÓN DE VOZ
        # ====================================================================
        self.voice_enabled = True           # Activar/desactivar feedback por voz
        self.voice_volume = 0.8             # Volumen (0.0-1.0)
        self.voice_rate = 150               # Velocidad de habla (palabras por minuto)
        self.voice_language = 'es'          # Idioma ('es', 'en', etc.)

        # ====================================================================
        # MODO TECLAS GRANDES
        # ====================================================================
        self.large_buttons = False          # Activar modo teclas grandes
        self.button_size = 85               # Diámetro de un botón en píxeles
        self.button_spacing = 12            # Separación entre botones
        self.size_multiplier = 1.4          # Ampliación en modo teclas grandes

        # ====================================================================
        # PANTALLA
        # ====================================================================
        self.display_height = 200           # Alto del panel de pantalla
        self.padding = 20                   # Margen alrededor del teclado

        # ====================================================================
        # AYUDAS VISUALES
        # ====================================================================
        self.show_operation_preview = True  # Mostrar "12 +" sobre el número
        self.highlight_active_operator = True  # Resaltar operador pendiente
        self.show_key_hints = True          # Mostrar atajos de teclado

    def _scale(self):
        return self.size_multiplier if self.large_buttons else 1.0

    def get_button_size(self):
        """Retorna el tamaño de botón según el modo activo."""
        return int(self.button_size * self._scale())

    def get_button_spacing(self):
        """Retorna la separación entre botones según el modo activo."""
        return int(self.button_spacing * self._scale())

    def get_window_size(self):
        """
        Calcula el tamaño de la ventana a partir del teclado.

        Returns:
            tuple: (ancho, alto) en píxeles
        """
        rows = keypad_layout()
        columns = max(len(row) for row in rows)
        size = self.get_button_size()
        spacing = self.get_button_spacing()

        width = 2 * self.padding + columns * size + (columns - 1) * spacing
        height = (self.display_height + 2 * self.padding
                  + len(rows) * size + (len(rows) - 1) * spacing)
        if self.show_key_hints:
            height += 30                    # Línea de atajos al pie
        return width, height
