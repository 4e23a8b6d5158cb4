"""
Interfaz de usuario y renderizado.

Este módulo contiene la clase KeypadRenderer que dibuja la pantalla y el
teclado de la calculadora sobre una imagen de OpenCV.
"""

import cv2
import numpy as np

from ..config.accessibility import AccessibilityConfig
from ..core.events import ButtonKind, Digit, keypad_layout


# Colores en BGR
BACKGROUND = (0, 0, 0)
WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
ORANGE = (10, 159, 255)
LIGHT_GRAY = (200, 200, 200)
DIM_TEXT = (150, 150, 150)

# Las fuentes Hershey de OpenCV solo dibujan ASCII
ASCII_SYMBOLS = str.maketrans({"−": "-", "×": "x", "÷": "/", "±": "+/-"})

KEY_HINTS = "c:AC  n:+/-  v:voz  g:teclas  q:salir"


def ascii_label(text):
    """Sustituye los símbolos Unicode de las teclas por equivalentes ASCII."""
    return text.translate(ASCII_SYMBOLS)


# ============================================================================
class KeypadRenderer:
    """
    Renderizador de interfaz gráfica para la calculadora.

    Componentes visuales:
        1. Pantalla: vista previa de la operación y número principal
        2. Teclado: 5 filas de botones redondos (el 0 ocupa dos columnas)
        3. Feedback: mensajes temporales de confirmación
        4. Línea de atajos de teclado

    Estilo de botones:
        - Números y punto: efecto cristal translúcido, texto blanco
        - Operadores: fondo naranja; blanco con texto naranja si están activos
        - Funciones (AC, ±, %): fondo gris claro, texto negro
    """

    def __init__(self, config=None):
        """
        Inicializa el renderizador con la configuración de accesibilidad.

        Args:
            config (AccessibilityConfig): Configuración de accesibilidad (opcional)
        """
        self.config = config if config else AccessibilityConfig()
        self.width, self.height = self.config.get_window_size()
        self.feedback_msg = ""               # Mensaje de feedback actual
        self.feedback_timer = 0              # Frames restantes para mostrar feedback
        self.feedback_color = WHITE          # Color del feedback
        self._rects = self._compute_rects()

    def resize(self):
        """Recalcula tamaños tras cambiar el modo teclas grandes."""
        self.width, self.height = self.config.get_window_size()
        self._rects = self._compute_rects()

    # ========================================================================
    # GEOMETRÍA DEL TECLADO
    # ========================================================================
    def _compute_rects(self):
        size = self.config.get_button_size()
        spacing = self.config.get_button_spacing()
        top = self.config.padding + self.config.display_height

        rects = []
        for row_index, row in enumerate(keypad_layout()):
            y = top + row_index * (size + spacing)
            x = self.config.padding
            for event in row:
                # El 0 es el doble de ancho, como en el iPhone
                w = 2 * size + spacing if event == Digit(0) else size
                rects.append((event, (x, y, w, size)))
                x += w + spacing
        return rects

    def button_rects(self):
        """
        Retorna la posición de cada botón.

        Returns:
            list: [(evento, (x, y, ancho, alto)), ...] en orden de lectura
        """
        return list(self._rects)

    def hit_test(self, x, y):
        """
        Busca el botón bajo un punto de la ventana.

        Returns:
            Evento del botón pulsado, o None si el punto cae fuera del teclado
        """
        for event, (bx, by, bw, bh) in self._rects:
            if bx <= x < bx + bw and by <= y < by + bh:
                return event
        return None

    # ========================================================================
    # FEEDBACK TEMPORAL
    # ========================================================================
    def show_feedback(self, msg, color=WHITE, duration=20):
        """
        Muestra mensaje de feedback temporal.

        Args:
            msg (str): Mensaje a mostrar
            color (tuple): Color BGR del mensaje
            duration (int): Duración en frames
        """
        self.feedback_msg = msg
        self.feedback_color = color
        self.feedback_timer = duration

    def draw_feedback(self, img):
        """Dibuja el mensaje de feedback con fade-out en la esquina superior."""
        if self.feedback_timer <= 0:
            return
        self.feedback_timer -= 1
        alpha = min(self.feedback_timer / 10.0, 1.0)
        color = tuple(int(c * alpha) for c in self.feedback_color)
        cv2.putText(img, ascii_label(self.feedback_msg),
                    (self.config.padding, self.config.padding + 20),
                    cv2.FONT_HERSHEY_SIMPLEX, 0.6, color, 1, cv2.LINE_AA)

    # ========================================================================
    # PANTALLA
    # ========================================================================
    def draw_display(self, img, controller):
        """
        Dibuja la pantalla de la calculadora.

        Args:
            img (np.array): Imagen sobre la cual dibujar
            controller (CalculatorController): Estado publicado a mostrar

        Componentes:
            1. Vista previa de la operación (atenuada, alineada a la derecha)
            2. Número principal (grande, se reduce si no cabe)
        """
        right = self.width - self.config.padding
        available = self.width - 2 * self.config.padding
        bottom = self.config.padding + self.config.display_height - 25

        preview = controller.operation_preview
        if preview and self.config.show_operation_preview:
            text = ascii_label(preview)
            (tw, _), _ = cv2.getTextSize(text, cv2.FONT_HERSHEY_SIMPLEX, 0.9, 2)
            cv2.putText(img, text, (right - tw, bottom - 80),
                        cv2.FONT_HERSHEY_SIMPLEX, 0.9, DIM_TEXT, 2, cv2.LINE_AA)

        display = controller.display_text
        font_scale = 2.4
        (tw, _), _ = cv2.getTextSize(display, cv2.FONT_HERSHEY_DUPLEX, font_scale, 2)
        # Reducir fuente hasta que el número quepa
        while tw > available and font_scale > 0.6:
            font_scale -= 0.1
            (tw, _), _ = cv2.getTextSize(display, cv2.FONT_HERSHEY_DUPLEX, font_scale, 2)
        cv2.putText(img, display, (right - tw, bottom),
                    cv2.FONT_HERSHEY_DUPLEX, font_scale, WHITE, 2, cv2.LINE_AA)

    # ========================================================================
    # TECLADO
    # ========================================================================
    def _button_colors(self, event, highlighted):
        """Retorna (fondo, texto) según el tipo de botón; fondo None = cristal."""
        if event.kind is ButtonKind.OPERATOR:
            if highlighted and self.config.highlight_active_operator:
                return WHITE, ORANGE
            return ORANGE, WHITE
        if event.kind is ButtonKind.FUNCTION:
            return LIGHT_GRAY, BLACK
        return None, WHITE

    @staticmethod
    def _fill_pill(img, rect, color, thickness=-1):
        """Dibuja un botón redondeado (círculo, o píldora si es ancho)."""
        x, y, w, h = rect
        r = h // 2
        cv2.circle(img, (x + r, y + r), r, color, thickness, cv2.LINE_AA)
        cv2.circle(img, (x + w - r, y + r), r, color, thickness, cv2.LINE_AA)
        if w > h:
            if thickness < 0:
                cv2.rectangle(img, (x + r, y), (x + w - r, y + h), color, -1)
            else:
                cv2.line(img, (x + r, y), (x + w - r, y), color, thickness, cv2.LINE_AA)
                cv2.line(img, (x + r, y + h), (x + w - r, y + h), color, thickness, cv2.LINE_AA)

    def draw_button(self, img, event, rect, highlighted=False):
        """Dibuja un botón con su etiqueta centrada."""
        background, text_color = self._button_colors(event, highlighted)

        if background is None:
            # Efecto cristal: relleno blanco translúcido y borde claro
            overlay = img.copy()
            self._fill_pill(overlay, rect, WHITE)
            cv2.addWeighted(overlay, 0.15, img, 0.85, 0, img)
            self._fill_pill(img, rect, (120, 120, 120), thickness=1)
        else:
            self._fill_pill(img, rect, background)

        x, y, w, h = rect
        label = ascii_label(event.label)
        font_scale = 1.2 if event.kind is not ButtonKind.FUNCTION else 1.0
        font_scale *= h / 85.0
        (tw, th), _ = cv2.getTextSize(label, cv2.FONT_HERSHEY_SIMPLEX, font_scale, 2)
        if event == Digit(0):
            # El 0 ancho alinea su etiqueta con la columna izquierda
            tx = x + h // 2 - tw // 2
        else:
            tx = x + (w - tw) // 2
        ty = y + (h + th) // 2
        cv2.putText(img, label, (tx, ty), cv2.FONT_HERSHEY_SIMPLEX,
                    font_scale, text_color, 2, cv2.LINE_AA)

    def draw_keypad(self, img, controller):
        """Dibuja todos los botones; resalta el operador activo."""
        for event, rect in self._rects:
            self.draw_button(img, event, rect, controller.is_highlighted(event))

    def draw_hints(self, img):
        """Dibuja la línea de atajos de teclado al pie de la ventana."""
        if not self.config.show_key_hints:
            return
        cv2.putText(img, KEY_HINTS, (self.config.padding, self.height - 15),
                    cv2.FONT_HERSHEY_SIMPLEX, 0.4, DIM_TEXT, 1, cv2.LINE_AA)

    def render(self, controller):
        """
        Dibuja un frame completo.

        Args:
            controller (CalculatorController): Estado a mostrar

        Returns:
            np.array: Imagen BGR de tamaño (alto, ancho, 3)
        """
        img = np.zeros((self.height, self.width, 3), dtype=np.uint8)
        img[:] = BACKGROUND
        self.draw_display(img, controller)
        self.draw_keypad(img, controller)
        self.draw_hints(img)
        self.draw_feedback(img)
        return img
