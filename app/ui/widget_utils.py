from PyQt6.QtCore import Qt
from PyQt6.QtGui import QColor, QPainter, QPainterPath, QPixmap
from PyQt6.QtWidgets import QLabel, QPushButton, QWidget

from core.images import get_image_bytes
from core.paths import DEFAULT_PHOTO_PATH


def disable_widget_interaction(widget: QWidget):
    """Disable interactive/focus states for display-only widgets."""
    widget.setFocusPolicy(Qt.FocusPolicy.NoFocus)
    if isinstance(widget, QLabel):
        widget.setTextInteractionFlags(Qt.TextInteractionFlag.NoTextInteraction)


def disable_button_focus_rect(button: QPushButton):
    """Disable focus rectangle on button while keeping it clickable."""
    button.setFocusPolicy(Qt.FocusPolicy.NoFocus)


def load_photo_pixmap(photo_ref: str | None) -> QPixmap:
    """Load the stored photo, falling back to the bundled default image."""
    pixmap = QPixmap()
    data = get_image_bytes(photo_ref)
    if data and pixmap.loadFromData(data):
        return pixmap
    if pixmap.load(str(DEFAULT_PHOTO_PATH)):
        return pixmap
    return QPixmap()


def circular_pixmap(source: QPixmap, size: int) -> QPixmap:
    """Center-crop a pixmap into a circle of the given diameter."""
    result = QPixmap(size, size)
    result.fill(QColor(0, 0, 0, 0))
    if source.isNull():
        return result

    scaled = source.scaled(
        size,
        size,
        Qt.AspectRatioMode.KeepAspectRatioByExpanding,
        Qt.TransformationMode.SmoothTransformation,
    )
    x = (scaled.width() - size) // 2
    y = (scaled.height() - size) // 2

    painter = QPainter(result)
    painter.setRenderHint(QPainter.RenderHint.Antialiasing)
    path = QPainterPath()
    path.addEllipse(0, 0, size, size)
    painter.setClipPath(path)
    painter.drawPixmap(-x, -y, scaled)
    painter.end()
    return result


class ClickableLabel(QLabel):
    """Label that reports mouse clicks through a callback."""

    def __init__(self, on_click=None, parent=None):
        super().__init__(parent)
        self.on_click = on_click
        self.setCursor(Qt.CursorShape.PointingHandCursor)
        disable_widget_interaction(self)

    def mouseReleaseEvent(self, event):
        if event.button() == Qt.MouseButton.LeftButton and self.on_click:
            self.on_click()
        super().mouseReleaseEvent(event)
