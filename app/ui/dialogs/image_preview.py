from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import QDialog, QHBoxLayout, QPushButton, QVBoxLayout

from app.ui.theme import Styles
from app.ui.widget_utils import ClickableLabel, disable_button_focus_rect, load_photo_pixmap


class ImagePreviewDialog(QDialog):
    """Full-screen view of the profile photo. Click, Escape or ✕ to dismiss."""

    def __init__(self, photo_ref, parent=None):
        super().__init__(parent)
        self.photo_ref = photo_ref
        self.setWindowTitle("Profile Photo")
        self.setStyleSheet(Styles.preview_dialog())
        self.setWindowState(Qt.WindowState.WindowFullScreen)

        self.pixmap = load_photo_pixmap(photo_ref)

        self.image_label = ClickableLabel(self.accept)
        self.image_label.setAlignment(Qt.AlignmentFlag.AlignCenter)

        close_btn = QPushButton("✕")
        close_btn.setFixedSize(40, 40)
        close_btn.setStyleSheet("color: #ffffff; background: transparent; border: none; font-size: 20px;")
        disable_button_focus_rect(close_btn)
        close_btn.clicked.connect(self.reject)

        top_row = QHBoxLayout()
        top_row.addStretch()
        top_row.addWidget(close_btn)

        layout = QVBoxLayout()
        layout.addLayout(top_row)
        layout.addWidget(self.image_label, 1)
        self.setLayout(layout)
        self._rescale()

    def _rescale(self):
        if self.pixmap.isNull():
            self.image_label.setText("No photo")
            return
        self.image_label.setPixmap(
            self.pixmap.scaled(
                max(1, self.image_label.width()),
                max(1, self.image_label.height()),
                Qt.AspectRatioMode.KeepAspectRatio,
                Qt.TransformationMode.SmoothTransformation,
            )
        )

    def resizeEvent(self, event):
        super().resizeEvent(event)
        self._rescale()
