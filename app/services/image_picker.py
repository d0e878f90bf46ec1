"""QFileDialog-backed image picker."""
from PyQt6.QtWidgets import QFileDialog

from core.images import IMAGE_EXTENSIONS


def mime_to_dialog_filter(mime_filter):
    """Translate a MIME filter such as image/* into a QFileDialog name filter."""
    if mime_filter.startswith("image/"):
        subtype = mime_filter.split("/", 1)[1]
        if subtype == "*":
            patterns = " ".join(f"*{ext}" for ext in IMAGE_EXTENSIONS)
        else:
            patterns = f"*.{subtype}"
        return f"Images ({patterns})"
    return "All Files (*)"


class DialogImagePicker:
    def __init__(self, parent=None, title="Select Profile Photo"):
        self.parent = parent
        self.title = title

    def request(self, mime_filter, callback):
        """Show a modal file dialog; callback gets the chosen path or None."""
        file_path, _ = QFileDialog.getOpenFileName(
            self.parent, self.title, "", mime_to_dialog_filter(mime_filter)
        )
        callback(file_path or None)
