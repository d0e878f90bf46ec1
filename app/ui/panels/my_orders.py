from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import QLabel, QVBoxLayout, QWidget

from app.ui.panel_header import PanelHeader
from app.ui.theme import Colors, Styles
from app.ui.widget_utils import disable_widget_interaction


class MyOrdersPanel(QWidget):
    def __init__(self, nav):
        super().__init__()
        self.nav = nav

        header = PanelHeader("My Orders", nav)

        self.empty_label = QLabel("No orders yet")
        self.empty_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        disable_widget_interaction(self.empty_label)
        self.empty_label.setStyleSheet(Styles.info_label(Colors.FG_GRAY, 15))

        layout = QVBoxLayout()
        layout.addWidget(header)
        layout.addWidget(self.empty_label, 1)
        self.setLayout(layout)
