from PyQt6.QtWidgets import QHBoxLayout, QLabel, QPushButton, QWidget

from app.ui.theme import Colors, Styles
from app.ui.widget_utils import disable_button_focus_rect, disable_widget_interaction


class PanelHeader(QWidget):
    def __init__(self, title, nav=None):
        super().__init__()
        self.nav = nav

        self.setObjectName("panel_header")
        self.setStyleSheet(
            f"""
            QWidget#panel_header {{
                background-color: {Colors.BG_LIGHT};
                padding: 4px;
            }}
            """
        )

        layout = QHBoxLayout()
        layout.setContentsMargins(6, 6, 6, 6)

        if nav is not None:
            back_btn = QPushButton("⬅")
            back_btn.setFixedWidth(40)
            back_btn.clicked.connect(self.nav.pop)
            disable_button_focus_rect(back_btn)
            back_btn.setStyleSheet(Styles.menu_button())
            layout.addWidget(back_btn)
        else:
            layout.addStretch()

        self.title_label = QLabel(title)
        disable_widget_interaction(self.title_label)
        self.title_label.setStyleSheet(Styles.title_label())

        layout.addWidget(self.title_label)
        layout.addStretch()
        self.setLayout(layout)
