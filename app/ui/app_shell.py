from pathlib import Path

from PyQt6.QtGui import QIcon
from PyQt6.QtWidgets import QApplication, QStackedLayout, QStyle, QVBoxLayout, QWidget

from app.controllers.navigation_controller import NavigationController
from app.controllers.profile_controller import MY_ORDERS_ROUTE
from app.ui.panels.my_orders import MyOrdersPanel
from app.ui.panels.profile import ProfilePanel
from app.ui.theme import Styles


class AppShell(QWidget):
    def __init__(self):
        super().__init__()

        self.setWindowTitle("ShopSmart")
        self.setGeometry(300, 300, 420, 760)
        self.setStyleSheet(Styles.window())

        root_layout = QVBoxLayout()
        root_layout.setContentsMargins(0, 0, 0, 0)
        self.setLayout(root_layout)

        self.stack = QStackedLayout()
        root_layout.addLayout(self.stack)
        self.load_app_icon()

        # ---- navigation ----
        self.nav = NavigationController(
            self.stack,
            routes={MY_ORDERS_ROUTE: MyOrdersPanel},
        )

        # ---- panels ----
        self.profile = ProfilePanel(self.nav)
        self.stack.addWidget(self.profile)
        self.stack.setCurrentWidget(self.profile)

    def load_app_icon(self):
        app = QApplication.instance()
        bundled_icon_path = Path(__file__).resolve().parents[1] / "assets" / "profile.png"
        icon = QIcon(str(bundled_icon_path))
        if icon.isNull():
            icon = self.style().standardIcon(QStyle.StandardPixmap.SP_ComputerIcon)
        self.setWindowIcon(icon)
        if app:
            app.setWindowIcon(icon)

    def closeEvent(self, event):
        self.profile.shutdown()
        super().closeEvent(event)
