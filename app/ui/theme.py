class Colors:
    """Color palette for the application UI."""

    BG_LIGHT = "#f6f5f3"
    BG_WHITE = "#ffffff"
    FG_DARK = "#332d25"
    FG_GRAY = "#808080"
    BORDER_LIGHT = "#d3d3d3"
    BORDER_GRAY = "#808080"
    HOVER_BG = "#efede9"
    PRESSED_BG = "#e4e1dc"

    PRIMARY = "#006400"
    PRIMARY_HOVER = "#0a7a0a"
    PRIMARY_PRESSED = "#004d00"
    ERROR = "#b3261e"


class Styles:
    """Reusable stylesheet templates."""

    @staticmethod
    def window():
        return f"background-color: {Colors.BG_LIGHT};"

    @staticmethod
    def menu_button():
        return f"""
            QPushButton {{
                background-color: transparent;
                color: {Colors.FG_DARK};
                border: none;
                padding: 10px 12px;
                font-size: 15px;
                outline: none;
            }}
            QPushButton:hover {{
                background-color: {Colors.HOVER_BG};
            }}
            QPushButton:pressed {{
                background-color: {Colors.PRESSED_BG};
            }}
        """

    @staticmethod
    def primary_button():
        return f"""
            QPushButton {{
                background-color: {Colors.PRIMARY};
                color: #ffffff;
                border: none;
                border-radius: 20px;
                padding: 10px 16px;
                font-size: 14px;
                outline: none;
            }}
            QPushButton:hover {{
                background-color: {Colors.PRIMARY_HOVER};
            }}
            QPushButton:pressed {{
                background-color: {Colors.PRIMARY_PRESSED};
            }}
        """

    @staticmethod
    def edit_icon_button():
        return f"""
            QPushButton {{
                background-color: {Colors.PRIMARY};
                color: #ffffff;
                border: 2px solid #ffffff;
                border-radius: 20px;
                font-size: 16px;
                outline: none;
            }}
        """

    @staticmethod
    def line_edit(error=False):
        border = Colors.ERROR if error else Colors.BORDER_LIGHT
        return f"""
            QLineEdit {{
                background-color: {Colors.BG_WHITE};
                color: {Colors.FG_DARK};
                border: 1px solid {border};
                border-bottom: 2px solid {border};
                border-radius: 4px;
                padding: 8px 10px;
                font-size: 14px;
            }}
        """

    @staticmethod
    def title_label():
        return f"""
            QLabel {{
                color: {Colors.FG_DARK};
                background-color: transparent;
                font-size: 24px;
                font-weight: bold;
                selection-background-color: transparent;
                selection-color: {Colors.FG_DARK};
            }}
        """

    @staticmethod
    def info_label(color=Colors.FG_DARK, size=13):
        return f"""
            QLabel {{
                color: {color};
                background-color: transparent;
                padding: 4px;
                font-size: {size}px;
                selection-background-color: transparent;
                selection-color: {color};
            }}
        """

    @staticmethod
    def card():
        return f"""
            QFrame#menu_card {{
                background-color: {Colors.BG_WHITE};
                border: 1px solid {Colors.BORDER_LIGHT};
                border-radius: 8px;
            }}
        """

    @staticmethod
    def preview_dialog():
        return "QDialog { background-color: rgba(0, 0, 0, 230); }"
