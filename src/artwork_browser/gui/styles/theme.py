"""
Theme definitions for the Artwork Browser GUI.
"""


class Colors:
    # Primary Colors
    PRIMARY_BLUE = "#0364B8"
    PRIMARY_BLUE_HOVER = "#0A2767"
    PRIMARY_BLUE_PRESSED = "#0A2767"

    # Backgrounds
    BACKGROUND = "#f5f5f5"
    SURFACE = "#ffffff"
    HOVER = "#f0f0f0"
    DISABLED_BG = "#e0e0e0"

    # Text
    TEXT_PRIMARY = "#1f1f1f"
    TEXT_SECONDARY = "#666666"
    TEXT_MUTED = "#999999"
    TEXT_DISABLED = "#757575"
    TEXT_ON_PRIMARY = "#ffffff"

    # Borders & Dividers
    BORDER = "#e0e0e0"
    DIVIDER = "#eeeeee"
    BORDER_FOCUS = "#28A8EA"

    # Status
    ERROR = "#d32f2f"
    SUCCESS = "#388e3c"
    WARNING = "#f57c00"
    INFO = "#1976d2"

    # Selection
    SELECTION_BG = "#F0F9FF"
    SELECTION_TEXT = "#1f1f1f"


class Fonts:
    # Font Families
    UI_FONT = "-apple-system, 'SF Pro Text', 'Segoe UI', Roboto, Helvetica, Arial, sans-serif"
    MONO_FONT = "Consolas, Monaco, Menlo, 'Courier New', monospace"

    # Sizes
    H2 = "16pt"
    BODY = "14pt"
    SMALL = "12pt"
    CONSOLE = "12pt"

    # Weights
    WEIGHT_REGULAR = "400"
    WEIGHT_MEDIUM = "500"
    WEIGHT_BOLD = "600"


class Styles:
    # Common QSS fragments

    BUTTON_PRIMARY = f"""
        QPushButton {{
            background-color: {Colors.PRIMARY_BLUE};
            color: {Colors.TEXT_ON_PRIMARY};
            border-radius: 6px;
            padding: 8px 16px;
            font-weight: {Fonts.WEIGHT_MEDIUM};
            border: none;
        }}
        QPushButton:hover {{
            background-color: {Colors.PRIMARY_BLUE_HOVER};
        }}
        QPushButton:pressed {{
            background-color: {Colors.PRIMARY_BLUE_PRESSED};
        }}
        QPushButton:disabled {{
            background-color: {Colors.DISABLED_BG};
            color: {Colors.TEXT_DISABLED};
        }}
    """

    BUTTON_SECONDARY = f"""
        QPushButton {{
            background-color: {Colors.SURFACE};
            color: {Colors.TEXT_PRIMARY};
            border: 1px solid {Colors.BORDER};
            border-radius: 6px;
            padding: 8px 16px;
            font-weight: {Fonts.WEIGHT_MEDIUM};
        }}
        QPushButton:hover {{
            background-color: {Colors.HOVER};
            border-color: {Colors.BORDER_FOCUS};
        }}
        QPushButton:disabled {{
            background-color: {Colors.DISABLED_BG};
            color: {Colors.TEXT_DISABLED};
            border-color: {Colors.DISABLED_BG};
        }}
    """

    PAGE_BUTTON = f"""
        QPushButton {{
            background-color: transparent;
            color: {Colors.TEXT_PRIMARY};
            border: none;
            border-radius: 16px;
            min-width: 32px;
            min-height: 32px;
        }}
        QPushButton:hover {{
            background-color: {Colors.HOVER};
        }}
        QPushButton:disabled {{
            color: {Colors.TEXT_DISABLED};
        }}
    """

    PAGE_BUTTON_ACTIVE = f"""
        QPushButton {{
            background-color: {Colors.SELECTION_BG};
            color: {Colors.PRIMARY_BLUE};
            border: 1px solid {Colors.BORDER_FOCUS};
            border-radius: 16px;
            min-width: 32px;
            min-height: 32px;
            font-weight: {Fonts.WEIGHT_BOLD};
        }}
    """

    INPUT_FIELD = f"""
        QLineEdit {{
            background-color: {Colors.SURFACE};
            border: 1px solid {Colors.BORDER};
            border-radius: 6px;
            padding: 6px 8px;
        }}
        QLineEdit:focus {{
            border-color: {Colors.BORDER_FOCUS};
        }}
    """

    TABLE = f"""
        QTableView {{
            background-color: {Colors.SURFACE};
            border: 1px solid {Colors.BORDER};
            gridline-color: {Colors.DIVIDER};
            selection-background-color: {Colors.SELECTION_BG};
            selection-color: {Colors.SELECTION_TEXT};
        }}
        QHeaderView::section {{
            background-color: {Colors.BACKGROUND};
            color: {Colors.TEXT_PRIMARY};
            border: none;
            border-bottom: 1px solid {Colors.BORDER};
            padding: 8px;
            font-weight: {Fonts.WEIGHT_BOLD};
        }}
    """

    OVERLAY_PANEL = f"""
        QFrame#bulkSelectOverlay {{
            background-color: {Colors.SURFACE};
            border: 1px solid {Colors.BORDER};
            border-radius: 8px;
        }}
    """


GLOBAL_STYLESHEET = f"""
    QMainWindow, QWidget#centralWidget {{
        background-color: {Colors.BACKGROUND};
    }}
    QLabel {{
        color: {Colors.TEXT_PRIMARY};
    }}
    QStatusBar {{
        color: {Colors.TEXT_SECONDARY};
    }}
"""


def apply_global_stylesheet(app) -> None:
    """Apply the application-wide stylesheet."""
    app.setStyleSheet(GLOBAL_STYLESHEET)
