"""
Entry point for the Artwork Browser GUI.
"""
import logging
import sys

from artwork_browser import __version__
from artwork_browser.gui.utils.crashlog import install_crash_handler
from artwork_browser.gui.utils.logging_utils import configure_logging

APP_NAME = "Artwork Browser"


def run():
    """
    Main entry point for the GUI application.
    """
    from PySide6.QtWidgets import QApplication
    from artwork_browser.api import ApiConfig
    from artwork_browser.gui.main_window import MainWindow
    from artwork_browser.gui.styles.theme import apply_global_stylesheet

    configure_logging(logging.INFO)
    install_crash_handler(app_version=__version__)

    app = QApplication(sys.argv)
    app.setApplicationName(APP_NAME)
    app.setApplicationDisplayName(APP_NAME)
    app.setApplicationVersion(__version__)

    # Install Qt-specific crash handling (must be after QApplication is created)
    from artwork_browser.gui.utils.crashlog import install_qt_crash_handling
    install_qt_crash_handling()

    apply_global_stylesheet(app)

    config = ApiConfig.from_env()
    logging.getLogger(__name__).info(f"Artwork Browser {__version__} using {config.base_url}")

    window = MainWindow(config=config)
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    run()
