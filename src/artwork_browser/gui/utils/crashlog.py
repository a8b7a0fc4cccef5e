"""
Crash handling for unhandled exceptions in the GUI process.

Nothing is written to disk: the traceback goes through logging (so it
reaches stderr and the console widget) and the user gets a dialog.

Strategy:
1. Python exceptions on the GUI thread: sys.excepthook
2. Exceptions in worker threads: threading.excepthook (log only)
3. Qt errors: Qt message handler routes qCritical/qFatal to logging
"""
from __future__ import annotations

import logging
import platform
import sys
import threading
import traceback
from typing import Callable, Optional

logger = logging.getLogger(__name__)

# Global reference to original excepthook
_original_excepthook: Optional[Callable] = None


def format_crash_report(exc_type, exc_value, exc_tb, app_version: str = "unknown") -> str:
    """Build the report text shown in logs and the crash dialog."""
    tb_text = "".join(traceback.format_exception(exc_type, exc_value, exc_tb))
    lines = [
        "Artwork Browser Crash Report",
        "=" * 50,
        f"Version: {app_version}",
        f"Python: {sys.version.split()[0]}",
        f"Platform: {platform.platform()}",
        "",
        "Exception:",
        "-" * 50,
        tb_text,
    ]
    return "\n".join(lines)


def _install_threading_excepthook() -> None:
    """
    Log unhandled exceptions in worker threads.

    Threads can't safely interact with Qt GUI, so no dialog is shown.
    """
    def thread_excepthook(args):
        thread_name = args.thread.name if args.thread else "Unknown"
        logger.error(
            f"Unhandled exception in thread '{thread_name}'",
            exc_info=(args.exc_type, args.exc_value, args.exc_traceback),
        )

    threading.excepthook = thread_excepthook


def _install_qt_message_handler() -> None:
    """Route Qt warnings and errors into logging."""
    from PySide6.QtCore import qInstallMessageHandler, QtMsgType

    level_map = {
        QtMsgType.QtDebugMsg: logging.DEBUG,
        QtMsgType.QtInfoMsg: logging.INFO,
        QtMsgType.QtWarningMsg: logging.WARNING,
        QtMsgType.QtCriticalMsg: logging.ERROR,
        QtMsgType.QtFatalMsg: logging.CRITICAL,
    }

    def qt_message_handler(mode, context, message):
        logger.log(level_map.get(mode, logging.WARNING), f"Qt: {message}")

    qInstallMessageHandler(qt_message_handler)


def install_crash_handler(app_version: str = "unknown", exit_on_crash: bool = True) -> None:
    """
    Install crash handling for the GUI thread and worker threads.

    Call this early in application startup, before any GUI code.

    Args:
        app_version: Application version string for crash reports.
        exit_on_crash: Exit with status 1 after the dialog is dismissed.
    """
    global _original_excepthook
    _original_excepthook = sys.excepthook

    _install_threading_excepthook()

    def crash_handler(exc_type, exc_value, exc_tb):
        if issubclass(exc_type, KeyboardInterrupt):
            _original_excepthook(exc_type, exc_value, exc_tb)
            return

        report = format_crash_report(exc_type, exc_value, exc_tb, app_version)
        logger.critical(report)

        _show_crash_dialog(report)

        if exit_on_crash:
            sys.exit(1)

    sys.excepthook = crash_handler


def install_qt_crash_handling() -> None:
    """
    Install Qt-specific crash handling.

    Call this AFTER QApplication is created but BEFORE showing the main window.
    """
    _install_qt_message_handler()


def _show_crash_dialog(report: str) -> None:
    """
    Show a crash dialog with the report in the details pane.

    Blocks until the user acknowledges the dialog. Does nothing when no
    QApplication is running.
    """
    from PySide6.QtWidgets import QApplication, QMessageBox
    from PySide6.QtCore import Qt

    app = QApplication.instance()
    if not app:
        return

    msg = QMessageBox()
    msg.setIcon(QMessageBox.Icon.Critical)
    msg.setWindowTitle("Artwork Browser - Unexpected Error")
    msg.setText("The application encountered an unexpected error and needs to close.")
    msg.setInformativeText("Please copy the details below when reporting the issue.")
    msg.setDetailedText(report)
    msg.setStandardButtons(QMessageBox.StandardButton.Ok)
    msg.setWindowModality(Qt.WindowModality.ApplicationModal)
    msg.exec()
