"""Logging setup and the user-facing error path"""
import sys
import logging

from PyQt5.QtWidgets import QMessageBox

# Running from source -> debug; PyInstaller build -> release
DEBUG_MODE = not getattr(sys, 'frozen', False)

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

logger = logging.getLogger(__name__)

_main_window = None


def configure_logging(level=logging.WARNING):
    """Root logger to stdout, warnings and up unless asked otherwise."""
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)]
    )


def set_main_window(window):
    """Window used as the parent of error popups"""
    global _main_window
    _main_window = window


def loggerRaise(e: Exception, user_message: str = None, title: str = "Error"):
    """Report an exception to the user, then re-raise it.

    From source the exception is re-raised immediately so the traceback is
    visible. In a frozen build it is logged with its traceback and shown in a
    critical message box over the main window before being re-raised.

    Args:
        e: Exception being handled
        user_message: Text for the popup (defaults to str(e))
        title: Popup title
    """
    if DEBUG_MODE:
        raise e

    message = user_message or str(e)
    logger.error("%s", message, exc_info=e)
    if _main_window is not None:
        QMessageBox.critical(_main_window, title, message)
    else:
        logger.error("No window for error popup: %s - %s", title, message)
    raise e
