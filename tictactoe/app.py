import logging
import sys

from PySide6.QtWidgets import QApplication

from .config import AppConfig
from .logging_utils import configure_logging
from .ui.main_window import TicTacToeWindow
from .ui.theme import apply_default_palette

logger = logging.getLogger(__name__)


def main(argv=None):
    """
    build the qt app, show the window, run the event loop
    """
    argv = sys.argv if argv is None else argv
    config = AppConfig.from_env()
    configure_logging(config.LOG_LEVEL)

    app = QApplication.instance() or QApplication(argv)
    app.setStyle(config.QT_STYLE)
    if config.DARK_THEME:
        apply_default_palette(app)

    window = TicTacToeWindow(config)
    window.show()
    logger.info("window shown (%dx%d)", config.WINDOW_WIDTH, config.WINDOW_HEIGHT)
    return app.exec()
