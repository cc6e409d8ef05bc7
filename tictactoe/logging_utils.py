import logging
import os
from typing import Optional

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"
DEFAULT_LEVEL = "INFO"


def configure_logging(level: Optional[str] = None) -> None:
    """Configure root logging once for the desktop app."""

    if level is None:
        level = os.getenv("TICTACTOE_LOG_LEVEL") or os.getenv("LOG_LEVEL", DEFAULT_LEVEL)
    level = level.strip().upper()
    unknown = not isinstance(logging.getLevelName(level), int)
    if unknown:
        bad_level, level = level, DEFAULT_LEVEL

    root_logger = logging.getLogger()
    if not root_logger.handlers:
        logging.basicConfig(level=level, format=LOG_FORMAT)
    root_logger.setLevel(level)

    if unknown:
        logging.getLogger(__name__).warning(
            "unknown log level %r, using %s", bad_level, DEFAULT_LEVEL
        )
