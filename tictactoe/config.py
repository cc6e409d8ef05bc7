"""
App configuration for the tic-tac-toe window.
Defaults live on the class; environment variables override them.
"""

import logging
import os
from dataclasses import dataclass

logger = logging.getLogger(__name__)


def _env_int(env, name, default, minimum):
    raw = env.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("ignoring %s=%r, not an integer", name, raw)
        return default
    if value < minimum:
        logger.warning("ignoring %s=%d, must be at least %d", name, value, minimum)
        return default
    return value


def _env_log_level(env, default):
    raw = env.get("TICTACTOE_LOG_LEVEL") or env.get("LOG_LEVEL")
    if raw is None or raw.strip() == "":
        return default
    level = raw.strip().upper()
    # unknown names come back as "Level FOO" rather than a number
    if not isinstance(logging.getLevelName(level), int):
        logger.warning("ignoring log level %r, not a known level name", raw)
        return default
    return level


def _env_flag(env, name, default):
    raw = env.get(name)
    if raw is None:
        return default
    return raw.strip().lower() not in ("0", "false", "no", "off", "")


@dataclass
class AppConfig:
    """
    Settings for the desktop app.
    Change the defaults here or set TICTACTOE_* variables.
    """

    # ==================== WINDOW ====================
    WINDOW_TITLE: str = "Tic-Tac-Toe"
    WINDOW_WIDTH: int = 420
    WINDOW_HEIGHT: int = 520
    BOARD_MIN_SIZE: int = 150  # smallest the grid may shrink to (px)

    # ==================== LOOK ====================
    DARK_THEME: bool = True
    QT_STYLE: str = "Fusion"

    # ==================== LOGGING ====================
    LOG_LEVEL: str = "INFO"

    @classmethod
    def from_env(cls, env=None):
        """
        Build a config from environment variables.

        Args:
            env: Mapping to read from (default: os.environ).

        Returns:
            AppConfig with overrides applied; bad values keep the default.
        """
        env = os.environ if env is None else env
        defaults = cls()
        return cls(
            WINDOW_WIDTH=_env_int(env, "TICTACTOE_WINDOW_WIDTH", defaults.WINDOW_WIDTH, defaults.BOARD_MIN_SIZE),
            WINDOW_HEIGHT=_env_int(env, "TICTACTOE_WINDOW_HEIGHT", defaults.WINDOW_HEIGHT, defaults.BOARD_MIN_SIZE),
            DARK_THEME=_env_flag(env, "TICTACTOE_DARK_THEME", defaults.DARK_THEME),
            LOG_LEVEL=_env_log_level(env, defaults.LOG_LEVEL),
        )
