"""
GitMind Logging Configuration

The wizard owns the terminal while it runs, so log output goes to a dated
file under the GitMind home directory. Console output is only used by
commands that print plain text. Every handler masks secrets.
"""

import os
import logging
import sys
from pathlib import Path
from datetime import datetime
from typing import Optional

from gitmind.wizard.ui import mask_secrets

LOGGER_NAME = "gitmind"
FILE_FORMAT = "%(asctime)s [%(levelname)s] %(name)s:%(lineno)d: %(message)s"
CONSOLE_FORMAT = "%(levelname)s: %(message)s"


def debug_enabled() -> bool:
    return os.environ.get("GITMIND_DEBUG", "").lower() in ("1", "true", "yes")


class SecretMaskingFormatter(logging.Formatter):
    """Formatter that masks API keys and tokens in the rendered record."""

    def format(self, record: logging.LogRecord) -> str:
        return mask_secrets(super().format(record))


def _file_handler(log_file: Path) -> logging.Handler:
    log_file.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(log_file)
    handler.setFormatter(SecretMaskingFormatter(FILE_FORMAT))
    return handler


def setup_logging(
    level: Optional[int] = None,
    log_file: Optional[Path] = None,
    quiet: bool = False
) -> logging.Logger:
    """Install handlers on the gitmind logger, replacing any previous ones.

    Args:
        level: Logging level; DEBUG when GITMIND_DEBUG is set, else INFO
        log_file: File to append records to
        quiet: Leave the console alone (used while the wizard is drawing)

    Returns:
        The gitmind logger
    """
    if level is None:
        level = logging.DEBUG if debug_enabled() else logging.INFO

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()

    if log_file:
        logger.addHandler(_file_handler(log_file))

    if not quiet:
        console = logging.StreamHandler(sys.stderr)
        console.setFormatter(SecretMaskingFormatter(CONSOLE_FORMAT))
        logger.addHandler(console)

    if not logger.handlers:
        logger.addHandler(logging.NullHandler())

    return logger


def get_logger(name: str = LOGGER_NAME) -> logging.Logger:
    """Get a logger in the gitmind namespace ('wizard' becomes 'gitmind.wizard')."""
    if not name.startswith(LOGGER_NAME):
        name = f"{LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def get_log_path(base_dir: Path) -> Path:
    """Get today's log file under base_dir/logs."""
    return base_dir / "logs" / f"gitmind-{datetime.now().strftime('%Y-%m-%d')}.log"


ENV_VARS = {
    "GITMIND_DEBUG": {
        "description": "Log at DEBUG level",
        "values": ["1", "true", "yes"],
        "default": "false"
    },
    "GITMIND_CONFIG": {
        "description": "Override the configuration file path",
        "default": "~/.gitmind/config.yaml"
    },
}
