from __future__ import annotations

import logging
import sys

"""Console logging for import runs.

Every line starts with a severity label (INFO, WARN, ERROR or SUMMARY) so that
operators can grep a run's outcome. Library modules only call
logging.getLogger(__name__); their records reach the package logger set up here.
The level comes from ImportConfig.log_level once the config is loaded.
"""

__all__ = [
    "LOGGER_NAME",
    "SUMMARY_LEVEL",
    "LabeledFormatter",
    "apply_config",
    "get_logger",
    "log_summary",
    "reset_logging",
    "set_level",
    "setup_logging",
]

LOGGER_NAME = "consultant_import"

# between INFO (20) and WARNING (30)
SUMMARY_LEVEL = 25

_configured: logging.Logger | None = None


class LabeledFormatter(logging.Formatter):
    """`<LABEL> <message>`; WARNING is shortened to WARN."""

    LABELS = {
        logging.WARNING: "WARN",
        SUMMARY_LEVEL: "SUMMARY",
    }

    def format(self, record: logging.LogRecord) -> str:
        label = self.LABELS.get(record.levelno, record.levelname)
        return f"{label} {record.getMessage()}"


def _to_level(level: int | str) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        raise ValueError(f"unknown log level: {level}")
    return resolved


def setup_logging(level: int | str = logging.INFO, name: str = LOGGER_NAME) -> logging.Logger:
    """Attach the labelled stdout handler to the package logger.

    Calling it again returns the already configured logger unchanged.
    """
    global _configured
    if _configured is not None:
        return _configured

    logging.addLevelName(SUMMARY_LEVEL, "SUMMARY")
    logger = logging.getLogger(name)
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(LabeledFormatter())
    logger.addHandler(handler)
    logger.propagate = False

    _configured = logger
    set_level(level)
    return logger


def set_level(level: int | str) -> None:
    """Change the level of the package logger and its handlers."""
    logger = get_logger()
    # the SUMMARY line is printed at every level
    numeric = min(_to_level(level), SUMMARY_LEVEL)
    logger.setLevel(numeric)
    for handler in logger.handlers:
        handler.setLevel(numeric)


def apply_config(config) -> logging.Logger:
    """Apply the run's ImportConfig (log_level) to the console logger."""
    set_level(config.log_level)
    return get_logger()


def get_logger() -> logging.Logger:
    return _configured if _configured is not None else setup_logging()


def log_summary(message: str) -> None:
    get_logger().log(SUMMARY_LEVEL, message)


def reset_logging() -> None:
    """Forget the configured logger (tests re-create it per capture)."""
    global _configured
    _configured = None
