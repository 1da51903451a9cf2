"""Logging configuration for tsb-oracle."""

import logging
import os
import sys

# Below DEBUG, shows raw query payloads and HTTP chatter
TRACE = 5
logging.addLevelName(TRACE, "TRACE")

NOISY_LOGGERS = ("urllib3", "requests")


class ColoredFormatter(logging.Formatter):
    """Level-tinted formatter; plain text when `use_color` is off.

    The CLI turns color off when stderr is not a terminal so piped logs and
    captured test output carry no escape codes.
    """

    LEVEL_TINTS = {
        "TRACE": "90",
        "DEBUG": "36",
        "INFO": "32",
        "WARNING": "33",
        "ERROR": "31",
        "CRITICAL": "35",
    }

    def __init__(self, *args, use_color: bool = True, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        tint = self.LEVEL_TINTS.get(record.levelname)
        if not (self.use_color and tint):
            return super().format(record)

        plain = record.levelname
        record.levelname = f"\033[1;{tint}m{plain}\033[0m"
        try:
            return super().format(record)
        finally:
            record.levelname = plain


def setup_logging(level: str | None = None) -> None:
    """Configure logging for the application.

    Uses ``level`` when given, otherwise the LOG_LEVEL environment variable
    (defaults to INFO). Logs go to stderr so that JSON written to stdout by
    the CLI stays machine readable.

    At DEBUG the urllib3/requests loggers are held at WARNING; TRACE lets
    them through.
    """
    log_level = (level or os.getenv("LOG_LEVEL", "INFO")).upper()
    resolved = TRACE if log_level == "TRACE" else getattr(logging, log_level, None)
    if not isinstance(resolved, int):
        resolved = logging.INFO

    handler = logging.StreamHandler(sys.stderr)
    formatter = ColoredFormatter(
        fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        use_color=sys.stderr.isatty(),
    )
    handler.setFormatter(formatter)

    logging.basicConfig(
        level=resolved,
        handlers=[handler],
        force=True,
    )

    if log_level == "DEBUG":
        for name in NOISY_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)
    elif log_level == "TRACE":
        for name in NOISY_LOGGERS:
            logging.getLogger(name).setLevel(TRACE)


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for a module.

    Args:
        name: Usually __name__ of the calling module

    Returns:
        Configured logger instance
    """
    return logging.getLogger(name)
