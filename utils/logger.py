"""
Logging configuration for the Vasco backend.
Colored level names on terminals, plain text when output is piped to a log collector.
"""
import logging
import sys


class ColoredFormatter(logging.Formatter):
    """Formatter that colors the level name."""

    COLORS = {
        'DEBUG': '\033[36m',
        'INFO': '\033[32m',
        'WARNING': '\033[33m',
        'ERROR': '\033[31m',
        'CRITICAL': '\033[35m',
    }
    RESET = '\033[0m'

    def __init__(self, fmt: str, datefmt: str | None = None, use_color: bool = True):
        super().__init__(fmt, datefmt=datefmt)
        self.use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        if not self.use_color:
            return super().format(record)

        # Copy so other handlers still see the bare level name
        record = logging.makeLogRecord(record.__dict__)
        color = self.COLORS.get(record.levelname, self.RESET)
        record.levelname = f"{color}{record.levelname}{self.RESET}"
        return super().format(record)


def setup_logger(name: str, level: int | str = logging.INFO, stream=None) -> logging.Logger:
    """
    Set up a logger writing to stdout (or `stream`).

    Args:
        name: Logger name
        level: Logging level
        stream: Output stream, defaults to sys.stdout

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    if logger.handlers:
        return logger

    stream = stream or sys.stdout
    handler = logging.StreamHandler(stream)
    handler.setLevel(level)
    handler.setFormatter(ColoredFormatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S',
        use_color=hasattr(stream, "isatty") and stream.isatty()
    ))

    logger.addHandler(handler)
    return logger


def set_log_level(level: int | str, logger: logging.Logger | None = None) -> None:
    """Apply the configured level, e.g. "DEBUG", to the logger and its handlers."""
    logger = logger or app_logger
    logger.setLevel(level)
    for handler in logger.handlers:
        handler.setLevel(level)


app_logger = setup_logger("vasco_backend")
