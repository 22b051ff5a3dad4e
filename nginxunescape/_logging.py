import logging
import sys

LOGGER_NAME = "nginxunescape"


class ColourFormatter(logging.Formatter):
    """Add ANSI colour codes based on record.levelno."""
    COLOURS = {
        logging.DEBUG:    "\033[36m",      # cyan
        logging.INFO:     "\033[32m",      # green
        logging.WARNING:  "\033[33m",      # yellow
        logging.ERROR:    "\033[31m",      # red
        logging.CRITICAL: "\033[41m",      # red background
    }
    RESET = "\033[0m"

    BASE_FMT = "%(asctime)s %(levelname)s: %(message)s"

    def __init__(self, fmt=None, datefmt=None, style='%', validate=True, *, defaults=None):
        if fmt is None:
            fmt = self.__class__.BASE_FMT
        super().__init__(fmt=fmt, datefmt=datefmt, style=style, validate=validate, defaults=defaults)

    def format(self, record):
        colour = self.COLOURS.get(record.levelno, self.RESET)
        # work on a copy, other handlers must see the plain levelname
        record = logging.makeLogRecord(record.__dict__)
        record.levelname = f"{colour}{record.levelname}{self.RESET}"
        return super().format(record)


def get_logger() -> logging.Logger:
    return logging.getLogger(LOGGER_NAME)


def setup_logging(level="WARNING") -> logging.Logger:
    """Attach a colour handler on the current stderr to the package logger, replacing an earlier one."""
    logger = get_logger()
    for old in [h for h in logger.handlers if getattr(h, "_nginxunescape", False)]:
        logger.removeHandler(old)
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(ColourFormatter())
    handler._nginxunescape = True
    logger.addHandler(handler)
    logger.setLevel(level)
    return logger
