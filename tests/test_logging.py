import logging

from nginxunescape._logging import LOGGER_NAME, ColourFormatter, setup_logging


def _record(level):
    return logging.LogRecord("x", level, __file__, 1, "hello", None, None)


def test_colour_formatter_colours_level():
    out = ColourFormatter("%(levelname)s %(message)s").format(_record(logging.WARNING))
    assert out == "\033[33mWARNING\033[0m hello"


def test_colour_formatter_leaves_record_untouched():
    record = _record(logging.ERROR)
    ColourFormatter().format(record)
    assert record.levelname == "ERROR"


def test_setup_logging_installs_single_handler():
    setup_logging("INFO")
    logger = setup_logging("DEBUG")
    ours = [h for h in logger.handlers if getattr(h, "_nginxunescape", False)]
    assert logger.name == LOGGER_NAME
    assert len(ours) == 1
    assert logger.level == logging.DEBUG
