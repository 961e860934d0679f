import logging
import os
import sys
from datetime import datetime

from common.helper import PrintColor

LOGGER_NAME = "bytesplit"

_LEVEL_COLORS = {
    logging.DEBUG: (PrintColor.BLUE, "DEBUG"),
    logging.INFO: (PrintColor.GREEN, "INFO "),
    logging.WARNING: (PrintColor.YELLOW, "WARN "),
    logging.ERROR: (PrintColor.RED, "ERROR"),
}

class ConsoleFormatter(logging.Formatter):
    # 15:04:05.000000 LEVEL file.py:12  name message
    def format(self, record: logging.LogRecord) -> str:
        t = datetime.fromtimestamp(record.created).strftime("%H:%M:%S.%f")

        if record.levelno in _LEVEL_COLORS:
            color, name = _LEVEL_COLORS[record.levelno]
            level = PrintColor.paint(color, name)
        else:
            level = record.levelname

        # pad line numbers up to 3 digits so messages line up
        caller = f"{record.filename}:{record.lineno}".ljust(len(record.filename) + 4)

        msg = " ".join([
            PrintColor.paint(PrintColor.CYAN, t),
            level,
            PrintColor.paint(PrintColor.MAGENTA, caller),
            PrintColor.paint(PrintColor.WHITE, record.name),
            record.getMessage(),
        ])

        if record.exc_info:
            msg += "\n" + self.formatException(record.exc_info)
        return msg

def _file_handler(path: str) -> logging.Handler:
    parent = os.path.dirname(path)
    if parent != "":
        os.makedirs(parent, mode=0o755, exist_ok=True)

    handler = logging.FileHandler(path, mode="a", encoding="utf-8")
    handler.setFormatter(logging.Formatter(
        fmt="%(asctime)s\t%(levelname)s\t%(pathname)s:%(lineno)d\t%(name)s\t%(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S%z"
    ))
    return handler

def init_logger(level: str="INFO", file: str="") -> logging.Logger:
    """
    Configures the bytesplit logger: colored console on stdout and, when
    file is given, a plain text copy appended to that file.
    Calling again replaces the previous handlers.
    """
    logger = logging.getLogger(LOGGER_NAME)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console = logging.StreamHandler(sys.stdout)
    console.setFormatter(ConsoleFormatter())
    logger.addHandler(console)

    if file != "":
        logger.addHandler(_file_handler(file))

    logger.setLevel(getattr(logging, level.upper()))
    logger.propagate = False

    return logger
