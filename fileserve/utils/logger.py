import logging

__all__ = ["logger", "set_level"]

LOGGER_NAME = "fileserve"


# Colored `LEVEL: message` lines on stderr
class CustomFormatter(logging.Formatter):
    """Level-aware colored formatter for the diagnostic channel"""

    GREY = '\033[90m'
    GREEN = '\033[32m'
    YELLOW = '\033[33m'
    RED = '\033[31m'
    WHITE = '\033[37m'
    RESET = '\033[0m'

    FORMAT = "%(levelcolor)s%(levelname)s%(reset)s: %(messagecolor)s%(message)s%(reset)s"

    FORMATS = {
        logging.DEBUG: FORMAT.replace('%(levelcolor)s', GREY).replace('%(messagecolor)s', GREY),
        logging.INFO: FORMAT.replace('%(levelcolor)s', GREEN).replace('%(messagecolor)s', WHITE),
        logging.WARNING: FORMAT.replace('%(levelcolor)s', YELLOW).replace('%(messagecolor)s', WHITE),
        logging.ERROR: FORMAT.replace('%(levelcolor)s', RED).replace('%(messagecolor)s', WHITE),
        logging.CRITICAL: FORMAT.replace('%(levelcolor)s', RED).replace('%(messagecolor)s', RED),
    }

    def format(self, record):
        log_fmt = self.FORMATS.get(record.levelno, self.FORMATS[logging.WARNING])
        formatter = logging.Formatter(log_fmt, style='%')
        formatter.default_time_format = '%Y-%m-%d %H:%M:%S'
        formatter.default_msec_format = '%s.%03d'
        record.reset = self.RESET
        return formatter.format(record)

def setup_logger(level=logging.WARNING):
    """Create the server logger, once per process"""
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    if not logger.handlers:
        ch = logging.StreamHandler()
        ch.setLevel(logging.DEBUG)
        ch.setFormatter(CustomFormatter())
        logger.addHandler(ch)
    return logger

def set_level(level):
    """Change verbosity; accepts a level number or name such as "INFO"."""
    if isinstance(level, str):
        level = level.upper()
    logger.setLevel(level)

logger = setup_logger()
