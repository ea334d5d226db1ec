import logging
import os
import sys

# below DEBUG: one line per laid-out cell
TRACE = 5
logging.addLevelName(TRACE, 'TRACE')

LEVEL_COLORS = {
    TRACE: '\033[90m',             # gray
    logging.DEBUG: '\033[36m',     # cyan
    logging.INFO: '\033[32m',      # green
    logging.WARNING: '\033[33m',   # yellow
    logging.ERROR: '\033[31m',     # red
    logging.CRITICAL: '\033[35m',  # magenta
}
RESET = '\033[0m'

BRIEF_FORMAT = '%(levelname)-8s | %(message)s'
VERBOSE_FORMAT = '%(levelname)-8s | %(filename)s:%(lineno)d | %(message)s'
FILE_FORMAT = '%(asctime)s | %(levelname)-8s | %(filename)s:%(lineno)d | %(message)s'


class LevelColorFormatter(logging.Formatter):
    """Pads and colors the level name; plain text when color is off."""

    def __init__(self, fmt, color=True):
        super().__init__(fmt)
        self.color = color

    def formatMessage(self, record):
        text = super().formatMessage(record)
        if not self.color:
            return text
        level = '%-8s' % record.levelname
        color = LEVEL_COLORS.get(record.levelno, '')
        return text.replace(level, color + level + RESET, 1)


def wants_color(stream):
    if os.environ.get('NO_COLOR'):
        return False
    isatty = getattr(stream, 'isatty', None)
    return bool(isatty and isatty())


def trace(self, message, *args, **kwargs):
    if self.isEnabledFor(TRACE):
        self._log(TRACE, message, args, stacklevel=2, **kwargs)


logging.Logger.trace = trace

handler = logging.StreamHandler(sys.stderr)
handler.setFormatter(LevelColorFormatter(BRIEF_FORMAT, wants_color(sys.stderr)))

logger = logging.getLogger('gametreemap')
logger.addHandler(handler)
logger.setLevel(logging.INFO)

file_handler = None


def set_verbosity(level, log_file=None):
    """0=INFO, 1=DEBUG with file:line, 2+=TRACE; log_file adds an uncolored copy"""
    global file_handler

    fmt = BRIEF_FORMAT if level <= 0 else VERBOSE_FORMAT
    handler.setFormatter(LevelColorFormatter(fmt, wants_color(handler.stream)))

    if level <= 0:
        logger.setLevel(logging.INFO)
    elif level == 1:
        logger.setLevel(logging.DEBUG)
    else:
        logger.setLevel(TRACE)

    if file_handler is not None:
        logger.removeHandler(file_handler)
        file_handler.close()
        file_handler = None
    if log_file:
        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setFormatter(LevelColorFormatter(FILE_FORMAT, color=False))
        logger.addHandler(file_handler)
