# -*- coding: utf-8 -*-
"""
The cvhub logger.

Messages written as ``'Section: text'`` are printed as
``[Section     ] text`` so the output of the different binding modules
lines up on the console.
"""

import copy
import logging
import os
import sys
from functools import partial


__all__ = [
    'Logger', 'LOG_LEVELS', 'COLORS', 'LoggerHistory', 'logger_config_update'
]

Logger = None

BLACK, RED, GREEN, YELLOW, BLUE, MAGENTA, CYAN, WHITE = list(range(8))

RESET_SEQ = '\033[0m'
COLOR_SEQ = '\033[1;%dm'
BOLD_SEQ = '\033[1m'


def formatter_message(msg, use_color=True):
    if use_color:
        msg = msg.replace('$RESET', RESET_SEQ)
        msg = msg.replace('$BOLD', BOLD_SEQ)
    else:
        msg = msg.replace('$RESET', '').replace('$BOLD', '')

    return msg

COLORS = {
    'TRACE': MAGENTA,
    'WARNING': YELLOW,
    'INFO': GREEN,
    'DEBUG': CYAN,
    'CRITICAL': RED,
    'ERROR': RED
}

TRACE = 9
logging.addLevelName(TRACE, 'TRACE')

LOG_LEVELS = {
    'trace': TRACE,
    'debug': logging.DEBUG,
    'info': logging.INFO,
    'warning': logging.WARNING,
    'error': logging.ERROR,
    'critical': logging.CRITICAL
}


class LoggerHistory(logging.Handler):
    """
    Keeps the last 100 records, newest first. Useful for post-mortem
    inspection of the calls that crossed the native boundary.
    """

    history = []

    def emit(self, record):
        LoggerHistory.history = [record] + LoggerHistory.history[:100]

    @classmethod
    def clear_history(cls):
        cls.history = []


class ColoredFormatter(logging.Formatter):

    def __init__(self, msg, use_color=True):
        super(ColoredFormatter, self).__init__(msg)
        self.use_color = use_color

    def format(self, record):
        # other handlers share the record
        record = copy.copy(record)
        if isinstance(record.msg, str):
            msg = record.msg.split(':', 1)
            if len(msg) == 2:
                record.msg = '[%-12s]%s' % (msg[0], msg[1])
        levelname = record.levelname
        if self.use_color and levelname in COLORS:
            levelname_color = (
                COLOR_SEQ % (30 + COLORS[levelname]) + levelname + RESET_SEQ)
            record.levelname = levelname_color
        return logging.Formatter.format(self, record)


class ConsoleHandler(logging.StreamHandler):
    """
    Writes to whatever ``sys.stderr`` is at emit time, so replacing
    stderr after import (test runners do) keeps working.
    """

    def __init__(self):
        super(ConsoleHandler, self).__init__()

    @property
    def stream(self):
        return sys.stderr

    @stream.setter
    def stream(self, value):
        pass


def logger_config_update(section, key, value):
    value = value.lower()
    if LOG_LEVELS.get(value) is None:
        raise AttributeError("Loglevel {0!r} doesn't exists".format(value))
    Logger.setLevel(level=LOG_LEVELS.get(value))


# cvhub default logger instance
Logger = logging.getLogger('cvhub')
Logger.trace = partial(Logger.log, TRACE)
Logger.setLevel(logging.INFO)

Logger.addHandler(LoggerHistory())

use_color = (
    os.name != 'nt' and
    os.environ.get('TERM') in ('xterm', 'rxvt', 'rxvt-unicode',
                               'xterm-256color')
)

color_fmt = formatter_message('[%(levelname)-18s] %(message)s', use_color)
formatter = ColoredFormatter(color_fmt, use_color=use_color)
console = ConsoleHandler()
console.setFormatter(formatter)
Logger.addHandler(console)
