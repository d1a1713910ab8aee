# -*- coding: utf-8 -*-
"""
Configuration of the binding layer.

Values come from, in increasing priority: the built-in defaults, the
ini file named by ``$CVHUB_CONFIG`` (or ``~/.cvhub/config.ini``), and the
``CVHUB_LOG_LEVEL`` / ``CVHUB_TRACE_CALLS`` environment variables.

    [cvhub]
    log_level = info
    trace_calls = 0

    [highgui]
    start_window_thread = 0

    [xfeatures2d]
    prefer_main_sift = 1
"""

from configparser import RawConfigParser as PythonConfigParser
from os import environ
from os.path import exists, expanduser, join
from .logger import Logger, logger_config_update

__all__ = [
    'Config', 'ConfigParser', 'CVHUB_CONFIG_FN'
]

CVHUB_CONFIG_FN = environ.get(
    'CVHUB_CONFIG', join(expanduser('~'), '.cvhub', 'config.ini'))

_defaults = {
    'cvhub': {
        'log_level': 'info',
        'trace_calls': '0',
    },
    'highgui': {
        'start_window_thread': '0',
    },
    'xfeatures2d': {
        'prefer_main_sift': '1',
    },
}

Config = None


class ConfigParser(PythonConfigParser):
    """
    RawConfigParser with per-key callbacks, fired whenever a value is
    changed through :meth:`set`.
    """

    def __init__(self):
        PythonConfigParser.__init__(self)
        self._callbacks = []

    def add_callback(self, callback, section=None, key=None):
        """
        Registers ``callback(section, key, value)`` for a key, a whole
        section (``key=None``) or every change (both ``None``).
        """
        if section is None and key is not None:
            raise ValueError('No section for the key {!r}'.format(key))
        self._callbacks.append((callback, section, key))

    def _do_callbacks(self, section, key, value):
        for callback, csection, ckey in self._callbacks:
            if csection is not None and csection != section:
                continue
            if ckey is not None and ckey != key:
                continue
            callback(section, key, value)

    def set(self, section, option, value):
        value = str(value)
        ret = PythonConfigParser.set(self, section, option, value)
        self._do_callbacks(section, option, value)
        return ret

    def setdefaults(self, section, options):
        if not self.has_section(section):
            self.add_section(section)
        for key, value in options.items():
            if not self.has_option(section, key):
                PythonConfigParser.set(self, section, key, str(value))

    def load_defaults(self):
        for section, options in _defaults.items():
            self.setdefaults(section, options)

    def read_env(self):
        level = environ.get('CVHUB_LOG_LEVEL')
        if level is not None:
            self.set('cvhub', 'log_level', level)
        trace = environ.get('CVHUB_TRACE_CALLS')
        if trace is not None:
            self.set('cvhub', 'trace_calls', trace)

    def read_file(self, filename=None):
        filename = filename or CVHUB_CONFIG_FN
        if not exists(filename):
            return False
        Logger.debug('Config: reading %s', filename)
        self.read(filename)
        return True


def _on_log_level(section, key, value):
    logger_config_update(section, key, value)


Config = ConfigParser()
Config.add_callback(_on_log_level, 'cvhub', 'log_level')
Config.load_defaults()
Config.read_file()
Config.read_env()
logger_config_update('cvhub', 'log_level', Config.get('cvhub', 'log_level'))
