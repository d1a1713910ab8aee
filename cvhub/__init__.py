# -*- coding: utf-8 -*-
from .base import CV_VERSION, CONTRIB_ENABLED, cv_version_at_least
from .logger import Logger
from .config import Config
from .core import *
from .hub import *
from .version import __version__
