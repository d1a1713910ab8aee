# -*- coding: utf-8 -*-

from .error import *
from .types import *
from .handle import *
from .callback import *
