# -*- coding: utf-8 -*-
from .features2d import *
from .highgui import *
from .imgcodecs import *
from .xfeatures2d import *
