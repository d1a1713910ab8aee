# -*- coding: utf-8 -*-
"""
Third party imports shared by every binding module, plus the capability
flags of the OpenCV build found at import time.
"""

import os
import sys
import threading

try:
    import cv2
except ImportError:
    raise ImportError("Cannot load OpenCV library which is required.")
else:
    if cv2.__version__ < '3':
        raise ImportError("Your OpenCV library version is lower than 3.")

import numpy as np

try:
    from PIL import Image as PILImage
except ImportError:
    raise ImportError("Cannot load PIL.")

__all__ = [
    'cv2', 'np', 'PILImage', 'os', 'sys', 'threading',
    'CV_VERSION', 'CONTRIB_ENABLED', 'cv_version_at_least'
]


def _parse_version(text):
    parts = []
    for p in text.split('.')[:3]:
        digits = ''.join(c for c in p if c.isdigit())
        parts.append(int(digits) if digits else 0)
    while len(parts) < 3:
        parts.append(0)
    return tuple(parts)


CV_VERSION = _parse_version(cv2.__version__)

# optional native modules

# opencv_contrib
CONTRIB_ENABLED = hasattr(cv2, 'xfeatures2d')


def cv_version_at_least(major, minor=0, patch=0):
    """
    Checks the version of the loaded OpenCV build.

    Args:
        major (int): major version
        minor (int): minor version
        patch (int): patch level

    Returns:
        (bool) True if the loaded build is at least that version
    """
    return CV_VERSION >= (major, minor, patch)
