# -*- coding: utf-8 -*-
import cv2

from cvhub import base


def test_version_parsing():
    assert base._parse_version('4.8.0') == (4, 8, 0)
    assert base._parse_version('3.4.2-dev') == (3, 4, 2)
    assert base._parse_version('4.10') == (4, 10, 0)


def test_loaded_version():
    major = int(cv2.__version__.split('.')[0])
    assert base.CV_VERSION[0] == major
    assert base.cv_version_at_least(3)
    assert base.cv_version_at_least(major)
    assert not base.cv_version_at_least(major + 1)


def test_contrib_flag():
    assert base.CONTRIB_ENABLED == hasattr(cv2, 'xfeatures2d')
