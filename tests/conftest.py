# -*- coding: utf-8 -*-
import types

import cv2
import numpy as np
import pytest

from cvhub.core.callback import registry


class FakeNative(object):
    """
    Stand-in for the cv2 module: every attribute is a function recording
    its calls. ``results`` and ``failures`` program the return values and
    the raised ``cv2.error`` of single entry points.
    """

    error = cv2.error

    def __init__(self, missing=()):
        self.calls = []
        self.results = {}
        self.failures = {}
        self.missing = set(missing)

    def __getattr__(self, name):
        if name.startswith('__') or name in self.missing:
            raise AttributeError(name)

        def func(*args, **kwargs):
            self.calls.append((name, args, kwargs))
            if name in self.failures:
                raise self.failures[name]
            return self.results.get(name)
        func.__name__ = name
        return func

    def called(self, name):
        return [args for n, args, _ in self.calls if n == name]


def native_error(message, code):
    e = cv2.error(message)
    e.code = code
    e.err = message
    return e


@pytest.fixture
def fake_cv2(monkeypatch):
    from cvhub.hub import highgui
    fake = FakeNative(missing=('stopLoop',))
    monkeypatch.setattr(highgui, 'cv2', fake)
    monkeypatch.setattr(highgui, '_window_thread_started', False)
    return fake


@pytest.fixture(autouse=True)
def clean_registry():
    yield
    registry.release_matching(lambda key: True)


class FakeAlgorithm(object):
    """
    Native algorithm object with a couple of recorded methods.
    """

    def __init__(self, *args):
        self.args = args
        self.cleared = 0
        self.params = {}

    def clear(self):
        self.cleared += 1

    def empty(self):
        return False

    def getDefaultName(self):
        return 'Feature2D.Fake'

    def descriptorSize(self):
        return 64

    def detect(self, image, mask):
        return (cv2.KeyPoint(1.0, 2.0, 3.0),)

    def compute(self, image, keypoints):
        return tuple(keypoints), np.zeros((len(keypoints), 64), np.float32)

    def detectAndCompute(self, image, mask):
        return (cv2.KeyPoint(4.0, 5.0, 6.0),), np.ones((1, 64), np.float32)

    def setHessianThreshold(self, value):
        self.params['hessian'] = value

    def getHessianThreshold(self):
        return self.params['hessian']

    def computeQuadraticFormDistance(self, a, b):
        return float(np.abs(a - b).sum())


@pytest.fixture
def fake_factories(monkeypatch):
    """
    Replaces the cv2 module seen by the handle factories with a namespace
    whose factories build :class:`FakeAlgorithm` objects.
    """
    from cvhub.core import handle
    created = []

    def factory(*args):
        obj = FakeAlgorithm(*args)
        created.append(obj)
        return obj

    contrib = types.SimpleNamespace(
        SURF_create=factory, DAISY_create=factory, FREAK_create=factory,
        SIFT_create=factory, AffineFeature2D_create=factory,
        PCTSignaturesSQFD_create=factory)
    fake = types.SimpleNamespace(xfeatures2d=contrib, error=cv2.error)
    monkeypatch.setattr(handle, 'cv2', fake)
    fake.created = created
    return fake
