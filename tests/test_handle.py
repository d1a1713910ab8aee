# -*- coding: utf-8 -*-
import pytest

from cvhub.core.error import CVHandleError, CVNotImplementedError
from cvhub.core.handle import Handle, Algorithm, resolve_native
from conftest import FakeAlgorithm


class Dummy(Handle):

    def __init__(self, ptr):
        super(Dummy, self).__init__(ptr)
        self.freed = []

    def _release(self, ptr):
        self.freed.append(ptr)


def test_release_once():
    h = Dummy('native')
    assert h.ptr == 'native'
    h.release()
    h.release()
    assert h.freed == ['native']
    assert h.released


def test_use_after_release():
    h = Dummy('native')
    h.release()
    with pytest.raises(CVHandleError):
        h.ptr


def test_context_manager():
    with Dummy('native') as h:
        assert not h.released
    assert h.released
    assert h.freed == ['native']


def test_null_handle():
    with pytest.raises(CVHandleError):
        Handle(None)


def test_missing_factory():
    class Missing(Handle):
        factory = ('xfeatures2d.NoSuchThing_create',)

    with pytest.raises(CVNotImplementedError):
        Missing._create()


def test_missing_method():
    h = Algorithm.from_raw_ptr(object())
    with pytest.raises(CVNotImplementedError):
        h._call('descriptorSize')


def test_algorithm_release_clears():
    native = FakeAlgorithm()
    algo = Algorithm.from_raw_ptr(native)
    assert algo.get_default_name() == 'Feature2D.Fake'
    assert not algo.empty()
    algo.release()
    assert native.cleared == 1
    algo.release()
    assert native.cleared == 1


def test_resolve_native():
    import types
    root = types.SimpleNamespace(a=types.SimpleNamespace(b=len))
    assert resolve_native('a.b', root) is len
    assert resolve_native('a.c', root) is None
