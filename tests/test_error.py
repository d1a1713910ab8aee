# -*- coding: utf-8 -*-
import pytest

from cvhub.core.error import (errors, err_val, from_native, native_call,
                              CVError, CVArgumentError, CVNotImplementedError,
                              CVDecodeError, CVHandleError)
from conftest import native_error


def test_error_codes():
    assert errors['StsOk'] == 0
    assert errors['StsBadArg'] == -5
    assert errors['StsNullPtr'] == -27
    assert errors['StsNotImplemented'] == -213
    assert errors['StsAssert'] == -215
    assert err_val[-215] == 'StsAssert'


def test_from_native_picks_subclass():
    err = from_native(native_error('bad', -5), 'imshow')
    assert isinstance(err, CVArgumentError)
    assert isinstance(err, ValueError)
    assert err.code == -5
    assert err.code_name == 'StsBadArg'

    err = from_native(native_error('missing', -213))
    assert isinstance(err, CVNotImplementedError)
    assert isinstance(err, NotImplementedError)

    err = from_native(native_error('assert', -215))
    assert type(err) is CVError
    assert err.message == 'assert'


def test_native_call_converts_error():
    def boom():
        raise native_error('Assertion failed', -215)

    with pytest.raises(CVError) as info:
        native_call(boom)
    assert info.value.code == -215
    assert info.value.func
    assert 'Assertion failed' in str(info.value)


def test_native_call_passes_result():
    assert native_call(lambda a, b=1: a + b, 2, b=3) == 5


def test_native_call_leaves_other_exceptions():
    def boom():
        raise KeyError('x')

    with pytest.raises(KeyError):
        native_call(boom)


def test_default_codes():
    assert CVArgumentError('x').code == errors['StsBadArg']
    assert CVHandleError('x').code == errors['StsNullPtr']
    assert CVNotImplementedError('x').code == errors['StsNotImplemented']
    assert isinstance(CVDecodeError('x'), CVError)
