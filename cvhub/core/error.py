# -*- coding: utf-8 -*-
"""
Native status codes and the exceptions raised at the binding boundary.
"""

from ..base import cv2
from ..config import Config
from ..logger import Logger

__all__ = [
    'errors', 'err_val', 'CVError', 'CVArgumentError', 'CVHandleError',
    'CVNotImplementedError', 'CVDecodeError', 'native_call', 'from_native'
]


def invert(to):
    tmp = {}
    for i, j in to.items():
        tmp[j] = i
    return tmp

# cv::Error::Code
# General rule: 0 is success, negative denotes a problem.
errors = {
    'StsOk': 0,
    'StsBackTrace': -1,
    'StsError': -2,
    'StsInternal': -3,
    'StsNoMem': -4,
    'StsBadArg': -5,
    'StsBadFunc': -6,
    'StsNoConv': -7,
    'StsAutoTrace': -8,
    'HeaderIsNull': -9,
    'BadImageSize': -10,
    'BadOffset': -11,
    'BadDataPtr': -12,
    'BadStep': -13,
    'BadModelOrChSeq': -14,
    'BadNumChannels': -15,
    'BadNumChannel1U': -16,
    'BadDepth': -17,
    'BadAlphaChannel': -18,
    'BadOrder': -19,
    'BadOrigin': -20,
    'BadAlign': -21,
    'BadCallBack': -22,
    'BadTileSize': -23,
    'BadCOI': -24,
    'BadROISize': -25,
    'MaskIsTiled': -26,
    'StsNullPtr': -27,
    'StsVecLengthErr': -28,
    'StsFilterStructContentErr': -29,
    'StsKernelStructContentErr': -30,
    'StsFilterOffsetErr': -31,
    'StsBadSize': -201,
    'StsDivByZero': -202,
    'StsInplaceNotSupported': -203,
    'StsObjectNotFound': -204,
    'StsUnmatchedFormats': -205,
    'StsBadFlag': -206,
    'StsBadPoint': -207,
    'StsBadMask': -208,
    'StsUnmatchedSizes': -209,
    'StsUnsupportedFormat': -210,
    'StsOutOfRange': -211,
    'StsParseError': -212,
    'StsNotImplemented': -213,
    'StsBadMemBlock': -214,
    'StsAssert': -215,
    'GpuNotSupported': -216,
    'GpuApiCallError': -217,
    'OpenGlNotSupported': -218,
    'OpenGlApiCallError': -219,
    'OpenCLApiCallError': -220,
    'OpenCLDoubleNotSupported': -221,
    'OpenCLInitError': -222,
    'OpenCLNoAMDBlasFft': -223,
}

err_val = invert(errors)


class CVError(RuntimeError):
    """
    A native call failed. ``code`` is the cv::Error::Code reported by the
    library, the remaining attributes locate the failure in native code
    when the library provided them.
    """

    def __init__(self, message, code=errors['StsError'], func=None,
                 file=None, line=None):
        super(CVError, self).__init__(message)
        self.message = message
        self.code = code
        self.func = func
        self.file = file
        self.line = line

    @property
    def code_name(self):
        return err_val.get(self.code, 'Unknown')

    def __repr__(self):
        return "{}: {} -> {}({}) {!r}".format(
            self.__class__.__name__, self.func, self.code_name, self.code,
            self.message
        )


class CVArgumentError(CVError, ValueError):
    """
    A host argument could not be marshalled for the native call.
    """

    def __init__(self, message, **kwargs):
        kwargs.setdefault('code', errors['StsBadArg'])
        super(CVArgumentError, self).__init__(message, **kwargs)


class CVHandleError(CVError):
    """
    A handle was used after its native resource was released.
    """

    def __init__(self, message, **kwargs):
        kwargs.setdefault('code', errors['StsNullPtr'])
        super(CVHandleError, self).__init__(message, **kwargs)


class CVNotImplementedError(CVError, NotImplementedError):

    def __init__(self, message, **kwargs):
        kwargs.setdefault('code', errors['StsNotImplemented'])
        super(CVNotImplementedError, self).__init__(message, **kwargs)


class CVDecodeError(CVError):

    def __init__(self, message, **kwargs):
        kwargs.setdefault('code', errors['StsError'])
        super(CVDecodeError, self).__init__(message, **kwargs)


def _func_name(func):
    return getattr(func, '__qualname__', None) or \
        getattr(func, '__name__', None) or repr(func)


def from_native(exc, func=None):
    """
    Builds the CVError matching a ``cv2.error``.

    Args:
        exc (cv2.error): the native exception
        func: the entry point that raised it

    Returns:
        (CVError) instance, the subclass is picked by status code
    """
    code = getattr(exc, 'code', errors['StsError'])
    message = getattr(exc, 'err', None) or str(exc)
    kwargs = dict(
        code=code,
        func=getattr(exc, 'func', None) or (func and _func_name(func)),
        file=getattr(exc, 'file', None),
        line=getattr(exc, 'line', None),
    )
    if code == errors['StsNotImplemented']:
        return CVNotImplementedError(message, **kwargs)
    if code == errors['StsBadArg']:
        return CVArgumentError(message, **kwargs)
    return CVError(message, **kwargs)


def native_call(func, *args, **kwargs):
    """
    Calls one native entry point and translates its failure.

    Every binding funnels through here, so this is the only place where a
    ``cv2.error`` is turned into a :class:`CVError`. Nothing is retried.
    """
    if Config.getboolean('cvhub', 'trace_calls'):
        Logger.trace('Native: %s%r', _func_name(func), args)
    try:
        return func(*args, **kwargs)
    except cv2.error as e:
        err = from_native(e, func)
        Logger.debug('Native: %s failed with %s(%d): %s',
                     _func_name(func), err.code_name, err.code, err.message)
        raise err from e
