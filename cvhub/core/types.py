# -*- coding: utf-8 -*-
"""
Fixed-layout value types and the marshalling of host arguments into the
shapes the native entry points accept.

Everything returned by the ``*_vector`` and ``input_array`` helpers is a
C-contiguous numpy array owned by the caller's frame, so its address stays
put for the whole native call.
"""

from collections import namedtuple
from ..base import cv2, np, PILImage
from .error import CVArgumentError

__all__ = [
    'Point', 'Point2f', 'Size', 'Rect', 'Scalar', 'string_arg',
    'input_array', 'int_vector', 'float_vector', 'uchar_vector',
    'point2f_vector', 'mat_vector', 'keypoint_vector', 'dmatch_vector',
    'to_point', 'to_size', 'to_scalar', 'to_rect'
]


Point = namedtuple('Point', ['x', 'y'])
Point2f = namedtuple('Point2f', ['x', 'y'])
Size = namedtuple('Size', ['width', 'height'])
Rect = namedtuple('Rect', ['x', 'y', 'width', 'height'])


class Scalar(namedtuple('Scalar', ['v0', 'v1', 'v2', 'v3'])):
    """
    Four-channel colour or value, missing channels are zero.
    """
    __slots__ = ()

    def __new__(cls, v0=0.0, v1=0.0, v2=0.0, v3=0.0):
        return super(Scalar, cls).__new__(cls, float(v0), float(v1),
                                          float(v2), float(v3))

    @classmethod
    def all(cls, v):
        return cls(v, v, v, v)


def string_arg(name, value):
    """
    Checks a string argument before it crosses the boundary. The native
    side sees a NUL terminated buffer, so an embedded NUL would silently
    truncate the value.

    Args:
        name (str): argument name, used in the error message
        value (str, bytes): the argument

    Returns:
        (str) the value, decoded if it was bytes
    """
    if isinstance(value, bytes):
        try:
            value = value.decode('utf-8')
        except UnicodeDecodeError as e:
            raise CVArgumentError(
                'Argument {!r} is not valid UTF-8: {}'.format(name, e))
    if not isinstance(value, str):
        raise CVArgumentError('Argument {!r} must be a string, got {}'.format(
            name, type(value).__name__))
    if '\0' in value:
        raise CVArgumentError(
            'Argument {!r} contains an interior NUL character'.format(name))
    return value


def input_array(obj, name='array'):
    """
    Converts an image-like object into an array the native side can read.

    Args:
        obj: numpy array, PIL image, or a bytes-like buffer
        name (str): argument name for error messages

    Returns:
        (numpy.ndarray) C-contiguous array
    """
    if obj is None:
        raise CVArgumentError('Argument {!r} must not be None'.format(name))
    if isinstance(obj, PILImage.Image):
        arr = np.asarray(obj)
        # PIL is RGB(A), the native library expects BGR(A)
        if arr.ndim == 3 and arr.shape[2] == 3:
            arr = arr[:, :, ::-1]
        elif arr.ndim == 3 and arr.shape[2] == 4:
            arr = arr[:, :, [2, 1, 0, 3]]
        return np.ascontiguousarray(arr)
    if isinstance(obj, (bytes, bytearray, memoryview)):
        return np.frombuffer(bytes(obj), dtype=np.uint8)
    if isinstance(obj, np.ndarray):
        return np.ascontiguousarray(obj)
    try:
        return np.ascontiguousarray(np.asarray(obj))
    except (TypeError, ValueError) as e:
        raise CVArgumentError('Argument {!r} is not array-like: {}'.format(
            name, e))


def _vector(values, dtype, name):
    if values is None:
        return np.empty(0, dtype=dtype)
    try:
        src = np.asarray(values)
    except (TypeError, ValueError) as e:
        raise CVArgumentError('Argument {!r} is not a vector of {}: {}'.format(
            name, np.dtype(dtype).name, e))
    # numpy wraps out of range integers silently
    if (np.issubdtype(dtype, np.integer) and src.size and
            src.dtype.kind in 'iuf'):
        info = np.iinfo(dtype)
        if src.min() < info.min or src.max() > info.max:
            raise CVArgumentError(
                'Argument {!r} holds values outside the {} range'.format(
                    name, np.dtype(dtype).name))
    try:
        return np.ascontiguousarray(src.astype(dtype, copy=False).ravel())
    except (TypeError, ValueError, OverflowError) as e:
        raise CVArgumentError('Argument {!r} is not a vector of {}: {}'.format(
            name, np.dtype(dtype).name, e))


def int_vector(values, name='values'):
    return _vector(values, np.int32, name)


def float_vector(values, name='values'):
    return _vector(values, np.float32, name)


def uchar_vector(values, name='buf'):
    if isinstance(values, (bytes, bytearray, memoryview)):
        return np.frombuffer(bytes(values), dtype=np.uint8)
    return _vector(values, np.uint8, name)


def point2f_vector(points, name='points'):
    """
    Returns an ``(N, 2)`` float32 array of points.
    """
    if points is None:
        return np.empty((0, 2), dtype=np.float32)
    try:
        arr = np.asarray(points, dtype=np.float32)
    except (TypeError, ValueError) as e:
        raise CVArgumentError('Argument {!r} is not a vector of points: {}'
                              .format(name, e))
    if arr.size == 0:
        return np.empty((0, 2), dtype=np.float32)
    if arr.shape[-1] != 2:
        raise CVArgumentError('Argument {!r} must hold 2D points, got shape {}'
                              .format(name, arr.shape))
    return np.ascontiguousarray(arr.reshape(-1, 2))


def mat_vector(mats, name='mats'):
    if mats is None:
        return []
    return [input_array(m, name) for m in mats]


def keypoint_vector(keypoints, name='keypoints'):
    """
    Accepts ``cv2.KeyPoint`` objects or tuples of
    ``(x, y, size[, angle, response, octave, class_id])``.
    """
    if keypoints is None:
        return []
    out = []
    for kp in keypoints:
        if isinstance(kp, cv2.KeyPoint):
            out.append(kp)
            continue
        try:
            x, y, size = kp[0], kp[1], kp[2]
            rest = list(kp[3:])
        except (TypeError, IndexError):
            raise CVArgumentError(
                'Argument {!r} holds an invalid keypoint {!r}'.format(
                    name, kp))
        angle = float(rest[0]) if len(rest) > 0 else -1.0
        response = float(rest[1]) if len(rest) > 1 else 0.0
        octave = int(rest[2]) if len(rest) > 2 else 0
        class_id = int(rest[3]) if len(rest) > 3 else -1
        out.append(cv2.KeyPoint(float(x), float(y), float(size), angle,
                                response, octave, class_id))
    return out


def dmatch_vector(matches, name='matches'):
    """
    Accepts ``cv2.DMatch`` objects or tuples of
    ``(query_idx, train_idx, distance[, img_idx])``.
    """
    if matches is None:
        return []
    out = []
    for m in matches:
        if isinstance(m, cv2.DMatch):
            out.append(m)
            continue
        try:
            if len(m) == 3:
                out.append(cv2.DMatch(int(m[0]), int(m[1]), float(m[2])))
            else:
                out.append(cv2.DMatch(int(m[0]), int(m[1]), int(m[3]),
                                      float(m[2])))
        except (TypeError, IndexError):
            raise CVArgumentError('Argument {!r} holds an invalid match {!r}'
                                  .format(name, m))
    return out


def to_point(pt, name='point'):
    try:
        return Point(int(pt[0]), int(pt[1]))
    except (TypeError, IndexError, ValueError):
        raise CVArgumentError('Argument {!r} is not a point: {!r}'.format(
            name, pt))


def to_size(sz, name='size'):
    try:
        return Size(int(sz[0]), int(sz[1]))
    except (TypeError, IndexError, ValueError):
        raise CVArgumentError('Argument {!r} is not a size: {!r}'.format(
            name, sz))


def to_rect(r, name='rect'):
    try:
        return Rect(int(r[0]), int(r[1]), int(r[2]), int(r[3]))
    except (TypeError, IndexError, ValueError):
        raise CVArgumentError('Argument {!r} is not a rectangle: {!r}'.format(
            name, r))


def to_scalar(s, name='color'):
    if isinstance(s, Scalar):
        return s
    if isinstance(s, (int, float)):
        return Scalar(s)
    try:
        return Scalar(*s)
    except (TypeError, ValueError):
        raise CVArgumentError('Argument {!r} is not a scalar: {!r}'.format(
            name, s))
