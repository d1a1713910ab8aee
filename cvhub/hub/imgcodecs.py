# -*- coding: utf-8 -*-
"""
Image file reading and writing.

The codecs themselves live in the native library; this module only checks
arguments, forwards them and turns "no image" results into
:class:`CVDecodeError`.
"""

from enum import IntEnum

from ..base import cv2, np
from ..logger import Logger
from ..core.error import native_call, CVDecodeError, CVArgumentError
from ..core.handle import native_function
from ..core.types import string_arg, input_array, int_vector, uchar_vector

__all__ = [
    'IMREAD_ANYCOLOR', 'IMREAD_ANYDEPTH', 'IMREAD_COLOR', 'IMREAD_GRAYSCALE',
    'IMREAD_IGNORE_ORIENTATION', 'IMREAD_LOAD_GDAL', 'IMREAD_REDUCED_COLOR_2',
    'IMREAD_REDUCED_COLOR_4', 'IMREAD_REDUCED_COLOR_8',
    'IMREAD_REDUCED_GRAYSCALE_2', 'IMREAD_REDUCED_GRAYSCALE_4',
    'IMREAD_REDUCED_GRAYSCALE_8', 'IMREAD_UNCHANGED', 'IMWRITE_EXR_TYPE',
    'IMWRITE_EXR_TYPE_FLOAT', 'IMWRITE_EXR_TYPE_HALF',
    'IMWRITE_JPEG2000_COMPRESSION_X1000', 'IMWRITE_JPEG_CHROMA_QUALITY',
    'IMWRITE_JPEG_LUMA_QUALITY', 'IMWRITE_JPEG_OPTIMIZE',
    'IMWRITE_JPEG_PROGRESSIVE', 'IMWRITE_JPEG_QUALITY',
    'IMWRITE_JPEG_RST_INTERVAL', 'IMWRITE_PAM_FORMAT_BLACKANDWHITE',
    'IMWRITE_PAM_FORMAT_GRAYSCALE', 'IMWRITE_PAM_FORMAT_GRAYSCALE_ALPHA',
    'IMWRITE_PAM_FORMAT_NULL', 'IMWRITE_PAM_FORMAT_RGB',
    'IMWRITE_PAM_FORMAT_RGB_ALPHA', 'IMWRITE_PAM_TUPLETYPE',
    'IMWRITE_PNG_BILEVEL', 'IMWRITE_PNG_COMPRESSION', 'IMWRITE_PNG_STRATEGY',
    'IMWRITE_PNG_STRATEGY_DEFAULT', 'IMWRITE_PNG_STRATEGY_FILTERED',
    'IMWRITE_PNG_STRATEGY_FIXED', 'IMWRITE_PNG_STRATEGY_HUFFMAN_ONLY',
    'IMWRITE_PNG_STRATEGY_RLE', 'IMWRITE_PXM_BINARY',
    'IMWRITE_TIFF_COMPRESSION', 'IMWRITE_TIFF_RESUNIT', 'IMWRITE_TIFF_XDPI',
    'IMWRITE_TIFF_YDPI', 'IMWRITE_WEBP_QUALITY', 'ImreadModes',
    'ImwriteFlags', 'ImwriteEXRTypeFlags', 'ImwritePNGFlags',
    'ImwritePAMFlags', 'have_image_reader', 'have_image_writer', 'imcount',
    'imdecode', 'imdecode_to', 'imencode', 'imread', 'imreadmulti', 'imwrite'
]

IMREAD_ANYCOLOR = 4
IMREAD_ANYDEPTH = 2
IMREAD_COLOR = 1
IMREAD_GRAYSCALE = 0
IMREAD_IGNORE_ORIENTATION = 128
IMREAD_LOAD_GDAL = 8
IMREAD_REDUCED_COLOR_2 = 17
IMREAD_REDUCED_COLOR_4 = 33
IMREAD_REDUCED_COLOR_8 = 65
IMREAD_REDUCED_GRAYSCALE_2 = 16
IMREAD_REDUCED_GRAYSCALE_4 = 32
IMREAD_REDUCED_GRAYSCALE_8 = 64
IMREAD_UNCHANGED = -1

IMWRITE_EXR_TYPE = 0x30
IMWRITE_EXR_TYPE_FLOAT = 2
IMWRITE_EXR_TYPE_HALF = 1
IMWRITE_JPEG2000_COMPRESSION_X1000 = 272
IMWRITE_JPEG_CHROMA_QUALITY = 6
IMWRITE_JPEG_LUMA_QUALITY = 5
IMWRITE_JPEG_OPTIMIZE = 3
IMWRITE_JPEG_PROGRESSIVE = 2
IMWRITE_JPEG_QUALITY = 1
IMWRITE_JPEG_RST_INTERVAL = 4
IMWRITE_PAM_FORMAT_BLACKANDWHITE = 1
IMWRITE_PAM_FORMAT_GRAYSCALE = 2
IMWRITE_PAM_FORMAT_GRAYSCALE_ALPHA = 3
IMWRITE_PAM_FORMAT_NULL = 0
IMWRITE_PAM_FORMAT_RGB = 4
IMWRITE_PAM_FORMAT_RGB_ALPHA = 5
IMWRITE_PAM_TUPLETYPE = 128
IMWRITE_PNG_BILEVEL = 18
IMWRITE_PNG_COMPRESSION = 16
IMWRITE_PNG_STRATEGY = 17
IMWRITE_PNG_STRATEGY_DEFAULT = 0
IMWRITE_PNG_STRATEGY_FILTERED = 1
IMWRITE_PNG_STRATEGY_FIXED = 4
IMWRITE_PNG_STRATEGY_HUFFMAN_ONLY = 2
IMWRITE_PNG_STRATEGY_RLE = 3
IMWRITE_PXM_BINARY = 32
IMWRITE_TIFF_COMPRESSION = 259
IMWRITE_TIFF_RESUNIT = 256
IMWRITE_TIFF_XDPI = 257
IMWRITE_TIFF_YDPI = 258
IMWRITE_WEBP_QUALITY = 64


class ImreadModes(IntEnum):
    IMREAD_UNCHANGED = IMREAD_UNCHANGED
    IMREAD_GRAYSCALE = IMREAD_GRAYSCALE
    IMREAD_COLOR = IMREAD_COLOR
    IMREAD_ANYDEPTH = IMREAD_ANYDEPTH
    IMREAD_ANYCOLOR = IMREAD_ANYCOLOR
    IMREAD_LOAD_GDAL = IMREAD_LOAD_GDAL
    IMREAD_REDUCED_GRAYSCALE_2 = IMREAD_REDUCED_GRAYSCALE_2
    IMREAD_REDUCED_COLOR_2 = IMREAD_REDUCED_COLOR_2
    IMREAD_REDUCED_GRAYSCALE_4 = IMREAD_REDUCED_GRAYSCALE_4
    IMREAD_REDUCED_COLOR_4 = IMREAD_REDUCED_COLOR_4
    IMREAD_REDUCED_GRAYSCALE_8 = IMREAD_REDUCED_GRAYSCALE_8
    IMREAD_REDUCED_COLOR_8 = IMREAD_REDUCED_COLOR_8
    IMREAD_IGNORE_ORIENTATION = IMREAD_IGNORE_ORIENTATION


class ImwriteFlags(IntEnum):
    IMWRITE_JPEG_QUALITY = IMWRITE_JPEG_QUALITY
    IMWRITE_JPEG_PROGRESSIVE = IMWRITE_JPEG_PROGRESSIVE
    IMWRITE_JPEG_OPTIMIZE = IMWRITE_JPEG_OPTIMIZE
    IMWRITE_JPEG_RST_INTERVAL = IMWRITE_JPEG_RST_INTERVAL
    IMWRITE_JPEG_LUMA_QUALITY = IMWRITE_JPEG_LUMA_QUALITY
    IMWRITE_JPEG_CHROMA_QUALITY = IMWRITE_JPEG_CHROMA_QUALITY
    IMWRITE_PNG_COMPRESSION = IMWRITE_PNG_COMPRESSION
    IMWRITE_PNG_STRATEGY = IMWRITE_PNG_STRATEGY
    IMWRITE_PNG_BILEVEL = IMWRITE_PNG_BILEVEL
    IMWRITE_PXM_BINARY = IMWRITE_PXM_BINARY
    IMWRITE_EXR_TYPE = IMWRITE_EXR_TYPE
    IMWRITE_WEBP_QUALITY = IMWRITE_WEBP_QUALITY
    IMWRITE_PAM_TUPLETYPE = IMWRITE_PAM_TUPLETYPE
    IMWRITE_TIFF_RESUNIT = IMWRITE_TIFF_RESUNIT
    IMWRITE_TIFF_XDPI = IMWRITE_TIFF_XDPI
    IMWRITE_TIFF_YDPI = IMWRITE_TIFF_YDPI
    IMWRITE_TIFF_COMPRESSION = IMWRITE_TIFF_COMPRESSION
    IMWRITE_JPEG2000_COMPRESSION_X1000 = IMWRITE_JPEG2000_COMPRESSION_X1000


class ImwriteEXRTypeFlags(IntEnum):
    IMWRITE_EXR_TYPE_HALF = IMWRITE_EXR_TYPE_HALF
    IMWRITE_EXR_TYPE_FLOAT = IMWRITE_EXR_TYPE_FLOAT


class ImwritePNGFlags(IntEnum):
    IMWRITE_PNG_STRATEGY_DEFAULT = IMWRITE_PNG_STRATEGY_DEFAULT
    IMWRITE_PNG_STRATEGY_FILTERED = IMWRITE_PNG_STRATEGY_FILTERED
    IMWRITE_PNG_STRATEGY_HUFFMAN_ONLY = IMWRITE_PNG_STRATEGY_HUFFMAN_ONLY
    IMWRITE_PNG_STRATEGY_RLE = IMWRITE_PNG_STRATEGY_RLE
    IMWRITE_PNG_STRATEGY_FIXED = IMWRITE_PNG_STRATEGY_FIXED


class ImwritePAMFlags(IntEnum):
    IMWRITE_PAM_FORMAT_NULL = IMWRITE_PAM_FORMAT_NULL
    IMWRITE_PAM_FORMAT_BLACKANDWHITE = IMWRITE_PAM_FORMAT_BLACKANDWHITE
    IMWRITE_PAM_FORMAT_GRAYSCALE = IMWRITE_PAM_FORMAT_GRAYSCALE
    IMWRITE_PAM_FORMAT_GRAYSCALE_ALPHA = IMWRITE_PAM_FORMAT_GRAYSCALE_ALPHA
    IMWRITE_PAM_FORMAT_RGB = IMWRITE_PAM_FORMAT_RGB
    IMWRITE_PAM_FORMAT_RGB_ALPHA = IMWRITE_PAM_FORMAT_RGB_ALPHA


def _native(name):
    return native_function(name, cv2)


def _params(params):
    params = int_vector(params, 'params')
    if len(params) % 2:
        raise CVArgumentError(
            'Argument {!r} must hold (flag, value) pairs, got {} items'
            .format('params', len(params)))
    return params.tolist()


def have_image_reader(filename):
    """
    Checks whether the build has a codec able to read ``filename``. The
    file must exist, its header is inspected.
    """
    return bool(native_call(_native('haveImageReader'),
                            string_arg('filename', filename)))


def have_image_writer(filename):
    """
    Checks whether the build has a codec able to write ``filename``,
    judging by its extension.
    """
    return bool(native_call(_native('haveImageWriter'),
                            string_arg('filename', filename)))


def imcount(filename, flags=IMREAD_ANYCOLOR):
    """
    Returns the number of images inside a (possibly multi-page) file.
    """
    return int(native_call(_native('imcount'),
                           string_arg('filename', filename), int(flags)))


def imdecode(buf, flags=IMREAD_COLOR):
    """
    Reads an image from a buffer in memory.

    Args:
        buf: encoded image bytes (bytes, bytearray or uint8 array)
        flags (int): IMREAD_* flags

    Returns:
        (numpy.ndarray) the decoded image

    Raises:
        CVDecodeError: the buffer is empty, truncated or of an unknown
                       format
    """
    buf = uchar_vector(buf, 'buf')
    if buf.size == 0:
        raise CVDecodeError('Cannot decode an empty buffer', func='imdecode')
    img = native_call(_native('imdecode'), buf, int(flags))
    if img is None or img.size == 0:
        raise CVDecodeError('Buffer of {} bytes could not be decoded'.format(
            buf.size), func='imdecode')
    return img


def imdecode_to(buf, flags, dst):
    """
    Like :func:`imdecode`, but reuses ``dst`` when its shape and type
    already match the decoded image.

    Returns:
        (numpy.ndarray) the decoded image, ``dst`` itself when reused
    """
    buf = uchar_vector(buf, 'buf')
    if buf.size == 0:
        raise CVDecodeError('Cannot decode an empty buffer', func='imdecode')
    if not isinstance(dst, np.ndarray):
        raise CVArgumentError('Argument {!r} must be a numpy array'.format(
            'dst'))
    img = native_call(_native('imdecode'), buf, int(flags))
    if img is None or img.size == 0:
        raise CVDecodeError('Buffer of {} bytes could not be decoded'.format(
            buf.size), func='imdecode')
    if dst.shape == img.shape and dst.dtype == img.dtype:
        np.copyto(dst, img)
        return dst
    return img


def imencode(ext, img, params=()):
    """
    Encodes an image into a memory buffer.

    Args:
        ext (str): file extension that picks the codec, e.g. '.png'
        img: image to encode
        params: flat sequence of (IMWRITE_* flag, value) pairs

    Returns:
        (tuple) (ok, buffer) where buffer is a uint8 numpy array
    """
    ext = string_arg('ext', ext)
    ok, buf = native_call(_native('imencode'), ext, input_array(img, 'img'),
                          _params(params))
    return bool(ok), buf


def imread(filename, flags=IMREAD_COLOR):
    """
    Loads an image from a file.

    Raises:
        CVDecodeError: the file is missing, unreadable or not an image
    """
    filename = string_arg('filename', filename)
    img = native_call(_native('imread'), filename, int(flags))
    if img is None:
        Logger.debug('ImgCodecs: cannot read %r', filename)
        raise CVDecodeError('Cannot read image from {!r}'.format(filename),
                            func='imread')
    return img


def imreadmulti(filename, flags=IMREAD_ANYCOLOR):
    """
    Loads every page of a multi-page image file.

    Returns:
        (list) numpy arrays, one per page
    """
    filename = string_arg('filename', filename)
    ok, mats = native_call(_native('imreadmulti'), filename,
                           flags=int(flags))
    if not ok:
        raise CVDecodeError('Cannot read images from {!r}'.format(filename),
                            func='imreadmulti')
    return list(mats)


def imwrite(filename, img, params=()):
    """
    Saves an image to a file, the codec is chosen by the extension.

    Returns:
        (bool) True on success
    """
    filename = string_arg('filename', filename)
    return bool(native_call(_native('imwrite'), filename,
                            input_array(img, 'img'), _params(params)))
