# -*- coding: utf-8 -*-
import cv2
import numpy as np
import pytest
from PIL import Image

from cvhub.core.error import CVArgumentError, CVDecodeError
from cvhub.hub import imgcodecs


@pytest.fixture
def image():
    rng = np.random.RandomState(0)
    return rng.randint(0, 256, (16, 24, 3)).astype(np.uint8)


def test_constants():
    assert imgcodecs.IMREAD_UNCHANGED == -1
    assert imgcodecs.IMREAD_REDUCED_COLOR_8 == 65
    assert imgcodecs.IMREAD_IGNORE_ORIENTATION == 128
    assert imgcodecs.IMWRITE_EXR_TYPE == 48
    assert imgcodecs.IMWRITE_JPEG2000_COMPRESSION_X1000 == 272
    assert imgcodecs.IMWRITE_PAM_TUPLETYPE == 128
    assert imgcodecs.IMWRITE_TIFF_COMPRESSION == 259
    assert imgcodecs.ImwritePNGFlags.IMWRITE_PNG_STRATEGY_FIXED == 4


def test_png_roundtrip_is_exact(image):
    ok, buf = imgcodecs.imencode('.png', image,
                                 [imgcodecs.IMWRITE_PNG_COMPRESSION, 9])
    assert ok
    assert buf.dtype == np.uint8
    decoded = imgcodecs.imdecode(buf, imgcodecs.IMREAD_UNCHANGED)
    np.testing.assert_array_equal(decoded, image)


def test_jpeg_roundtrip_is_close():
    image = np.full((32, 32, 3), (40, 120, 200), np.uint8)
    ok, buf = imgcodecs.imencode('.jpg', image,
                                 (imgcodecs.IMWRITE_JPEG_QUALITY, 95))
    assert ok
    decoded = imgcodecs.imdecode(bytes(buf.tobytes()))
    assert decoded.shape == image.shape
    assert np.abs(decoded.astype(int) - image.astype(int)).max() <= 4


def test_decode_grayscale(image):
    _, buf = imgcodecs.imencode('.png', image)
    gray = imgcodecs.imdecode(buf, imgcodecs.IMREAD_GRAYSCALE)
    assert gray.shape == image.shape[:2]


def test_decode_empty_buffer():
    with pytest.raises(CVDecodeError):
        imgcodecs.imdecode(b'')


def test_decode_garbage():
    with pytest.raises(CVDecodeError):
        imgcodecs.imdecode(b'definitely not an image')


def test_decode_rejects_wrapping_buffer():
    with pytest.raises(CVArgumentError):
        imgcodecs.imdecode(np.array([300, 1], np.int32))


def test_decode_to_reuses_destination(image):
    _, buf = imgcodecs.imencode('.png', image)
    dst = np.zeros_like(image)
    out = imgcodecs.imdecode_to(buf, imgcodecs.IMREAD_COLOR, dst)
    assert out is dst
    np.testing.assert_array_equal(dst, image)

    small = np.zeros((2, 2, 3), np.uint8)
    out = imgcodecs.imdecode_to(buf, imgcodecs.IMREAD_COLOR, small)
    assert out is not small
    assert out.shape == image.shape


def test_odd_params_rejected(image):
    with pytest.raises(CVArgumentError):
        imgcodecs.imencode('.png', image, [imgcodecs.IMWRITE_PNG_COMPRESSION])


def test_write_and_read(tmp_path, image):
    filename = str(tmp_path / 'out.png')
    assert imgcodecs.imwrite(filename, image)
    np.testing.assert_array_equal(imgcodecs.imread(filename), image)
    pages = imgcodecs.imreadmulti(filename)
    assert len(pages) == 1
    np.testing.assert_array_equal(pages[0], image)


def test_write_pil_image(tmp_path):
    filename = str(tmp_path / 'pil.png')
    assert imgcodecs.imwrite(filename, Image.new('RGB', (3, 3), (255, 0, 0)))
    img = imgcodecs.imread(filename)
    assert tuple(img[0, 0]) == (0, 0, 255)


def test_read_missing_file(tmp_path):
    with pytest.raises(CVDecodeError):
        imgcodecs.imread(str(tmp_path / 'missing.png'))


def test_filename_with_nul():
    with pytest.raises(CVArgumentError):
        imgcodecs.imread('a\0.png')


@pytest.mark.skipif(not hasattr(cv2, 'haveImageWriter'),
                    reason='needs OpenCV 4.5.2')
def test_have_image_writer():
    assert imgcodecs.have_image_writer('x.png')


@pytest.mark.skipif(not hasattr(cv2, 'imcount'), reason='needs OpenCV 4.6')
def test_imcount(tmp_path, image):
    filename = str(tmp_path / 'count.png')
    imgcodecs.imwrite(filename, image)
    assert imgcodecs.imcount(filename) == 1
