# -*- coding: utf-8 -*-
import numpy as np
import pytest

from cvhub.config import Config
from cvhub.core.callback import registry
from cvhub.core.error import (CVError, CVArgumentError, CVHandleError,
                              CVNotImplementedError)
from cvhub.hub import highgui
from conftest import native_error


def test_constants():
    assert highgui.EVENT_MOUSEMOVE == 0
    assert highgui.EVENT_MBUTTONDBLCLK == 9
    assert highgui.EVENT_MOUSEHWHEEL == 11
    assert highgui.EVENT_FLAG_ALTKEY == 32
    assert highgui.EVENT_FLAG_SHIFTKEY == 16
    assert highgui.QT_NEW_BUTTONBAR == 1024
    assert highgui.QT_FONT_DEMIBOLD == 63
    assert highgui.QT_FONT_BLACK == 87
    assert highgui.QT_STYLE_OBLIQUE == 2
    assert highgui.WINDOW_FREERATIO == 0x100
    assert highgui.WINDOW_OPENGL == 0x1000
    assert highgui.WINDOW_GUI_NORMAL == 0x10
    assert highgui.WINDOW_NORMAL == highgui.WINDOW_KEEPRATIO == 0
    assert highgui.WND_PROP_VISIBLE == 4
    assert highgui.WindowFlags.WINDOW_AUTOSIZE == 1
    assert highgui.MouseEventTypes(10) is \
        highgui.MouseEventTypes.EVENT_MOUSEWHEEL


def test_named_window_and_imshow(fake_cv2):
    highgui.named_window('main', highgui.WINDOW_NORMAL)
    img = np.zeros((4, 4, 3), np.uint8)
    highgui.imshow('main', img)
    assert fake_cv2.called('namedWindow') == [('main', 0)]
    (winname, shown), = fake_cv2.called('imshow')
    assert winname == 'main'
    assert shown.shape == (4, 4, 3)


def test_interior_nul_never_reaches_native(fake_cv2):
    with pytest.raises(CVArgumentError):
        highgui.named_window('ma\0in')
    assert fake_cv2.calls == []


def test_native_error_is_converted(fake_cv2):
    fake_cv2.failures['namedWindow'] = native_error('No GUI support', -2)
    with pytest.raises(CVError) as info:
        highgui.named_window('main')
    assert info.value.code == -2


def test_mouse_callback_roundtrip(fake_cv2):
    seen = []
    highgui.set_mouse_callback('main', lambda *a: seen.append(a))
    (winname, trampoline, userdata), = fake_cv2.called('setMouseCallback')
    trampoline(highgui.EVENT_LBUTTONDOWN, 3, 4, highgui.EVENT_FLAG_CTRLKEY,
               userdata)
    assert seen == [(1, 3, 4, 8)]

    highgui.set_mouse_callback('main', None)
    trampoline(highgui.EVENT_LBUTTONDOWN, 3, 4, 0, userdata)
    assert seen == [(1, 3, 4, 8)]
    assert ('mouse', 'main') not in registry


def test_mouse_callback_failure_frees_slot(fake_cv2):
    fake_cv2.failures['setMouseCallback'] = native_error('no window', -27)
    with pytest.raises(CVError):
        highgui.set_mouse_callback('main', print)
    assert ('mouse', 'main') not in registry


def test_trackbar(fake_cv2):
    seen = []
    fake_cv2.results['getTrackbarPos'] = 5
    highgui.create_trackbar('t', 'main', 5, 10, seen.append)
    (name, winname, value, count, on_change), = \
        fake_cv2.called('createTrackbar')
    assert (name, winname, value, count) == ('t', 'main', 5, 10)
    on_change(7)
    assert seen == [7]
    assert highgui.get_trackbar_pos('t', 'main') == 5

    highgui.destroy_window('main')
    on_change(8)
    assert seen == [7]


def test_destroy_all_windows_keeps_buttons(fake_cv2):
    seen = []
    highgui.create_button('b', seen.append)
    highgui.set_mouse_callback('w', print)
    highgui.destroy_all_windows()
    (_, trampoline, userdata, _, _), = fake_cv2.called('createButton')
    trampoline(1, userdata)
    assert seen == [1]
    assert ('mouse', 'w') not in registry


def test_button(fake_cv2):
    seen = []
    highgui.create_button('b', seen.append, highgui.QT_CHECKBOX, True)
    (name, trampoline, userdata, button_type, state), = \
        fake_cv2.called('createButton')
    assert (name, button_type, state) == ('b', 1, True)
    trampoline(1, userdata)
    assert seen == [1]


def test_buttons_with_the_same_name_keep_their_callbacks(fake_cv2):
    first, second = [], []
    highgui.create_button('Apply', first.append)
    highgui.create_button('Apply', second.append)
    (_, tramp1, data1, _, _), (_, tramp2, data2, _, _) = \
        fake_cv2.called('createButton')
    assert data1 != data2
    tramp1(1, data1)
    tramp2(0, data2)
    assert (first, second) == ([1], [0])


def test_opengl_draw_callback(fake_cv2):
    seen = []
    highgui.set_opengl_draw_callback('gl', lambda: seen.append('draw'))
    (winname, trampoline, userdata), = fake_cv2.called('setOpenGlDrawCallback')
    trampoline(userdata)
    highgui.set_opengl_draw_callback('gl', None)
    trampoline(userdata)
    assert seen == ['draw']


def test_window_rect(fake_cv2):
    fake_cv2.results['getWindowImageRect'] = (1, 2, 30, 40)
    rect = highgui.get_window_image_rect('main')
    assert rect.width == 30
    assert rect.height == 40


def test_wait_key(fake_cv2):
    fake_cv2.results['waitKey'] = -1
    assert highgui.wait_key(10) == -1
    assert fake_cv2.called('waitKey') == [(10,)]


def test_font_qt_and_add_text(fake_cv2):
    font = highgui.font_qt('Times', 12, (0, 0, 255),
                           highgui.QT_FONT_BOLD, highgui.QT_STYLE_ITALIC)
    assert font.point_size == 12
    assert font.weight == 75
    img = np.zeros((10, 10, 3), np.uint8)
    highgui.add_text_with_font(img, 'hi', (1, 2), font)
    args, = fake_cv2.called('addText')
    assert args[0] is img
    assert args[1:6] == ('hi', (1, 2), 'Times', 12, (0.0, 0.0, 255.0, 0.0))
    font.release()
    with pytest.raises(CVHandleError):
        font.name_font


def test_add_text_needs_contiguous_array(fake_cv2):
    img = np.zeros((10, 10, 3), np.uint8)[:, ::2]
    with pytest.raises(CVArgumentError):
        highgui.add_text(img, 'hi', (0, 0), 'Times')


def test_missing_entry_point(fake_cv2):
    with pytest.raises(CVNotImplementedError):
        highgui.stop_loop()


def test_window_thread_started_from_config(fake_cv2):
    Config.set('highgui', 'start_window_thread', '1')
    try:
        highgui.named_window('a')
        highgui.named_window('b')
    finally:
        Config.set('highgui', 'start_window_thread', '0')
    assert len(fake_cv2.called('startWindowThread')) == 1
