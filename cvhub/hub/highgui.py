# -*- coding: utf-8 -*-
"""
High-level GUI.

Windows that display images and remember their content, trackbars, mouse
and keyboard events, and the Qt extras (buttons, overlays, status bar,
fonts). Everything here forwards to the native highgui module; the event
loop and the windows themselves belong to it.

Callbacks are boxed in :data:`cvhub.core.callback.registry` and reach the
native side through the trampolines of that module. Passing ``None`` as a
callback unregisters it, and destroying a window unregisters every
callback bound to it.
"""

import itertools
from enum import IntEnum
from functools import partial

from ..base import cv2, np
from ..config import Config
from ..logger import Logger
from ..core.callback import (registry, mouse_trampoline, trackbar_trampoline,
                             button_trampoline, opengl_draw_trampoline)
from ..core.error import native_call, CVError, CVArgumentError
from ..core.handle import Handle, native_function
from ..core.types import (string_arg, input_array, to_point, to_scalar,
                          Rect, Scalar)

__all__ = [
    'EVENT_FLAG_ALTKEY', 'EVENT_FLAG_CTRLKEY', 'EVENT_FLAG_LBUTTON',
    'EVENT_FLAG_MBUTTON', 'EVENT_FLAG_RBUTTON', 'EVENT_FLAG_SHIFTKEY',
    'EVENT_LBUTTONDBLCLK', 'EVENT_LBUTTONDOWN', 'EVENT_LBUTTONUP',
    'EVENT_MBUTTONDBLCLK', 'EVENT_MBUTTONDOWN', 'EVENT_MBUTTONUP',
    'EVENT_MOUSEHWHEEL', 'EVENT_MOUSEMOVE', 'EVENT_MOUSEWHEEL',
    'EVENT_RBUTTONDBLCLK', 'EVENT_RBUTTONDOWN', 'EVENT_RBUTTONUP',
    'QT_CHECKBOX', 'QT_FONT_BLACK', 'QT_FONT_BOLD', 'QT_FONT_DEMIBOLD',
    'QT_FONT_LIGHT', 'QT_FONT_NORMAL', 'QT_NEW_BUTTONBAR', 'QT_PUSH_BUTTON',
    'QT_RADIOBOX', 'QT_STYLE_ITALIC', 'QT_STYLE_NORMAL', 'QT_STYLE_OBLIQUE',
    'WINDOW_AUTOSIZE', 'WINDOW_FREERATIO', 'WINDOW_FULLSCREEN',
    'WINDOW_GUI_EXPANDED', 'WINDOW_GUI_NORMAL', 'WINDOW_KEEPRATIO',
    'WINDOW_NORMAL', 'WINDOW_OPENGL', 'WND_PROP_ASPECT_RATIO',
    'WND_PROP_AUTOSIZE', 'WND_PROP_FULLSCREEN', 'WND_PROP_OPENGL',
    'WND_PROP_VISIBLE', 'WindowFlags', 'WindowPropertyFlags',
    'MouseEventTypes', 'MouseEventFlags', 'QtButtonTypes', 'QtFontWeights',
    'QtFontStyles', 'QtFont', 'add_text', 'add_text_with_font',
    'create_button', 'create_trackbar', 'destroy_all_windows',
    'destroy_window', 'display_overlay', 'display_status_bar', 'font_qt',
    'get_mouse_wheel_delta', 'get_trackbar_pos', 'get_window_image_rect',
    'get_window_property', 'imshow', 'load_window_parameters', 'move_window',
    'named_window', 'resize_window', 'save_window_parameters', 'select_roi',
    'set_mouse_callback', 'set_opengl_context', 'set_opengl_draw_callback',
    'set_trackbar_max', 'set_trackbar_min', 'set_trackbar_pos',
    'set_window_property', 'set_window_title', 'start_window_thread',
    'stop_loop', 'update_window', 'wait_key_ex', 'wait_key'
]

# indicates that ALT Key is pressed.
EVENT_FLAG_ALTKEY = 32
# indicates that CTRL Key is pressed.
EVENT_FLAG_CTRLKEY = 8
# indicates that the left mouse button is down.
EVENT_FLAG_LBUTTON = 1
# indicates that the middle mouse button is down.
EVENT_FLAG_MBUTTON = 4
# indicates that the right mouse button is down.
EVENT_FLAG_RBUTTON = 2
# indicates that SHIFT Key is pressed.
EVENT_FLAG_SHIFTKEY = 16
EVENT_LBUTTONDBLCLK = 7
EVENT_LBUTTONDOWN = 1
EVENT_LBUTTONUP = 4
EVENT_MBUTTONDBLCLK = 9
EVENT_MBUTTONDOWN = 3
EVENT_MBUTTONUP = 6
# positive and negative values mean right and left scrolling.
EVENT_MOUSEHWHEEL = 11
EVENT_MOUSEMOVE = 0
# positive and negative values mean forward and backward scrolling.
EVENT_MOUSEWHEEL = 10
EVENT_RBUTTONDBLCLK = 8
EVENT_RBUTTONDOWN = 2
EVENT_RBUTTONUP = 5

# Qt button types
QT_CHECKBOX = 1
QT_NEW_BUTTONBAR = 1024
QT_PUSH_BUTTON = 0
QT_RADIOBOX = 2

# Qt font weights
QT_FONT_BLACK = 87
QT_FONT_BOLD = 75
QT_FONT_DEMIBOLD = 63
QT_FONT_LIGHT = 25
QT_FONT_NORMAL = 50

# Qt font styles
QT_STYLE_ITALIC = 1
QT_STYLE_NORMAL = 0
QT_STYLE_OBLIQUE = 2

# window flags
WINDOW_AUTOSIZE = 0x00000001
WINDOW_FREERATIO = 0x00000100
WINDOW_FULLSCREEN = 1
WINDOW_GUI_EXPANDED = 0x00000000
WINDOW_GUI_NORMAL = 0x00000010
WINDOW_KEEPRATIO = 0x00000000
WINDOW_NORMAL = 0x00000000
WINDOW_OPENGL = 0x00001000

# window property ids
WND_PROP_ASPECT_RATIO = 2
WND_PROP_AUTOSIZE = 1
WND_PROP_FULLSCREEN = 0
WND_PROP_OPENGL = 3
WND_PROP_VISIBLE = 4


class WindowFlags(IntEnum):
    WINDOW_NORMAL = WINDOW_NORMAL
    WINDOW_AUTOSIZE = WINDOW_AUTOSIZE
    WINDOW_OPENGL = WINDOW_OPENGL
    WINDOW_FREERATIO = WINDOW_FREERATIO
    WINDOW_GUI_NORMAL = WINDOW_GUI_NORMAL


class WindowPropertyFlags(IntEnum):
    WND_PROP_FULLSCREEN = WND_PROP_FULLSCREEN
    WND_PROP_AUTOSIZE = WND_PROP_AUTOSIZE
    WND_PROP_ASPECT_RATIO = WND_PROP_ASPECT_RATIO
    WND_PROP_OPENGL = WND_PROP_OPENGL
    WND_PROP_VISIBLE = WND_PROP_VISIBLE


class MouseEventTypes(IntEnum):
    EVENT_MOUSEMOVE = EVENT_MOUSEMOVE
    EVENT_LBUTTONDOWN = EVENT_LBUTTONDOWN
    EVENT_RBUTTONDOWN = EVENT_RBUTTONDOWN
    EVENT_MBUTTONDOWN = EVENT_MBUTTONDOWN
    EVENT_LBUTTONUP = EVENT_LBUTTONUP
    EVENT_RBUTTONUP = EVENT_RBUTTONUP
    EVENT_MBUTTONUP = EVENT_MBUTTONUP
    EVENT_LBUTTONDBLCLK = EVENT_LBUTTONDBLCLK
    EVENT_RBUTTONDBLCLK = EVENT_RBUTTONDBLCLK
    EVENT_MBUTTONDBLCLK = EVENT_MBUTTONDBLCLK
    EVENT_MOUSEWHEEL = EVENT_MOUSEWHEEL
    EVENT_MOUSEHWHEEL = EVENT_MOUSEHWHEEL


class MouseEventFlags(IntEnum):
    EVENT_FLAG_LBUTTON = EVENT_FLAG_LBUTTON
    EVENT_FLAG_RBUTTON = EVENT_FLAG_RBUTTON
    EVENT_FLAG_MBUTTON = EVENT_FLAG_MBUTTON
    EVENT_FLAG_CTRLKEY = EVENT_FLAG_CTRLKEY
    EVENT_FLAG_SHIFTKEY = EVENT_FLAG_SHIFTKEY
    EVENT_FLAG_ALTKEY = EVENT_FLAG_ALTKEY


class QtButtonTypes(IntEnum):
    QT_PUSH_BUTTON = QT_PUSH_BUTTON
    QT_CHECKBOX = QT_CHECKBOX
    QT_RADIOBOX = QT_RADIOBOX
    QT_NEW_BUTTONBAR = QT_NEW_BUTTONBAR


class QtFontWeights(IntEnum):
    QT_FONT_LIGHT = QT_FONT_LIGHT
    QT_FONT_NORMAL = QT_FONT_NORMAL
    QT_FONT_DEMIBOLD = QT_FONT_DEMIBOLD
    QT_FONT_BOLD = QT_FONT_BOLD
    QT_FONT_BLACK = QT_FONT_BLACK


class QtFontStyles(IntEnum):
    QT_STYLE_NORMAL = QT_STYLE_NORMAL
    QT_STYLE_ITALIC = QT_STYLE_ITALIC
    QT_STYLE_OBLIQUE = QT_STYLE_OBLIQUE


_window_thread_started = False
# one registry slot per button
_button_ids = itertools.count(1)


def _native(name):
    return native_function(name, cv2)


def _call(name, *args):
    return native_call(_native(name), *args)


def _window_keys(winname):
    return lambda key: key[0] != 'button' and key[1] == winname


def _image_arg(img):
    # drawing happens in place, a converted copy would be thrown away
    if not isinstance(img, np.ndarray):
        raise CVArgumentError('Argument {!r} must be a numpy array, got {}'
                              .format('img', type(img).__name__))
    if not img.flags['C_CONTIGUOUS']:
        raise CVArgumentError('Argument {!r} must be C-contiguous'.format(
            'img'))
    return img


class QtFont(Handle):
    """
    Font used by :func:`add_text_with_font`. Create it with
    :func:`font_qt`.

    The native record holds the font name, point size, colour, weight,
    style and letter spacing. Reading any of them after :meth:`release`
    raises CVHandleError.
    """

    @property
    def name_font(self):
        return self.ptr['name_font']

    @property
    def point_size(self):
        return self.ptr['point_size']

    @property
    def color(self):
        return self.ptr['color']

    @property
    def weight(self):
        return self.ptr['weight']

    @property
    def style(self):
        return self.ptr['style']

    @property
    def spacing(self):
        return self.ptr['spacing']

    def _release(self, ptr):
        ptr.clear()


def font_qt(name_font, point_size=-1, color=Scalar.all(0),
            weight=QT_FONT_NORMAL, style=QT_STYLE_NORMAL, spacing=0):
    """
    Creates the font to be used to draw text on an image.

    Args:
        name_font (str): name of the font, the system default if the font
                         is not found
        point_size (int): size of the font, the system default if <= 0
        color: colour of the font in BGRA, A = 255 is fully transparent
        weight (int): font weight, one of QT_FONT_*
        style (int): font style, one of QT_STYLE_*
        spacing (int): spacing between characters

    Returns:
        (QtFont) font handle
    """
    record = {
        'name_font': string_arg('name_font', name_font),
        'point_size': int(point_size),
        'color': to_scalar(color),
        'weight': int(weight),
        'style': int(style),
        'spacing': int(spacing),
    }
    return QtFont.from_raw_ptr(record)


def add_text_with_font(img, text, org, font):
    """
    Draws text on the image using a font created by :func:`font_qt`.
    """
    text = string_arg('text', text)
    if not isinstance(font, QtFont):
        raise CVArgumentError('Argument {!r} must be a QtFont'.format('font'))
    _call('addText', _image_arg(img), text, tuple(to_point(org, 'org')),
          font.name_font, font.point_size, tuple(font.color), font.weight,
          font.style, font.spacing)


def add_text(img, text, org, name_font, point_size=-1, color=Scalar.all(0),
             weight=QT_FONT_NORMAL, style=QT_STYLE_NORMAL, spacing=0):
    """
    Draws text on the image, the font is described by the arguments
    directly. Qt backend only.
    """
    text = string_arg('text', text)
    name_font = string_arg('name_font', name_font)
    _call('addText', _image_arg(img), text, tuple(to_point(org, 'org')),
          name_font, int(point_size), tuple(to_scalar(color)), int(weight),
          int(style), int(spacing))


def create_button(bar_name, on_change=None, button_type=QT_PUSH_BUTTON,
                  initial_button_state=False):
    """
    Attaches a button to the control panel. Qt backend only.

    Args:
        bar_name (str): name of the button
        on_change (callable): called as ``on_change(state)`` every time the
                              button changes its state
        button_type (int): one of QT_PUSH_BUTTON, QT_CHECKBOX, QT_RADIOBOX,
                    optionally or-ed with QT_NEW_BUTTONBAR
        initial_button_state (bool): initial state of a checkbox/radiobox

    Note:
        The native library cannot remove a button, so its callback stays
        registered until the process exits.
    """
    bar_name = string_arg('bar_name', bar_name)
    key = ('button', bar_name, next(_button_ids))
    userdata = None
    if on_change is not None:
        userdata = registry.box(key, on_change)
    try:
        return _call('createButton', bar_name, button_trampoline, userdata,
                     int(button_type), bool(initial_button_state))
    except CVError:
        if userdata is not None:
            registry.release(key)
        raise


def create_trackbar(trackbarname, winname, value, count, on_change=None):
    """
    Creates a trackbar and attaches it to the window.

    Args:
        trackbarname (str): name of the trackbar
        winname (str): window that will be the parent of the trackbar
        value (int): initial slider position
        count (int): maximal slider position, the minimum is always 0
        on_change (callable): called as ``on_change(pos)`` every time the
                              slider moves, or None

    Returns:
        whatever the native call returns
    """
    trackbarname = string_arg('trackbarname', trackbarname)
    winname = string_arg('winname', winname)
    key = ('trackbar', winname, trackbarname)
    if on_change is None:
        registry.release(key)
        userdata = None
    else:
        userdata = registry.box(key, on_change)
    # the python binding calls onChange(pos) only, the user data is
    # bound here instead of being passed by the native side
    trampoline = partial(trackbar_trampoline, userdata=userdata)
    try:
        return _call('createTrackbar', trackbarname, winname, int(value),
                     int(count), trampoline)
    except CVError:
        if userdata is not None:
            registry.release(key)
        raise


def destroy_all_windows():
    """
    Destroys every HighGUI window and frees the callbacks bound to them.
    """
    _call('destroyAllWindows')
    registry.release_matching(lambda key: key[0] != 'button')


def destroy_window(winname):
    winname = string_arg('winname', winname)
    _call('destroyWindow', winname)
    registry.release_matching(_window_keys(winname))


def display_overlay(winname, text, delayms=0):
    """
    Displays text on the window image as an overlay for ``delayms``
    milliseconds (0 means forever). Qt backend only.
    """
    _call('displayOverlay', string_arg('winname', winname),
          string_arg('text', text), int(delayms))


def display_status_bar(winname, text, delayms=0):
    _call('displayStatusBar', string_arg('winname', winname),
          string_arg('text', text), int(delayms))


def get_mouse_wheel_delta(flags):
    """
    Gets the wheel delta of an EVENT_MOUSEWHEEL or EVENT_MOUSEHWHEEL event
    from the ``flags`` passed to a mouse callback. Multiples of 120.
    """
    return _call('getMouseWheelDelta', int(flags))


def get_trackbar_pos(trackbarname, winname):
    return _call('getTrackbarPos', string_arg('trackbarname', trackbarname),
                 string_arg('winname', winname))


def get_window_image_rect(winname):
    """
    Gets the rectangle of the image area inside the window.

    Returns:
        (Rect) x, y, width, height
    """
    return Rect(*_call('getWindowImageRect', string_arg('winname', winname)))


def get_window_property(winname, prop_id):
    return _call('getWindowProperty', string_arg('winname', winname),
                 int(prop_id))


def imshow(winname, mat):
    """
    Displays an image in the window, creating the window if needed.
    Accepts numpy arrays and PIL images.
    """
    _call('imshow', string_arg('winname', winname), input_array(mat, 'mat'))


def load_window_parameters(window_name):
    _call('loadWindowParameters', string_arg('window_name', window_name))


def move_window(winname, x, y):
    _call('moveWindow', string_arg('winname', winname), int(x), int(y))


def named_window(winname, flags=WINDOW_AUTOSIZE):
    """
    Creates a window that can be used as a placeholder for images and
    trackbars. Does nothing if a window with that name exists.

    Args:
        winname (str): name used as the window identifier and caption
        flags (int): WINDOW_* flags
    """
    global _window_thread_started

    winname = string_arg('winname', winname)
    if (not _window_thread_started and
            Config.getboolean('highgui', 'start_window_thread')):
        start_window_thread()
    _call('namedWindow', winname, int(flags))
    Logger.debug('HighGUI: window %r created', winname)


def resize_window(winname, width, height):
    _call('resizeWindow', string_arg('winname', winname), int(width),
          int(height))


def save_window_parameters(window_name):
    _call('saveWindowParameters', string_arg('window_name', window_name))


def select_roi(winname, img, show_crosshair=True, from_center=False):
    """
    Lets the user select a rectangle in the window with the mouse.
    Blocks until the selection is confirmed with space or enter.

    Returns:
        (Rect) the selection, zero sized if cancelled
    """
    ret = _call('selectROI', string_arg('winname', winname),
                input_array(img, 'img'), bool(show_crosshair),
                bool(from_center))
    return Rect(*ret)


def set_mouse_callback(winname, on_mouse):
    """
    Sets the mouse handler of the window.

    Args:
        winname (str): name of the window
        on_mouse (callable): called as ``on_mouse(event, x, y, flags)``,
                             or None to unregister the current handler
    """
    winname = string_arg('winname', winname)
    key = ('mouse', winname)
    if on_mouse is None:
        _call('setMouseCallback', winname, mouse_trampoline, None)
        registry.release(key)
        return
    userdata = registry.box(key, on_mouse)
    try:
        _call('setMouseCallback', winname, mouse_trampoline, userdata)
    except CVError:
        registry.release(key)
        raise


def set_opengl_context(winname):
    _call('setOpenGlContext', string_arg('winname', winname))


def set_opengl_draw_callback(winname, on_opengl_draw):
    """
    Sets a callback invoked as ``on_opengl_draw()`` every time the window
    content is redrawn. Only for windows created with WINDOW_OPENGL.
    Passing None unregisters it.
    """
    winname = string_arg('winname', winname)
    key = ('opengl', winname)
    if on_opengl_draw is None:
        _call('setOpenGlDrawCallback', winname, opengl_draw_trampoline, None)
        registry.release(key)
        return
    userdata = registry.box(key, on_opengl_draw)
    try:
        _call('setOpenGlDrawCallback', winname, opengl_draw_trampoline,
              userdata)
    except CVError:
        registry.release(key)
        raise


def set_trackbar_max(trackbarname, winname, maxval):
    _call('setTrackbarMax', string_arg('trackbarname', trackbarname),
          string_arg('winname', winname), int(maxval))


def set_trackbar_min(trackbarname, winname, minval):
    _call('setTrackbarMin', string_arg('trackbarname', trackbarname),
          string_arg('winname', winname), int(minval))


def set_trackbar_pos(trackbarname, winname, pos):
    _call('setTrackbarPos', string_arg('trackbarname', trackbarname),
          string_arg('winname', winname), int(pos))


def set_window_property(winname, prop_id, prop_value):
    _call('setWindowProperty', string_arg('winname', winname), int(prop_id),
          float(prop_value))


def set_window_title(winname, title):
    _call('setWindowTitle', string_arg('winname', winname),
          string_arg('title', title))


def start_window_thread():
    """
    Starts the native window event thread (GTK backend). The thread is
    owned and scheduled by the native library.
    """
    global _window_thread_started

    ret = _call('startWindowThread')
    _window_thread_started = True
    Logger.debug('HighGUI: window thread started')
    return ret


def stop_loop():
    _call('stopLoop')


def update_window(winname):
    _call('updateWindow', string_arg('winname', winname))


def wait_key_ex(delay=0):
    """
    Like :func:`wait_key`, but returns the full key code, including the
    platform specific bits of arrow and function keys.
    """
    return _call('waitKeyEx', int(delay))


def wait_key(delay=0):
    """
    Waits for a pressed key, for ``delay`` milliseconds or forever when
    ``delay <= 0``. This also runs the native event loop, so windows only
    repaint while something is waiting here.

    Returns:
        (int) code of the pressed key, -1 if none was pressed
    """
    return _call('waitKey', int(delay))
