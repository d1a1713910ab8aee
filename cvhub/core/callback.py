# -*- coding: utf-8 -*-
"""
Boxed host callbacks and the fixed-signature trampolines handed to the
native library.

The native side only ever sees one of the module level trampolines and an
integer user-data value. The integer is the slot of the boxed closure in
:data:`registry`; the trampoline looks the closure up and calls it. Once a
slot is released the trampoline drops any late native invocation for it,
so a callback never runs after it was unregistered, whatever the native
library does with its own copy of the pointer.
"""

import itertools
from ..base import threading
from ..logger import Logger

__all__ = [
    'CallbackRegistry', 'registry', 'mouse_trampoline',
    'trackbar_trampoline', 'button_trampoline', 'opengl_draw_trampoline'
]


class CallbackRegistry(object):
    """
    Slab of boxed closures.

    Each closure is stored under an owner ``key`` (for example
    ``('mouse', 'main')``) and gets a fresh integer ``userdata``. Rebinding
    a key boxes the new closure before the old slot is freed.
    """

    def __init__(self):
        self._lock = threading.RLock()
        self._ids = itertools.count(1)
        # userdata -> (key, callable)
        self._slots = {}
        # key -> userdata
        self._keys = {}

    def __len__(self):
        with self._lock:
            return len(self._slots)

    def __contains__(self, key):
        with self._lock:
            return key in self._keys

    def box(self, key, fn):
        """
        Boxes ``fn`` for ``key`` and returns its user-data value.

        Args:
            key (hashable): owner of the callback
            fn (callable): the closure

        Returns:
            (int) opaque user-data to hand to the native library
        """
        if not callable(fn):
            raise TypeError('Callback for {!r} is not callable'.format(key))
        with self._lock:
            userdata = next(self._ids)
            self._slots[userdata] = (key, fn)
            old = self._keys.get(key)
            self._keys[key] = userdata
            if old is not None:
                self._slots.pop(old, None)
        Logger.debug('Callback: boxed %r as %d', key, userdata)
        return userdata

    def release(self, key):
        """
        Frees the closure boxed for ``key``.

        Returns:
            (bool) True if something was freed
        """
        with self._lock:
            userdata = self._keys.pop(key, None)
            if userdata is None:
                return False
            self._slots.pop(userdata, None)
        Logger.debug('Callback: released %r (%d)', key, userdata)
        return True

    def release_matching(self, predicate):
        """
        Frees every closure whose key satisfies ``predicate``.

        Returns:
            (int) the number of freed closures
        """
        with self._lock:
            keys = [k for k in self._keys if predicate(k)]
            for key in keys:
                self._slots.pop(self._keys.pop(key), None)
        if keys:
            Logger.debug('Callback: released %d callbacks', len(keys))
        return len(keys)

    def lookup(self, userdata):
        with self._lock:
            slot = self._slots.get(userdata)
        return None if slot is None else slot[1]

    def invoke(self, userdata, *args):
        """
        Runs the closure boxed under ``userdata``. Calls for freed slots
        are dropped. Exceptions are logged, never raised into the native
        frame.
        """
        fn = self.lookup(userdata)
        if fn is None:
            Logger.trace('Callback: dropped call for freed slot %r', userdata)
            return None
        try:
            return fn(*args)
        except Exception:
            Logger.exception('Callback: exception in callback %r', userdata)
            return None


registry = CallbackRegistry()


def mouse_trampoline(event, x, y, flags, userdata):
    registry.invoke(userdata, event, x, y, flags)


def trackbar_trampoline(pos, userdata):
    registry.invoke(userdata, pos)


def button_trampoline(state, userdata):
    registry.invoke(userdata, state)


def opengl_draw_trampoline(userdata):
    registry.invoke(userdata)
