# -*- coding: utf-8 -*-
"""
Ownership of native objects.

A :class:`Handle` wraps exactly one native object and releases it exactly
once: through :meth:`Handle.release`, at the end of a ``with`` block, or
when the wrapper is garbage collected. Handles are not thread safe; share
one between threads only under your own lock.
"""

from ..base import cv2
from ..logger import Logger
from .error import native_call, CVHandleError, CVNotImplementedError
from .types import string_arg

__all__ = [
    'Handle', 'Algorithm', 'resolve_native', 'native_function'
]


def resolve_native(path, root=None):
    """
    Looks up a dotted attribute path, e.g. ``'xfeatures2d.DAISY_create'``,
    on the cv2 module.

    Returns:
        the attribute, or None when the build does not provide it
    """
    obj = cv2 if root is None else root
    for part in path.split('.'):
        obj = getattr(obj, part, None)
        if obj is None:
            return None
    return obj


def native_function(name, root=None):
    """
    Like :func:`resolve_native`, but raises CVNotImplementedError when the
    build lacks the entry point.
    """
    func = resolve_native(name, root)
    if func is None:
        raise CVNotImplementedError(
            'cv2.{} is not available in this OpenCV build'.format(name),
            func=name)
    return func


class Handle(object):
    """
    Base class of every wrapper owning a native object.

    Attributes:
        factory (tuple): dotted cv2 paths of the native constructor, tried
                         in order
    """
    factory = ()

    _ptr = None
    _released = True

    def __init__(self, ptr):
        if ptr is None:
            raise CVHandleError('Cannot wrap a null {} handle'.format(
                self.__class__.__name__))
        self._ptr = ptr
        self._released = False
        Logger.debug('Handle: %s acquired', self.__class__.__name__)

    def __del__(self):
        self.release()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.release()

    def __repr__(self):
        state = 'released' if self._released else 'live'
        return '<{} {}>'.format(self.__class__.__name__, state)

    @classmethod
    def from_raw_ptr(cls, ptr):
        """
        Takes ownership of an existing native object.
        """
        obj = cls.__new__(cls)
        Handle.__init__(obj, ptr)
        return obj

    @classmethod
    def _factories(cls):
        return cls.factory

    @classmethod
    def _native_factory(cls):
        for path in cls._factories():
            func = resolve_native(path)
            if func is not None:
                return func
        raise CVNotImplementedError(
            '{} is not available in this OpenCV build (looked for {})'.format(
                cls.__name__, ', '.join(cls._factories()) or 'nothing'),
            func=cls.__name__
        )

    @classmethod
    def _create(cls, *args):
        func = cls._native_factory()
        return cls.from_raw_ptr(native_call(func, *args))

    @property
    def ptr(self):
        """
        The native object. Raises CVHandleError once released.
        """
        if self._released:
            raise CVHandleError('{} used after release'.format(
                self.__class__.__name__), func=self.__class__.__name__)
        return self._ptr

    @property
    def released(self):
        return self._released

    def _release(self, ptr):
        """
        Frees the native object. Subclasses hook in here, dropping the
        last reference is what finally runs the native destructor.
        """

    def release(self):
        """
        Release the native object. Calling it again is a no-op.
        """
        if self._released:
            return
        ptr, self._ptr = self._ptr, None
        self._released = True
        try:
            self._release(ptr)
        finally:
            del ptr
            Logger.debug('Handle: %s released', self.__class__.__name__)

    def _call(self, method, *args):
        func = getattr(self.ptr, method, None)
        if func is None:
            raise CVNotImplementedError(
                '{}.{} is not available in this OpenCV build'.format(
                    self.__class__.__name__, method), func=method)
        return native_call(func, *args)


class Algorithm(Handle):
    """
    Wrapper of cv::Algorithm, the base of every detector and extractor.
    """

    def _release(self, ptr):
        clear = getattr(ptr, 'clear', None)
        if clear is not None:
            native_call(clear)

    def clear(self):
        self._call('clear')

    def empty(self):
        return bool(self._call('empty'))

    def get_default_name(self):
        return self._call('getDefaultName')

    def save(self, filename):
        filename = string_arg('filename', filename)
        self._call('save', filename)

    def write(self, filename):
        """
        Writes the parameters through a FileStorage opened for writing.
        """
        filename = string_arg('filename', filename)
        fs = native_call(cv2.FileStorage, filename, cv2.FILE_STORAGE_WRITE)
        try:
            self._call('write', fs)
        finally:
            fs.release()

    def read(self, filename):
        """
        Reads the parameters back from a FileStorage file.
        """
        filename = string_arg('filename', filename)
        fs = native_call(cv2.FileStorage, filename, cv2.FILE_STORAGE_READ)
        try:
            self._call('read', fs.getFirstTopLevelNode())
        finally:
            fs.release()
