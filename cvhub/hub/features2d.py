# -*- coding: utf-8 -*-
"""
Feature2D, the common interface of keypoint detectors and descriptor
extractors.
"""

from ..core.error import native_call
from ..core.handle import Algorithm
from ..core.types import input_array, keypoint_vector

__all__ = [
    'Feature2D'
]


class Feature2D(Algorithm):
    """
    Detects keypoints and/or computes their descriptors. Which of the two
    a given algorithm supports is decided by the native implementation;
    calling an unsupported one raises CVNotImplementedError.
    """

    def detect(self, image, mask=None):
        """
        Detects keypoints in an image.

        Args:
            image: image to search
            mask: optional 8-bit mask of the region of interest

        Returns:
            (list) cv2.KeyPoint
        """
        image = input_array(image, 'image')
        if mask is not None:
            mask = input_array(mask, 'mask')
        return list(native_call(self.ptr.detect, image, mask))

    def compute(self, image, keypoints):
        """
        Computes descriptors for a set of keypoints. Keypoints for which
        no descriptor can be computed are removed.

        Returns:
            (tuple) (keypoints, descriptors)
        """
        image = input_array(image, 'image')
        kps, descs = native_call(self.ptr.compute, image,
                                 keypoint_vector(keypoints))
        return list(kps), descs

    def detect_and_compute(self, image, mask=None, keypoints=None,
                           use_provided_keypoints=False):
        # the python binding only exposes keypoints as an output here, the
        # provided-keypoints path of the native call is plain compute()
        if use_provided_keypoints:
            return self.compute(image, keypoints)
        image = input_array(image, 'image')
        if mask is not None:
            mask = input_array(mask, 'mask')
        kps, descs = native_call(self.ptr.detectAndCompute, image, mask)
        return list(kps), descs

    def descriptor_size(self):
        return self._call('descriptorSize')

    def descriptor_type(self):
        return self._call('descriptorType')

    def default_norm(self):
        return self._call('defaultNorm')
