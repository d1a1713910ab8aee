# -*- coding: utf-8 -*-
"""
Extra 2D features framework (opencv_contrib).

Non-free and experimental keypoint detectors and descriptor extractors.
Each class owns one native algorithm object created by its ``create``
classmethod; the detection and description math is entirely native.

Classes whose factory is missing from the installed OpenCV build (SURF in
builds without OPENCV_ENABLE_NONFREE, anything when opencv_contrib is not
installed) raise CVNotImplementedError from ``create``.
"""

from ..base import cv2, np
from ..config import Config
from ..core.error import native_call, CVArgumentError
from ..core.handle import Algorithm, native_function
from ..core.types import (input_array, float_vector, int_vector,
                          point2f_vector, keypoint_vector, dmatch_vector,
                          to_size, to_rect, Point2f, Size)
from .features2d import Feature2D

__all__ = [
    'DAISY_NRM_FULL', 'DAISY_NRM_NONE', 'DAISY_NRM_PARTIAL', 'DAISY_NRM_SIFT',
    'FREAK_NB_ORIENPAIRS', 'FREAK_NB_PAIRS', 'FREAK_NB_SCALES',
    'PCTSignatures_GAUSSIAN', 'PCTSignatures_HEURISTIC', 'PCTSignatures_L0_25',
    'PCTSignatures_L0_5', 'PCTSignatures_L1', 'PCTSignatures_L2',
    'PCTSignatures_L2SQUARED', 'PCTSignatures_L5', 'PCTSignatures_L_INFINITY',
    'PCTSignatures_MINUS', 'PCTSignatures_NORMAL', 'PCTSignatures_REGULAR',
    'PCTSignatures_UNIFORM', 'BoostDesc_BGM', 'BoostDesc_BGM_HARD',
    'BoostDesc_BGM_BILINEAR', 'BoostDesc_LBGM', 'BoostDesc_BINBOOST_64',
    'BoostDesc_BINBOOST_128', 'BoostDesc_BINBOOST_256', 'VGG_VGG_120',
    'VGG_VGG_80', 'VGG_VGG_64', 'VGG_VGG_48', 'FAST_TYPE_5_8',
    'FAST_TYPE_7_12', 'FAST_TYPE_9_16', 'AffineFeature2D', 'BoostDesc',
    'BriefDescriptorExtractor', 'DAISY', 'EllipticKeyPoint', 'FREAK',
    'HarrisLaplaceFeatureDetector', 'LATCH', 'LUCID', 'MSDDetector',
    'PCTSignatures', 'PCTSignaturesSQFD', 'SIFT', 'SURF', 'StarDetector',
    'VGG', 'fast_for_point_set', 'match_gms'
]

DAISY_NRM_FULL = 102
DAISY_NRM_NONE = 100
DAISY_NRM_PARTIAL = 101
DAISY_NRM_SIFT = 103

FREAK_NB_ORIENPAIRS = 45
FREAK_NB_PAIRS = 512
FREAK_NB_SCALES = 64

# distance functions
PCTSignatures_L0_25 = 0
PCTSignatures_L0_5 = 1
PCTSignatures_L1 = 2
PCTSignatures_L2 = 3
PCTSignatures_L2SQUARED = 4
PCTSignatures_L5 = 5
PCTSignatures_L_INFINITY = 6
# point distributions
PCTSignatures_UNIFORM = 0
PCTSignatures_REGULAR = 1
PCTSignatures_NORMAL = 2
# similarity functions
PCTSignatures_MINUS = 0
PCTSignatures_GAUSSIAN = 1
PCTSignatures_HEURISTIC = 2

BoostDesc_BGM = 100
BoostDesc_BGM_HARD = 101
BoostDesc_BGM_BILINEAR = 102
BoostDesc_LBGM = 200
BoostDesc_BINBOOST_64 = 300
BoostDesc_BINBOOST_128 = 301
BoostDesc_BINBOOST_256 = 302

VGG_VGG_120 = 100
VGG_VGG_80 = 101
VGG_VGG_64 = 102
VGG_VGG_48 = 103

# cv::FastFeatureDetector types
FAST_TYPE_5_8 = 0
FAST_TYPE_7_12 = 1
FAST_TYPE_9_16 = 2


def _ptr_of(feature, name):
    if not isinstance(feature, Algorithm):
        raise CVArgumentError('Argument {!r} must be a Feature2D handle'
                              .format(name))
    return feature.ptr


class AffineFeature2D(Feature2D):
    """
    Makes a detector/extractor pair affine invariant through an affine
    adaptation of the detected keypoints.
    """
    factory = ('xfeatures2d.AffineFeature2D_create',)

    @classmethod
    def create(cls, keypoint_detector, descriptor_extractor=None):
        """
        Args:
            keypoint_detector (Feature2D): detector to adapt
            descriptor_extractor (Feature2D): extractor, the detector
                                              itself when None
        """
        detector = _ptr_of(keypoint_detector, 'keypoint_detector')
        if descriptor_extractor is None:
            obj = cls._create(detector)
        else:
            extractor = _ptr_of(descriptor_extractor, 'descriptor_extractor')
            obj = cls._create(detector, extractor)
        # the native object refers to both, keep their wrappers alive
        obj._parts = (keypoint_detector, descriptor_extractor)
        return obj

    create_with_extractor = create


class BoostDesc(Feature2D):
    """
    Boosted binary/float descriptors (BGM, LBGM, BinBoost).
    """
    factory = ('xfeatures2d.BoostDesc_create',)

    @classmethod
    def create(cls, desc=BoostDesc_BINBOOST_256, use_scale_orientation=True,
               scale_factor=6.25):
        return cls._create(int(desc), bool(use_scale_orientation),
                           float(scale_factor))

    def set_use_scale_orientation(self, use_scale_orientation):
        self._call('setUseScaleOrientation', bool(use_scale_orientation))

    def get_use_scale_orientation(self):
        return bool(self._call('getUseScaleOrientation'))

    def set_scale_factor(self, scale_factor):
        self._call('setScaleFactor', float(scale_factor))

    def get_scale_factor(self):
        return self._call('getScaleFactor')


class BriefDescriptorExtractor(Feature2D):
    factory = ('xfeatures2d.BriefDescriptorExtractor_create',)

    @classmethod
    def create(cls, bytes=32, use_orientation=False):
        """
        Args:
            bytes (int): descriptor length in bytes, 16, 32 or 64
            use_orientation (bool): sample patterns using keypoint
                                    orientation
        """
        return cls._create(int(bytes), bool(use_orientation))


class DAISY(Feature2D):
    """
    DAISY dense descriptor.
    """
    factory = ('xfeatures2d.DAISY_create',)

    @classmethod
    def create(cls, radius=15.0, q_radius=3, q_theta=8, q_hist=8,
               norm=DAISY_NRM_NONE, h=None, interpolation=True,
               use_orientation=False):
        """
        Args:
            radius (float): radius of the descriptor at the initial scale
            q_radius (int): amount of radial range division quantity
            q_theta (int): amount of angular range division quantity
            q_hist (int): amount of gradient orientations range division
            norm (int): one of DAISY_NRM_*
            h: optional 3x3 homography warping the sampling grid
            interpolation (bool): interpolate the histograms
            use_orientation (bool): use the keypoint orientation
        """
        args = [float(radius), int(q_radius), int(q_theta), int(q_hist),
                int(norm)]
        if h is not None:
            args.append(np.asarray(h, dtype=np.float64).reshape(3, 3))
        else:
            args.append(None)
        args += [bool(interpolation), bool(use_orientation)]
        return cls._create(*args)

    def compute_many(self, images, keypoints):
        """
        Computes descriptors for several images at once.

        Args:
            images (list): images
            keypoints (list): one keypoint list per image

        Returns:
            (tuple) (keypoints per image, descriptors per image)
        """
        if len(images) != len(keypoints):
            raise CVArgumentError('Got {} images but {} keypoint lists'.format(
                len(images), len(keypoints)))
        kps_out, descs_out = [], []
        for image, kps in zip(images, keypoints):
            k, d = self.compute(image, kps)
            kps_out.append(k)
            descs_out.append(d)
        return kps_out, descs_out

    def compute_roi(self, image, roi):
        """
        Computes one descriptor per pixel of the region of interest, in
        row-major order.

        Returns:
            (numpy.ndarray) (roi.height * roi.width, descriptor_size)
        """
        x, y, w, h = to_rect(roi, 'roi')
        ys, xs = np.mgrid[y:y + h, x:x + w]
        grid = [cv2.KeyPoint(float(px), float(py), 1.0)
                for px, py in zip(xs.ravel(), ys.ravel())]
        _, descs = self.compute(image, grid)
        return descs

    def compute_dense(self, image):
        """
        Computes one descriptor for every pixel of the image.
        """
        image = input_array(image, 'image')
        return self.compute_roi(image, (0, 0, image.shape[1], image.shape[0]))

    def get_descriptor(self, y, x, orientation):
        """
        Descriptor of a single point, rotated by ``orientation`` degrees.

        Returns:
            (numpy.ndarray) float32 vector of descriptor_size() values
        """
        return self._call('GetDescriptor', float(y), float(x),
                          int(orientation))

    def get_unnormalized_descriptor(self, y, x, orientation):
        return self._call('GetUnnormalizedDescriptor', float(y), float(x),
                          int(orientation))


class EllipticKeyPoint(object):
    """
    Keypoint of an affine invariant detector: a point with an elliptic
    region described by its axes and angle.

    Attributes:
        pt (Point2f): center
        angle (float): orientation of the ellipse in degrees
        axes (Size): half lengths of the ellipse axes
        size (float): diameter of the meaningful neighbourhood
        si (float): integration scale
    """

    def __init__(self, pt=(0.0, 0.0), angle=0.0, axes=(0, 0), size=0.0,
                 si=0.0):
        self.pt = Point2f(float(pt[0]), float(pt[1]))
        self.angle = float(angle)
        self.axes = Size(float(axes[0]), float(axes[1]))
        self.size = float(size)
        self.si = float(si)

    @classmethod
    def default(cls):
        return cls()

    def __eq__(self, other):
        if not isinstance(other, EllipticKeyPoint):
            return NotImplemented
        return (self.pt, self.angle, self.axes, self.size, self.si) == \
            (other.pt, other.angle, other.axes, other.size, other.si)

    def __repr__(self):
        return 'EllipticKeyPoint(pt={}, angle={}, axes={}, size={}, si={})'\
            .format(tuple(self.pt), self.angle, tuple(self.axes), self.size,
                    self.si)

    def to_keypoint(self):
        return cv2.KeyPoint(self.pt.x, self.pt.y, self.size, self.angle)


class FREAK(Feature2D):
    """
    Fast Retina Keypoint descriptor.
    """
    factory = ('xfeatures2d.FREAK_create',)

    @classmethod
    def create(cls, orientation_normalized=True, scale_normalized=True,
               pattern_scale=22.0, n_octaves=4, selected_pairs=()):
        return cls._create(bool(orientation_normalized),
                           bool(scale_normalized), float(pattern_scale),
                           int(n_octaves),
                           int_vector(selected_pairs, 'selected_pairs')
                           .tolist())


class HarrisLaplaceFeatureDetector(Feature2D):
    factory = ('xfeatures2d.HarrisLaplaceFeatureDetector_create',)

    @classmethod
    def create(cls, num_octaves=6, corn_thresh=0.01, dog_thresh=0.01,
               max_corners=5000, num_layers=4):
        return cls._create(int(num_octaves), float(corn_thresh),
                           float(dog_thresh), int(max_corners),
                           int(num_layers))


class LATCH(Feature2D):
    """
    Learned Arrangements of Three Patch Codes.
    """
    factory = ('xfeatures2d.LATCH_create',)

    @classmethod
    def create(cls, bytes=32, rotation_invariance=True, half_ssd_size=3,
               sigma=2.0):
        return cls._create(int(bytes), bool(rotation_invariance),
                           int(half_ssd_size), float(sigma))


class LUCID(Feature2D):
    factory = ('xfeatures2d.LUCID_create',)

    @classmethod
    def create(cls, lucid_kernel=1, blur_kernel=2):
        """
        Args:
            lucid_kernel (int): kernel for descriptor construction, 1=3x3
            blur_kernel (int): kernel for blurring before construction
        """
        return cls._create(int(lucid_kernel), int(blur_kernel))


class MSDDetector(Feature2D):
    """
    Maximal Self-Dissimilarity interest point detector.
    """
    factory = ('xfeatures2d.MSDDetector_create',)

    @classmethod
    def create(cls, m_patch_radius=3, m_search_area_radius=5, m_nms_radius=5,
               m_nms_scale_radius=0, m_th_saliency=250.0, m_k_nn=4,
               m_scale_factor=1.25, m_n_scales=-1,
               m_compute_orientation=False):
        return cls._create(int(m_patch_radius), int(m_search_area_radius),
                           int(m_nms_radius), int(m_nms_scale_radius),
                           float(m_th_saliency), int(m_k_nn),
                           float(m_scale_factor), int(m_n_scales),
                           bool(m_compute_orientation))


class PCTSignatures(Algorithm):
    """
    Position-Color-Texture signatures: a compact image descriptor made of
    weighted cluster centroids, compared with :class:`PCTSignaturesSQFD`.
    """
    factory = ('xfeatures2d.PCTSignatures_create',)

    @classmethod
    def create(cls, init_sample_count=2000, init_seed_count=400,
               point_distribution=PCTSignatures_UNIFORM):
        """
        Args:
            init_sample_count (int): number of sampling points
            init_seed_count (int): number of initial cluster seeds, at most
                                   init_sample_count
            point_distribution (int): one of UNIFORM, REGULAR, NORMAL
        """
        return cls._create(int(init_sample_count), int(init_seed_count),
                           int(point_distribution))

    @classmethod
    def create_with_points(cls, init_sampling_points, init_seed_count):
        return cls._create(point2f_vector(init_sampling_points,
                                          'init_sampling_points'),
                           int(init_seed_count))

    @classmethod
    def create_with_seeds(cls, init_sampling_points,
                          init_cluster_seed_indexes):
        return cls._create(point2f_vector(init_sampling_points,
                                          'init_sampling_points'),
                           int_vector(init_cluster_seed_indexes,
                                      'init_cluster_seed_indexes').tolist())

    @staticmethod
    def draw_signature(source, signature, radius_to_shorter_side_ratio=1.0 / 8,
                       border_thickness=1):
        """
        Draws a signature over the source image.

        Returns:
            (numpy.ndarray) the drawing
        """
        func = native_function('xfeatures2d.PCTSignatures_drawSignature', cv2)
        return native_call(func, input_array(source, 'source'),
                           input_array(signature, 'signature'), None,
                           float(radius_to_shorter_side_ratio),
                           int(border_thickness))

    @staticmethod
    def generate_init_points(count, point_distribution):
        """
        Generates sampling points in [0, 1) with the given distribution.

        Returns:
            (numpy.ndarray) (count, 2) float32
        """
        with PCTSignatures.create(count, count, point_distribution) as pct:
            return pct.get_sampling_points()

    def compute_signature(self, image):
        """
        Computes the signature of an image.

        Returns:
            (numpy.ndarray) one row per centroid: x, y, L, a, b, contrast,
            entropy, weight
        """
        return self._call('computeSignature', input_array(image, 'image'))

    def compute_signatures(self, images):
        return [self.compute_signature(img) for img in images]

    def get_sample_count(self):
        return self._call('getSampleCount')

    def get_grayscale_bits(self):
        return self._call('getGrayscaleBits')

    def set_grayscale_bits(self, grayscale_bits):
        self._call('setGrayscaleBits', int(grayscale_bits))

    def get_window_radius(self):
        return self._call('getWindowRadius')

    def set_window_radius(self, radius):
        self._call('setWindowRadius', int(radius))

    def get_weight_x(self):
        return self._call('getWeightX')

    def set_weight_x(self, weight):
        self._call('setWeightX', float(weight))

    def get_weight_y(self):
        return self._call('getWeightY')

    def set_weight_y(self, weight):
        self._call('setWeightY', float(weight))

    def get_weight_l(self):
        return self._call('getWeightL')

    def set_weight_l(self, weight):
        self._call('setWeightL', float(weight))

    def get_weight_a(self):
        return self._call('getWeightA')

    def set_weight_a(self, weight):
        self._call('setWeightA', float(weight))

    def get_weight_b(self):
        return self._call('getWeightB')

    def set_weight_b(self, weight):
        self._call('setWeightB', float(weight))

    def get_weight_contrast(self):
        return self._call('getWeightContrast')

    def set_weight_contrast(self, weight):
        self._call('setWeightContrast', float(weight))

    def get_weight_entropy(self):
        return self._call('getWeightEntropy')

    def set_weight_entropy(self, weight):
        self._call('setWeightEntropy', float(weight))

    def get_sampling_points(self):
        return point2f_vector(self._call('getSamplingPoints'))

    def set_weight(self, idx, value):
        """
        Sets the weight of one feature dimension (0 x, 1 y, 2 L, 3 a, 4 b,
        5 contrast, 6 entropy).
        """
        self._call('setWeight', int(idx), float(value))

    def set_weights(self, weights):
        self._call('setWeights', float_vector(weights, 'weights').tolist())

    def set_translation(self, idx, value):
        self._call('setTranslation', int(idx), float(value))

    def set_translations(self, translations):
        self._call('setTranslations',
                   float_vector(translations, 'translations').tolist())

    def set_sampling_points(self, sampling_points):
        self._call('setSamplingPoints',
                   point2f_vector(sampling_points, 'sampling_points'))

    def get_init_seed_indexes(self):
        return int_vector(self._call('getInitSeedIndexes')).tolist()

    def set_init_seed_indexes(self, init_seed_indexes):
        self._call('setInitSeedIndexes',
                   int_vector(init_seed_indexes, 'init_seed_indexes')
                   .tolist())

    def get_init_seed_count(self):
        return self._call('getInitSeedCount')

    def get_iteration_count(self):
        return self._call('getIterationCount')

    def set_iteration_count(self, iteration_count):
        self._call('setIterationCount', int(iteration_count))

    def get_max_clusters_count(self):
        return self._call('getMaxClustersCount')

    def set_max_clusters_count(self, max_clusters_count):
        self._call('setMaxClustersCount', int(max_clusters_count))

    def get_cluster_min_size(self):
        return self._call('getClusterMinSize')

    def set_cluster_min_size(self, cluster_min_size):
        self._call('setClusterMinSize', int(cluster_min_size))

    def get_joining_distance(self):
        return self._call('getJoiningDistance')

    def set_joining_distance(self, joining_distance):
        self._call('setJoiningDistance', float(joining_distance))

    def get_drop_threshold(self):
        return self._call('getDropThreshold')

    def set_drop_threshold(self, drop_threshold):
        self._call('setDropThreshold', float(drop_threshold))

    def get_distance_function(self):
        return self._call('getDistanceFunction')

    def set_distance_function(self, distance_function):
        self._call('setDistanceFunction', int(distance_function))


class PCTSignaturesSQFD(Algorithm):
    """
    Signature Quadratic Form Distance between PCT signatures.
    """
    factory = ('xfeatures2d.PCTSignaturesSQFD_create',)

    @classmethod
    def create(cls, distance_function=PCTSignatures_L2,
               similarity_function=PCTSignatures_HEURISTIC,
               similarity_parameter=1.0):
        return cls._create(int(distance_function), int(similarity_function),
                           float(similarity_parameter))

    def compute_quadratic_form_distance(self, signature0, signature1):
        return self._call('computeQuadraticFormDistance',
                          input_array(signature0, 'signature0'),
                          input_array(signature1, 'signature1'))

    def compute_quadratic_form_distances(self, source_signature,
                                         image_signatures):
        """
        Distances from one signature to each of a list of signatures.

        Returns:
            (list) float distances, in the order of image_signatures
        """
        source = input_array(source_signature, 'source_signature')
        return [self.compute_quadratic_form_distance(source, sig)
                for sig in image_signatures]


class SIFT(Feature2D):
    """
    Scale Invariant Feature Transform. OpenCV 4.4 moved it from contrib to
    the main module; both locations are tried.
    """

    @classmethod
    def _factories(cls):
        main, contrib = 'SIFT_create', 'xfeatures2d.SIFT_create'
        if Config.getboolean('xfeatures2d', 'prefer_main_sift'):
            return main, contrib
        return contrib, main

    @classmethod
    def create(cls, nfeatures=0, n_octave_layers=3, contrast_threshold=0.04,
               edge_threshold=10.0, sigma=1.6):
        return cls._create(int(nfeatures), int(n_octave_layers),
                           float(contrast_threshold), float(edge_threshold),
                           float(sigma))


class SURF(Feature2D):
    """
    Speeded-Up Robust Features. Patented; needs a build with
    OPENCV_ENABLE_NONFREE.
    """
    factory = ('xfeatures2d.SURF_create',)

    @classmethod
    def create(cls, hessian_threshold=100.0, n_octaves=4, n_octave_layers=3,
               extended=False, upright=False):
        return cls._create(float(hessian_threshold), int(n_octaves),
                           int(n_octave_layers), bool(extended), bool(upright))

    def set_hessian_threshold(self, hessian_threshold):
        self._call('setHessianThreshold', float(hessian_threshold))

    def get_hessian_threshold(self):
        return self._call('getHessianThreshold')

    def set_n_octaves(self, n_octaves):
        self._call('setNOctaves', int(n_octaves))

    def get_n_octaves(self):
        return self._call('getNOctaves')

    def set_n_octave_layers(self, n_octave_layers):
        self._call('setNOctaveLayers', int(n_octave_layers))

    def get_n_octave_layers(self):
        return self._call('getNOctaveLayers')

    def set_extended(self, extended):
        self._call('setExtended', bool(extended))

    def get_extended(self):
        return bool(self._call('getExtended'))

    def set_upright(self, upright):
        self._call('setUpright', bool(upright))

    def get_upright(self):
        return bool(self._call('getUpright'))


class StarDetector(Feature2D):
    factory = ('xfeatures2d.StarDetector_create',)

    @classmethod
    def create(cls, max_size=45, response_threshold=30,
               line_threshold_projected=10, line_threshold_binarized=8,
               suppress_nonmax_size=5):
        return cls._create(int(max_size), int(response_threshold),
                           int(line_threshold_projected),
                           int(line_threshold_binarized),
                           int(suppress_nonmax_size))


class VGG(Feature2D):
    """
    VGG descriptors learned with convex optimisation.
    """
    factory = ('xfeatures2d.VGG_create',)

    @classmethod
    def create(cls, desc=VGG_VGG_120, isigma=1.4, img_normalize=True,
               use_scale_orientation=True, scale_factor=6.25,
               dsc_normalize=False):
        return cls._create(int(desc), float(isigma), bool(img_normalize),
                           bool(use_scale_orientation), float(scale_factor),
                           bool(dsc_normalize))

    def set_sigma(self, isigma):
        self._call('setSigma', float(isigma))

    def get_sigma(self):
        return self._call('getSigma')

    def set_use_normalize_image(self, img_normalize):
        self._call('setUseNormalizeImage', bool(img_normalize))

    def get_use_normalize_image(self):
        return bool(self._call('getUseNormalizeImage'))

    def set_use_scale_orientation(self, use_scale_orientation):
        self._call('setUseScaleOrientation', bool(use_scale_orientation))

    def get_use_scale_orientation(self):
        return bool(self._call('getUseScaleOrientation'))

    def set_scale_factor(self, scale_factor):
        self._call('setScaleFactor', float(scale_factor))

    def get_scale_factor(self):
        return self._call('getScaleFactor')

    def set_use_normalize_descriptor(self, dsc_normalize):
        self._call('setUseNormalizeDescriptor', bool(dsc_normalize))

    def get_use_normalize_descriptor(self):
        return bool(self._call('getUseNormalizeDescriptor'))


def fast_for_point_set(image, keypoints, threshold, nonmax_suppression=True,
                       detector_type=FAST_TYPE_9_16):
    """
    Estimates cornerness for a prespecified set of keypoints using the
    FAST algorithm.

    Returns:
        (list) the keypoints with their response filled in
    """
    func = native_function('xfeatures2d.FASTForPointSet', cv2)
    ret = native_call(func, input_array(image, 'image'),
                      keypoint_vector(keypoints), int(threshold),
                      bool(nonmax_suppression), int(detector_type))
    return list(ret)


def match_gms(size1, size2, keypoints1, keypoints2, matches1to2,
              with_rotation=False, with_scale=False, threshold_factor=6.0):
    """
    Grid-based Motion Statistics filtering of putative matches.

    Args:
        size1: (width, height) of the first image
        size2: (width, height) of the second image
        keypoints1 (list): keypoints of the first image
        keypoints2 (list): keypoints of the second image
        matches1to2 (list): putative matches to filter
        with_rotation (bool): take rotation into account
        with_scale (bool): take scale into account
        threshold_factor (float): higher keeps fewer matches

    Returns:
        (list) cv2.DMatch that passed the filter
    """
    func = native_function('xfeatures2d.matchGMS', cv2)
    ret = native_call(func, tuple(to_size(size1, 'size1')),
                      tuple(to_size(size2, 'size2')),
                      keypoint_vector(keypoints1, 'keypoints1'),
                      keypoint_vector(keypoints2, 'keypoints2'),
                      dmatch_vector(matches1to2, 'matches1to2'),
                      bool(with_rotation), bool(with_scale),
                      float(threshold_factor))
    return list(ret)
