"""Shared constants: luminance weights, kernels, Bayer matrices."""

import numpy as np

# ITU-R BT.601
LUMA_WEIGHTS = np.array([0.299, 0.587, 0.114])

IDENTITY_3X3 = np.array([
    [0.0, 0.0, 0.0],
    [0.0, 1.0, 0.0],
    [0.0, 0.0, 0.0],
])

BLUR_3X3 = np.array([
    [1.0, 2.0, 1.0],
    [2.0, 4.0, 2.0],
    [1.0, 2.0, 1.0],
]) / 16.0

SHARPEN_3X3 = np.array([
    [0.0, -1.0, 0.0],
    [-1.0, 5.0, -1.0],
    [0.0, -1.0, 0.0],
])

EDGE_DETECT_3X3 = np.array([
    [-1.0, -1.0, -1.0],
    [-1.0, 8.0, -1.0],
    [-1.0, -1.0, -1.0],
])

BAYER_2X2 = np.array([
    [0, 2],
    [3, 1],
])

DIFFERENCE_OF_GAUSSIANS_THRESHOLD = 0.03
