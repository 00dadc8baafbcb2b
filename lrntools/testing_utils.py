#  Copyright (c) 2026, Apple Inc. All rights reserved.
#
#  Use of this source code is governed by a BSD-3-clause license that can be
#  found in the LICENSE.txt file or at https://opensource.org/licenses/BSD-3-Clause

from itertools import product

import numpy as np

from lrntools import NormRegion


def random_gen(
    shape,
    rand_min=0.0,
    rand_max=1.0,
    dtype=np.float32,
    seed=None,
):
    """
    This helper function generates a random array of shape `shape`
    The range of generated numbers will be between [rand_min, rand_max).
    Default data type is np.float32.
    """
    rng = np.random.default_rng(seed)
    ret = (rand_max - rand_min) * rng.random(size=shape) + rand_min
    return ret.astype(dtype)


def lrn_reference(x, radius, bias, alpha, beta, norm_region):
    """
    Element by element local response normalization in NHWC layout, computed in float64.
    Used as an oracle for the vectorized kernel.
    """
    norm_region = NormRegion(norm_region)
    x64 = np.asarray(x, dtype=np.float64)
    n_size, h_size, w_size, c_size = x64.shape
    out = np.zeros(x64.shape, dtype=np.float64)
    for n, h, w, c in product(range(n_size), range(h_size), range(w_size), range(c_size)):
        if norm_region == NormRegion.ACROSS_CHANNELS:
            c_start = max(0, c - radius)
            c_end = min(c_size - 1, c + radius) + 1
            window = x64[n, h, w, c_start:c_end]
        else:
            h_start, h_end = max(0, h - radius), min(h_size - 1, h + radius) + 1
            w_start, w_end = max(0, w - radius), min(w_size - 1, w + radius) + 1
            window = x64[n, h_start:h_end, w_start:w_end, c]
        sqr_sum = np.sum(window * window)
        out[n, h, w, c] = x64[n, h, w, c] / np.power(bias + alpha * sqr_sum, beta)
    return out.astype(np.asarray(x).dtype)
