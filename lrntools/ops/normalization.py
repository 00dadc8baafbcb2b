#  Copyright (c) 2026, Apple Inc. All rights reserved.
#
#  Use of this source code is governed by a BSD-3-clause license that can be
#  found in the LICENSE.txt file or at https://opensource.org/licenses/BSD-3-Clause
import numpy as np

from lrntools import NormRegion
from lrntools import _logger as logger
from lrntools.config import LRNConfig
from lrntools.ops._validation import InvalidArgumentError, check_float_dtype, check_rank

_CHANNEL_AXIS = 3
_SPATIAL_AXES = (1, 2)


def _clamped_window_sum(values, axis, radius):
    """
    Sum of ``values`` over the window ``[i - radius, i + radius]`` along ``axis``, clamped to
    the valid index range. A window larger than the axis covers the whole axis.
    """
    total = values.copy()
    src = np.moveaxis(values, axis, 0)
    dst = np.moveaxis(total, axis, 0)
    for offset in range(1, min(radius, src.shape[0] - 1) + 1):
        dst[offset:] += src[:-offset]
        dst[:-offset] += src[offset:]
    return total


def _lrn_4d(x, config):
    if config.norm_region == NormRegion.ACROSS_CHANNELS:
        extent = x.shape[_CHANNEL_AXIS]
    else:
        extent = max(x.shape[_SPATIAL_AXES[0]], x.shape[_SPATIAL_AXES[1]])
    logger.debug(
        "local_response_norm_4d: shape=%s dtype=%s region=%s radius=%d (effective %d)",
        x.shape, x.dtype, config.norm_region.value, config.radius, min(config.radius, max(extent - 1, 0)),
    )

    dtype = x.dtype.type
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        square = x * x
        if config.norm_region == NormRegion.ACROSS_CHANNELS:
            square_sum = _clamped_window_sum(square, _CHANNEL_AXIS, config.radius)
        else:
            # A clamped square window is separable into a row pass and a column pass.
            square_sum = _clamped_window_sum(square, _SPATIAL_AXES[0], config.radius)
            square_sum = _clamped_window_sum(square_sum, _SPATIAL_AXES[1], config.radius)

        denom = np.power(dtype(config.bias) + dtype(config.alpha) * square_sum, dtype(config.beta))
        return (x / denom).astype(x.dtype, copy=False)


def local_response_norm_4d(x, radius, bias, alpha, beta, norm_region):
    """
    Apply local response normalization to a 4-D ``(N, H, W, C)`` tensor:

    .. math::
       out[n,h,w,c] = \\dfrac{x[n,h,w,c]}{\\left ( bias + alpha \\sum_{window} x^2 \\right )^{beta}}

    For ``"acrossChannels"`` the window is the channels ``[c - radius, c + radius]`` at the same
    ``(n, h, w)``. For ``"withinChannel"`` it is the spatial patch
    ``[h - radius, h + radius] x [w - radius, w + radius]`` at the same ``(n, c)``. Windows are
    clamped at the tensor boundary, never wrapped or zero-padded beyond it.

    Parameters
    ----------
    x: np.ndarray, shape ``(N, H, W, C)``
        * Floating point (fp16, fp32 or fp64). Never modified.
    radius: int
    bias: float
    alpha: float
    beta: float
    norm_region: NormRegion or str

    Returns
    -------
    np.ndarray
        * Newly allocated, same shape and dtype as ``x``.
        * A zero or negative base is not guarded against: the result holds inf or NaN.

    Raises
    ------
    InvalidArgumentError
        * Before any computation, if ``x`` is not rank 4 or not floating point, or if a
          parameter is invalid (see ``LRNConfig``).
    """
    x = np.asarray(x)
    check_rank("local_response_norm_4d", x, (4,))
    check_float_dtype("local_response_norm_4d", x)
    config = LRNConfig(radius=radius, bias=bias, alpha=alpha, beta=beta, norm_region=norm_region)
    return _lrn_4d(x, config)


def apply_config(x, config, tape=None):
    """
    Normalize ``x`` (rank 3 or 4) with the parameters held by an ``LRNConfig``, or by a dict
    accepted by ``LRNConfig.from_dict``. See ``local_response_normalization``.
    """
    if isinstance(config, dict):
        config = LRNConfig.from_dict(config)
    elif not isinstance(config, LRNConfig):
        raise InvalidArgumentError(
            f"Error in local_response_normalization: config must be an LRNConfig or a dict but got {type(config)}."
        )
    x = np.asarray(x)
    if not np.issubdtype(x.dtype, np.floating):
        x = x.astype(np.float32)
    check_rank("local_response_normalization", x, (3, 4))

    reshaped_to_4d = x.ndim == 3
    x_4d = x[np.newaxis, ...] if reshaped_to_4d else x
    res = _lrn_4d(x_4d, config)
    if reshaped_to_4d:
        res = res[0]

    if tape is not None:
        tape.record(
            "local_response_normalization",
            inputs={"x": x},
            attributes=config.to_dict(),
            output=res,
        )
    return res


def local_response_normalization(
    x, radius=5, bias=1.0, alpha=1.0, beta=0.5, norm_region="acrossChannels", tape=None
):
    """
    Normalize the activation of a local neighbourhood across or within channels.

    Parameters
    ----------
    x: array_like, shape ``(H, W, C)`` or ``(N, H, W, C)``
        * Rank 3 input is treated as a batch of one and the result keeps rank 3.
        * Non floating point input is cast to fp32.
    radius: int
        * Number of adjacent channels or spatial locations on each side of the window.
        * Default is ``5``.
    bias: float
        * Default is ``1.0``.
    alpha: float
        * Default is ``1.0``.
    beta: float
        * Default is ``0.5``.
    norm_region: str
        * ``"acrossChannels"`` (default) or ``"withinChannel"``.
    tape: OperationTape (Optional)
        * When provided, the call is appended to it as an ``OpRecord``.

    Returns
    -------
    np.ndarray
        * Same shape as ``x``.
    """
    config = LRNConfig(radius=radius, bias=bias, alpha=alpha, beta=beta, norm_region=norm_region)
    return apply_config(x, config, tape=tape)
