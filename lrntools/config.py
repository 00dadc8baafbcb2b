#  Copyright (c) 2026, Apple Inc. All rights reserved.
#
#  Use of this source code is governed by a BSD-3-clause license that can be
#  found in the LICENSE.txt file or at https://opensource.org/licenses/BSD-3-Clause

import math
import numbers
import os
from typing import IO, Any, Dict, Union

import cattrs
import yaml
from attrs import define, field

from lrntools import NormRegion
from lrntools.ops._validation import InvalidArgumentError, is_integral


def _convert_radius(value):
    if not is_integral(value):
        raise InvalidArgumentError(
            f"\"radius\" must be a non-negative integer. Got radius {value!r}."
        )
    return int(value)


def _check_radius(instance, attribute, value):
    if value < 0:
        raise InvalidArgumentError(f"\"radius\" must be a non-negative integer. Got radius {value}.")


def _convert_finite(name):
    def _convert(value):
        if isinstance(value, bool) or not isinstance(value, numbers.Real):
            raise InvalidArgumentError(f"\"{name}\" must be a real number. Got {name} {value!r}.")
        value = float(value)
        if not math.isfinite(value):
            raise InvalidArgumentError(f"\"{name}\" must be finite. Got {name} {value}.")
        return value

    return _convert


def _convert_norm_region(value):
    if isinstance(value, NormRegion):
        return value
    try:
        return NormRegion(value)
    except ValueError:
        valid = [r.value for r in NormRegion]
        raise InvalidArgumentError(
            f"\"norm_region\" must be one of {valid}. Got norm_region {value!r}."
        )


@define(frozen=True)
class LRNConfig:
    """
    Parameters of a local response normalization.

    .. math::
       out_i = \\dfrac{x_i}{\\left ( bias + alpha \\sum_{j \\in window(i)} x_j^2 \\right )^{beta}}

    Parameters
    ----------

    radius: int
        Half-width of the normalization window. The window covers ``2 * radius + 1``
        channels (``"acrossChannels"``) or a ``(2 * radius + 1) x (2 * radius + 1)`` spatial
        patch (``"withinChannel"``), clamped at the tensor boundary.

        * Must be a non-negative integer. A float with an integral value such as ``3.0``
          is accepted and stored as ``3``.
        * Default is ``5``.

    bias: float
        Additive constant of the denominator base. Default is ``1.0``.

    alpha: float
        Scale of the sum of squares. Default is ``1.0``.

    beta: float
        Exponent of the denominator. Default is ``0.5``, that is, a square root.

    norm_region: NormRegion or str
        ``"acrossChannels"`` (default) or ``"withinChannel"``.
    """
    radius: int = field(default=5, converter=_convert_radius, validator=_check_radius)
    bias: float = field(default=1.0, converter=_convert_finite("bias"))
    alpha: float = field(default=1.0, converter=_convert_finite("alpha"))
    beta: float = field(default=0.5, converter=_convert_finite("beta"))
    norm_region: NormRegion = field(default=NormRegion.ACROSS_CHANNELS, converter=_convert_norm_region)

    _VALID_KEYS = ("radius", "bias", "alpha", "beta", "norm_region")

    @staticmethod
    def _get_converter():
        # Raw values are handed to the attrs converters, which own the validation.
        converter = cattrs.Converter(forbid_extra_keys=True, detailed_validation=False)
        for cls_type in (int, float, NormRegion):
            converter.register_structure_hook(cls_type, lambda value, _: value)
        converter.register_unstructure_hook(NormRegion, lambda region: region.value)
        return converter

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> "LRNConfig":
        """
        Construct an ``LRNConfig`` from a dictionary, which may only contain (if any) the
        keys ``"radius"``, ``"bias"``, ``"alpha"``, ``"beta"`` and ``"norm_region"``.
        Missing keys take their default value.
        """
        if config_dict is None:
            config_dict = {}
        if not isinstance(config_dict, dict):
            raise InvalidArgumentError(
                f"LRNConfig must be constructed from a dict. Got {type(config_dict)}."
            )
        for k in config_dict:
            if k not in cls._VALID_KEYS:
                raise InvalidArgumentError(
                    f"Invalid key {k} to construct an LRNConfig object. Supported keys are {cls._VALID_KEYS}."
                )
        return cls._get_converter().structure(config_dict, cls)

    @classmethod
    def from_yaml(cls, yml: Union[IO, str, os.PathLike]) -> "LRNConfig":
        """
        Construct an ``LRNConfig`` from a YAML file path (``str`` or ``os.PathLike``) or file-like object, for instance:

        ::

            radius: 2
            bias: 2.0
            alpha: 1.0e-4
            beta: 0.75
            norm_region: withinChannel
        """
        if isinstance(yml, (str, os.PathLike)):
            with open(yml, "r") as file:
                config_dict = yaml.safe_load(file)
        else:
            config_dict = yaml.safe_load(yml)
        return cls.from_dict(config_dict)

    def to_dict(self) -> Dict[str, Any]:
        return self._get_converter().unstructure(self)
