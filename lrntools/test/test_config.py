#  Copyright (c) 2026, Apple Inc. All rights reserved.
#
#  Use of this source code is governed by a BSD-3-clause license that can be
#  found in the LICENSE.txt file or at https://opensource.org/licenses/BSD-3-Clause

import io

import attrs
import numpy as np
import pytest

from lrntools import InvalidArgumentError, LRNConfig, NormRegion


class TestLRNConfig:
    def test_defaults(self):
        config = LRNConfig()
        assert config.radius == 5
        assert config.bias == 1.0
        assert config.alpha == 1.0
        assert config.beta == 0.5
        assert config.norm_region == NormRegion.ACROSS_CHANNELS

    def test_conversions(self):
        config = LRNConfig(radius=np.int32(3), bias=2, alpha=np.float32(0.5), beta=1, norm_region="withinChannel")
        assert config.radius == 3 and type(config.radius) is int
        assert type(config.bias) is float and config.bias == 2.0
        assert config.alpha == 0.5
        assert config.norm_region == NormRegion.WITHIN_CHANNEL

    def test_integral_float_radius(self):
        config = LRNConfig(radius=4.0)
        assert config.radius == 4 and type(config.radius) is int

    def test_immutable(self):
        config = LRNConfig()
        with pytest.raises(attrs.exceptions.FrozenInstanceError):
            config.radius = 2

    def test_equality(self):
        assert LRNConfig(radius=2, norm_region="withinChannel") == LRNConfig(
            radius=2.0, norm_region=NormRegion.WITHIN_CHANNEL
        )

    @pytest.mark.parametrize("radius", [2.5, -3, False, "one"])
    def test_invalid_radius(self, radius):
        with pytest.raises(InvalidArgumentError, match=r"\"radius\" must be a non-negative integer"):
            LRNConfig(radius=radius)

    def test_invalid_region(self):
        with pytest.raises(InvalidArgumentError, match=r"norm_region"):
            LRNConfig(norm_region="diagonal")

    def test_from_dict(self):
        config = LRNConfig.from_dict({"radius": 2, "beta": 0.75, "norm_region": "withinChannel"})
        assert config == LRNConfig(radius=2, beta=0.75, norm_region="withinChannel")

    def test_from_empty_dict(self):
        assert LRNConfig.from_dict({}) == LRNConfig()
        assert LRNConfig.from_dict(None) == LRNConfig()

    def test_from_dict_invalid_key(self):
        with pytest.raises(InvalidArgumentError, match=r"Invalid key depth_radius"):
            LRNConfig.from_dict({"depth_radius": 2})

    def test_from_dict_invalid_value(self):
        with pytest.raises(InvalidArgumentError, match=r"radius"):
            LRNConfig.from_dict({"radius": 1.5})

    def test_from_dict_not_a_dict(self):
        with pytest.raises(InvalidArgumentError, match=r"must be constructed from a dict"):
            LRNConfig.from_dict([("radius", 1)])

    def test_to_dict(self):
        config = LRNConfig(radius=2, bias=2.0, alpha=1e-4, beta=0.75, norm_region="withinChannel")
        config_dict = config.to_dict()
        assert config_dict == {
            "radius": 2,
            "bias": 2.0,
            "alpha": 1e-4,
            "beta": 0.75,
            "norm_region": "withinChannel",
        }
        assert LRNConfig.from_dict(config_dict) == config

    def test_from_yaml_stream(self):
        yml = io.StringIO(
            "radius: 2\n"
            "bias: 2.0\n"
            "alpha: 1.0e-4\n"
            "beta: 0.75\n"
            "norm_region: withinChannel\n"
        )
        config = LRNConfig.from_yaml(yml)
        assert config == LRNConfig(radius=2, bias=2.0, alpha=1e-4, beta=0.75, norm_region="withinChannel")

    def test_from_yaml_file(self, tmp_path):
        path = tmp_path / "lrn.yaml"
        path.write_text("radius: 1\nnorm_region: acrossChannels\n")
        config = LRNConfig.from_yaml(str(path))
        assert config == LRNConfig(radius=1)

    def test_from_yaml_pathlike(self, tmp_path):
        path = tmp_path / "lrn.yaml"
        path.write_text("radius: 3\nbeta: 0.75\nnorm_region: withinChannel\n")
        config = LRNConfig.from_yaml(path)
        assert config == LRNConfig(radius=3, beta=0.75, norm_region="withinChannel")

    def test_from_yaml_invalid_key(self):
        with pytest.raises(InvalidArgumentError, match=r"Invalid key size"):
            LRNConfig.from_yaml(io.StringIO("size: 5\n"))
