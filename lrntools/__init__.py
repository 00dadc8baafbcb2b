#  Copyright (c) 2026, Apple Inc. All rights reserved.
#
#  Use of this source code is governed by a BSD-3-clause license that can be
#  found in the LICENSE.txt file or at https://opensource.org/licenses/BSD-3-Clause

"""
lrntools is a small numerical package implementing local response normalization (LRN)
over 3-D ``(H, W, C)`` and 4-D ``(N, H, W, C)`` numpy tensors.

Each value is divided by a power of the sum of squares of its neighbours, where the
neighbourhood is either a window of adjacent channels at the same spatial location
(``"acrossChannels"``) or a square spatial window at the same channel (``"withinChannel"``).

The package provides:

* ``local_response_norm_4d``: the rank-4 compute kernel.
* ``local_response_normalization``: the operator accepting rank 3 or 4 input.
* ``LRNConfig``: an immutable, validated parameter record loadable from dict or YAML.
* ``OperationTape``: an explicit, caller-owned record of executed operations.
"""

from enum import Enum as _Enum
from logging import getLogger as _getLogger

from .version import __version__

_logger = _getLogger(__name__)


class NormRegion(_Enum):
    '''
    The neighbourhood over which the sum of squares is taken.
    '''
    ACROSS_CHANNELS = "acrossChannels"  # Window spans adjacent channels at a fixed (n, h, w)
    WITHIN_CHANNEL = "withinChannel"  # Window spans a (2r+1)x(2r+1) spatial patch at a fixed channel


# expose sub packages as directories
from . import ops
from .config import LRNConfig
from .ops import (
    InvalidArgumentError,
    apply_config,
    local_response_norm_4d,
    local_response_normalization,
)
from .tape import OperationTape, OpRecord
