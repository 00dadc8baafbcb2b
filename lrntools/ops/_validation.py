#  Copyright (c) 2026, Apple Inc. All rights reserved.
#
#  Use of this source code is governed by a BSD-3-clause license that can be
#  found in the LICENSE.txt file or at https://opensource.org/licenses/BSD-3-Clause

import math
import numbers

import numpy as np


class InvalidArgumentError(ValueError):
    """
    Raised when an argument of a normalization op violates one of its preconditions.
    """
    pass


def is_integral(value):
    """
    True for python / numpy integers and for floats holding an integral value.
    ``bool`` is rejected even though it subclasses ``int``.
    """
    if isinstance(value, (bool, np.bool_)):
        return False
    if isinstance(value, numbers.Integral):
        return True
    if isinstance(value, numbers.Real):
        return math.isfinite(value) and float(value).is_integer()
    return False


def check_rank(op_name, x, allowed_ranks):
    if x.ndim not in allowed_ranks:
        ranks = " or ".join(str(r) for r in allowed_ranks)
        raise InvalidArgumentError(
            f"Error in {op_name}: x must be rank {ranks} but got rank {x.ndim} (shape {x.shape})."
        )


def check_float_dtype(op_name, x):
    if not np.issubdtype(x.dtype, np.floating):
        raise InvalidArgumentError(
            f"Error in {op_name}: x must have a floating point dtype but got dtype {x.dtype}."
        )
