#  Copyright (c) 2026, Apple Inc. All rights reserved.
#
#  Use of this source code is governed by a BSD-3-clause license that can be
#  found in the LICENSE.txt file or at https://opensource.org/licenses/BSD-3-Clause

from ._validation import InvalidArgumentError
from .normalization import apply_config, local_response_norm_4d, local_response_normalization
