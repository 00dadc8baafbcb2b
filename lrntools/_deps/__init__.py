#  Copyright (c) 2026, Apple Inc. All rights reserved.
#
#  Use of this source code is governed by a BSD-3-clause license that can be
#  found in the LICENSE.txt file or at https://opensource.org/licenses/BSD-3-Clause

"""
List of all external dependancies for this package. Imported as
optional includes
"""
import re as _re

from packaging import version

from lrntools import _logger as logger


def _get_version(version_str):
    # matching 1.6.1, and 1.6.1rc, 1.6.1.dev
    version_regex = r"^\d+\.\d+\.\d+"
    match = _re.search(version_regex, str(version_str))
    return version.parse(match.group(0)) if match else version.parse("0.0.0")


def _warn_if_above_max_supported_version(package_name, package_version, max_supported_version):
    if _get_version(package_version) > version.parse(max_supported_version):
        logger.warning(
            "%s version %s has not been tested with lrntools. You may run into unexpected errors. "
            "%s %s is the most recent version that has been tested."
            % (package_name, package_version, package_name, max_supported_version)
        )


# ---------------------------------------------------------------------------------------
_HAS_TORCH = True
_TORCH_VERSION = None
_TORCH_MAX_VERSION = "2.9.0"
try:
    import torch

    _TORCH_VERSION = torch.__version__
    _warn_if_above_max_supported_version("Torch", _TORCH_VERSION, _TORCH_MAX_VERSION)
except ImportError:
    _HAS_TORCH = False
MSG_TORCH_NOT_FOUND = "PyTorch not found."
