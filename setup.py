#!/usr/bin/env python
#
# Copyright (c) 2026, Apple Inc. All rights reserved.
#
# Use of this source code is governed by a BSD-3-clause license that can be
# found in the LICENSE.txt file or at https://opensource.org/licenses/BSD-3-Clause

import os
from setuptools import setup, find_packages

# Get the lrntools version string
lrntools_dir = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'lrntools')
version_ns = {}
with open(os.path.join(lrntools_dir, 'version.py')) as f:
    exec(f.read(), version_ns)
__version__ = version_ns['__version__']

README = os.path.join(os.path.dirname(os.path.abspath(__file__)), "README.rst")

with open(README) as f:
    long_description = f.read()

setup(name='lrntools',
      version=__version__,
      description='Local response normalization for NHWC numpy tensors',
      long_description=long_description,
      long_description_content_type='text/x-rst',
      packages=find_packages(include=['lrntools', 'lrntools.*']),
      python_requires='>=3.8',
      install_requires=[
          'numpy >= 1.20',
          'packaging',
          'attrs >= 21.3.0',
          'cattrs >= 22.2.0',
          'pyyaml',
      ],
      extras_require={
          'test': ['pytest', 'torch'],
          'torch': ['torch'],
      },
      classifiers=[
          'Development Status :: 3 - Alpha',
          'Intended Audience :: Developers',
          'Intended Audience :: Science/Research',
          'Operating System :: MacOS :: MacOS X',
          'Operating System :: POSIX :: Linux',
          'Programming Language :: Python :: 3',
          'Topic :: Scientific/Engineering',
          'Topic :: Software Development'
      ],
      license='BSD'
      )
