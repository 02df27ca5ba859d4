#!/usr/bin/env python

"""Set up the ethiocal package.

(C) Copyright 2025 Dassault Systemes SE.  All Rights Reserved.

This software is licensed under a BSD 3-Clause License.
See the LICENSE file provided with this software.

This package can be installed using pip as follows:

    pip install ethiocal

To install with the test requirements:

    pip install 'ethiocal[test]'
"""

import os
import re

from setuptools import setup

with open(os.path.join(os.path.dirname(__file__), 'ethiocal', '__init__.py')) as v:
    m = re.search(r"^ *__version__ *= *'(.*?)'", v.read(), re.M)
    if m is None:
        raise RuntimeError("Cannot detect version in ethiocal/__init__.py")
    VERSION = m.group(1)

readme = os.path.join(os.path.dirname(__file__), 'README.rst')

with open(readme, encoding='utf-8') as f:
    long_description = f.read()

setup(
    name='ethiocal',
    version=VERSION,
    description='Ethiopian and Gregorian calendar conversion',
    keywords='ethiopian gregorian calendar julian day converter',
    packages=['ethiocal'],
    license='BSD License',
    long_description=long_description,
    long_description_content_type='text/x-rst',
    python_requires='>=3.9',
    install_requires=['jdcal>=1.4', 'tzlocal>=3.0'],
    extras_require=dict(test='pytest'),
    entry_points={
        'console_scripts': ['ethiocal = ethiocal.cli:main'],
    },
    classifiers=[
        'Development Status :: 5 - Production/Stable',
        'Environment :: Console',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: BSD License',
        'Operating System :: OS Independent',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.9',
        'Natural Language :: Amharic',
        'Topic :: Utilities',
    ],
)
