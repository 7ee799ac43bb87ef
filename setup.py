#!/usr/bin/env python

"""
    linesetter
    ==========

    linesetter breaks sized boxes into lines and stacks lines into pages.

"""

import re
from pathlib import Path

from setuptools import find_packages, setup

VERSION = re.search(
    r"^VERSION = __version__ = '([^']+)'$",
    (Path(__file__).parent / 'linesetter' / '__init__.py').read_text(),
    re.MULTILINE).group(1)

setup(
    name='linesetter',
    version=VERSION,
    description='Line breaking and inline arrangement of sized boxes',
    long_description=__doc__,
    license='BSD',
    packages=find_packages(include=['linesetter', 'linesetter.*']),
    python_requires='>=3.9',
    install_requires=[
        'tinycss2>=1.0.0',
        'pydyf>=0.11.0',
    ],
    extras_require={
        'test': ['pytest', 'ruff'],
    },
    classifiers=[
        'Programming Language :: Python :: 3',
        'Topic :: Text Processing',
        'Topic :: Printing',
    ],
)
