#!/usr/bin/env python
"""
Setup.py for mathgraph.
Pure Python package, no compiled extensions.
"""

import os
import re

from setuptools import setup, find_packages


def get_version():
    sFilename = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'mathgraph', '__init__.py')
    with open(sFilename) as pFile:
        return re.search(r'^__version__ = "([^"]+)"', pFile.read(), re.M).group(1)


setup(
    name='mathgraph',
    version=get_version(),
    description='Mutable graph data structure with shortest path, connectivity, cycle and SCC algorithms',
    packages=find_packages(exclude=['tests', 'tests.*']),
    python_requires='>=3.8',
    install_requires=[
        'numpy',
    ],
    extras_require={
        'test': ['pytest'],
    },
)
