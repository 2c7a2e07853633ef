#!/usr/bin/env python3

import os
import re

from setuptools import setup, find_packages


def read(*rnames):
    with open(os.path.join(os.path.dirname(__file__), *rnames)) as f:
        return f.read()


# The package itself cannot be imported here because its dependencies might
# not be installed yet.
VERSION_STRING = re.search(
    r'^VERSION_STRING = "([^"]+)"$',
    read('ordtable', 'version', '__init__.py'),
    re.MULTILINE,
).group(1)

setup(
    name="ordtable",
    version=VERSION_STRING,
    packages=find_packages(
        include=['ordtable', 'ordtable.*'],
    ),
    zip_safe=True,

    install_requires=['PyYAML'],
    python_requires='>=3.8',

    extras_require={
        'test': ['pytest'],
    },
    test_suite='tests.unit',

    description='Insertion-order preserving map',
)
