"""Python Utilities for reading BUFKIT sounding files

BUFKIT files carry model forecast soundings (upper air profiles) along with
a time series of surface values.  This package decodes both sections and
merges them into one record per forecast valid time.
"""

import os
from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pybufkit")
    pkgdir = os.path.dirname(os.path.dirname(os.path.realpath(__file__)))
    if not pkgdir.endswith("site-packages"):
        __version__ += "-dev"
except PackageNotFoundError:
    # package is not installed
    __version__ = "dev"
