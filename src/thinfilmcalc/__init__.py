"""Thin film thickness calculator with a flat-file material library."""
from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("thinfilmcalc")
except PackageNotFoundError:
    __version__ = "0.0.0-dev"
