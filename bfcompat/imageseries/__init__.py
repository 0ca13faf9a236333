"""Handles series of images

This file contains the generic ImageSeries class
and a function for loading. Adapters for particular
data formats are managed in the "load" subpackage;
the "bioformats" adapter serves every format of the
legacy readers.
"""
from .baseclass import ImageSeries, RegionType
from . import load


def open(filename, format=None, **kwargs):
    # find the appropriate adapter based on format specified
    acls = load.Registry.get(format)
    return ImageSeries(acls(filename, **kwargs))


def formats():
    """Return list of registered adapter formats"""
    return load.Registry.formats()
