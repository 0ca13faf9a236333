"""Flat-addressed, multi-series image reader library

Readers describe each series of a source with scalar sizes, a dimension
order string and channel sub-dimensions. `ImageReader` picks the first of a
list of candidate readers that claims a given file.
"""
from .base import FormatReader, CoreMetadata, ChannelDimension
from .errors import FormatReaderError, UnknownFormatError
from .imagereader import ImageReader
from .registry import Registry, reader_id, resolve_reader

# import built-in readers to fill the registry
from . import readers


def default_reader_ids():
    """identifiers of all registered readers, in registration order"""
    return Registry.reader_ids()
