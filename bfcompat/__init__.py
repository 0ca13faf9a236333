"""Legacy multi-series image readers in a structured metadata model

The compatibility format (`BioFormatsFormat`) selects candidate legacy
readers, translates each series' flat dimensional description into typed
axes (`convert_metadata`) and reads plane regions (`open_plane`).
"""
from .errors import FormatError, OpenFailure, ReadFailure
from .format import BioFormatsFormat, Metadata
from .imagemeta import ImageMetadata, MetaTable
from .plane import Plane, PlaneRequest, open_plane
from .registry import ReaderRegistry, build_candidate_set
from .translate import convert_metadata

__version__ = '0.1.0'
