"""Base class for legacy readers

A legacy reader describes every series of a source with a flat
`CoreMetadata` record and keeps a single mutable series cursor: all
per-series properties and plane reads refer to the series last selected
with `set_id` / `set_series`.
"""
import abc
import logging
import os
from collections import namedtuple
from dataclasses import dataclass, field

import numpy as np

from bfcompat import pixeltype
from .errors import FormatReaderError
from .registry import Registry

logger = logging.getLogger(__name__)

THUMBNAIL_DIMENSION = 128

# one channel sub-dimension of a series
ChannelDimension = namedtuple(
    'ChannelDimension', ['length', 'type', 'interleaved']
)

CHANNEL = 'Channel'

# the probe methods take an "open" flag, which hides the builtin
open_file = open


@dataclass
class CoreMetadata:
    size_x: int = 0
    size_y: int = 0
    size_z: int = 1
    size_c: int = 1
    size_t: int = 1
    dimension_order: str = 'XYZCT'
    pixel_type: int = pixeltype.UINT8
    bits_per_pixel: int = 0
    '''0 means the bit depth follows from the pixel type'''
    image_count: int = 0
    rgb: bool = False
    little_endian: bool = True
    interleaved: bool = False
    indexed: bool = False
    false_color: bool = False
    order_certain: bool = True
    metadata_complete: bool = True
    thumbnail: bool = False
    thumb_size_x: int = 0
    thumb_size_y: int = 0
    channel_dimensions: list = None
    '''channel sub-dimensions; None means one dimension of size_c'''
    series_metadata: dict = field(default_factory=dict)


def check_suffix(name, suffixes):
    """True if *name* ends with one of the (dotless) *suffixes*"""
    lname = name.lower()
    return any(lname.endswith('.' + s.lower()) for s in suffixes)


# Metaclass for reader registry

class _RegisterReaderClass(abc.ABCMeta):

    def __init__(cls, name, bases, attrs):
        abc.ABCMeta.__init__(cls, name, bases, attrs)
        Registry.register(cls)


class FormatReader(metaclass=_RegisterReaderClass):
    """flat-addressed, multi-series image reader"""

    format = None
    suffixes = ()
    header_length = 0

    def __init__(self):
        self._id = None
        self._file_open = False
        self._series = 0
        self._core = []

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()

    # ======================================== source

    @abc.abstractmethod
    def _init_file(self, id):
        """Open *id* and return the list of CoreMetadata, one per series"""

    @abc.abstractmethod
    def _open_plane(self, no):
        """Return plane *no* of the current series

        Layout is (y, x) for single-channel planes, (y, x, c) for interleaved
        and (c, y, x) for non-interleaved multi-channel planes.
        """

    def _close_file(self):
        pass

    @property
    def current_file(self):
        return self._id

    def set_id(self, id):
        """Open a source; the series cursor is reset to 0

        Calling again with the open source does nothing; a source whose file
        was closed with `close(file_only=True)` is opened again.
        """
        if id == self._id and self._file_open:
            return
        self.close()
        logger.debug('%s initializing %s', type(self).__name__, id)
        core = self._init_file(id)
        if not core:
            self._close_file()
            raise FormatReaderError('no images found in "%s"' % id)
        self._core = list(core)
        self._id = id
        self._file_open = True
        self._series = 0

    def close(self, file_only=False):
        self._close_file()
        self._file_open = False
        if not file_only:
            self._id = None
            self._core = []
            self._series = 0

    # ======================================== series cursor

    @property
    def series_count(self):
        return len(self._core)

    @property
    def series(self):
        return self._series

    def set_series(self, series):
        """Select the series that subsequent calls refer to"""
        if series < 0 or series >= self.series_count:
            raise IndexError('Invalid series: %s' % series)
        self._series = series

    @property
    def core(self):
        if not self._core:
            raise FormatReaderError('no file has been opened')
        return self._core[self._series]

    # ======================================== per-series properties

    @property
    def size_x(self):
        return self.core.size_x

    @property
    def size_y(self):
        return self.core.size_y

    @property
    def size_z(self):
        return self.core.size_z

    @property
    def size_c(self):
        return self.core.size_c

    @property
    def size_t(self):
        return self.core.size_t

    @property
    def dimension_order(self):
        return self.core.dimension_order

    @property
    def pixel_type(self):
        return self.core.pixel_type

    @property
    def bits_per_pixel(self):
        return self.core.bits_per_pixel

    @property
    def image_count(self):
        return self.core.image_count

    @property
    def rgb(self):
        return self.core.rgb

    @property
    def little_endian(self):
        return self.core.little_endian

    @property
    def interleaved(self):
        return self.core.interleaved

    @property
    def indexed(self):
        return self.core.indexed

    @property
    def false_color(self):
        return self.core.false_color

    @property
    def order_certain(self):
        return self.core.order_certain

    @property
    def metadata_complete(self):
        return self.core.metadata_complete

    @property
    def thumbnail_series(self):
        return self.core.thumbnail

    @property
    def series_metadata(self):
        return self.core.series_metadata

    @property
    def channel_dimensions(self):
        c = self.core
        if c.channel_dimensions is None:
            return [ChannelDimension(c.size_c, CHANNEL, c.interleaved)]
        return list(c.channel_dimensions)

    @property
    def channel_dim_lengths(self):
        return [d.length for d in self.channel_dimensions]

    @property
    def channel_dim_types(self):
        return [d.type for d in self.channel_dimensions]

    def is_interleaved(self, sub_c=None):
        if sub_c is None:
            return self.interleaved
        return self.channel_dimensions[sub_c].interleaved

    @property
    def effective_size_c(self):
        """number of separately stored channel planes"""
        zt = self.size_z * self.size_t
        if zt == 0:
            return 0
        return self.image_count // zt

    @property
    def rgb_channel_count(self):
        """number of channels stored within each plane"""
        if not self.rgb:
            return 1
        effc = self.effective_size_c
        return self.size_c // effc if effc else self.size_c

    @property
    def thumb_size_x(self):
        c = self.core
        if c.thumb_size_x:
            return c.thumb_size_x
        sx, sy = c.size_x, c.size_y
        if sx < THUMBNAIL_DIMENSION and sy < THUMBNAIL_DIMENSION:
            tx = sx
        elif sx > sy:
            tx = THUMBNAIL_DIMENSION
        elif sy > 0:
            tx = sx * THUMBNAIL_DIMENSION // sy
        else:
            tx = 0
        return max(tx, 1)

    @property
    def thumb_size_y(self):
        c = self.core
        if c.thumb_size_y:
            return c.thumb_size_y
        sx, sy = c.size_x, c.size_y
        if sx < THUMBNAIL_DIMENSION and sy < THUMBNAIL_DIMENSION:
            ty = sy
        elif sy > sx:
            ty = THUMBNAIL_DIMENSION
        elif sx > 0:
            ty = sy * THUMBNAIL_DIMENSION // sx
        else:
            ty = 0
        return max(ty, 1)

    # ======================================== pixels

    def get_8bit_lookup_table(self):
        """8-bit palette (channels, 256) of the current series, or None"""
        return None

    def get_16bit_lookup_table(self):
        """16-bit palette (channels, 65536) of the current series, or None"""
        return None

    def plane_size(self, w, h):
        """bytes needed to hold a (w, h) region of one plane"""
        return (w * h * self.rgb_channel_count
                * pixeltype.bytes_per_pixel(self.pixel_type))

    def open_bytes(self, no, buf, x=0, y=0, w=None, h=None):
        """Read a region of plane *no* into the writable buffer *buf*

        Samples are written in the byte order of the current series; the
        buffer must hold at least `plane_size(w, h)` bytes.
        """
        w = self.size_x - x if w is None else w
        h = self.size_y - y if h is None else h
        mv = memoryview(buf).cast('B')
        self._check_plane_parameters(no, mv.nbytes, x, y, w, h)

        data = self._open_region(no, x, y, w, h)
        dt = pixeltype.dtype(self.pixel_type, self.little_endian)
        raw = np.ascontiguousarray(data, dtype=dt).tobytes()
        mv[:len(raw)] = raw

        return buf

    def _open_region(self, no, x, y, w, h):
        plane = self._open_plane(no)
        if self.rgb_channel_count == 1 or self.interleaved:
            return plane[y:y + h, x:x + w]
        return plane[:, y:y + h, x:x + w]

    def _check_plane_parameters(self, no, nbytes, x, y, w, h):
        if no < 0 or no >= self.image_count:
            raise FormatReaderError(
                'plane out of range: %s (series has %d planes)'
                % (no, self.image_count)
            )
        if x < 0 or y < 0 or w <= 0 or h <= 0 \
                or x + w > self.size_x or y + h > self.size_y:
            raise FormatReaderError(
                'invalid region: x=%s y=%s w=%s h=%s (plane is %dx%d)'
                % (x, y, w, h, self.size_x, self.size_y)
            )
        needed = self.plane_size(w, h)
        if nbytes < needed:
            raise FormatReaderError(
                'buffer too small: got %d bytes, expecting %d'
                % (nbytes, needed)
            )

    # ======================================== probing

    def is_this_type(self, name, open=True):
        """Whether this reader can read *name*

        The file suffix is checked first; when *open* is set, the file's
        leading `header_length` bytes are passed to `is_this_type_header`.
        """
        if check_suffix(name, self.suffixes):
            return True
        if not open or self.header_length <= 0 or not os.path.isfile(name):
            return False
        try:
            with open_file(name, 'rb') as f:
                block = f.read(self.header_length)
        except OSError as e:
            logger.debug('%s could not read header of %s: %s',
                         type(self).__name__, name, e)
            return False
        return self.is_this_type_header(block)

    def is_this_type_header(self, block):
        """Whether a leading block of bytes identifies this format"""
        return False

    def __str__(self):
        return '%s(%s)' % (type(self).__name__, self._id)

