"""Reading plane regions through a legacy reader"""
from collections import namedtuple

import numpy as np

from . import pixeltype
from .colortable import ColorTable8, ColorTable16
from .errors import ReadFailure
from .legacy import FormatReaderError

# region is (x, y, w, h)
PlaneRequest = namedtuple('PlaneRequest', ['series', 'plane', 'region'])


class Plane(object):
    """bytes of one plane region, plus its color table if indexed

    *buf* - writable buffer receiving the samples; allocated from *size*
            when not given
    """

    def __init__(self, buf=None, size=0, region=None):
        self.bytes = bytearray(size) if buf is None else buf
        self.region = region
        self.color_table = None

    def __len__(self):
        return len(memoryview(self.bytes).cast('B'))

    def as_array(self, meta):
        """View the bytes as a numpy array laid out per *meta*

        *meta* - ImageMetadata of the series the plane belongs to

        Interleaved planes come back as (h, w, c), other multi-channel
        planes as (c, h, w) and single-channel planes as (h, w).
        """
        w, h = self.region[2:4] if self.region else (meta.size_x, meta.size_y)
        dt = pixeltype.dtype(meta.pixel_type, meta.little_endian)
        nc = meta.rgb_channel_count
        data = np.frombuffer(self.bytes, dtype=dt, count=w * h * nc)
        if nc == 1:
            return data.reshape(h, w)
        if meta.interleaved:
            return data.reshape(h, w, nc)
        return data.reshape(nc, h, w)


def open_plane(reader, request, plane):
    """Read the requested plane region of *reader* into *plane*

    *reader* - legacy reader with an open file; its series cursor is set to
               `request.series` and stays there after the call
    *request* - PlaneRequest
    *plane* - Plane whose buffer receives the samples

    An 8-bit palette is attached when the reader has one, otherwise a 16-bit
    one when it has that. Reader failures are raised as ReadFailure.
    """
    reader.set_series(request.series)
    x, y, w, h = request.region
    try:
        reader.open_bytes(request.plane, plane.bytes, x, y, w, h)

        lut = reader.get_8bit_lookup_table()
        if lut is not None:
            plane.color_table = ColorTable8(lut)
        else:
            lut = reader.get_16bit_lookup_table()
            if lut is not None:
                plane.color_table = ColorTable16(lut)
    except (FormatReaderError, OSError) as e:
        raise ReadFailure(
            'failed to read plane %s of series %s' % (
                request.plane, request.series)
        ) from e

    plane.region = tuple(request.region)
    return plane
