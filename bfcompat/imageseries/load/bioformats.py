"""Adapter class for any format read by the legacy readers
"""
import numpy as np

from . import ImageSeriesAdapter, RegionType
from bfcompat import pixeltype
from bfcompat.format import BioFormatsFormat


class BioFormatsImageSeriesAdapter(ImageSeriesAdapter):
    """planes of one series of a file read through the compatibility format"""

    format = 'bioformats'

    def __init__(self, fname, **kwargs):
        """Constructor for compatibility format image series

        *fname* - name of the file
        *kwargs* - keyword arguments, choices are:
           series - index of the series to use (default 0)
           bf_format - BioFormatsFormat instance (default: a new one with
                       the default candidate readers)
        """
        self._series = kwargs.pop('series', 0)
        self._format = kwargs.pop('bf_format', None)
        if self._format is None:
            self._format = BioFormatsFormat()
        self._bfmeta = self._format.parse(fname)
        try:
            self._imeta = self._bfmeta[self._series]
        except IndexError:
            self._bfmeta.close()
            raise IndexError(
                'no series %s in "%s" (%d series)'
                % (self._series, fname, len(self._bfmeta))
            )
        self._meta = dict(self._imeta.table)
        self._meta['image_metadata'] = self._imeta

    def close(self):
        self._bfmeta.close()

    def _check_key(self, key):
        nf = len(self)
        if key < -nf or key >= nf:
            raise IndexError('frame out of range: %s' % key)
        return key if key >= 0 else nf + key

    def _read(self, frame_idx, region=None):
        plane = self._format.open_plane(
            self._bfmeta, self._series, self._check_key(frame_idx),
            region=region
        )
        if plane.color_table is not None:
            self._meta['color_table'] = plane.color_table
        return np.array(plane.as_array(self._imeta), dtype=self.dtype)

    def __getitem__(self, key):
        return self._read(key)

    def get_region(self, frame_idx: int, region: RegionType) -> np.ndarray:
        (r0, r1), (c0, c1) = region
        return self._read(frame_idx, (c0, r0, c1 - c0, r1 - r0))

    def __len__(self):
        return self._imeta.plane_count

    @property
    def image_metadata(self):
        """ImageMetadata of the series"""
        return self._imeta

    @property
    def metadata(self):
        """(read-only) Image sequence metadata

        the series metadata table, plus 'image_metadata' and, once an
        indexed plane has been read, 'color_table'
        """
        return self._meta

    @property
    def dtype(self):
        return pixeltype.dtype(self._imeta.pixel_type).newbyteorder('=')

    @property
    def shape(self):
        im = self._imeta
        nc = im.rgb_channel_count
        if nc == 1:
            return (im.size_y, im.size_x)
        if im.interleaved:
            return (im.size_y, im.size_x, nc)
        return (nc, im.size_y, im.size_x)

    pass  # end class
