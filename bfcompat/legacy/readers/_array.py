"""Shared base for readers of n-d arrays

Arrays of rank 2 to 5 are read as (T, C, Z, Y, X), right-aligned, so a
3-d array is a time series of planes and a 4-d array adds channels.
"""
import abc
import sys

import numpy as np

from bfcompat import pixeltype
from ..base import FormatReader, CoreMetadata
from ..errors import FormatReaderError

_MIN_NDIM = 2
_MAX_NDIM = 5


def _little_endian(dt):
    if dt.byteorder == '>':
        return False
    if dt.byteorder == '=':
        return sys.byteorder == 'little'
    return True


def is_image_array(shape, dtype):
    """True for numeric arrays the array readers can describe"""
    return _MIN_NDIM <= len(shape) <= _MAX_NDIM \
        and np.dtype(dtype).kind in 'biuf'


def array_core(shape, dtype, meta=None):
    """CoreMetadata of an array with the given shape and dtype"""
    ndim = len(shape)
    if not _MIN_NDIM <= ndim <= _MAX_NDIM:
        raise FormatReaderError(
            'array must be 2-d to 5-d; you provided ndim=%d' % ndim
        )
    dt = np.dtype(dtype)
    try:
        ptype = pixeltype.pixel_type_from_dtype(dt)
    except ValueError as e:
        raise FormatReaderError(str(e)) from e

    full = (1,) * (_MAX_NDIM - ndim) + tuple(shape)
    nt, nc, nz, ny, nx = full
    return CoreMetadata(
        size_x=nx, size_y=ny, size_z=nz, size_c=nc, size_t=nt,
        dimension_order='XYZCT',
        pixel_type=ptype,
        image_count=nt * nc * nz,
        little_endian=_little_endian(dt),
        series_metadata=dict(meta or {}),
    )


class ArrayReader(FormatReader):
    """reader of sources holding one n-d array per series"""

    def __init__(self):
        super(ArrayReader, self).__init__()
        self._arrays = []

    @abc.abstractmethod
    def _load_arrays(self, id):
        """Return list of (array, metadata dict), one per series"""

    def _init_file(self, id):
        self._arrays = []
        loaded = self._load_arrays(id)
        core = []
        for arr, meta in loaded:
            core.append(array_core(arr.shape, arr.dtype, meta))
            self._arrays.append(arr)

        return core

    def _close_file(self):
        self._arrays = []

    def _array(self):
        if not self._arrays:
            raise FormatReaderError(
                'file is closed: %s' % self.current_file
            )
        return self._arrays[self.series]

    def _plane_index(self, no):
        arr = self._array()
        tcz = np.unravel_index(no, (self.size_t, self.size_c, self.size_z))
        return tuple(int(i) for i in tcz[_MAX_NDIM - arr.ndim:])

    def _open_plane(self, no):
        arr = self._array()
        return np.asarray(arr[self._plane_index(no)])

    def _open_region(self, no, x, y, w, h):
        # slice before reading so that memory maps and datasets stay lazy
        arr = self._array()
        idx = self._plane_index(no) + (slice(y, y + h), slice(x, x + w))
        return np.asarray(arr[idx])
