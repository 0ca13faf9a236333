"""Color tables attached to indexed planes"""
import numpy as np


class ColorTable(object):
    """lookup table mapping sample values to display colors

    *values* - array (channels, entries) of palette values
    """

    bits = None

    def __init__(self, values):
        self._values = np.asarray(values, dtype=self._dtype)
        if self._values.ndim != 2:
            raise ValueError(
                'color table must be 2-d; you provided ndim=%d'
                % self._values.ndim
            )

    @property
    def values(self):
        return self._values

    @property
    def component_count(self):
        """number of color components (rows)"""
        return self._values.shape[0]

    @property
    def length(self):
        """number of entries per component"""
        return self._values.shape[1]

    def get(self, comp, index):
        return int(self._values[comp, index])

    def lookup(self, data):
        """Map an array of indices to (…, components) colors"""
        return np.moveaxis(self._values[:, np.asarray(data)], 0, -1)

    def __eq__(self, other):
        if not isinstance(other, ColorTable) or self.bits != other.bits:
            return NotImplemented
        return np.array_equal(self._values, other._values)

    def __repr__(self):
        return '%s(components=%d, length=%d)' % (
            type(self).__name__, self.component_count, self.length)


class ColorTable8(ColorTable):
    """8-bit palette"""
    bits = 8
    _dtype = np.uint8


class ColorTable16(ColorTable):
    """16-bit palette"""
    bits = 16
    _dtype = np.uint16
