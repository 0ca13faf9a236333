"""Reader for numpy .npy files"""
import numpy as np

from ._array import ArrayReader
from ..errors import FormatReaderError

NPY_MAGIC = b'\x93NUMPY'


class NumpyReader(ArrayReader):
    """single-series reader of a memory-mapped .npy array"""

    format = 'NumPy array'
    suffixes = ('npy',)
    header_length = len(NPY_MAGIC)

    def _load_arrays(self, id):
        try:
            arr = np.load(id, mmap_mode='r', allow_pickle=False)
        except ValueError as e:
            raise FormatReaderError('not a .npy array: %s' % id) from e
        return [(arr, {'shape': arr.shape, 'dtype': str(arr.dtype)})]

    def is_this_type_header(self, block):
        return block[:len(NPY_MAGIC)] == NPY_MAGIC
