"""Reader for HDF5 files

Every numeric dataset of rank 2 to 5 is a series, in the order h5py visits
them; the dataset's attributes are the series metadata.
"""
import h5py

from ._array import ArrayReader, is_image_array

HDF5_MAGIC = b'\x89HDF\r\n\x1a\n'


class HDF5Reader(ArrayReader):
    """collection of image datasets in an HDF5 file"""

    format = 'HDF5'
    suffixes = ('h5', 'hdf5', 'hdf')
    header_length = len(HDF5_MAGIC)

    def __init__(self):
        super(HDF5Reader, self).__init__()
        self.__h5file = None

    def _load_arrays(self, id):
        self.__h5file = h5py.File(id, 'r')
        found = []

        def visit(name, obj):
            if isinstance(obj, h5py.Dataset) \
                    and is_image_array(obj.shape, obj.dtype):
                meta = {k: v for k, v in obj.attrs.items()}
                meta['path'] = name
                found.append((obj, meta))

        self.__h5file.visititems(visit)
        return found

    def _close_file(self):
        super(HDF5Reader, self)._close_file()
        if self.__h5file is not None:
            self.__h5file.close()
            self.__h5file = None

    def is_this_type_header(self, block):
        return block[:len(HDF5_MAGIC)] == HDF5_MAGIC
