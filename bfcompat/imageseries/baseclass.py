"""Base class for imageseries
"""
import collections.abc

import numpy as np

# region of a frame: ((row0, row1), (col0, col1))
RegionType = tuple[tuple[int, int], tuple[int, int]]


class ImageSeriesABC(collections.abc.Sequence):
    pass


class ImageSeries(ImageSeriesABC):
    """collection of images

    Basic sequence class with additional properties for image shape and
    metadata (possibly None).
    """

    def __init__(self, adapter):
        """Build FrameSeries from adapter instance

        *adapter* - object instance based on abstract Sequence class with
        properties for image shape, data type and metadata.
        """
        self._adapter = adapter

    def __getitem__(self, key):
        return self._adapter[key]

    def __len__(self):
        return len(self._adapter)

    def __iter__(self):
        return iter(self._adapter)

    def get_region(self, frame_idx: int, region: RegionType) -> np.ndarray:
        return self._adapter.get_region(frame_idx, region)

    def close(self):
        """Release the adapter's source, if it holds one"""
        close = getattr(self._adapter, 'close', None)
        if close is not None:
            close()

    @property
    def adapter(self):
        return self._adapter

    @property
    def dtype(self):
        return self._adapter.dtype

    @property
    def shape(self):
        return self._adapter.shape

    @property
    def metadata(self):
        return self._adapter.metadata

    pass  # end class
