import abc
import logging

import numpy as np

from ..baseclass import ImageSeriesABC, RegionType

logger = logging.getLogger(__name__)


class Registry(object):
    """Registry for imageseries adapters, keyed by format name"""
    adapter_registry = dict()

    @classmethod
    def register(cls, acls):
        if acls.format is None:
            return
        if acls.format in cls.adapter_registry:
            logger.debug('adapter %s replaces format "%s"',
                         acls.__name__, acls.format)
        cls.adapter_registry[acls.format] = acls

    @classmethod
    def get(cls, format):
        try:
            return cls.adapter_registry[format]
        except KeyError:
            raise KeyError(
                'unknown imageseries format "%s"; known formats: %s'
                % (format, ', '.join(sorted(str(k) for k in cls.formats())))
            )

    @classmethod
    def formats(cls):
        return list(cls.adapter_registry.keys())

    pass  # end class


# Metaclass for adapter registry

class _RegisterAdapterClass(abc.ABCMeta):

    def __init__(cls, name, bases, attrs):
        abc.ABCMeta.__init__(cls, name, bases, attrs)
        Registry.register(cls)


class ImageSeriesAdapter(ImageSeriesABC, metaclass=_RegisterAdapterClass):

    format = None

    def get_region(self, frame_idx: int, region: RegionType) -> np.ndarray:
        (r0, r1), (c0, c1) = region
        return self[frame_idx][r0:r1, c0:c1]

    def __iter__(self):
        for i in range(len(self)):
            yield self[i]

# import all adapter modules

from . import array, bioformats
