"""Compatibility format wrapping the legacy reader library

`BioFormatsFormat` exposes the legacy readers through the structured
metadata model: it owns the list of candidate readers, hands out fresh
multiplexing readers, and plays the checker, parser and plane reader roles.
"""
import logging

from .constants import DO_NOT_CONVERT, FORMAT_NAME
from .errors import OpenFailure
from .legacy import FormatReaderError, ImageReader
from .plane import Plane, PlaneRequest, open_plane
from .registry import ReaderRegistry
from .translate import convert_metadata

logger = logging.getLogger(__name__)


class Metadata(object):
    """ImageMetadata of every series of a source, and the reader behind it"""

    def __init__(self, format=None):
        self.format = format
        self.reader = None
        self._images = []

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()

    def __len__(self):
        return len(self._images)

    def __getitem__(self, key):
        return self._images[key]

    def __iter__(self):
        return iter(self._images)

    @property
    def images(self):
        return list(self._images)

    @property
    def source(self):
        return None if self.reader is None else self.reader.current_file

    def add(self, image_meta):
        self._images.append(image_meta)

    def populate_image_metadata(self):
        """Translate every series of the reader, in series order"""
        self._images = []
        for s in range(self.reader.series_count):
            self.add(convert_metadata(self.reader, s))

    def close(self, file_only=False):
        if self.reader is not None:
            self.reader.close(file_only)

    pass  # end class


class BioFormatsFormat(object):
    """format backed by the legacy readers

    *default_readers* - candidate reader identifiers before exclusion
                        (default: all registered legacy readers)
    *exclude* - identifiers the host already reads natively
    """

    format_name = FORMAT_NAME

    def __init__(self, default_readers=None, exclude=DO_NOT_CONVERT):
        self._registry = ReaderRegistry(default_readers, exclude)
        self._suffixes = ()
        self.update_suffixes()

    @property
    def readers(self):
        return self._registry.candidates

    @property
    def suffixes(self):
        return self._suffixes

    def update_suffixes(self):
        """Recompute the recognized suffixes from the candidate readers"""
        self._suffixes = self.create_image_reader().suffixes
        return self._suffixes

    def create_image_reader(self):
        """Return a new ImageReader over the current candidates"""
        return ImageReader(self._registry.candidates)

    def add_reader(self, reader):
        """Append a reader (identifier or class) to the candidates"""
        d = self._registry.add(reader)
        self.update_suffixes()
        logger.info('added reader %s', d)

    # ======================================== checker

    def is_format(self, name, open=None):
        """Whether a candidate reader claims *name*

        With *open* left as None only the name is checked; otherwise it is
        passed on to the readers, which may then read the file header.
        """
        try:
            reader = self.create_image_reader()
            if open is None:
                return reader.is_this_type(name, False)
            return reader.is_this_type(name, open)
        except (FormatReaderError, OSError, ValueError) as e:
            logger.debug('probe of %s failed: %s', name, e)
            return False

    def check_header(self, block):
        """Whether a candidate reader claims a leading block of bytes"""
        try:
            return self.create_image_reader().is_this_type_header(block)
        except (FormatReaderError, OSError, ValueError) as e:
            logger.debug('header probe failed: %s', e)
            return False

    # ======================================== parser

    def parse(self, filename):
        """Open *filename* and return its Metadata"""
        meta = Metadata(self)
        try:
            reader = self.create_image_reader()
            meta.reader = reader
            reader.set_id(filename)
        except (FormatReaderError, OSError) as e:
            raise OpenFailure('could not open "%s"' % filename) from e

        meta.populate_image_metadata()
        logger.info('%s: %d series', filename, len(meta))
        return meta

    # ======================================== reader

    def open_plane(self, meta, image_index, plane_index, plane=None,
                   region=None):
        """Read a plane region of one image of *meta*

        *region* - (x, y, w, h); the whole plane if not given
        *plane* - Plane to fill; allocated to fit the region if not given
        """
        reader = meta.reader
        if region is None:
            im = meta[image_index]
            region = (0, 0, im.size_x, im.size_y)
        if plane is None:
            reader.set_series(image_index)
            plane = Plane(size=reader.plane_size(region[2], region[3]))
        request = PlaneRequest(image_index, plane_index, tuple(region))
        return open_plane(reader, request, plane)

    pass  # end class
