"""Reader multiplexing over a list of candidate readers"""
import logging

from .errors import FormatReaderError, UnknownFormatError
from .registry import resolve_reader

logger = logging.getLogger(__name__)


class ImageReader(object):
    """reader that delegates to the first candidate claiming a source

    *reader_ids* - ordered reader identifiers; candidates are probed in this
                   order and the first match wins.

    Anything not defined here (series cursor, per-series properties, plane
    reads, lookup tables) is forwarded to the reader selected by `set_id`.
    """

    def __init__(self, reader_ids):
        self._reader_ids = list(reader_ids)
        self._readers = [resolve_reader(r)() for r in self._reader_ids]
        self._current = None
        self._current_id = None

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()

    def __getattr__(self, name):
        if name.startswith('_'):
            raise AttributeError(name)
        current = self.__dict__.get('_current')
        if current is None:
            raise AttributeError(
                "'%s' has no attribute '%s' before a file is opened"
                % (type(self).__name__, name)
            )
        return getattr(current, name)

    @property
    def reader_ids(self):
        return list(self._reader_ids)

    @property
    def readers(self):
        return list(self._readers)

    @property
    def suffixes(self):
        """sorted union of the candidates' suffixes"""
        sfx = set()
        for r in self._readers:
            sfx.update(r.suffixes)
        return tuple(sorted(sfx))

    @property
    def current_file(self):
        return self._current_id

    def get_reader(self, id=None):
        """Return the candidate that reads *id* (default: the open file)"""
        if id is None or id == self._current_id:
            if self._current is None:
                raise FormatReaderError('no file has been opened')
            return self._current
        for r in self._readers:
            if r.is_this_type(id):
                logger.debug('%s claims %s', type(r).__name__, id)
                return r
        raise UnknownFormatError('Unknown file format: %s' % id)

    def set_id(self, id):
        r = self.get_reader(id)
        if self._current is not None and r is not self._current:
            self._current.close()
            self._current = None
            self._current_id = None
        r.set_id(id)
        self._current = r
        self._current_id = id

    def close(self, file_only=False):
        if self._current is not None:
            self._current.close(file_only)
        if not file_only:
            self._current = None
            self._current_id = None

    def is_this_type(self, name, open=True):
        for r in self._readers:
            if r.is_this_type(name, open):
                return True
        return False

    def is_this_type_header(self, block):
        for r in self._readers:
            if r.is_this_type_header(block):
                return True
        return False

    pass  # end class
