import logging

from bfcompat.constants import DO_NOT_CONVERT
from bfcompat.format import BioFormatsFormat

from .config import Config

logger = logging.getLogger('bfcompat.config')


class ReadersConfig(Config):
    """candidate reader settings (the "readers" section)"""

    BASEKEY = 'readers'

    def __init__(self, cfg):
        super(ReadersConfig, self).__init__(cfg)

    def get(self, key, **kwargs):
        return self._cfg.get(':'.join([self.BASEKEY, key]), **kwargs)

    @property
    def default(self):
        """reader identifiers before exclusion; None means all registered"""
        return self._as_list('default', None)

    @property
    def exclude(self):
        return self._as_list('exclude', sorted(DO_NOT_CONVERT))

    @property
    def add(self):
        return self._as_list('add', [])

    def _as_list(self, key, default):
        val = self.get(key, default=default)
        if val is None:
            return None
        if isinstance(val, str):
            val = [val]
        if not isinstance(val, (list, tuple)):
            raise RuntimeError(
                '"%s:%s" must be a list of reader names' % (self.BASEKEY, key)
            )
        return [str(v) for v in val]

    def build_format(self):
        """Return a BioFormatsFormat with these reader settings"""
        fmt = BioFormatsFormat(self.default, self.exclude)
        for r in self.add:
            fmt.add_reader(r)
        logger.debug('candidate readers: %s', fmt.readers)
        return fmt
