import logging

from .config import Config
from .readers import ReadersConfig

logger = logging.getLogger('bfcompat.config')


class RootConfig(Config):

    @property
    def readers(self):
        if not hasattr(self, '_readers_config'):
            self._readers_config = ReadersConfig(self)
        return self._readers_config

    @property
    def series(self):
        return int(self.get('series', default=0))

    @series.setter
    def series(self, val):
        self.set('series', val)

    def build_format(self):
        return self.readers.build_format()
