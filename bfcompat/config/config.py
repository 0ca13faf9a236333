"""Base Config class"""
import copy
import logging

import yaml

logger = logging.getLogger('bfcompat.config')


class Null():
    pass


null = Null()


def merge_dicts(a, b):
    """Return a copy of `a` updated, section by section, with values of `b`

    A None value in `b` (a section whose body is commented out) inherits the
    value from `a` instead of overwriting it.
    """
    res = copy.deepcopy(a)
    for k, v in b.items():
        if isinstance(v, dict):
            base = res.get(k)
            res[k] = merge_dicts(base if isinstance(base, dict) else {}, v)
        elif v is not None or res.get(k) is None:
            res[k] = copy.deepcopy(v)
    return res


class Config(object):
    """nested settings addressed by colon-separated keys ("a:b:c")"""

    _dirty = False

    def __init__(self, cfg):
        self._cfg = cfg

    @property
    def dirty(self):
        return self._dirty

    def _section(self, key, create=False):
        *path, item = key.split(':')
        temp = self._cfg
        for k in path:
            sub = temp.get(k)
            # section may be present but empty
            if sub is None:
                sub = {}
                if create:
                    temp[k] = sub
            temp = sub
        return temp, item

    def get(self, key, default=null):
        temp, item = self._section(key)
        if item in temp:
            return temp[item]
        if default is null:
            raise RuntimeError(
                '%s must be specified in configuration file' % key
                )
        logger.info('%s not specified, defaulting to %s', key, default)
        return default

    def set(self, key, val):
        temp, item = self._section(key, create=True)
        if temp.get(item, null) != val:
            temp[item] = val
            self._dirty = True

    def dump(self, filename):
        with open(filename, 'w') as f:
            yaml.safe_dump(self._cfg, f)
        self._dirty = False
