"""Candidate legacy readers of the compatibility format"""
import inspect
import logging

from .constants import DO_NOT_CONVERT
from .legacy import default_reader_ids, reader_id

logger = logging.getLogger(__name__)


def build_candidate_set(default_descriptors, exclusion_set):
    """Return the descriptors not named in *exclusion_set*, in order

    Matching is exact string equality.
    """
    excluded = set(exclusion_set)
    candidates = []
    for d in default_descriptors:
        if d in excluded:
            logger.debug('not converting %s', d)
            continue
        candidates.append(d)

    return candidates


def as_descriptor(reader):
    """Descriptor of a reader given as identifier string or class"""
    if inspect.isclass(reader):
        return reader_id(reader)
    return str(reader)


class ReaderRegistry(object):
    """ordered list of candidate reader descriptors

    *default_descriptors* - reader identifiers (default: all registered
                            legacy readers)
    *exclusion_set* - identifiers to leave out
    """

    def __init__(self, default_descriptors=None, exclusion_set=DO_NOT_CONVERT):
        if default_descriptors is None:
            default_descriptors = default_reader_ids()
        self._candidates = build_candidate_set(
            default_descriptors, exclusion_set
        )

    def __len__(self):
        return len(self._candidates)

    def __iter__(self):
        return iter(list(self._candidates))

    def __contains__(self, descriptor):
        return as_descriptor(descriptor) in self._candidates

    @property
    def candidates(self):
        """copy of the candidate descriptors"""
        return list(self._candidates)

    def add(self, descriptor):
        """Append a reader; derived caches must be recomputed by the owner"""
        d = as_descriptor(descriptor)
        logger.debug('adding candidate reader %s', d)
        self._candidates.append(d)
        return d

    pass  # end class
