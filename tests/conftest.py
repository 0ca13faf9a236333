import pytest

from bfcompat import BioFormatsFormat
from bfcompat.legacy.readers.fake import FakeReader


def fake_name(name='test', **params):
    """Build a FakeReader file name from keyword parameters"""
    tokens = [name]
    for k, v in params.items():
        if isinstance(v, bool):
            v = 'true' if v else 'false'
        tokens.append('%s=%s' % (k, v))
    return '&'.join(tokens) + '.fake'


@pytest.fixture
def fake_format():
    """compatibility format with the synthetic reader enabled"""
    fmt = BioFormatsFormat()
    fmt.add_reader(FakeReader)
    return fmt
