"""Constants of the compatibility format"""

FORMAT_NAME = 'Bio-Formats Compatibility Format'

# legacy readers whose formats the host image-series framework already
# reads natively; they are left out of the candidate readers by default
DO_NOT_CONVERT = frozenset([
    'bfcompat.legacy.readers.fake.FakeReader',
    'bfcompat.legacy.readers.npy.NumpyReader',
])
