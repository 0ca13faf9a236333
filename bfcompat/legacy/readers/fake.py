"""Synthetic image reader

The whole image description lives in the file name, so no file is needed::

    name&sizeX=512&sizeY=256&sizeC=3&dimOrder=XYCZT.fake

Recognized keys:

    sizeX, sizeY, sizeZ, sizeC, sizeT
    pixelType       uint8, int16, float, ...
    bitsPerPixel    declared bit depth (0 = follow pixel type)
    rgb             channels stored per plane
    dimOrder        dimension order string
    interleaved, little, indexed, falseColor, orderCertain,
    metadataComplete, thumbnail   booleans (true/false)
    thumbSizeX, thumbSizeY
    series          number of identical series

Pixel values form a gradient along X: `(x + no) mod 2**bits`.
"""
import os

import numpy as np

from bfcompat import pixeltype
from ..base import FormatReader, CoreMetadata
from ..errors import FormatReaderError

_int_keys = {
    'sizeX': 'size_x',
    'sizeY': 'size_y',
    'sizeZ': 'size_z',
    'sizeC': 'size_c',
    'sizeT': 'size_t',
    'bitsPerPixel': 'bits_per_pixel',
    'thumbSizeX': 'thumb_size_x',
    'thumbSizeY': 'thumb_size_y',
}

_bool_keys = {
    'interleaved': 'interleaved',
    'little': 'little_endian',
    'indexed': 'indexed',
    'falseColor': 'false_color',
    'orderCertain': 'order_certain',
    'metadataComplete': 'metadata_complete',
    'thumbnail': 'thumbnail',
}


def parse_fake_name(name):
    """Return (image name, dict of key/value strings) of a fake file name"""
    base = os.path.basename(name)
    if base.lower().endswith('.fake'):
        base = base[:-len('.fake')]
    tokens = base.split('&')
    params = {}
    for token in tokens[1:]:
        key, sep, value = token.partition('=')
        if not sep:
            raise FormatReaderError('malformed fake parameter: "%s"' % token)
        params[key] = value

    return tokens[0], params


def _to_bool(key, value):
    v = value.lower()
    if v in ('true', '1', 'yes'):
        return True
    if v in ('false', '0', 'no'):
        return False
    raise FormatReaderError('bad boolean for %s: "%s"' % (key, value))


class FakeReader(FormatReader):
    """reader of synthetic images described by their file name"""

    format = 'Simulated data'
    suffixes = ('fake',)

    def _init_file(self, id):
        name, params = parse_fake_name(id)
        c = CoreMetadata(size_x=512, size_y=512)
        rgb = 1
        nseries = 1
        for key, value in params.items():
            try:
                if key in _int_keys:
                    setattr(c, _int_keys[key], int(value))
                elif key in _bool_keys:
                    setattr(c, _bool_keys[key], _to_bool(key, value))
                elif key == 'pixelType':
                    c.pixel_type = pixeltype.pixel_type_from_string(value)
                elif key == 'dimOrder':
                    c.dimension_order = value.upper()
                elif key == 'rgb':
                    rgb = int(value)
                elif key == 'series':
                    nseries = int(value)
                else:
                    raise FormatReaderError('unknown fake parameter: %s' % key)
            except ValueError as e:
                raise FormatReaderError(
                    'bad value for %s: "%s"' % (key, value)) from e

        if rgb < 1 or c.size_c % rgb:
            raise FormatReaderError(
                'sizeC (%d) must be a multiple of rgb (%d)' % (c.size_c, rgb)
            )
        c.rgb = rgb > 1
        c.image_count = c.size_z * c.size_c * c.size_t // rgb

        core = []
        for s in range(nseries):
            sc = CoreMetadata(**vars(c))
            sc.series_metadata = {'name': name, 'series': s}
            core.append(sc)

        return core

    def _open_plane(self, no):
        bits = pixeltype.bits_per_pixel(self.pixel_type)
        if self.pixel_type == pixeltype.BIT:
            bits = 1
        row = np.arange(self.size_x, dtype=np.int64) + no
        if not pixeltype.is_floating_point(self.pixel_type):
            row = row % (2 ** bits)
        plane = np.tile(row, (self.size_y, 1)).astype(
            pixeltype.dtype(self.pixel_type)
        )
        nc = self.rgb_channel_count
        if nc == 1:
            return plane
        if self.interleaved:
            return np.repeat(plane[:, :, np.newaxis], nc, axis=2)
        return np.repeat(plane[np.newaxis, :, :], nc, axis=0)

    def get_8bit_lookup_table(self):
        if not self.indexed or self.pixel_type not in (
                pixeltype.INT8, pixeltype.UINT8):
            return None
        ramp = np.arange(256, dtype=np.uint8)
        return np.tile(ramp, (3, 1))

    def get_16bit_lookup_table(self):
        if not self.indexed or self.pixel_type not in (
                pixeltype.INT16, pixeltype.UINT16):
            return None
        ramp = np.arange(65536, dtype=np.uint16)
        return np.tile(ramp, (3, 1))
