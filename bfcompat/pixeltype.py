"""Pixel type constants and helpers

Pixel types are small integers shared by the legacy readers and the
image metadata records.
"""
import numpy as np

INT8 = 0
UINT8 = 1
INT16 = 2
UINT16 = 3
INT32 = 4
UINT32 = 5
FLOAT = 6
DOUBLE = 7
BIT = 8

_names = {
    INT8: 'int8',
    UINT8: 'uint8',
    INT16: 'int16',
    UINT16: 'uint16',
    INT32: 'int32',
    UINT32: 'uint32',
    FLOAT: 'float',
    DOUBLE: 'double',
    BIT: 'bit',
}

_bytes_per_sample = {
    INT8: 1,
    UINT8: 1,
    INT16: 2,
    UINT16: 2,
    INT32: 4,
    UINT32: 4,
    FLOAT: 4,
    DOUBLE: 8,
    BIT: 1,
}

# BIT data is unpacked to one byte per sample
_dtypes = {
    INT8: 'i1',
    UINT8: 'u1',
    INT16: 'i2',
    UINT16: 'u2',
    INT32: 'i4',
    UINT32: 'u4',
    FLOAT: 'f4',
    DOUBLE: 'f8',
    BIT: 'u1',
}


def bytes_per_pixel(pixel_type):
    """Number of bytes of one sample of the given pixel type"""
    try:
        return _bytes_per_sample[pixel_type]
    except KeyError:
        raise ValueError('Unknown pixel type: %s' % pixel_type)


def bits_per_pixel(pixel_type):
    """Number of bits of one sample of the given pixel type"""
    return bytes_per_pixel(pixel_type) * 8


def pixel_type_string(pixel_type):
    try:
        return _names[pixel_type]
    except KeyError:
        raise ValueError('Unknown pixel type: %s' % pixel_type)


def pixel_type_from_string(name):
    for k, v in _names.items():
        if v == name.lower():
            return k
    if name.lower() == 'float32':
        return FLOAT
    if name.lower() == 'float64':
        return DOUBLE
    raise ValueError('Unknown pixel type: %s' % name)


def dtype(pixel_type, little_endian=True):
    """numpy dtype of the given pixel type in the given byte order"""
    try:
        code = _dtypes[pixel_type]
    except KeyError:
        raise ValueError('Unknown pixel type: %s' % pixel_type)
    return np.dtype(('<' if little_endian else '>') + code)


def pixel_type_from_dtype(dt):
    """Pixel type matching a numpy dtype, ignoring byte order"""
    dt = np.dtype(dt)
    if dt == np.bool_:
        return BIT
    for k, v in _dtypes.items():
        if k == BIT:
            continue
        if np.dtype(v).kind == dt.kind and np.dtype(v).itemsize == dt.itemsize:
            return k
    raise ValueError('Unsupported data type: %s' % dt)


def is_signed(pixel_type):
    return pixel_type in (INT8, INT16, INT32, FLOAT, DOUBLE)


def is_floating_point(pixel_type):
    return pixel_type in (FLOAT, DOUBLE)
