import numpy as np
import pytest

from bfcompat import pixeltype


@pytest.mark.parametrize('ptype, nbytes', [
    (pixeltype.INT8, 1),
    (pixeltype.UINT8, 1),
    (pixeltype.INT16, 2),
    (pixeltype.UINT16, 2),
    (pixeltype.INT32, 4),
    (pixeltype.UINT32, 4),
    (pixeltype.FLOAT, 4),
    (pixeltype.DOUBLE, 8),
    (pixeltype.BIT, 1),
])
def test_bytes_and_bits(ptype, nbytes):
    assert pixeltype.bytes_per_pixel(ptype) == nbytes
    assert pixeltype.bits_per_pixel(ptype) == nbytes * 8


def test_unknown_pixel_type():
    with pytest.raises(ValueError):
        pixeltype.bytes_per_pixel(42)
    with pytest.raises(ValueError):
        pixeltype.pixel_type_from_string('complex')


def test_dtype_byte_order():
    assert pixeltype.dtype(pixeltype.UINT16) == np.dtype('<u2')
    assert pixeltype.dtype(pixeltype.UINT16, little_endian=False) \
        == np.dtype('>u2')
    assert pixeltype.dtype(pixeltype.DOUBLE) == np.dtype('<f8')


def test_from_dtype_and_string():
    assert pixeltype.pixel_type_from_dtype('>i2') == pixeltype.INT16
    assert pixeltype.pixel_type_from_dtype(np.float32) == pixeltype.FLOAT
    assert pixeltype.pixel_type_from_dtype(bool) == pixeltype.BIT
    assert pixeltype.pixel_type_from_string('UINT8') == pixeltype.UINT8
    assert pixeltype.pixel_type_from_string('float64') == pixeltype.DOUBLE
    assert pixeltype.pixel_type_string(pixeltype.INT32) == 'int32'
    with pytest.raises(ValueError):
        pixeltype.pixel_type_from_dtype(np.complex64)
