import h5py
import numpy as np
import pytest

from bfcompat import BioFormatsFormat, OpenFailure, ReadFailure
from bfcompat.axes import Axes
from bfcompat.colortable import ColorTable8, ColorTable16
from bfcompat.constants import FORMAT_NAME
from bfcompat.legacy import FormatReaderError, UnknownFormatError
from bfcompat.legacy.readers.npy import NumpyReader
from bfcompat import pixeltype

from .conftest import fake_name


def _axes(im):
    return [(a.type.label, a.length) for a in im.axes]


def test_format_name_and_suffixes():
    fmt = BioFormatsFormat()
    assert fmt.format_name == FORMAT_NAME
    assert 'h5' in fmt.suffixes
    assert 'edf' in fmt.suffixes
    assert 'fake' not in fmt.suffixes
    assert 'npy' not in fmt.suffixes


def test_fresh_reader_per_call():
    fmt = BioFormatsFormat()
    r1 = fmt.create_image_reader()
    r2 = fmt.create_image_reader()
    assert r1 is not r2
    assert r1.reader_ids == r2.reader_ids == fmt.readers


def test_parse_fake(fake_format):
    name = fake_name(sizeX=64, sizeY=32, sizeZ=3, sizeC=2, sizeT=4,
                     dimOrder='XYCZT', series=2)
    with fake_format.parse(name) as meta:
        assert len(meta) == 2
        for s, im in enumerate(meta):
            assert _axes(im) == [
                ('X', 64), ('Y', 32), ('Channel', 2), ('Z', 3), ('Time', 4)
            ]
            assert im.plane_count == 24
            assert im.pixel_type == pixeltype.UINT8
            assert im.bits_per_pixel == 8
            assert im.table['series'] == s
        assert meta.source == name


def test_parse_rgb_interleaved(fake_format):
    name = fake_name(sizeX=16, sizeY=8, sizeC=3, rgb=3, interleaved=True,
                     dimOrder='XYCZT')
    meta = fake_format.parse(name)
    im = meta[0]
    assert _axes(im) == [
        ('Channel', 3), ('X', 16), ('Y', 8), ('Z', 1), ('Time', 1)
    ]
    assert im.rgb
    assert im.interleaved
    assert im.plane_count == 1
    assert im.rgb_channel_count == 3

    plane = fake_format.open_plane(meta, 0, 0)
    arr = plane.as_array(im)
    assert arr.shape == (8, 16, 3)
    np.testing.assert_array_equal(arr[:, :, 1], np.tile(np.arange(16), (8, 1)))


def test_parse_rgb_planar(fake_format):
    name = fake_name(sizeX=16, sizeY=8, sizeC=3, rgb=3, dimOrder='XYCZT')
    meta = fake_format.parse(name)
    im = meta[0]
    assert _axes(im) == [
        ('X', 16), ('Y', 8), ('Channel', 3), ('Z', 1), ('Time', 1)
    ]
    plane = fake_format.open_plane(meta, 0, 0, region=(4, 2, 5, 3))
    arr = plane.as_array(im)
    assert arr.shape == (3, 3, 5)
    np.testing.assert_array_equal(arr[2, 0], np.arange(4, 9))


def test_declared_bits_per_pixel(fake_format):
    meta = fake_format.parse(fake_name(pixelType='uint16', bitsPerPixel=12))
    assert meta[0].bits_per_pixel == 12
    meta = fake_format.parse(fake_name(pixelType='uint16'))
    assert meta[0].bits_per_pixel == 16


def test_open_plane_default_region(fake_format):
    meta = fake_format.parse(
        fake_name(sizeX=6, sizeY=2, sizeT=3, pixelType='int16', little=False)
    )
    plane = fake_format.open_plane(meta, 0, 2)
    assert len(plane) == 6 * 2 * 2
    assert plane.region == (0, 0, 6, 2)
    arr = plane.as_array(meta[0])
    assert arr.dtype == np.dtype('>i2')
    np.testing.assert_array_equal(arr[0], np.arange(2, 8))
    assert plane.color_table is None


def test_indexed_palettes(fake_format):
    meta = fake_format.parse(fake_name(sizeX=4, sizeY=4, indexed=True))
    plane = fake_format.open_plane(meta, 0, 0)
    assert isinstance(plane.color_table, ColorTable8)

    meta = fake_format.parse(
        fake_name(sizeX=4, sizeY=4, indexed=True, pixelType='uint16')
    )
    plane = fake_format.open_plane(meta, 0, 0)
    assert isinstance(plane.color_table, ColorTable16)
    assert plane.color_table.get(0, 1000) == 1000


def test_open_plane_out_of_range(fake_format):
    meta = fake_format.parse(fake_name(sizeX=4, sizeY=4))
    with pytest.raises(ReadFailure) as excinfo:
        fake_format.open_plane(meta, 0, 7)
    assert isinstance(excinfo.value.__cause__, FormatReaderError)


def test_open_failure_unknown_format():
    fmt = BioFormatsFormat()
    with pytest.raises(OpenFailure) as excinfo:
        fmt.parse(fake_name())
    assert isinstance(excinfo.value.__cause__, UnknownFormatError)


def test_open_failure_missing_file(tmp_path):
    fmt = BioFormatsFormat()
    with pytest.raises(OpenFailure) as excinfo:
        fmt.parse(str(tmp_path / 'missing.h5'))
    assert isinstance(excinfo.value.__cause__, OSError)


def test_open_failure_bad_fake_name(fake_format):
    with pytest.raises(OpenFailure) as excinfo:
        fake_format.parse(fake_name(sizeC=4, rgb=3))
    assert isinstance(excinfo.value.__cause__, FormatReaderError)


def test_parse_hdf5(tmp_path):
    fname = str(tmp_path / 'stack.h5')
    a = np.arange(2 * 3 * 4 * 5, dtype=np.uint16).reshape(2, 3, 4, 5)
    b = np.ones((6, 7), dtype=np.float32)
    with h5py.File(fname, 'w') as f:
        d = f.create_dataset('a', data=a)
        d.attrs['exposure'] = 0.25
        f.create_dataset('b', data=b)

    fmt = BioFormatsFormat()
    with fmt.parse(fname) as meta:
        assert len(meta) == 2
        im = meta[0]
        assert _axes(im) == [
            ('X', 5), ('Y', 4), ('Z', 3), ('Channel', 2), ('Time', 1)
        ]
        assert im.table['exposure'] == 0.25
        assert im.table['path'] == 'a'
        assert meta[1].pixel_type == pixeltype.FLOAT
        assert meta[1].axis_length(Axes.TIME) == 1

        # plane 4 is c=1, z=1
        plane = fmt.open_plane(meta, 0, 4, region=(1, 1, 3, 2))
        np.testing.assert_array_equal(plane.as_array(im), a[1, 1, 1:3, 1:4])

        plane = fmt.open_plane(meta, 1, 0)
        np.testing.assert_array_equal(plane.as_array(meta[1]), b)


def test_is_format_by_name():
    fmt = BioFormatsFormat()
    assert fmt.is_format('image.h5')
    assert fmt.is_format('IMAGE.HDF5')
    assert not fmt.is_format('image.fake')
    assert not fmt.is_format('image.npy')
    assert not fmt.is_format('image.h5.txt')


def test_is_format_opens_file(tmp_path):
    fname = str(tmp_path / 'data.bin')
    with h5py.File(fname, 'w') as f:
        f.create_dataset('img', data=np.zeros((4, 4)))

    fmt = BioFormatsFormat()
    assert not fmt.is_format(fname)
    assert not fmt.is_format(fname, open=False)
    assert fmt.is_format(fname, open=True)
    assert not fmt.is_format(str(tmp_path / 'missing.bin'), open=True)


def test_check_header():
    fmt = BioFormatsFormat()
    assert fmt.check_header(b'\x89HDF\r\n\x1a\n' + b'\x00' * 8)
    assert not fmt.check_header(b'\x93NUMPY\x01\x00')
    assert not fmt.check_header(b'')

    fmt.add_reader(NumpyReader)
    assert fmt.check_header(b'\x93NUMPY\x01\x00')


def test_unknown_reader_identifier():
    with pytest.raises(ValueError):
        BioFormatsFormat(['bfcompat.no_such_module.Reader'], exclude=())


def test_added_reader_is_used(tmp_path):
    fname = str(tmp_path / 'data.npy')
    np.save(fname, np.arange(12, dtype=np.int32).reshape(3, 4))

    fmt = BioFormatsFormat()
    with pytest.raises(OpenFailure):
        fmt.parse(fname)

    fmt.add_reader(NumpyReader)
    with fmt.parse(fname) as meta:
        assert _axes(meta[0]) == [
            ('X', 4), ('Y', 3), ('Z', 1), ('Channel', 1), ('Time', 1)
        ]
        assert meta[0].pixel_type == pixeltype.INT32


@pytest.mark.parametrize('params, shape', [
    (dict(sizeC=3, rgb=3), (3, 2, 4)),
    (dict(sizeC=6, rgb=3, dimOrder='XYCZT'), (3, 2, 4)),
    (dict(sizeC=6, rgb=3, interleaved=True), (2, 4, 3)),
    (dict(sizeC=3, interleaved=True), (2, 4)),
    (dict(sizeC=3, sizeT=2, dimOrder='XYTCZ'), (2, 4)),
])
def test_plane_array_holds_every_stored_channel(fake_format, params, shape):
    meta = fake_format.parse(fake_name(sizeX=4, sizeY=2, **params))
    im = meta[0]
    plane = fake_format.open_plane(meta, 0, im.plane_count - 1)
    arr = plane.as_array(im)
    assert arr.shape == shape
    assert arr.size * arr.itemsize == len(plane)
    assert arr.size * arr.itemsize \
        == meta.reader.plane_size(im.size_x, im.size_y)


def test_read_after_file_closed(tmp_path):
    fname = str(tmp_path / 'data.h5')
    a = np.arange(12, dtype=np.uint8).reshape(3, 4)
    with h5py.File(fname, 'w') as f:
        f.create_dataset('img', data=a)

    fmt = BioFormatsFormat()
    meta = fmt.parse(fname)
    meta.close(file_only=True)
    with pytest.raises(ReadFailure) as excinfo:
        fmt.open_plane(meta, 0, 0)
    assert isinstance(excinfo.value.__cause__, FormatReaderError)

    meta.reader.set_id(meta.source)
    np.testing.assert_array_equal(
        fmt.open_plane(meta, 0, 0).as_array(meta[0]), a
    )
    meta.close()
