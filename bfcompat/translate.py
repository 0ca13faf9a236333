"""Translate a legacy reader's series description into ImageMetadata

Legacy readers describe a series with scalar sizes, a dimension order
string such as "XYCZT", and a list of channel sub-dimensions, each either
interleaved within a plane or stored as separate planes. The structured
model wants one ordered list of typed axes instead.

Axes are emitted as follows:

1. interleaved channel dimensions, in declared order, always first;
2. then one axis per code of the (upper-cased) dimension order; at 'C' the
   non-interleaved channel dimensions are inserted in declared order.

If the order has no 'C', non-interleaved channel dimensions are dropped.
"""
from . import pixeltype
from .axes import Axes, calibrate
from .imagemeta import ImageMetadata, MetaTable


def convert_metadata(reader, s):
    """Return the ImageMetadata of series *s* of *reader*

    The reader's series cursor is left at *s*.
    """
    reader.set_series(s)

    axes = []
    _channel_axes(reader, True, axes)

    for code in reader.dimension_order.upper():
        if code == 'X':
            axes.append(calibrate(Axes.X, reader.size_x))
        elif code == 'Y':
            axes.append(calibrate(Axes.Y, reader.size_y))
        elif code == 'Z':
            axes.append(calibrate(Axes.Z, reader.size_z))
        elif code == 'C':
            _channel_axes(reader, False, axes)
        elif code == 'T':
            axes.append(calibrate(Axes.TIME, reader.size_t))

    bpp = reader.bits_per_pixel
    if bpp == 0:
        bpp = pixeltype.bits_per_pixel(reader.pixel_type)

    return ImageMetadata(
        axes=tuple(axes),
        pixel_type=reader.pixel_type,
        bits_per_pixel=bpp,
        plane_count=reader.image_count,
        rgb=reader.rgb,
        thumb_size_x=reader.thumb_size_x,
        thumb_size_y=reader.thumb_size_y,
        order_certain=reader.order_certain,
        little_endian=reader.little_endian,
        interleaved=reader.interleaved,
        indexed=reader.indexed,
        false_color=reader.false_color,
        metadata_complete=reader.metadata_complete,
        thumbnail=reader.thumbnail_series,
        table=MetaTable(reader.series_metadata),
    )


def _channel_axes(reader, interleaved, axes):
    for cdim in reader.channel_dimensions:
        if bool(cdim.interleaved) != interleaved:
            continue
        axes.append(calibrate(Axes.get(cdim.type), cdim.length))
