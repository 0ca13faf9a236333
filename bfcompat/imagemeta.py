"""Structured image metadata

One `ImageMetadata` record describes one series (image) of a source: its
ordered calibrated axes, a handful of scalar properties, and a table of
series metadata.
"""
from dataclasses import dataclass, field

from .axes import Axes, CalibratedAxis


class MetaTable(dict):
    """String-keyed table of series metadata"""

    def __repr__(self):
        return 'MetaTable(%s)' % dict.__repr__(self)


@dataclass(frozen=True)
class ImageMetadata:
    axes: tuple[CalibratedAxis, ...]
    '''Calibrated axes in storage order'''
    pixel_type: int
    '''Pixel type constant, see bfcompat.pixeltype'''
    bits_per_pixel: int
    '''Number of valid bits per sample'''
    plane_count: int
    '''Number of planes in the image'''
    rgb: bool = False
    thumb_size_x: int = 0
    thumb_size_y: int = 0
    order_certain: bool = True
    little_endian: bool = True
    interleaved: bool = False
    indexed: bool = False
    false_color: bool = False
    metadata_complete: bool = True
    thumbnail: bool = False
    '''Whether this image is a thumbnail of another one'''
    table: MetaTable = field(default_factory=MetaTable)
    '''Series metadata'''

    @property
    def axis_types(self):
        return [a.type for a in self.axes]

    @property
    def axis_lengths(self):
        return [a.length for a in self.axes]

    @property
    def shape(self):
        return tuple(self.axis_lengths)

    def axis_index(self, axis_type):
        """Index of the first axis of the given type, -1 if there is none"""
        for i, a in enumerate(self.axes):
            if a.type == axis_type:
                return i
        return -1

    def axis_length(self, axis_type):
        """Length of the first axis of the given type, 1 if there is none"""
        i = self.axis_index(axis_type)
        return 1 if i < 0 else self.axes[i].length

    @property
    def size_x(self):
        return self.axis_length(Axes.X)

    @property
    def size_y(self):
        return self.axis_length(Axes.Y)

    @property
    def planar_axes(self):
        """axes stored within a plane: everything up to and including Y"""
        i = self.axis_index(Axes.Y)
        return self.axes[:i + 1]

    @property
    def interleaved_axes(self):
        """planar axes other than X and Y"""
        return tuple(
            a for a in self.planar_axes if a.type not in (Axes.X, Axes.Y)
        )

    @property
    def channel_axes(self):
        """axes other than X, Y, Z and Time"""
        return tuple(
            a for a in self.axes
            if a.type not in (Axes.X, Axes.Y, Axes.Z, Axes.TIME)
        )

    @property
    def rgb_channel_count(self):
        """number of channels stored within each plane

        All channels divided by the channel planes stored separately, i.e.
        plane_count / (Z * T); 1 unless the image is rgb.
        """
        if not self.rgb:
            return 1
        nc = 1
        for a in self.channel_axes:
            nc *= a.length
        zt = self.axis_length(Axes.Z) * self.axis_length(Axes.TIME)
        effc = self.plane_count // zt if zt else 0
        return nc // effc if effc else nc
