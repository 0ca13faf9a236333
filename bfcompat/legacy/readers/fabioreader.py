"""Reader for detector image formats handled by fabio"""
import fabio

from bfcompat import pixeltype
from ..base import FormatReader, CoreMetadata
from ..errors import FormatReaderError


class FabioReader(FormatReader):
    """single-series reader of (multi-frame) fabio images; frames along T"""

    format = 'fabio image'
    suffixes = ('edf', 'edf.gz', 'cbf', 'mccd', 'sfrm', 'img', 'tif', 'tiff')

    def _init_file(self, id):
        with fabio.open(id) as img:
            data = img.data
            nframes = img.nframes
            header = dict(img.header)
            fabioclass = img.classname
        if data.ndim != 2:
            raise FormatReaderError(
                'only 2-d frames are supported; %s has ndim=%d'
                % (id, data.ndim)
            )
        try:
            ptype = pixeltype.pixel_type_from_dtype(data.dtype)
        except ValueError as e:
            raise FormatReaderError(str(e)) from e

        header['fabio_class'] = fabioclass
        return [CoreMetadata(
            size_x=data.shape[1],
            size_y=data.shape[0],
            size_t=nframes,
            image_count=nframes,
            pixel_type=ptype,
            series_metadata=header,
        )]

    def _open_plane(self, no):
        with fabio.open(self.current_file) as img:
            if no == 0:
                data = img.data
            else:
                data = img.getframe(no).data
        return data
