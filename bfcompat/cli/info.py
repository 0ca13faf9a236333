import logging

from bfcompat import config
from bfcompat import pixeltype
from bfcompat.errors import FormatError

logger = logging.getLogger('bfcompat')

descr = 'prints the axes and properties of the series of an image file'
example = """
examples:
    bfcompat info image.h5
    bfcompat info image.h5 -s 1
"""


def configure_parser(sub_parsers):
    p = sub_parsers.add_parser('info', description=descr, help=descr)
    p.add_argument(
        'file', type=str,
        help='image file'
        )
    p.add_argument(
        '-c', '--config', type=str, default=None,
        help='YAML configuration file'
        )
    p.add_argument(
        '-s', '--series', type=int, default=None,
        help='only report this series'
        )
    p.set_defaults(func=execute)


def format_image(index, im):
    axes = ', '.join('%s(%d)' % (a.type.label, a.length) for a in im.axes)
    lines = [
        '==== series %d' % index,
        '          axes: %s' % axes,
        '        planes: %d' % im.plane_count,
        '    pixel type: %s' % pixeltype.pixel_type_string(im.pixel_type),
        'bits per pixel: %d' % im.bits_per_pixel,
        '           rgb: %s' % im.rgb,
        '   interleaved: %s' % im.interleaved,
        '       indexed: %s' % im.indexed,
        ' little endian: %s' % im.little_endian,
        '     thumbnail: %dx%d%s' % (
            im.thumb_size_x, im.thumb_size_y,
            ' (thumbnail series)' if im.thumbnail else ''),
    ]
    for k in sorted(im.table, key=str):
        lines.append('    %s: %s' % (k, im.table[k]))
    return '\n'.join(lines)


def execute(args, parser):
    cfg = config.open(args.config)[0]
    fmt = cfg.build_format()

    try:
        meta = fmt.parse(args.file)
    except FormatError as e:
        logger.error('%s: %s', e, e.__cause__)
        return 1

    with meta:
        if args.series is None:
            indices = range(len(meta))
        elif 0 <= args.series < len(meta):
            indices = [args.series]
        else:
            logger.error(
                '%s: no series %d; file has %d series',
                args.file, args.series, len(meta)
            )
            return 1
        for s in indices:
            print(format_image(s, meta[s]))
    return 0
