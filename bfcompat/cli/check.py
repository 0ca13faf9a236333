from bfcompat import config


descr = 'reports whether a candidate reader claims a file'
example = """
examples:
    bfcompat check image.h5
    bfcompat check image.dat --no-open
"""


def configure_parser(sub_parsers):
    p = sub_parsers.add_parser('check', description=descr, help=descr)
    p.add_argument(
        'file', type=str,
        help='image file'
        )
    p.add_argument(
        '-c', '--config', type=str, default=None,
        help='YAML configuration file'
        )
    p.add_argument(
        '--no-open', action='store_true',
        help="decide from the file name only"
        )
    p.set_defaults(func=execute)


def execute(args, parser):
    fmt = config.open(args.config)[0].build_format()
    claimed = fmt.is_format(args.file, open=not args.no_open)
    print('%s: %s' % (args.file, 'yes' if claimed else 'no'))
    return 0 if claimed else 1
