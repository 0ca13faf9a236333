from bfcompat import config


descr = 'lists the candidate readers and the file suffixes they recognize'
example = """
examples:
    bfcompat formats
    bfcompat formats -c readers.yml
"""


def configure_parser(sub_parsers):
    p = sub_parsers.add_parser('formats', description=descr, help=descr)
    p.add_argument(
        '-c', '--config', type=str, default=None,
        help='YAML configuration file'
        )
    p.set_defaults(func=execute)


def execute(args, parser):
    cfg = config.open(args.config)[0]
    fmt = cfg.build_format()

    print(fmt.format_name)
    print('readers:')
    for r in fmt.readers:
        print('    %s' % r)
    print('suffixes: %s' % ', '.join(fmt.suffixes))
    return 0
