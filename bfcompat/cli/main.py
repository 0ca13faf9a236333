"""Entry point for bfcompat command line interface"""

import argparse
import logging
import sys

from bfcompat.cli import check
from bfcompat.cli import formats
from bfcompat.cli import info


def main(argv=None):
    argv = sys.argv[1:] if argv is None else list(argv)
    if not argv:
        argv.append('-h')

    p = argparse.ArgumentParser(
        description='Legacy image readers through the structured metadata model'
    )
    p.add_argument(
        "--debug",
        action = "store_true",
        help = 'verbose reporting',
    )
    sub_parsers = p.add_subparsers(
        metavar = 'command',
        dest = 'cmd',
    )

    formats.configure_parser(sub_parsers)
    info.configure_parser(sub_parsers)
    check.configure_parser(sub_parsers)

    args = p.parse_args(argv)
    if args.cmd is None:
        p.print_help()
        return 1

    log_level = logging.DEBUG if args.debug else logging.INFO
    logger = logging.getLogger('bfcompat')
    logger.setLevel(log_level)
    ch = logging.StreamHandler()
    ch.setLevel(log_level)
    cf = logging.Formatter('%(asctime)s - %(message)s', '%y-%m-%d %H:%M:%S')
    ch.setFormatter(cf)
    logger.addHandler(ch)

    try:
        return args.func(args, p)
    finally:
        logger.removeHandler(ch)


if __name__ == '__main__':
    sys.exit(main())
