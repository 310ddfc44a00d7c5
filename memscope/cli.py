#!/usr/bin/env python3
"""memscope command-line entry point."""

import argparse
import logging
import sys
from typing import List, Optional

from . import __version__
from .commands.regions import add_regions_parser, run_regions
from .commands.report import add_report_parser, run_report

COMMANDS = {
    'report': run_report,
    'regions': run_regions,
}


def build_parser() -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument('-v', '--verbose', action='store_true', help='Enable debug logging')

    parser = argparse.ArgumentParser(
        prog='memscope',
        description='Decode ELF files and report memory usage against linker memory regions',
    )
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    subparsers = parser.add_subparsers(dest='command', metavar='COMMAND')
    subparsers.required = True

    add_report_parser(subparsers, parents=[common])
    add_regions_parser(subparsers, parents=[common])
    return parser


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format='%(levelname)s: %(name)s: %(message)s',
        stream=sys.stderr,
    )


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(getattr(args, 'verbose', False))
    return COMMANDS[args.command](args)


if __name__ == '__main__':
    sys.exit(main())
