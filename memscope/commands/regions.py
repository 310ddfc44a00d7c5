"""Regions subcommand - parse memory regions from a linker script or map file."""

import argparse
import json
import logging
from pathlib import Path
from typing import List

from ..core.models import MemoryRegion
from ..exceptions import MemscopeError
from ..linker import parse_linker_script, parse_map_file

logger = logging.getLogger(__name__)

MAP_FILE_MARKER = 'Memory Configuration'


def detect_format(path: str, content: str) -> str:
    """
    Guess whether a file is a map file or a linker script.

    Returns:
        'map' or 'ld'
    """
    if Path(path).suffix.lower() == '.map' or MAP_FILE_MARKER in content:
        return 'map'
    return 'ld'


def load_regions(path: str, file_format: str = 'auto') -> List[MemoryRegion]:
    """
    Read and parse a memory layout file.

    Args:
        path: Linker script or map file path
        file_format: 'ld', 'map' or 'auto'

    Raises:
        OSError: If the file cannot be read
        MemoryLayoutError, FormatError: If the file cannot be parsed
    """
    content = Path(path).read_text(encoding='utf-8', errors='replace')
    if file_format == 'auto':
        file_format = detect_format(path, content)
    logger.debug("Parsing %s as %s", path, file_format)
    if file_format == 'map':
        return parse_map_file(content)
    return parse_linker_script(content)


def add_regions_parser(subparsers, parents=()) -> argparse.ArgumentParser:
    """
    Add 'regions' subcommand parser.

    Args:
        subparsers: Subparsers object from argparse
        parents: Parent parsers carrying shared options

    Returns:
        The regions parser
    """
    parser = subparsers.add_parser(
        'regions',
        parents=list(parents),
        help='Print the memory regions declared in a linker script or map file',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
examples:
  memscope regions STM32F407VGTx_FLASH.ld
  memscope regions firmware.map --format map
        """
    )
    parser.add_argument('path', help='Path to linker script or map file')
    parser.add_argument(
        '--format',
        choices=('auto', 'ld', 'map'),
        default='auto',
        help='Input format (default: detect from name and content)'
    )
    parser.add_argument('--indent', type=int, default=2, help='JSON indentation (default: 2)')
    return parser


def run_regions(args: argparse.Namespace) -> int:
    """
    Execute the regions subcommand.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    try:
        regions = load_regions(args.path, args.format)
    except (MemscopeError, OSError) as e:
        logger.error("Failed to parse memory regions: %s", e)
        return 1

    print(json.dumps([region.to_dict() for region in regions], indent=args.indent))
    return 0
