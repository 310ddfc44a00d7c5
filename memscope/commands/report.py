"""Report subcommand - decode an ELF file and print the memory report."""

import argparse
import json
import logging
from pathlib import Path
from typing import Optional

from ..core.generator import ReportGenerator
from ..elf import parse_elf
from ..exceptions import MemscopeError
from .regions import load_regions

logger = logging.getLogger(__name__)


def add_report_parser(subparsers, parents=()) -> argparse.ArgumentParser:
    """
    Add 'report' subcommand parser.

    Args:
        subparsers: Subparsers object from argparse
        parents: Parent parsers carrying shared options

    Returns:
        The report parser
    """
    parser = subparsers.add_parser(
        'report',
        parents=list(parents),
        help='Generate a JSON report from an ELF file and optional memory layout',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
examples:
  # Sections as the top tier
  memscope report firmware.elf

  # Regions from the linker script as the top tier
  memscope report firmware.elf --linker-script STM32F407VGTx_FLASH.ld

  # Regions from the map file
  memscope report firmware.elf --map-file firmware.map > report.json
        """
    )
    parser.add_argument('elf_path', help='Path to ELF file')

    layout_group = parser.add_mutually_exclusive_group()
    layout_group.add_argument('--linker-script', help='Linker script declaring MEMORY regions')
    layout_group.add_argument('--map-file', help='Linker map file with a Memory Configuration table')

    parser.add_argument('--indent', type=int, default=2, help='JSON indentation (default: 2)')
    return parser


def generate_report(elf_path: str, linker_script: Optional[str] = None,
                    map_file: Optional[str] = None) -> dict:
    """
    Generate a report for an ELF file on disk.

    Args:
        elf_path: Path to ELF file
        linker_script: Linker script providing memory regions (optional)
        map_file: Map file providing memory regions (optional)

    Returns:
        dict: JSON-serializable report

    Raises:
        OSError: If a file cannot be read
        MemscopeError: If decoding or parsing fails
    """
    logger.info("ELF file: %s", elf_path)
    image = parse_elf(Path(elf_path).read_bytes())

    regions = None
    if linker_script:
        logger.info("Linker script: %s", linker_script)
        regions = load_regions(linker_script, 'ld')
    elif map_file:
        logger.info("Map file: %s", map_file)
        regions = load_regions(map_file, 'map')

    return ReportGenerator(image, regions).generate_report()


def run_report(args: argparse.Namespace) -> int:
    """
    Execute the report subcommand.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    try:
        report = generate_report(
            elf_path=args.elf_path,
            linker_script=getattr(args, 'linker_script', None),
            map_file=getattr(args, 'map_file', None),
        )
    except (MemscopeError, OSError) as e:
        logger.error("Failed to generate report: %s", e)
        return 1

    print(json.dumps(report, indent=args.indent))
    return 0
