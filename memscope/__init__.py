"""memscope - ELF decoding and memory layout analysis for firmware builds."""

__version__ = '0.1.0'

from .core import (HighLevelEntry, LowLevelEntry, MemoryRegion, MidLevelEntry,
                   ReportGenerator, build_memory_hierarchy)
from .elf import ElfImage, parse_elf
from .linker import parse_linker_script, parse_map_file

__all__ = [
    '__version__', 'parse_elf', 'parse_linker_script', 'parse_map_file',
    'build_memory_hierarchy', 'ReportGenerator', 'ElfImage', 'MemoryRegion',
    'HighLevelEntry', 'MidLevelEntry', 'LowLevelEntry',
]
