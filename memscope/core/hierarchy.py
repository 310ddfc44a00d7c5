#!/usr/bin/env python3
"""
Memory hierarchy construction.

Correlates allocated sections and sized symbols with memory regions to build
the three-tier utilization tree:

- With regions:    regions -> sections -> symbols
- Without regions: sections -> symbols

A child belongs to every parent whose [start, end) range contains the
child's start address. The child's end is not checked, so an entry that
overruns its parent is still assigned to it whole.
"""

import logging
from typing import List, Optional, Sequence

from ..elf.constants import SHF_ALLOC, STT_FUNC, STT_OBJECT, STV_HIDDEN
from ..elf.models import ElfImage, SectionHeader, Symbol, SymbolTables
from .models import (HighLevelEntry, LowLevelEntry, MemoryRegion, MemoryRegionEntry,
                     MidLevelEntry)

logger = logging.getLogger(__name__)


def usage_percent(part: int, whole: int) -> float:
    """part as a percentage of whole; 0.0 when whole is zero"""
    return (part / whole * 100) if whole > 0 else 0.0


def filter_allocated_sections(sections: Sequence[SectionHeader]) -> List[SectionHeader]:
    return [section for section in sections if section.sh_flags & SHF_ALLOC]


def filter_sized_symbols(symbols: SymbolTables) -> List[Symbol]:
    """Objects and functions that are not hidden, dynamic symbols first"""
    return [
        symbol for symbol in list(symbols.dynsym) + list(symbols.symtab)
        if symbol.type in (STT_OBJECT, STT_FUNC) and symbol.visibility != STV_HIDDEN
    ]


class MemoryHierarchyBuilder:
    """Builds the hierarchy for one ELF image and optional region list"""

    def __init__(self, image: ElfImage, regions: Optional[Sequence[MemoryRegion]] = None):
        self.image = image
        self.regions = regions

    def build(self) -> List[HighLevelEntry]:
        sections = filter_allocated_sections(self.image.sections)
        symbols = filter_sized_symbols(self.image.symbols)
        logger.debug("Hierarchy input: %d allocated sections, %d symbols",
                     len(sections), len(symbols))

        if self.regions is not None:
            low_level = [self._symbol_entry(LowLevelEntry, symbol) for symbol in symbols]
            mid_level = [self._section_entry(MidLevelEntry, section) for section in sections]
            self.assign_children(mid_level, low_level)
            high_level = [self._region_entry(region) for region in self.regions]
        else:
            mid_level = [self._symbol_entry(MidLevelEntry, symbol) for symbol in symbols]
            high_level = [self._section_entry(HighLevelEntry, section) for section in sections]

        self.assign_children(high_level, mid_level)
        return high_level

    @staticmethod
    def assign_children(parents: Sequence[MemoryRegionEntry],
                        children: Sequence[MemoryRegionEntry]) -> None:
        """
        Attach contained children to every parent and aggregate utilization.

        Each parent gets used, free and usage_percent. Each claimed child's
        usage_percent is then rewritten as its share of the parent's used
        bytes; children are shared objects, so when parents overlap the
        last parent processed wins.
        """
        for parent in parents:
            claimed = [child for child in children if parent.contains(child)]
            parent.children[:] = claimed
            parent.used = sum(child.size for child in claimed)
            parent.free = parent.size - parent.used
            parent.usage_percent = usage_percent(parent.used, parent.size)
            for child in claimed:
                child.usage_percent = usage_percent(child.size, parent.used)

    @staticmethod
    def _symbol_entry(entry_class, symbol: Symbol):
        return entry_class(region=symbol.name, start_address=symbol.st_value, size=symbol.st_size)

    @staticmethod
    def _section_entry(entry_class, section: SectionHeader):
        return entry_class(region=section.name, start_address=section.sh_addr, size=section.sh_size)

    @staticmethod
    def _region_entry(region: MemoryRegion) -> HighLevelEntry:
        return HighLevelEntry(region=region.name, start_address=region.origin, size=region.length)


def build_memory_hierarchy(image: ElfImage,
                           regions: Optional[Sequence[MemoryRegion]] = None) -> List[HighLevelEntry]:
    """
    Build the memory utilization hierarchy.

    Args:
        image: Parsed ELF image
        regions: Memory regions from a linker script or map file; when None
            the sections become the top tier

    Returns:
        Top-tier entries with their children attached
    """
    return MemoryHierarchyBuilder(image, regions).build()
