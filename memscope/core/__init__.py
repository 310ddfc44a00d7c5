"""Memory layout models, hierarchy builder and report generator."""

from .generator import ReportGenerator
from .hierarchy import MemoryHierarchyBuilder, build_memory_hierarchy
from .models import HighLevelEntry, LowLevelEntry, MemoryRegion, MemoryRegionEntry, MidLevelEntry

__all__ = [
    'ReportGenerator', 'MemoryHierarchyBuilder', 'build_memory_hierarchy',
    'HighLevelEntry', 'LowLevelEntry', 'MemoryRegion', 'MemoryRegionEntry',
    'MidLevelEntry',
]
