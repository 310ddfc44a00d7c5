"""Memory layout data structures.

MemoryRegion is what the linker-script and map-file parsers produce. The
entry classes form the three-tier utilization hierarchy; their used, free
and usage_percent fields stay None where a tier is never aggregated.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class MemoryRegion:
    """A named region declared in a MEMORY block or map file"""

    name: str
    origin: int
    length: int
    attributes: Optional[str] = None
    fill: Optional[int] = None

    @property
    def end_address(self) -> int:
        """First address past the region"""
        return self.origin + self.length

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "origin": self.origin,
            "length": self.length,
            "attributes": self.attributes,
            "fill": self.fill,
        }


@dataclass
class MemoryRegionEntry:
    """One node of the memory hierarchy"""

    region: str
    start_address: int
    size: int
    used: Optional[int] = None
    free: Optional[int] = None
    usage_percent: Optional[float] = None

    @property
    def end_address(self) -> int:
        return self.start_address + self.size

    @property
    def children(self) -> List['MemoryRegionEntry']:
        """Child entries; a leaf has none"""
        return []

    def contains(self, other: 'MemoryRegionEntry') -> bool:
        """True when the other entry starts inside this one; its end is not checked"""
        return self.start_address <= other.start_address < self.end_address

    def to_dict(self) -> Dict[str, Any]:
        return {
            "region": self.region,
            "start_address": self.start_address,
            "end_address": self.end_address,
            "size": self.size,
            "used": self.used,
            "free": self.free,
            "usage_percent": self.usage_percent,
        }


@dataclass
class LowLevelEntry(MemoryRegionEntry):
    """Leaf node: a symbol inside a section"""


@dataclass
class MidLevelEntry(MemoryRegionEntry):
    low_level: List[LowLevelEntry] = field(default_factory=list)

    @property
    def children(self) -> List[MemoryRegionEntry]:
        return self.low_level

    def to_dict(self) -> Dict[str, Any]:
        result = super().to_dict()
        result["low_level"] = [child.to_dict() for child in self.low_level]
        return result


@dataclass
class HighLevelEntry(MemoryRegionEntry):
    mid_level: List[MidLevelEntry] = field(default_factory=list)

    @property
    def children(self) -> List[MemoryRegionEntry]:
        return self.mid_level

    def to_dict(self) -> Dict[str, Any]:
        result = super().to_dict()
        result["mid_level"] = [child.to_dict() for child in self.mid_level]
        return result
