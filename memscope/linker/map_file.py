"""Parser for the Memory Configuration table of a GNU ld map file."""

import logging
import re
from typing import List, Optional

from ..core.models import MemoryRegion
from ..exceptions import MapFileFormatError
from .values import parse_numeric_value

logger = logging.getLogger(__name__)

MEMORY_CONFIGURATION_RE = re.compile(r'Memory Configuration\s*([\s\S]*?\*default\*.*)')
HEADER_RE = re.compile(r'^Name\s+Origin\s+Length\s+Attributes$')
DEFAULT_REGION = '*default*'


class MapFileParser:
    """
    Reads the region table that ld prints under "Memory Configuration".

    The table runs from the Name/Origin/Length/Attributes header down to
    the *default* row, which is validated like any other row and then
    dropped.
    """

    def __init__(self, log: Optional[logging.Logger] = None):
        self.log = log or logger

    def parse(self, content: str) -> List[MemoryRegion]:
        match = MEMORY_CONFIGURATION_RE.search(content)
        if not match:
            raise MapFileFormatError("Memory Configuration block not found in the .map file")

        lines = match.group(1).strip().split('\n')
        if len(lines) <= 2:
            raise MapFileFormatError("Invalid Memory Configuration block")
        if not HEADER_RE.match(lines[0].strip()):
            raise MapFileFormatError("Invalid Memory Configuration header")

        regions = []
        for line in lines[1:]:
            region = self._parse_row(line)
            if region is not None:
                regions.append(region)
        self.log.info("Parsed %d memory regions from map file", len(regions))
        return regions

    def _parse_row(self, line: str) -> Optional[MemoryRegion]:
        parts = line.split()
        if not parts:
            return None
        if len(parts) not in (3, 4):
            self.log.warning("Skipping invalid memory configuration line: %s", line)
            return None

        name, origin, length = parts[:3]
        attributes = parts[3] if len(parts) == 4 else None
        try:
            parsed_origin = parse_numeric_value(origin)
            parsed_length = parse_numeric_value(length)
        except ValueError as exc:
            raise MapFileFormatError(
                f"Invalid Origin or Length value in memory definition: {line}") from exc

        if name == DEFAULT_REGION:
            return None
        return MemoryRegion(name=name, origin=parsed_origin, length=parsed_length,
                            attributes=attributes)


def parse_map_file(text: str, log: Optional[logging.Logger] = None) -> List[MemoryRegion]:
    """
    Parse the memory regions listed in a linker map file.

    Rows that do not have 3 or 4 columns are logged and skipped.

    Raises:
        FormatError: Missing block, short block, bad header or a
            non-numeric origin/length
    """
    return MapFileParser(log).parse(text)
