#!/usr/bin/env python3

"""
parser.py - GNU LD linker script MEMORY block parser

Extracts the memory regions declared in the first MEMORY { ... } block of a
linker script:
- Region names (FLASH, RAM, etc.)
- Attributes (rx, rwx, ...)
- ORIGIN, LENGTH and FILL values, with K/M/G/T size suffixes

The work is split into small classes:
- ScriptContentCleaner: strips comments
- MemoryBlockExtractor: finds the MEMORY block and its definition lines
- MemoryDefinitionParser: turns one definition line into a MemoryRegion
- LinkerScriptParser: orchestrates the above
"""

import logging
import re
from typing import List, Optional, Sequence, Tuple

from ..core.models import MemoryRegion
from ..exceptions import MalformedDefinitionError, MissingMemoryBlockError
from .values import NUMBER_PATTERN, apply_size_suffix, parse_numeric_value

logger = logging.getLogger(__name__)

MEMORY_BLOCK_RE = re.compile(r'MEMORY\s*\{([^}]*)\}')
DEFINITION_SPLIT_RE = re.compile(r'\s*:\s*')
NAME_RE = re.compile(r'^[^\s(]+')
ATTRIBUTES_RE = re.compile(r'\(([^)]+)\)')

ORIGIN_ALIASES = ('ORIGIN', 'org', 'o')
LENGTH_ALIASES = ('LENGTH', 'len', 'l')
FILL_ALIASES = ('FILL', 'fill', 'f')


class ScriptContentCleaner:
    """Removes comments while keeping the line structure intact"""

    @staticmethod
    def clean_content(content: str) -> str:
        # Remove C-style comments /* ... */, keeping their newlines
        content = re.sub(r'/\*.*?\*/',
                         lambda match: '\n' * match.group(0).count('\n'),
                         content, flags=re.DOTALL)
        # Remove C++-style comments // ...
        content = re.sub(r'//.*', '', content)
        return content


class MemoryBlockExtractor:
    """Finds the first MEMORY block; nested braces are not supported"""

    @staticmethod
    def extract_definitions(content: str) -> List[str]:
        match = MEMORY_BLOCK_RE.search(content)
        if not match:
            raise MissingMemoryBlockError(
                "Invalid linker script format: MEMORY section not found")
        lines = [line.strip() for line in match.group(1).strip().split('\n')]
        return [line for line in lines if line]


class MemoryDefinitionParser:
    """Parses `NAME (ATTRS) : ORIGIN = x, LENGTH = y[, FILL = z]`"""

    def __init__(self):
        self._option_patterns = {
            aliases: [self._option_regex(alias) for alias in aliases]
            for aliases in (ORIGIN_ALIASES, LENGTH_ALIASES, FILL_ALIASES)
        }

    @staticmethod
    def _option_regex(alias: str):
        return re.compile(
            rf'\b{alias}\s*=\s*({NUMBER_PATTERN})([KMGT]?)\b', re.IGNORECASE)

    def parse(self, definition: str) -> MemoryRegion:
        parts = DEFINITION_SPLIT_RE.split(definition.strip())
        if len(parts) != 2:
            raise MalformedDefinitionError(f"Invalid memory definition: {definition}")
        name_part, options_part = parts

        name, attributes = self._extract_name_and_attributes(name_part)
        origin = self._extract_option(options_part, ORIGIN_ALIASES)
        length = self._extract_option(options_part, LENGTH_ALIASES)
        if origin is None or length is None:
            raise MalformedDefinitionError(
                f"Failed to parse origin or length in memory definition: {definition}")
        fill = self._extract_option(options_part, FILL_ALIASES)

        return MemoryRegion(name=name, origin=origin, length=length,
                            attributes=attributes, fill=fill)

    @staticmethod
    def _extract_name_and_attributes(name_part: str) -> Tuple[str, Optional[str]]:
        name_part = name_part.strip()
        name_match = NAME_RE.search(name_part)
        if not name_match:
            raise MalformedDefinitionError(
                f"Failed to extract name from memory definition: {name_part}")
        attributes_match = ATTRIBUTES_RE.search(name_part)
        attributes = attributes_match.group(1) if attributes_match else None
        return name_match.group(0), attributes

    def _extract_option(self, options_part: str, aliases: Sequence[str]) -> Optional[int]:
        for pattern in self._option_patterns[tuple(aliases)]:
            match = pattern.search(options_part)
            if match:
                return apply_size_suffix(parse_numeric_value(match.group(1)), match.group(2))
        return None


class LinkerScriptParser:
    """Parses the MEMORY block of one linker script"""

    def __init__(self, log: Optional[logging.Logger] = None):
        self.log = log or logger
        self.definition_parser = MemoryDefinitionParser()

    def parse(self, content: str) -> List[MemoryRegion]:
        cleaned = ScriptContentCleaner.clean_content(content)
        definitions = MemoryBlockExtractor.extract_definitions(cleaned)
        regions = [self.definition_parser.parse(definition) for definition in definitions]
        for region in regions:
            self.log.debug("Region %s: origin=0x%08x length=%d attributes=%s",
                           region.name, region.origin, region.length, region.attributes)
        self.log.info("Parsed %d memory regions from linker script", len(regions))
        return regions


def parse_linker_script(text: str, log: Optional[logging.Logger] = None) -> List[MemoryRegion]:
    """
    Parse the MEMORY block of a GNU LD linker script.

    Args:
        text: Linker script contents
        log: Optional logger used instead of the module logger

    Returns:
        Regions in declaration order

    Raises:
        MissingMemoryBlockError: No MEMORY block is present
        MalformedDefinitionError: A definition line cannot be parsed
    """
    return LinkerScriptParser(log).parse(text)
