"""Section header table codec.

Decoding happens in two passes: the raw headers are read first, then every
name is resolved from the section-name string table chosen by e_shstrndx.
"""

from dataclasses import replace
from typing import List

from ..exceptions import StringTableIndexError
from .base import StructureParser
from .models import ElfHeader, SectionHeader


class SectionHeaderParser(StructureParser):

    def parse(self, header: ElfHeader) -> List[SectionHeader]:
        raw_sections = self.parse_raw(header)
        if not raw_sections:
            self.log.debug("File has no section headers")
            return raw_sections
        return self.resolve_names(raw_sections, header.e_shstrndx)

    def parse_raw(self, header: ElfHeader) -> List[SectionHeader]:
        return [
            SectionHeader(**self.reader.unpack('shdr', header.e_shoff + index * header.e_shentsize))
            for index in range(header.e_shnum)
        ]

    def resolve_names(self, sections: List[SectionHeader], shstrndx: int) -> List[SectionHeader]:
        """
        Attach names read from the section-name string table.

        Raises:
            StringTableIndexError: If shstrndx is not the index of a parsed section
        """
        if not 0 <= shstrndx < len(sections):
            raise StringTableIndexError(
                f"Section name string table index {shstrndx} is out of range "
                f"({len(sections)} sections)")
        string_table = sections[shstrndx]
        named = [
            replace(section, name=self.reader.read_cstring(string_table.sh_offset + section.sh_name))
            for section in sections
        ]
        self.log.debug("Decoded %d section headers", len(named))
        return named

    def encode_entry(self, section: SectionHeader) -> bytes:
        return self.encode('shdr', section)
