"""Relocation table codec for SHT_REL and SHT_RELA sections."""

from typing import List

from .base import StructureParser
from .constants import SHT_REL, SHT_RELA
from .models import Relocation, RelocationTables, SectionHeader


class RelocationParser(StructureParser):

    def parse(self, sections: List[SectionHeader]) -> RelocationTables:
        rel_sections = [s for s in sections if s.sh_type == SHT_REL]
        rela_sections = [s for s in sections if s.sh_type == SHT_RELA]
        if not rel_sections and not rela_sections:
            self.log.warning("No relocation sections found")
            return RelocationTables()

        rel: List[Relocation] = []
        for section in rel_sections:
            rel.extend(self._parse_table(section, 'rel', self.layout.rel_size))
        rela: List[Relocation] = []
        for section in rela_sections:
            rela.extend(self._parse_table(section, 'rela', self.layout.rela_size))

        self.log.debug("Decoded %d REL and %d RELA entries", len(rel), len(rela))
        return RelocationTables(rel=rel, rela=rela)

    def _parse_table(self, section: SectionHeader, kind: str,
                     entry_size: int) -> List[Relocation]:
        return [
            Relocation(**self.reader.unpack(kind, section.sh_offset + index * entry_size))
            for index in range(section.sh_size // entry_size)
        ]

    def encode_entry(self, relocation: Relocation) -> bytes:
        kind = 'rel' if relocation.r_addend is None else 'rela'
        return self.encode(kind, relocation)
