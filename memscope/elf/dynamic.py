"""Dynamic section codec."""

from typing import List, Optional, Tuple

from .base import StructureParser
from .constants import DT_NULL, DYNAMIC_NAME, PT_DYNAMIC
from .models import DynamicTag, ProgramHeader, SectionHeader


class DynamicTagParser(StructureParser):

    def parse(self, sections: List[SectionHeader],
              program_headers: List[ProgramHeader]) -> List[DynamicTag]:
        """
        Decode the dynamic table.

        The table is found through the .dynamic section, falling back to the
        first PT_DYNAMIC segment. The first DT_NULL entry is kept and
        decoding stops at the second one, which is not returned.
        """
        location = self._locate(sections, program_headers)
        if location is None:
            self.log.warning("No dynamic section or PT_DYNAMIC segment found")
            return []

        offset, size = location
        entry_size = self.layout.dyn_size
        tags: List[DynamicTag] = []
        seen_null = False
        for index in range(size // entry_size):
            tag = DynamicTag(**self.reader.unpack('dyn', offset + index * entry_size))
            if tag.d_tag == DT_NULL:
                if seen_null:
                    break
                seen_null = True
            tags.append(tag)

        self.log.debug("Decoded %d dynamic tags", len(tags))
        return tags

    def _locate(self, sections: List[SectionHeader],
                program_headers: List[ProgramHeader]) -> Optional[Tuple[int, int]]:
        for section in sections:
            if section.name == DYNAMIC_NAME:
                return section.sh_offset, section.sh_size
        for program_header in program_headers:
            if program_header.p_type == PT_DYNAMIC:
                self.log.debug("Using PT_DYNAMIC segment at %#x", program_header.p_offset)
                return program_header.p_offset, program_header.p_filesz
        return None

    def encode_entry(self, tag: DynamicTag) -> bytes:
        return self.encode('dyn', tag)
