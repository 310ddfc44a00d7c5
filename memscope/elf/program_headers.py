"""Program header table codec."""

from typing import List

from .base import StructureParser
from .models import ElfHeader, ProgramHeader


class ProgramHeaderParser(StructureParser):

    def parse(self, header: ElfHeader) -> List[ProgramHeader]:
        """Decode e_phnum entries starting at e_phoff, stepping e_phentsize"""
        program_headers = [
            ProgramHeader(**self.reader.unpack('phdr', header.e_phoff + index * header.e_phentsize))
            for index in range(header.e_phnum)
        ]
        self.log.debug("Decoded %d program headers", len(program_headers))
        return program_headers

    def encode_entry(self, program_header: ProgramHeader) -> bytes:
        return self.encode('phdr', program_header)
