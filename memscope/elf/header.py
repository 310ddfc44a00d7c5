"""ELF file header codec."""

from .base import StructureParser
from .layout import EI_NIDENT
from .models import ElfHeader


class HeaderParser(StructureParser):
    """Decodes the fixed-position header that follows e_ident"""

    def parse(self) -> ElfHeader:
        fields = self.reader.unpack('ehdr', EI_NIDENT)
        header = ElfHeader(identification=self.reader.identification, **fields)
        self.log.debug("Header: type=%d machine=%d phnum=%d shnum=%d shstrndx=%d",
                       header.e_type, header.e_machine, header.e_phnum,
                       header.e_shnum, header.e_shstrndx)
        return header

    def encode_header(self, header: ElfHeader) -> bytes:
        """Bytes of e_ident followed by the header fields"""
        return header.identification.to_bytes() + self.encode('ehdr', header)
