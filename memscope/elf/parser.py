"""ELF decoding orchestrator."""

import logging
from typing import Optional

from .dynamic import DynamicTagParser
from .header import HeaderParser
from .models import ElfImage
from .notes import NoteParser
from .program_headers import ProgramHeaderParser
from .reader import ElfReader
from .relocations import RelocationParser
from .sections import SectionHeaderParser
from .symbols import SymbolParser

logger = logging.getLogger(__name__)


class ElfParser:
    """
    Runs every structure codec over one buffer.

    The identification is resolved once when the reader is built; the
    codecs share that reader and therefore its width and byte order.
    """

    def __init__(self, data: bytes, log: Optional[logging.Logger] = None):
        self.log = log or logger
        self.reader = ElfReader(data)
        self._codec_log = log

    def parse(self) -> ElfImage:
        header = HeaderParser(self.reader, self._codec_log).parse()
        program_headers = ProgramHeaderParser(self.reader, self._codec_log).parse(header)
        sections = SectionHeaderParser(self.reader, self._codec_log).parse(header)
        symbols = SymbolParser(self.reader, self._codec_log).parse(sections)
        relocations = RelocationParser(self.reader, self._codec_log).parse(sections)
        dynamic_tags = DynamicTagParser(self.reader, self._codec_log).parse(sections, program_headers)
        notes = NoteParser(self.reader, self._codec_log).parse(sections)

        self.log.info("Parsed %s %s image: %d segments, %d sections, %d symbols",
                      header.identification.elf_class.name,
                      header.identification.byte_order.name,
                      len(program_headers), len(sections),
                      len(symbols.dynsym) + len(symbols.symtab))
        return ElfImage(
            header=header,
            program_headers=program_headers,
            sections=sections,
            symbols=symbols,
            relocations=relocations,
            dynamic_tags=dynamic_tags,
            notes=notes,
        )


def parse_elf(data: bytes, log: Optional[logging.Logger] = None) -> ElfImage:
    """
    Decode an ELF file held in memory.

    Args:
        data: Complete file contents
        log: Optional logger used instead of the module loggers

    Returns:
        ElfImage with every decoded structure

    Raises:
        ElfFormatError: Bad identification or a record that runs past the buffer
        StringTableIndexError: e_shstrndx does not name a parsed section
        MissingTableError: The file has no .strtab section
    """
    return ElfParser(data, log).parse()
