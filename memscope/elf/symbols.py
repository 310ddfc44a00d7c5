"""Symbol table codec for .symtab and .dynsym."""

from typing import List, Optional

from ..exceptions import MissingTableError
from .base import StructureParser
from .constants import DYNSTR_NAME, SHT_DYNSYM, SHT_SYMTAB, STRTAB_NAME
from .models import SectionHeader, Symbol, SymbolTables


def _find_section(sections: List[SectionHeader], name: str) -> Optional[SectionHeader]:
    return next((section for section in sections if section.name == name), None)


class SymbolParser(StructureParser):
    """
    Decodes both symbol tables.

    Static symbols resolve their names against .strtab, which must exist.
    Dynamic symbols resolve against .dynstr; when it is absent their names
    are empty strings.
    """

    def parse(self, sections: List[SectionHeader]) -> SymbolTables:
        strtab = _find_section(sections, STRTAB_NAME)
        if strtab is None:
            raise MissingTableError(f"String table {STRTAB_NAME} not found")
        dynstr = _find_section(sections, DYNSTR_NAME)

        dynsym: List[Symbol] = []
        symtab: List[Symbol] = []
        for section in sections:
            if section.sh_type == SHT_SYMTAB:
                symtab.extend(self._parse_table(section, strtab))
            elif section.sh_type == SHT_DYNSYM:
                dynsym.extend(self._parse_table(section, dynstr))

        self.log.debug("Decoded %d dynamic and %d static symbols", len(dynsym), len(symtab))
        return SymbolTables(dynsym=dynsym, symtab=symtab)

    def _parse_table(self, section: SectionHeader,
                     string_table: Optional[SectionHeader]) -> List[Symbol]:
        entry_size = self.layout.sym_size
        count = section.sh_size // entry_size
        symbols = []
        for index in range(count):
            fields = self.reader.unpack('sym', section.sh_offset + index * entry_size)
            name = ''
            if string_table is not None:
                name = self.reader.read_cstring(string_table.sh_offset + fields['st_name'])
            symbols.append(Symbol(name=name, **fields))
        return symbols

    def encode_entry(self, symbol: Symbol) -> bytes:
        return self.encode('sym', symbol)
