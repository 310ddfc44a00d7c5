"""ELF structural decoder."""

from .layout import ELF32_LAYOUT, ELF64_LAYOUT, ByteOrder, ElfClass, ElfLayout
from .models import (DynamicTag, ElfHeader, ElfIdentification, ElfImage, NoteEntry,
                     ProgramHeader, Relocation, RelocationTables, SectionHeader,
                     Symbol, SymbolTables)
from .parser import ElfParser, parse_elf
from .reader import ElfReader, resolve_identification

__all__ = [
    'ELF32_LAYOUT', 'ELF64_LAYOUT', 'ByteOrder', 'ElfClass', 'ElfLayout',
    'DynamicTag', 'ElfHeader', 'ElfIdentification', 'ElfImage', 'NoteEntry',
    'ProgramHeader', 'Relocation', 'RelocationTables', 'SectionHeader',
    'Symbol', 'SymbolTables', 'ElfParser', 'parse_elf', 'ElfReader',
    'resolve_identification',
]
