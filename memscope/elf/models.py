"""Decoded ELF records.

All records are frozen dataclasses whose field names match the layout tables
in memscope.elf.layout, so a record can be handed straight back to the reader
for encoding.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from .layout import ELF_MAGIC, ByteOrder, ElfClass


@dataclass(frozen=True)
class ElfIdentification:
    """The 16-byte e_ident block plus the machine code at 0x12"""

    elf_class: ElfClass
    byte_order: ByteOrder
    version: int
    osabi: int
    abiversion: int
    machine: int
    pad: bytes = b'\x00' * 7
    magic: bytes = ELF_MAGIC

    def to_bytes(self) -> bytes:
        return (self.magic
                + bytes((self.elf_class.value, self.byte_order.value,
                         self.version, self.osabi, self.abiversion))
                + self.pad)


@dataclass(frozen=True)
class ElfHeader:
    identification: ElfIdentification
    e_type: int
    e_machine: int
    e_version: int
    e_entry: int
    e_phoff: int
    e_shoff: int
    e_flags: int
    e_ehsize: int
    e_phentsize: int
    e_phnum: int
    e_shentsize: int
    e_shnum: int
    e_shstrndx: int


@dataclass(frozen=True)
class ProgramHeader:
    p_type: int
    p_offset: int
    p_vaddr: int
    p_paddr: int
    p_filesz: int
    p_memsz: int
    p_flags: int
    p_align: int


@dataclass(frozen=True)
class SectionHeader:
    sh_name: int
    sh_type: int
    sh_flags: int
    sh_addr: int
    sh_offset: int
    sh_size: int
    sh_link: int
    sh_info: int
    sh_addralign: int
    sh_entsize: int
    name: str = ''


@dataclass(frozen=True)
class Symbol:
    """Symbol table entry with its resolved name"""

    st_name: int
    st_value: int
    st_size: int
    st_info: int
    st_other: int
    st_shndx: int
    name: str = ''

    @property
    def bind(self) -> int:
        return self.st_info >> 4

    @property
    def type(self) -> int:
        return self.st_info & 0xf

    @property
    def visibility(self) -> int:
        return self.st_other & 0x3


@dataclass(frozen=True)
class SymbolTables:
    dynsym: List[Symbol] = field(default_factory=list)
    symtab: List[Symbol] = field(default_factory=list)


@dataclass(frozen=True)
class Relocation:
    """REL or RELA entry; r_addend is None for REL"""

    r_offset: int
    r_info: int
    r_addend: Optional[int] = None


@dataclass(frozen=True)
class RelocationTables:
    rel: List[Relocation] = field(default_factory=list)
    rela: List[Relocation] = field(default_factory=list)


@dataclass(frozen=True)
class DynamicTag:
    d_tag: int
    d_un: int


@dataclass(frozen=True)
class NoteEntry:
    n_namesz: int
    n_descsz: int
    n_type: int
    owner: str
    description: bytes
    section: str


@dataclass(frozen=True)
class ElfImage:
    """Everything decoded from one ELF file"""

    header: ElfHeader
    program_headers: List[ProgramHeader]
    sections: List[SectionHeader]
    symbols: SymbolTables
    relocations: RelocationTables
    dynamic_tags: List[DynamicTag]
    notes: List[NoteEntry]

    @property
    def identification(self) -> ElfIdentification:
        return self.header.identification

    def section_by_name(self, name: str) -> Optional[SectionHeader]:
        for section in self.sections:
            if section.name == name:
                return section
        return None
