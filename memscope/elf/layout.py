"""Per-width record layouts for the ELF structures memscope decodes.

ELF32 and ELF64 differ in both field widths and, for program headers and
symbols, field order. Each layout lists its fields in file order together with
the struct format code of every field, so one table drives decoding, encoding
and entry-size computation.
"""

import struct
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple

EI_NIDENT = 16
ELF_MAGIC = b'\x7fELF'
MACHINE_OFFSET = 0x12


class ElfClass(Enum):
    """Word width selected by e_ident[EI_CLASS]"""

    ELF32 = 1
    ELF64 = 2


class ByteOrder(Enum):
    """Byte order selected by e_ident[EI_DATA]"""

    LITTLE = 1
    BIG = 2

    @property
    def struct_prefix(self) -> str:
        return '<' if self is ByteOrder.LITTLE else '>'


@dataclass(frozen=True)
class RecordLayout:
    """Field names and struct codes of one fixed-size record, in file order"""

    fields: Tuple[Tuple[str, str], ...]

    @property
    def names(self) -> Tuple[str, ...]:
        return tuple(name for name, _ in self.fields)

    @property
    def format(self) -> str:
        return ''.join(code for _, code in self.fields)

    @property
    def size(self) -> int:
        return struct.calcsize('<' + self.format)

    def offsets(self) -> Dict[str, int]:
        """Byte offset of every field from the start of the record"""
        result = {}
        position = 0
        for name, code in self.fields:
            result[name] = position
            position += struct.calcsize('<' + code)
        return result


@dataclass(frozen=True)
class ElfLayout:
    """Record layouts for one word width.

    The ehdr layout covers the header fields after the 16-byte e_ident.
    """

    elf_class: ElfClass
    ehdr: RecordLayout
    phdr: RecordLayout
    shdr: RecordLayout
    sym: RecordLayout
    rel: RecordLayout
    rela: RecordLayout
    dyn: RecordLayout
    nhdr: RecordLayout

    def record(self, kind: str) -> RecordLayout:
        return getattr(self, kind)

    @property
    def header_size(self) -> int:
        return EI_NIDENT + self.ehdr.size

    @property
    def sym_size(self) -> int:
        return self.sym.size

    @property
    def rel_size(self) -> int:
        return self.rel.size

    @property
    def rela_size(self) -> int:
        return self.rela.size

    @property
    def dyn_size(self) -> int:
        return self.dyn.size

    @property
    def nhdr_size(self) -> int:
        return self.nhdr.size


_NHDR = RecordLayout((('n_namesz', 'I'), ('n_descsz', 'I'), ('n_type', 'I')))


ELF32_LAYOUT = ElfLayout(
    elf_class=ElfClass.ELF32,
    ehdr=RecordLayout((
        ('e_type', 'H'), ('e_machine', 'H'), ('e_version', 'I'),
        ('e_entry', 'I'), ('e_phoff', 'I'), ('e_shoff', 'I'),
        ('e_flags', 'I'), ('e_ehsize', 'H'), ('e_phentsize', 'H'),
        ('e_phnum', 'H'), ('e_shentsize', 'H'), ('e_shnum', 'H'),
        ('e_shstrndx', 'H'),
    )),
    phdr=RecordLayout((
        ('p_type', 'I'), ('p_offset', 'I'), ('p_vaddr', 'I'),
        ('p_paddr', 'I'), ('p_filesz', 'I'), ('p_memsz', 'I'),
        ('p_flags', 'I'), ('p_align', 'I'),
    )),
    shdr=RecordLayout((
        ('sh_name', 'I'), ('sh_type', 'I'), ('sh_flags', 'I'),
        ('sh_addr', 'I'), ('sh_offset', 'I'), ('sh_size', 'I'),
        ('sh_link', 'I'), ('sh_info', 'I'), ('sh_addralign', 'I'),
        ('sh_entsize', 'I'),
    )),
    sym=RecordLayout((
        ('st_name', 'I'), ('st_value', 'I'), ('st_size', 'I'),
        ('st_info', 'B'), ('st_other', 'B'), ('st_shndx', 'H'),
    )),
    rel=RecordLayout((('r_offset', 'I'), ('r_info', 'I'))),
    rela=RecordLayout((('r_offset', 'I'), ('r_info', 'I'), ('r_addend', 'i'))),
    dyn=RecordLayout((('d_tag', 'I'), ('d_un', 'I'))),
    nhdr=_NHDR,
)

ELF64_LAYOUT = ElfLayout(
    elf_class=ElfClass.ELF64,
    ehdr=RecordLayout((
        ('e_type', 'H'), ('e_machine', 'H'), ('e_version', 'I'),
        ('e_entry', 'Q'), ('e_phoff', 'Q'), ('e_shoff', 'Q'),
        ('e_flags', 'I'), ('e_ehsize', 'H'), ('e_phentsize', 'H'),
        ('e_phnum', 'H'), ('e_shentsize', 'H'), ('e_shnum', 'H'),
        ('e_shstrndx', 'H'),
    )),
    phdr=RecordLayout((
        ('p_type', 'I'), ('p_flags', 'I'), ('p_offset', 'Q'),
        ('p_vaddr', 'Q'), ('p_paddr', 'Q'), ('p_filesz', 'Q'),
        ('p_memsz', 'Q'), ('p_align', 'Q'),
    )),
    shdr=RecordLayout((
        ('sh_name', 'I'), ('sh_type', 'I'), ('sh_flags', 'Q'),
        ('sh_addr', 'Q'), ('sh_offset', 'Q'), ('sh_size', 'Q'),
        ('sh_link', 'I'), ('sh_info', 'I'), ('sh_addralign', 'Q'),
        ('sh_entsize', 'Q'),
    )),
    sym=RecordLayout((
        ('st_name', 'I'), ('st_info', 'B'), ('st_other', 'B'),
        ('st_shndx', 'H'), ('st_value', 'Q'), ('st_size', 'Q'),
    )),
    rel=RecordLayout((('r_offset', 'Q'), ('r_info', 'Q'))),
    rela=RecordLayout((('r_offset', 'Q'), ('r_info', 'Q'), ('r_addend', 'q'))),
    dyn=RecordLayout((('d_tag', 'Q'), ('d_un', 'Q'))),
    nhdr=_NHDR,
)

LAYOUTS = {
    ElfClass.ELF32: ELF32_LAYOUT,
    ElfClass.ELF64: ELF64_LAYOUT,
}
