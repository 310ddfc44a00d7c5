"""Lookup functions translating numeric ELF codes to labels.

Plain lookups never fail: an unknown code renders as "Unknown <field>: <n>".
Relocation types are the exception and raise, since an unknown machine or
type code means the relocation cannot be interpreted at all.
"""

from typing import List, Optional, Union

from ..elf.layout import ElfClass
from ..exceptions import UnknownRelocationTypeError, UnsupportedArchitectureError
from .dynamic_tags import DYNAMIC_TAGS
from .header import ELF_CLASSES, ELF_DATA_ENCODINGS, ELF_TYPES, MACHINES, OSABIS
from .program import NO_PROGRAM_FLAGS, PF_MASKOS, PF_MASKPROC, PROGRAM_FLAGS, PROGRAM_TYPES
from .relocations import RELOCATION_TABLES
from .sections import (GENERIC_SECTION_FLAGS, GNU_SECTION_FLAGS, MACHINE_SECTION_FLAGS,
                       SECTION_TYPES, SHF_MASKOS, SHF_MASKPROC)
from .symbols import SYMBOL_BINDINGS, SYMBOL_TYPES, SYMBOL_VISIBILITIES

FLAG_SEPARATOR = " | "


def _lookup(table, code: int, field: str) -> str:
    return table.get(code, f"Unknown {field}: {code}")


def elf_class_name(ei_class: int) -> str:
    return _lookup(ELF_CLASSES, ei_class, "EI_CLASS")


def elf_data_name(ei_data: int) -> str:
    return _lookup(ELF_DATA_ENCODINGS, ei_data, "EI_DATA")


def osabi_name(ei_osabi: int) -> str:
    return _lookup(OSABIS, ei_osabi, "EI_OSABI")


def machine_name(e_machine: int) -> str:
    return _lookup(MACHINES, e_machine, "e_machine")


def elf_type_name(e_type: int) -> str:
    return _lookup(ELF_TYPES, e_type, "e_type")


def program_type_name(p_type: int) -> str:
    return _lookup(PROGRAM_TYPES, p_type, "p_type")


def section_type_name(sh_type: int) -> str:
    return _lookup(SECTION_TYPES, sh_type, "sh_type")


def symbol_binding_name(bind: int) -> str:
    return _lookup(SYMBOL_BINDINGS, bind, "Binding")


def symbol_type_name(symbol_type: int) -> str:
    return _lookup(SYMBOL_TYPES, symbol_type, "Type")


def symbol_visibility_name(visibility: int) -> str:
    return _lookup(SYMBOL_VISIBILITIES, visibility, "st_other")


def dynamic_tag_name(d_tag: int) -> str:
    return _lookup(DYNAMIC_TAGS, d_tag, "d_tag")


def program_flags_labels(p_flags: int) -> List[str]:
    """
    Permission labels for a segment, in X, W, R order.

    OS-specific and processor-specific bits are appended as
    PF_MASKOS(0x...) and PF_MASKPROC(0x...) with the masked value.
    """
    labels = [label for bit, label in PROGRAM_FLAGS if p_flags & bit]
    if p_flags & PF_MASKOS:
        labels.append(f"PF_MASKOS({p_flags & PF_MASKOS:#x})")
    if p_flags & PF_MASKPROC:
        labels.append(f"PF_MASKPROC({p_flags & PF_MASKPROC:#x})")
    return labels


def program_flags_label(p_flags: int) -> str:
    if p_flags == 0:
        return NO_PROGRAM_FLAGS
    return FLAG_SEPARATOR.join(program_flags_labels(p_flags))


def section_flags_labels(sh_flags: int, machine: Optional[int] = None) -> List[str]:
    """
    Labels for a section's flags.

    Processor-specific bits overlap between architectures, so they are only
    named from the table of the given machine. Bits that table leaves
    unclaimed fall back to the GNU SHF_ORDERED/SHF_EXCLUDE meanings, and
    anything still unnamed in the OS or processor ranges is reported as a
    raw SHF_MASKOS/SHF_MASKPROC value.

    Args:
        sh_flags: Raw section flags
        machine: e_machine of the file, or None for generic labels only

    Returns:
        Ordered list of labels
    """
    labels = [label for bit, label in GENERIC_SECTION_FLAGS if sh_flags & bit]
    claimed = 0

    for bit, label in MACHINE_SECTION_FLAGS.get(machine, ()):
        if sh_flags & bit:
            labels.append(label)
            claimed |= bit

    for bit, label in GNU_SECTION_FLAGS:
        if sh_flags & bit and not claimed & bit:
            labels.append(label)
            claimed |= bit

    remaining = sh_flags & ~claimed
    if remaining & SHF_MASKOS:
        labels.append(f"SHF_MASKOS({remaining & SHF_MASKOS:#x})")
    if remaining & SHF_MASKPROC:
        labels.append(f"SHF_MASKPROC({remaining & SHF_MASKPROC:#x})")
    return labels


def section_flags_label(sh_flags: int, machine: Optional[int] = None) -> str:
    return FLAG_SEPARATOR.join(section_flags_labels(sh_flags, machine))


def _elf_class(elf_class: Union[ElfClass, int]) -> ElfClass:
    if isinstance(elf_class, ElfClass):
        return elf_class
    try:
        return ElfClass(elf_class)
    except ValueError as exc:
        raise ValueError(f"Invalid ELF class: {elf_class}") from exc


def relocation_type_code(r_info: int, elf_class: Union[ElfClass, int]) -> int:
    if _elf_class(elf_class) is ElfClass.ELF32:
        return r_info & 0xff
    return r_info & 0xffffffff


def relocation_symbol_index(r_info: int, elf_class: Union[ElfClass, int]) -> int:
    if _elf_class(elf_class) is ElfClass.ELF32:
        return r_info >> 8
    return r_info >> 32


def relocation_type_name(r_info: int, elf_class: Union[ElfClass, int], machine: int) -> str:
    """
    Name of a relocation's type for the given machine.

    Raises:
        UnsupportedArchitectureError: No table is registered for the machine
        UnknownRelocationTypeError: The type code is not in the machine's table
    """
    table = RELOCATION_TABLES.get(machine)
    if table is None:
        raise UnsupportedArchitectureError(machine)
    type_code = relocation_type_code(r_info, elf_class)
    try:
        return table[type_code]
    except KeyError as exc:
        raise UnknownRelocationTypeError(machine, type_code) from exc
