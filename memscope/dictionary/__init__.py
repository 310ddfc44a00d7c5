"""Code-to-label tables for ELF fields."""

from .mapping import (dynamic_tag_name, elf_class_name, elf_data_name, elf_type_name,
                      machine_name, osabi_name, program_flags_label, program_flags_labels,
                      program_type_name, relocation_symbol_index, relocation_type_code,
                      relocation_type_name, section_flags_label, section_flags_labels,
                      section_type_name, symbol_binding_name, symbol_type_name,
                      symbol_visibility_name)
from .relocations import RELOCATION_TABLES

__all__ = [
    'dynamic_tag_name', 'elf_class_name', 'elf_data_name', 'elf_type_name',
    'machine_name', 'osabi_name', 'program_flags_label', 'program_flags_labels',
    'program_type_name', 'relocation_symbol_index', 'relocation_type_code',
    'relocation_type_name', 'section_flags_label', 'section_flags_labels',
    'section_type_name', 'symbol_binding_name', 'symbol_type_name',
    'symbol_visibility_name', 'RELOCATION_TABLES',
]
