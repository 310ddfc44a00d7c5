#!/usr/bin/env python3
"""
Report generation.

ReportGenerator projects a parsed ElfImage, and optionally a list of memory
regions, into a JSON-serializable dictionary. Every numeric code is paired
with its label from the dictionary layer; raw numbers are kept as integers.
"""

import logging
from typing import Any, Dict, List, Optional, Sequence

from .. import dictionary
from ..elf.models import ElfImage, Relocation
from .hierarchy import build_memory_hierarchy
from .models import MemoryRegion

logger = logging.getLogger(__name__)


class ReportGenerator:
    """Builds the full report for one ELF image"""

    def __init__(self, image: ElfImage, regions: Optional[Sequence[MemoryRegion]] = None,
                 log: Optional[logging.Logger] = None):
        """Initialize the report generator.

        Args:
            image: Parsed ELF image
            regions: Memory regions from a linker script or map file (optional)
            log: Logger to use instead of the module logger
        """
        self.image = image
        self.regions = regions
        self.log = log or logger

    def generate_report(self) -> Dict[str, Any]:
        """Generate the report.

        Returns:
            Dictionary with header, program_headers, sections, symbols,
            dynamic_tags, relocations, notes and memory_layout keys

        Raises:
            UnsupportedArchitectureError: Relocations exist for a machine
                without a relocation table
            UnknownRelocationTypeError: A relocation type is not in the table
        """
        report = {
            'header': self._header(),
            'program_headers': self._program_headers(),
            'sections': self._sections(),
            'symbols': self._symbols(),
            'dynamic_tags': self._dynamic_tags(),
            'relocations': self._relocations(),
            'notes': self._notes(),
            'memory_layout': self._memory_layout(),
        }
        self.log.info("Generated report: %d sections, %d regions in memory layout",
                      len(report['sections']), len(report['memory_layout']))
        return report

    def _header(self) -> Dict[str, Any]:
        header = self.image.header
        ident = header.identification
        return {
            'magic': ident.to_bytes().hex(' '),
            'class': dictionary.elf_class_name(ident.elf_class.value),
            'data': dictionary.elf_data_name(ident.byte_order.value),
            'version': ident.version,
            'osabi': dictionary.osabi_name(ident.osabi),
            'abi_version': ident.abiversion,
            'type': dictionary.elf_type_name(header.e_type),
            'machine': dictionary.machine_name(header.e_machine),
            'e_version': header.e_version,
            'entry_point': header.e_entry,
            'program_header_offset': header.e_phoff,
            'section_header_offset': header.e_shoff,
            'flags': header.e_flags,
            'header_size': header.e_ehsize,
            'program_header_entry_size': header.e_phentsize,
            'program_header_count': header.e_phnum,
            'section_header_entry_size': header.e_shentsize,
            'section_header_count': header.e_shnum,
            'section_name_table_index': header.e_shstrndx,
        }

    def _program_headers(self) -> List[Dict[str, Any]]:
        return [{
            'type': dictionary.program_type_name(ph.p_type),
            'offset': ph.p_offset,
            'virtual_address': ph.p_vaddr,
            'physical_address': ph.p_paddr,
            'file_size': ph.p_filesz,
            'memory_size': ph.p_memsz,
            'flags': dictionary.program_flags_label(ph.p_flags),
            'align': ph.p_align,
        } for ph in self.image.program_headers]

    def _sections(self) -> List[Dict[str, Any]]:
        machine = self.image.header.e_machine
        return [{
            'name': section.name,
            'type': dictionary.section_type_name(section.sh_type),
            'flags': dictionary.section_flags_labels(section.sh_flags, machine),
            'address': section.sh_addr,
            'offset': section.sh_offset,
            'size': section.sh_size,
            'link': section.sh_link,
            'info': section.sh_info,
            'address_align': section.sh_addralign,
            'entry_size': section.sh_entsize,
        } for section in self.image.sections]

    def _symbols(self) -> Dict[str, List[Dict[str, Any]]]:
        def describe(symbol):
            return {
                'name': symbol.name,
                'value': symbol.st_value,
                'size': symbol.st_size,
                'type': dictionary.symbol_type_name(symbol.type),
                'binding': dictionary.symbol_binding_name(symbol.bind),
                'visibility': dictionary.symbol_visibility_name(symbol.visibility),
                'section_index': symbol.st_shndx,
            }

        return {
            'dynsym': [describe(symbol) for symbol in self.image.symbols.dynsym],
            'symtab': [describe(symbol) for symbol in self.image.symbols.symtab],
        }

    def _dynamic_tags(self) -> List[Dict[str, Any]]:
        return [{'tag': dictionary.dynamic_tag_name(tag.d_tag), 'value': tag.d_un}
                for tag in self.image.dynamic_tags]

    def _relocations(self) -> Dict[str, List[Dict[str, Any]]]:
        return {
            'rel': [self._relocation(entry) for entry in self.image.relocations.rel],
            'rela': [self._relocation(entry) for entry in self.image.relocations.rela],
        }

    def _relocation(self, relocation: Relocation) -> Dict[str, Any]:
        elf_class = self.image.identification.elf_class
        entry = {
            'offset': relocation.r_offset,
            'info': relocation.r_info,
            'type': dictionary.relocation_type_name(
                relocation.r_info, elf_class, self.image.header.e_machine),
            'symbol_index': dictionary.relocation_symbol_index(relocation.r_info, elf_class),
        }
        if relocation.r_addend is not None:
            entry['addend'] = relocation.r_addend
        return entry

    def _notes(self) -> List[Dict[str, Any]]:
        return [{
            'section': note.section,
            'owner': note.owner,
            'type': note.n_type,
            'description_size': note.n_descsz,
            'description': note.description.hex(),
        } for note in self.image.notes]

    def _memory_layout(self) -> List[Dict[str, Any]]:
        return [entry.to_dict() for entry in build_memory_hierarchy(self.image, self.regions)]
