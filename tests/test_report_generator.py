#!/usr/bin/env python3

"""
test_report_generator.py - Tests for the JSON report projection
"""

import json
import unittest

from elf_builder import (EM_X86_64, FIRMWARE_LINKER_SCRIPT, ElfBuilder, build_firmware_image,
                         relocation_info)
from memscope.core.generator import ReportGenerator
from memscope.elf import parse_elf
from memscope.elf.layout import ByteOrder, ElfClass
from memscope.elf.models import Relocation
from memscope.exceptions import UnsupportedArchitectureError
from memscope.linker import parse_linker_script


class TestFirmwareReport(unittest.TestCase):
    """Report for the 32-bit ARM firmware image"""

    def setUp(self):
        self.image = parse_elf(build_firmware_image())
        self.regions = parse_linker_script(FIRMWARE_LINKER_SCRIPT)
        self.report = ReportGenerator(self.image, self.regions).generate_report()

    def test_top_level_keys(self):
        self.assertEqual(list(self.report), [
            'header', 'program_headers', 'sections', 'symbols',
            'dynamic_tags', 'relocations', 'notes', 'memory_layout',
        ])

    def test_header(self):
        header = self.report['header']
        self.assertEqual(header['magic'], '7f 45 4c 46 01 01 01 00 00 00 00 00 00 00 00 00')
        self.assertEqual(header['class'], 'ELF32')
        self.assertEqual(header['data'], 'ELFDATA2LSB (little endian)')
        self.assertEqual(header['type'], 'ET_EXEC (Executable file)')
        self.assertEqual(header['machine'], 'EM_ARM')
        self.assertEqual(header['entry_point'], 0x08000181)
        self.assertEqual(header['section_header_count'], 11)
        self.assertEqual(header['section_name_table_index'], 10)

    def test_program_headers(self):
        flash, ram = self.report['program_headers']
        self.assertEqual(flash['type'], 'PT_LOAD (Loadable program segment)')
        self.assertEqual(flash['flags'], 'X | R')
        self.assertEqual(ram['flags'], 'W | R')
        self.assertEqual(ram['virtual_address'], 0x20000000)

    def test_sections(self):
        by_name = {section['name']: section for section in self.report['sections']}
        self.assertEqual(by_name['.text']['flags'], ['SHF_ALLOC', 'SHF_EXECINSTR'])
        self.assertEqual(by_name['.text']['type'], 'SHT_PROGBITS')
        self.assertEqual(by_name['.bss']['type'], 'SHT_NOBITS')
        self.assertEqual(by_name['.comment']['flags'], ['SHF_MERGE', 'SHF_STRINGS'])
        self.assertEqual(by_name['']['flags'], [])

    def test_symbols(self):
        symtab = self.report['symbols']['symtab']
        hidden = next(s for s in symtab if s['name'] == 'hidden_helper')
        self.assertEqual(hidden['visibility'], 'STV_HIDDEN')
        self.assertEqual(hidden['binding'], 'STB_LOCAL')
        self.assertEqual(hidden['type'], 'STT_FUNC')
        self.assertEqual(symtab[-1]['type'], 'STT_SECTION')
        self.assertEqual(self.report['symbols']['dynsym'], [])

    def test_relocations(self):
        rel = self.report['relocations']['rel']
        self.assertEqual([entry['type'] for entry in rel], ['R_ARM_ABS32', 'R_ARM_JUMP_SLOT'])
        self.assertEqual([entry['symbol_index'] for entry in rel], [1, 2])
        self.assertNotIn('addend', rel[0])
        self.assertEqual(self.report['relocations']['rela'], [])

    def test_memory_layout(self):
        flash, ram = self.report['memory_layout']
        self.assertEqual((flash['region'], flash['used']), ('FLASH', 1536))
        self.assertEqual((ram['region'], ram['used']), ('RAM', 576))
        self.assertEqual([s['region'] for s in ram['mid_level']], ['.data', '.bss'])

    def test_json_serializable(self):
        decoded = json.loads(json.dumps(self.report))
        self.assertEqual(decoded['header']['entry_point'], 0x08000181)

    def test_layout_without_regions(self):
        report = ReportGenerator(self.image).generate_report()
        self.assertEqual([entry['region'] for entry in report['memory_layout']],
                         ['.isr_vector', '.text', '.rodata', '.data', '.bss'])


class TestReportDetails(unittest.TestCase):
    """Dynamic tags, notes, addends and relocation failures"""

    def _image(self):
        builder = ElfBuilder(ElfClass.ELF64, ByteOrder.LITTLE, machine=EM_X86_64, e_type=3)
        builder.add_symbol_table('.symtab', [{'name': ''}, {'name': 'f', 'info': 0x12}])
        builder.add_relocations('.rela.dyn', [
            Relocation(r_offset=0x3ff8, r_info=relocation_info(ElfClass.ELF64, 0, 8),
                       r_addend=-16),
        ], rela=True)
        builder.add_dynamic([(1, 1), (0x6ffffef5, 0x308), (0, 0)])
        builder.add_notes('.note.gnu.build-id', [('GNU', 3, b'\xde\xad\xbe\xef')])
        return parse_elf(builder.build())

    def test_shared_object_report(self):
        report = ReportGenerator(self._image()).generate_report()
        self.assertEqual(report['header']['type'], 'ET_DYN (Shared object file)')
        self.assertEqual(report['header']['class'], 'ELF64')
        (rela,) = report['relocations']['rela']
        self.assertEqual(rela['type'], 'R_X86_64_RELATIVE')
        self.assertEqual(rela['addend'], -16)
        self.assertEqual(rela['symbol_index'], 0)
        self.assertEqual([tag['tag'] for tag in report['dynamic_tags']][0], 'DT_NEEDED')
        self.assertEqual(report['dynamic_tags'][-1], {'tag': 'DT_NULL', 'value': 0})
        self.assertEqual(report['notes'], [{
            'section': '.note.gnu.build-id',
            'owner': 'GNU',
            'type': 3,
            'description_size': 4,
            'description': 'deadbeef',
        }])

    def test_unsupported_machine_with_relocations(self):
        image = parse_elf(build_firmware_image(machine=0x1234))
        with self.assertRaises(UnsupportedArchitectureError):
            ReportGenerator(image).generate_report()


if __name__ == '__main__':
    unittest.main()
