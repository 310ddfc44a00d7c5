#!/usr/bin/env python3

"""
test_elf_structures.py - Tests for the section, segment, symbol, relocation,
dynamic and note codecs
"""

import struct
import unittest

from elf_builder import (EM_386, EM_X86_64, FLASH_ORIGIN, RAM_ORIGIN, WIDTHS_AND_ORDERS,
                         ElfBuilder, build_firmware_image, relocation_info)
from memscope.elf import parse_elf
from memscope.elf.dynamic import DynamicTagParser
from memscope.elf.header import HeaderParser
from memscope.elf.layout import ByteOrder, ElfClass
from memscope.elf.models import Relocation
from memscope.elf.notes import NoteParser
from memscope.elf.program_headers import ProgramHeaderParser
from memscope.elf.reader import ElfReader
from memscope.elf.relocations import RelocationParser
from memscope.elf.sections import SectionHeaderParser
from memscope.elf.symbols import SymbolParser
from memscope.exceptions import ElfError, MissingTableError, StringTableIndexError

FIRMWARE_SECTION_NAMES = [
    '', '.isr_vector', '.text', '.rodata', '.data', '.bss', '.comment',
    '.strtab', '.symtab', '.rel.text', '.shstrtab',
]


def _with_symbols(builder):
    """Give a builder the .strtab every decodable image needs"""
    builder.add_symbol_table('.symtab', [
        {'name': ''},
        {'name': '_start', 'value': 0x401000, 'size': 0x10, 'info': 0x12, 'shndx': 0},
    ])
    return builder


class TestProgramHeaders(unittest.TestCase):
    """Program header decoding for every width and byte order"""

    def test_load_segments(self):
        for elf_class, byte_order in WIDTHS_AND_ORDERS:
            with self.subTest(elf_class=elf_class.name, byte_order=byte_order.name):
                image = parse_elf(build_firmware_image(elf_class, byte_order))
                flash, ram = image.program_headers
                self.assertEqual(flash.p_type, 1)
                self.assertEqual(flash.p_flags, 0x5)
                self.assertEqual(flash.p_vaddr, FLASH_ORIGIN)
                self.assertEqual(flash.p_memsz, 0x600)
                self.assertEqual(flash.p_offset, image.section_by_name('.isr_vector').sh_offset)
                self.assertEqual(flash.p_filesz, 0x100)
                self.assertEqual(ram.p_flags, 0x6)
                self.assertEqual(ram.p_vaddr, RAM_ORIGIN)
                self.assertEqual(ram.p_align, 0x10000)

    def test_flags_field_position_differs_by_width(self):
        data32 = build_firmware_image(ElfClass.ELF32, ByteOrder.LITTLE)
        data64 = build_firmware_image(ElfClass.ELF64, ByteOrder.LITTLE)
        self.assertEqual(struct.unpack_from('<I', data32, 52 + 24)[0], 0x5)
        self.assertEqual(struct.unpack_from('<I', data64, 64 + 4)[0], 0x5)

    def test_no_program_headers(self):
        image = parse_elf(_with_symbols(ElfBuilder(e_type=1)).build())
        self.assertEqual(image.program_headers, [])


class TestSectionHeaders(unittest.TestCase):
    """Section header decoding and name resolution"""

    def test_names_resolved_from_shstrtab(self):
        for elf_class, byte_order in WIDTHS_AND_ORDERS:
            with self.subTest(elf_class=elf_class.name, byte_order=byte_order.name):
                image = parse_elf(build_firmware_image(elf_class, byte_order))
                self.assertEqual([s.name for s in image.sections], FIRMWARE_SECTION_NAMES)

    def test_section_fields(self):
        image = parse_elf(build_firmware_image())
        text = image.section_by_name('.text')
        self.assertEqual(text.sh_type, 1)
        self.assertEqual(text.sh_flags, 0x6)
        self.assertEqual(text.sh_addr, FLASH_ORIGIN + 0x100)
        self.assertEqual(text.sh_size, 0x400)
        self.assertEqual(text.sh_addralign, 4)
        bss = image.section_by_name('.bss')
        self.assertEqual(bss.sh_type, 8)
        self.assertEqual(bss.sh_size, 0x200)
        symtab = image.section_by_name('.symtab')
        self.assertEqual(symtab.sh_link, FIRMWARE_SECTION_NAMES.index('.strtab'))
        self.assertEqual(symtab.sh_entsize, 16)
        self.assertIsNone(image.section_by_name('.missing'))

    def test_string_table_index_out_of_range(self):
        data = _with_symbols(ElfBuilder()).build(shstrndx=99)
        with self.assertRaises(StringTableIndexError) as ctx:
            parse_elf(data)
        self.assertIn('99', str(ctx.exception))

    def test_string_table_index_error_is_index_error(self):
        data = _with_symbols(ElfBuilder()).build(shstrndx=5)
        with self.assertRaises(IndexError):
            parse_elf(data)
        with self.assertRaises(ElfError):
            parse_elf(data)

    def test_section_encoding_matches_file(self):
        data = build_firmware_image(ElfClass.ELF64, ByteOrder.BIG)
        image = parse_elf(data)
        reader = ElfReader(data)
        parser = SectionHeaderParser(reader)
        for index, section in enumerate(image.sections):
            start = image.header.e_shoff + index * image.header.e_shentsize
            self.assertEqual(parser.encode_entry(section), data[start:start + 64])


class TestSymbols(unittest.TestCase):
    """Symbol table decoding"""

    def test_firmware_symbols(self):
        for elf_class, byte_order in WIDTHS_AND_ORDERS:
            with self.subTest(elf_class=elf_class.name, byte_order=byte_order.name):
                image = parse_elf(build_firmware_image(elf_class, byte_order))
                symtab = image.symbols.symtab
                self.assertEqual(
                    [s.name for s in symtab],
                    ['', 'main', 'Reset_Handler', 'hidden_helper', 'const_table',
                     'counter', 'buffer', ''])
                self.assertEqual(image.symbols.dynsym, [])
                main = symtab[1]
                self.assertEqual(main.st_value, FLASH_ORIGIN + 0x100)
                self.assertEqual(main.st_size, 0x80)
                self.assertEqual(main.st_shndx, 2)

    def test_info_and_other_accessors(self):
        image = parse_elf(build_firmware_image())
        by_name = {s.name: s for s in image.symbols.symtab if s.name}
        self.assertEqual((by_name['main'].bind, by_name['main'].type), (1, 2))
        self.assertEqual((by_name['counter'].bind, by_name['counter'].type), (0, 1))
        self.assertEqual(by_name['hidden_helper'].visibility, 2)
        self.assertEqual(by_name['buffer'].visibility, 0)
        self.assertEqual(image.symbols.symtab[-1].type, 3)

    def test_missing_strtab_rejected(self):
        builder = ElfBuilder()
        builder.add_symbol_table('.dynsym', [{'name': ''}, {'name': 'puts'}], dynamic=True)
        with self.assertRaises(MissingTableError):
            parse_elf(builder.build())

    def test_dynamic_symbols_use_dynstr(self):
        builder = _with_symbols(ElfBuilder())
        builder.add_symbol_table('.dynsym', [{'name': ''}, {'name': 'puts', 'info': 0x12}],
                                 dynamic=True)
        image = parse_elf(builder.build())
        self.assertEqual([s.name for s in image.symbols.dynsym], ['', 'puts'])
        self.assertEqual([s.name for s in image.symbols.symtab], ['', '_start'])

    def test_missing_dynstr_gives_empty_names(self):
        builder = _with_symbols(ElfBuilder())
        builder.add_symbol_table('.dynsym', [{'name': ''}, {'name': 'puts', 'info': 0x12}],
                                 dynamic=True, with_strings=False)
        image = parse_elf(builder.build())
        self.assertEqual([s.name for s in image.symbols.dynsym], ['', ''])
        self.assertEqual(image.symbols.dynsym[1].st_info, 0x12)


class TestRelocations(unittest.TestCase):
    """REL and RELA decoding"""

    def test_firmware_rel_entries(self):
        for elf_class, byte_order in WIDTHS_AND_ORDERS:
            with self.subTest(elf_class=elf_class.name, byte_order=byte_order.name):
                image = parse_elf(build_firmware_image(elf_class, byte_order))
                rel = image.relocations.rel
                self.assertEqual(len(rel), 2)
                self.assertEqual(rel[0].r_offset, FLASH_ORIGIN + 0x104)
                self.assertEqual(rel[0].r_info, relocation_info(elf_class, 1, 2))
                self.assertIsNone(rel[0].r_addend)
                self.assertEqual(rel[1].r_info, relocation_info(elf_class, 2, 22))
                self.assertEqual(image.relocations.rela, [])

    def test_rela_addend_is_signed(self):
        cases = [(ElfClass.ELF64, EM_X86_64, 7, -8), (ElfClass.ELF32, EM_386, 7, -4)]
        for elf_class, machine, type_code, addend in cases:
            with self.subTest(elf_class=elf_class.name):
                builder = _with_symbols(ElfBuilder(elf_class, machine=machine))
                builder.add_relocations('.rela.plt', [
                    Relocation(r_offset=0x4018, r_info=relocation_info(elf_class, 1, type_code),
                               r_addend=addend),
                    Relocation(r_offset=0x4020, r_info=relocation_info(elf_class, 1, type_code),
                               r_addend=0x30),
                ], rela=True)
                image = parse_elf(builder.build())
                self.assertEqual([r.r_addend for r in image.relocations.rela], [addend, 0x30])
                self.assertEqual(image.relocations.rel, [])

    def test_missing_relocations_logs_warning(self):
        data = _with_symbols(ElfBuilder()).build()
        with self.assertLogs('memscope.elf', level='WARNING') as captured:
            image = parse_elf(data)
        self.assertEqual(image.relocations.rel, [])
        self.assertEqual(image.relocations.rela, [])
        self.assertTrue(any('No relocation sections found' in line for line in captured.output))

    def test_encode_entry_picks_record_kind(self):
        reader = ElfReader(build_firmware_image(ElfClass.ELF64, ByteOrder.LITTLE))
        parser = RelocationParser(reader)
        self.assertEqual(len(parser.encode_entry(Relocation(0x10, 0x107))), 16)
        self.assertEqual(len(parser.encode_entry(Relocation(0x10, 0x107, -1))), 24)


class TestDynamicTags(unittest.TestCase):
    """Dynamic table location and DT_NULL handling"""

    def test_first_null_kept_second_stops(self):
        builder = _with_symbols(ElfBuilder())
        builder.add_dynamic([(1, 0x10), (0, 0), (5, 0x400), (0, 0), (7, 99)])
        image = parse_elf(builder.build())
        self.assertEqual([(t.d_tag, t.d_un) for t in image.dynamic_tags],
                         [(1, 0x10), (0, 0), (5, 0x400)])

    def test_falls_back_to_pt_dynamic(self):
        builder = _with_symbols(ElfBuilder(ElfClass.ELF32, ByteOrder.BIG, machine=EM_386))
        builder.add_dynamic([(1, 0x21), (0x6ffffffb, 0x8000001)], name='.dynamic_copy')
        builder.add_segment(2, flags=0x6, section='.dynamic_copy')
        image = parse_elf(builder.build())
        self.assertEqual([(t.d_tag, t.d_un) for t in image.dynamic_tags],
                         [(1, 0x21), (0x6ffffffb, 0x8000001)])

    def test_missing_dynamic_logs_warning(self):
        data = _with_symbols(ElfBuilder()).build()
        with self.assertLogs('memscope.elf.dynamic', level='WARNING'):
            image = parse_elf(data)
        self.assertEqual(image.dynamic_tags, [])


class TestNotes(unittest.TestCase):
    """Note walking without alignment padding"""

    def _image(self, notes, **kwargs):
        builder = _with_symbols(ElfBuilder(ElfClass.ELF32, ByteOrder.LITTLE))
        builder.add_notes('.note.test', notes, **kwargs)
        data = builder.build()
        return data, parse_elf(data)

    def test_unaligned_notes(self):
        _, image = self._image([('GNU', 3, b'\x01\x02\x03\x04\x05'), ('Go', 4, b'\xaa\xbb')])
        first, second = image.notes
        self.assertEqual((first.owner, first.n_type, first.n_namesz, first.n_descsz),
                         ('GNU', 3, 4, 5))
        self.assertEqual(first.description, b'\x01\x02\x03\x04\x05')
        self.assertEqual((second.owner, second.n_type), ('Go', 4))
        self.assertEqual(second.description, b'\xaa\xbb')
        self.assertEqual(second.section, '.note.test')

    def test_owner_bounded_by_namesz(self):
        _, image = self._image([('ab', 1, b'\x10\x20')], namesz_padding=3)
        (note,) = image.notes
        self.assertEqual(note.n_namesz, 6)
        self.assertEqual(note.owner, 'ab')
        self.assertEqual(note.description, b'\x10\x20')

    def test_encoding_reproduces_section(self):
        data, image = self._image([('GNU', 3, b'\x01\x02\x03'), ('Go', 4, b'\xaa')])
        section = image.section_by_name('.note.test')
        parser = NoteParser(ElfReader(data))
        encoded = b''.join(parser.encode_entry(note) for note in image.notes)
        self.assertEqual(encoded, data[section.sh_offset:section.sh_offset + section.sh_size])

    def test_no_note_sections(self):
        image = parse_elf(build_firmware_image())
        self.assertEqual(image.notes, [])


def _round_trip_image(elf_class, byte_order):
    """Image carrying every fixed-layout record kind"""
    builder = ElfBuilder(elf_class, byte_order, machine=EM_X86_64, e_type=3, entry=0x1040)
    builder.add_section('.text', 1, b'\x90' * 0x40, flags=0x6, addr=0x1000)
    builder.add_symbol_table('.symtab', [
        {'name': ''},
        {'name': '_start', 'value': 0x1040, 'size': 0x10, 'info': 0x12, 'shndx': 1},
        {'name': 'local_data', 'value': 0x2000, 'size': 8, 'info': 0x01, 'other': 2,
         'shndx': 1},
    ])
    builder.add_symbol_table('.dynsym', [{'name': ''}, {'name': 'puts', 'info': 0x12}],
                             dynamic=True)
    builder.add_relocations('.rel.dyn', [
        Relocation(r_offset=0x3000, r_info=relocation_info(elf_class, 1, 8)),
    ])
    builder.add_relocations('.rela.plt', [
        Relocation(r_offset=0x3008, r_info=relocation_info(elf_class, 1, 7), r_addend=-8),
        Relocation(r_offset=0x3010, r_info=relocation_info(elf_class, 0, 8), r_addend=0x1040),
    ], rela=True)
    builder.add_dynamic([(1, 1), (5, 0x400), (6, 0x500), (0, 0)])
    builder.add_segment(1, flags=0x5, vaddr=0x1000, memsz=0x40, section='.text', align=0x1000)
    builder.add_segment(2, flags=0x6, section='.dynamic')
    return builder.build()


class TestRoundTrip(unittest.TestCase):
    """Re-encoding decoded records reproduces the original bytes"""

    def _slice(self, data, section):
        return data[section.sh_offset:section.sh_offset + section.sh_size]

    def test_records_reencode_to_file_bytes(self):
        for elf_class, byte_order in WIDTHS_AND_ORDERS:
            with self.subTest(elf_class=elf_class.name, byte_order=byte_order.name):
                data = _round_trip_image(elf_class, byte_order)
                image = parse_elf(data)
                reader = ElfReader(data)
                header = image.header

                self.assertEqual(HeaderParser(reader).encode_header(header),
                                 data[:reader.layout.header_size])

                phdr_codec = ProgramHeaderParser(reader)
                self.assertEqual(len(image.program_headers), 2)
                for index, program_header in enumerate(image.program_headers):
                    start = header.e_phoff + index * header.e_phentsize
                    self.assertEqual(phdr_codec.encode_entry(program_header),
                                     data[start:start + header.e_phentsize])

                symbol_codec = SymbolParser(reader)
                self.assertEqual(
                    b''.join(symbol_codec.encode_entry(s) for s in image.symbols.symtab),
                    self._slice(data, image.section_by_name('.symtab')))
                self.assertEqual(
                    b''.join(symbol_codec.encode_entry(s) for s in image.symbols.dynsym),
                    self._slice(data, image.section_by_name('.dynsym')))

                relocation_codec = RelocationParser(reader)
                self.assertEqual(
                    b''.join(relocation_codec.encode_entry(r) for r in image.relocations.rel),
                    self._slice(data, image.section_by_name('.rel.dyn')))
                self.assertEqual(
                    b''.join(relocation_codec.encode_entry(r) for r in image.relocations.rela),
                    self._slice(data, image.section_by_name('.rela.plt')))
                self.assertEqual([r.r_addend for r in image.relocations.rela], [-8, 0x1040])

                dynamic_codec = DynamicTagParser(reader)
                self.assertEqual(
                    b''.join(dynamic_codec.encode_entry(t) for t in image.dynamic_tags),
                    self._slice(data, image.section_by_name('.dynamic')))
                self.assertEqual(image.dynamic_tags[-1].d_tag, 0)


if __name__ == '__main__':
    unittest.main()
