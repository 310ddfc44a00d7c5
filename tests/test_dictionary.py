#!/usr/bin/env python3

"""
test_dictionary.py - Tests for code-to-label lookups and relocation naming
"""

import unittest

from elftools.elf.enums import (ENUM_RELOC_TYPE_ARM, ENUM_RELOC_TYPE_PPC, ENUM_RELOC_TYPE_PPC64,
                                ENUM_RELOC_TYPE_S390X)

from elf_builder import EM_AARCH64, EM_ARM, EM_X86_64, relocation_info
from memscope.dictionary import (RELOCATION_TABLES, dynamic_tag_name, elf_class_name,
                                 elf_data_name, elf_type_name, machine_name, osabi_name,
                                 program_flags_label, program_flags_labels, program_type_name,
                                 relocation_symbol_index, relocation_type_code,
                                 relocation_type_name, section_flags_label,
                                 section_flags_labels, section_type_name,
                                 symbol_binding_name, symbol_type_name,
                                 symbol_visibility_name)
from memscope.elf.layout import ElfClass
from memscope.exceptions import (ElfError, UnknownRelocationTypeError,
                                 UnsupportedArchitectureError)

EM_MIPS = 8
EM_IA_64 = 50


class TestFieldLookups(unittest.TestCase):
    """Plain code lookups"""

    def test_known_codes(self):
        self.assertEqual(elf_class_name(2), "ELF64")
        self.assertEqual(elf_data_name(2), "ELFDATA2MSB (big endian)")
        self.assertEqual(osabi_name(3), "ELFOSABI_GNU (GNU/Linux)")
        self.assertEqual(elf_type_name(2), "ET_EXEC (Executable file)")
        self.assertEqual(machine_name(EM_ARM), "EM_ARM")
        self.assertEqual(machine_name(0x9026), "EM_ALPHA")
        self.assertEqual(program_type_name(1), "PT_LOAD (Loadable program segment)")
        self.assertEqual(program_type_name(0x6474e551),
                         "PT_GNU_STACK (Indicates stack executability)")
        self.assertEqual(section_type_name(8), "SHT_NOBITS")
        self.assertEqual(symbol_binding_name(1), "STB_GLOBAL")
        self.assertEqual(symbol_type_name(2), "STT_FUNC")
        self.assertEqual(symbol_visibility_name(2), "STV_HIDDEN")
        self.assertEqual(dynamic_tag_name(1), "DT_NEEDED")

    def test_unknown_codes_render_placeholder(self):
        self.assertEqual(machine_name(0xbeef), "Unknown e_machine: 48879")
        self.assertEqual(section_type_name(99), "Unknown sh_type: 99")
        self.assertEqual(symbol_binding_name(5), "Unknown Binding: 5")
        self.assertEqual(symbol_type_name(9), "Unknown Type: 9")
        self.assertEqual(dynamic_tag_name(0x12345), "Unknown d_tag: 74565")
        self.assertEqual(elf_class_name(7), "Unknown EI_CLASS: 7")


class TestProgramFlags(unittest.TestCase):
    """Segment permission labels"""

    def test_permissions_in_fixed_order(self):
        self.assertEqual(program_flags_labels(0x7), ["X", "W", "R"])
        self.assertEqual(program_flags_label(0x5), "X | R")
        self.assertEqual(program_flags_label(0x6), "W | R")

    def test_no_flags(self):
        self.assertEqual(program_flags_label(0), "No p_flags (Segment has no permissions)")
        self.assertEqual(program_flags_labels(0), [])

    def test_os_and_processor_bits(self):
        self.assertEqual(program_flags_label(0x00100001), "X | PF_MASKOS(0x100000)")
        self.assertEqual(program_flags_label(0x10000004), "R | PF_MASKPROC(0x10000000)")


class TestSectionFlags(unittest.TestCase):
    """Section flag labels with per-machine processor bits"""

    def test_generic_flags(self):
        self.assertEqual(section_flags_label(0x6), "SHF_ALLOC | SHF_EXECINSTR")
        self.assertEqual(section_flags_label(0x30), "SHF_MERGE | SHF_STRINGS")
        self.assertEqual(section_flags_label(0), "")

    def test_machine_specific_bit_named_only_for_its_machine(self):
        self.assertEqual(section_flags_labels(0x10000002, EM_X86_64),
                         ["SHF_ALLOC", "SHF_X86_64_LARGE"])
        self.assertEqual(section_flags_labels(0x10000002, EM_ARM),
                         ["SHF_ALLOC", "SHF_ARM_ENTRYSECT"])
        self.assertEqual(section_flags_labels(0x10000002, EM_IA_64),
                         ["SHF_ALLOC", "SHF_IA_64_SHORT"])
        self.assertEqual(section_flags_labels(0x10000002),
                         ["SHF_ALLOC", "SHF_MASKPROC(0x10000000)"])

    def test_machine_table_takes_precedence_over_gnu_meaning(self):
        self.assertEqual(section_flags_labels(0x80000000, EM_ARM), ["SHF_ARM_COMDEF"])
        self.assertEqual(section_flags_labels(0x40000000, EM_MIPS), ["SHF_MIPS_ADDR"])

    def test_gnu_meaning_for_unclaimed_bits(self):
        self.assertEqual(section_flags_labels(0x80000000), ["SHF_EXCLUDE"])
        self.assertEqual(section_flags_labels(0x40000000, EM_X86_64), ["SHF_ORDERED"])

    def test_os_range_reported_raw(self):
        self.assertEqual(section_flags_labels(0x00200001), ["SHF_WRITE", "SHF_MASKOS(0x200000)"])


class TestRelocationNames(unittest.TestCase):
    """Relocation type resolution from r_info"""

    def test_info_split_per_width(self):
        self.assertEqual(relocation_type_code(relocation_info(ElfClass.ELF32, 3, 22), 1), 22)
        self.assertEqual(relocation_symbol_index(relocation_info(ElfClass.ELF32, 3, 22), 1), 3)
        info64 = relocation_info(ElfClass.ELF64, 5, 7)
        self.assertEqual(relocation_type_code(info64, ElfClass.ELF64), 7)
        self.assertEqual(relocation_symbol_index(info64, ElfClass.ELF64), 5)

    def test_known_types(self):
        self.assertEqual(
            relocation_type_name(relocation_info(ElfClass.ELF32, 1, 2), ElfClass.ELF32, EM_ARM),
            "R_ARM_ABS32")
        self.assertEqual(
            relocation_type_name(relocation_info(ElfClass.ELF32, 2, 22), 1, EM_ARM),
            "R_ARM_JUMP_SLOT")
        self.assertEqual(
            relocation_type_name(relocation_info(ElfClass.ELF64, 5, 7), 2, EM_X86_64),
            "R_X86_64_JUMP_SLOT")
        self.assertEqual(
            relocation_type_name(8, ElfClass.ELF64, EM_X86_64), "R_X86_64_RELATIVE")
        self.assertEqual(
            relocation_type_name(relocation_info(ElfClass.ELF64, 1, 1026), 2, EM_AARCH64),
            "R_AARCH64_JUMP_SLOT")

    def test_listed_architectures(self):
        self.assertEqual(relocation_type_name(5, 1, 243), "R_RISCV_JUMP_SLOT")
        self.assertEqual(relocation_type_name(21, 1, 4), "R_68K_JMP_SLOT")
        self.assertIs(RELOCATION_TABLES[2], RELOCATION_TABLES[43])
        self.assertIs(RELOCATION_TABLES[41], RELOCATION_TABLES[0x9026])

    def test_tables_taken_from_pyelftools(self):
        for machine, enum in ((20, ENUM_RELOC_TYPE_PPC), (21, ENUM_RELOC_TYPE_PPC64),
                              (22, ENUM_RELOC_TYPE_S390X), (EM_ARM, ENUM_RELOC_TYPE_ARM)):
            with self.subTest(machine=machine):
                codes = {value for value in enum.values() if isinstance(value, int)}
                self.assertEqual(set(RELOCATION_TABLES[machine]), codes)
                for code in codes:
                    self.assertEqual(enum[relocation_type_name(code, 2, machine)], code)

    def test_unsupported_architecture(self):
        with self.assertRaises(UnsupportedArchitectureError) as ctx:
            relocation_type_name(0x102, 1, 9999)
        self.assertEqual(ctx.exception.machine, 9999)
        self.assertEqual(str(ctx.exception), "Unsupported architecture: 9999")
        self.assertIsInstance(ctx.exception, ElfError)

    def test_unknown_type_for_machine(self):
        with self.assertRaises(UnknownRelocationTypeError) as ctx:
            relocation_type_name(0xffff, ElfClass.ELF64, EM_X86_64)
        self.assertEqual(ctx.exception.type_code, 0xffff)
        self.assertEqual(ctx.exception.machine, EM_X86_64)

    def test_invalid_class(self):
        with self.assertRaises(ValueError):
            relocation_type_code(0x102, 3)


if __name__ == '__main__':
    unittest.main()
