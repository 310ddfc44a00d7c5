"""Labels for section header types and flags.

Processor-specific flag bits overlap between architectures, so they are kept
in per-machine tables and only consulted for the matching e_machine.
"""

SECTION_TYPES = {
    0: "SHT_NULL",
    1: "SHT_PROGBITS",
    2: "SHT_SYMTAB",
    3: "SHT_STRTAB",
    4: "SHT_RELA",
    5: "SHT_HASH",
    6: "SHT_DYNAMIC",
    7: "SHT_NOTE",
    8: "SHT_NOBITS",
    9: "SHT_REL",
    10: "SHT_SHLIB",
    11: "SHT_DYNSYM",
    14: "SHT_INIT_ARRAY",
    15: "SHT_FINI_ARRAY",
    16: "SHT_PREINIT_ARRAY",
    17: "SHT_GROUP",
    18: "SHT_SYMTAB_SHNDX",
    19: "SHT_RELR",
    0x60000000: "SHT_LOOS",
    0x6ffffff5: "SHT_GNU_ATTRIBUTES",
    0x6ffffff6: "SHT_GNU_HASH",
    0x6ffffff7: "SHT_GNU_LIBLIST",
    0x6ffffff8: "SHT_CHECKSUM",
    0x6ffffffa: "SHT_SUNW_move",
    0x6ffffffb: "SHT_SUNW_COMDAT",
    0x6ffffffc: "SHT_SUNW_syminfo",
    0x6ffffffd: "SHT_GNU_verdef",
    0x6ffffffe: "SHT_GNU_verneed",
    0x6fffffff: "SHT_GNU_versym",
    0x70000000: "SHT_LOPROC",
    0x7fffffff: "SHT_HIPROC",
    0x80000000: "SHT_LOUSER",
    0x8fffffff: "SHT_HIUSER",
}

GENERIC_SECTION_FLAGS = (
    (0x1, "SHF_WRITE"),
    (0x2, "SHF_ALLOC"),
    (0x4, "SHF_EXECINSTR"),
    (0x10, "SHF_MERGE"),
    (0x20, "SHF_STRINGS"),
    (0x40, "SHF_INFO_LINK"),
    (0x80, "SHF_LINK_ORDER"),
    (0x100, "SHF_OS_NONCONFORMING"),
    (0x200, "SHF_GROUP"),
    (0x400, "SHF_TLS"),
    (0x800, "SHF_COMPRESSED"),
)

# Keyed by e_machine
MACHINE_SECTION_FLAGS = {
    8: (  # EM_MIPS
        (0x01000000, "SHF_MIPS_NODUPE"),
        (0x02000000, "SHF_MIPS_NAMES"),
        (0x04000000, "SHF_MIPS_LOCAL"),
        (0x08000000, "SHF_MIPS_NOSTRIP"),
        (0x10000000, "SHF_MIPS_GPREL"),
        (0x20000000, "SHF_MIPS_MERGE"),
        (0x40000000, "SHF_MIPS_ADDR"),
        (0x80000000, "SHF_MIPS_STRINGS"),
    ),
    15: (  # EM_PARISC
        (0x20000000, "SHF_PARISC_SHORT"),
        (0x40000000, "SHF_PARISC_HUGE"),
        (0x80000000, "SHF_PARISC_SBP"),
    ),
    41: (  # EM_FAKE_ALPHA
        (0x10000000, "SHF_ALPHA_GPREL"),
    ),
    0x9026: (  # EM_ALPHA
        (0x10000000, "SHF_ALPHA_GPREL"),
    ),
    40: (  # EM_ARM
        (0x10000000, "SHF_ARM_ENTRYSECT"),
        (0x80000000, "SHF_ARM_COMDEF"),
    ),
    50: (  # EM_IA_64
        (0x10000000, "SHF_IA_64_SHORT"),
        (0x20000000, "SHF_IA_64_NORECOV"),
    ),
    62: (  # EM_X86_64
        (0x10000000, "SHF_X86_64_LARGE"),
    ),
}

# GNU meanings for bits no machine table claimed
GNU_SECTION_FLAGS = (
    (0x40000000, "SHF_ORDERED"),
    (0x80000000, "SHF_EXCLUDE"),
)

SHF_MASKOS = 0x0ff00000
SHF_MASKPROC = 0xf0000000
