"""Labels for dynamic section tags."""

DYNAMIC_TAGS = {
    0: "DT_NULL",
    1: "DT_NEEDED",
    2: "DT_PLTRELSZ",
    3: "DT_PLTGOT",
    4: "DT_HASH",
    5: "DT_STRTAB",
    6: "DT_SYMTAB",
    7: "DT_RELA",
    8: "DT_RELASZ",
    9: "DT_RELAENT",
    10: "DT_STRSZ",
    11: "DT_SYMENT",
    12: "DT_INIT",
    13: "DT_FINI",
    14: "DT_SONAME",
    15: "DT_RPATH",
    16: "DT_SYMBOLIC",
    17: "DT_REL",
    18: "DT_RELSZ",
    19: "DT_RELENT",
    20: "DT_PLTREL",
    21: "DT_DEBUG",
    22: "DT_TEXTREL",
    23: "DT_JMPREL",
    24: "DT_BIND_NOW",
    25: "DT_INIT_ARRAY",
    26: "DT_FINI_ARRAY",
    27: "DT_INIT_ARRAYSZ",
    28: "DT_FINI_ARRAYSZ",
    29: "DT_RUNPATH",
    30: "DT_FLAGS",
    32: "DT_PREINIT_ARRAY",
    33: "DT_PREINIT_ARRAYSZ",
    34: "DT_SYMTAB_SHNDX",
    35: "DT_RELRSZ",
    36: "DT_RELR",
    37: "DT_RELRENT",
    0x6000000d: "DT_LOOS",
    0x6ffff000: "DT_HIOS",
    0x6ffffd00: "DT_VALRNGLO",
    0x6ffffdf5: "DT_GNU_PRELINKED",
    0x6ffffdf6: "DT_GNU_CONFLICTSZ",
    0x6ffffdf7: "DT_GNU_LIBLISTSZ",
    0x6ffffdf8: "DT_CHECKSUM",
    0x6ffffdf9: "DT_PLTPADSZ",
    0x6ffffdfa: "DT_MOVEENT",
    0x6ffffdfb: "DT_MOVESZ",
    0x6ffffdfc: "DT_FEATURE_1",
    0x6ffffdfd: "DT_POSFLAG_1",
    0x6ffffdfe: "DT_SYMINSZ",
    0x6ffffdff: "DT_SYMINENT",
    0x6ffffe00: "DT_ADDRRNGLO",
    0x6ffffef5: "DT_GNU_HASH",
    0x6ffffef6: "DT_TLSDESC_PLT",
    0x6ffffef7: "DT_TLSDESC_GOT",
    0x6ffffef8: "DT_GNU_CONFLICT",
    0x6ffffef9: "DT_GNU_LIBLIST",
    0x6ffffefa: "DT_CONFIG",
    0x6ffffefb: "DT_DEPAUDIT",
    0x6ffffefc: "DT_AUDIT",
    0x6ffffefd: "DT_PLTPAD",
    0x6ffffefe: "DT_MOVETAB",
    0x6ffffeff: "DT_SYMINFO",
    0x6ffffff0: "DT_VERSYM",
    0x6ffffff9: "DT_RELACOUNT",
    0x6ffffffa: "DT_RELCOUNT",
    0x6ffffffb: "DT_FLAGS_1",
    0x6ffffffc: "DT_VERDEF",
    0x6ffffffd: "DT_VERDEFNUM",
    0x6ffffffe: "DT_VERNEED",
    0x6fffffff: "DT_VERNEEDNUM",
    0x70000000: "DT_LOPROC",
    0x70000001: "DT_MIPS_RLD_VERSION",
    0x70000002: "DT_MIPS_TIME_STAMP",
    0x70000003: "DT_MIPS_ICHECKSUM",
    0x70000004: "DT_MIPS_IVERSION",
    0x70000005: "DT_MIPS_FLAGS",
    0x70000006: "DT_MIPS_BASE_ADDRESS",
    0x70000007: "DT_MIPS_MSYM",
    0x70000008: "DT_MIPS_CONFLICT",
    0x70000009: "DT_MIPS_LIBLIST",
    0x7000000a: "DT_MIPS_LOCAL_GOTNO",
    0x7000000b: "DT_MIPS_CONFLICTNO",
    0x70000010: "DT_MIPS_LIBLISTNO",
    0x70000011: "DT_MIPS_SYMTABNO",
    0x70000012: "DT_MIPS_UNREFEXTNO",
    0x70000013: "DT_MIPS_GOTSYM",
    0x70000014: "DT_MIPS_HIPAGENO",
    0x70000016: "DT_MIPS_RLD_MAP",
    0x70000017: "DT_MIPS_DELTA_CLASS",
    0x70000018: "DT_MIPS_DELTA_CLASS_NO",
    0x70000019: "DT_MIPS_DELTA_INSTANCE",
    0x7000001a: "DT_MIPS_DELTA_INSTANCE_NO",
    0x7000001b: "DT_MIPS_DELTA_RELOC",
    0x7000001c: "DT_MIPS_DELTA_RELOC_NO",
    0x7000001d: "DT_MIPS_DELTA_SYM",
    0x7000001e: "DT_MIPS_DELTA_SYM_NO",
    0x70000020: "DT_MIPS_DELTA_CLASSSYM",
    0x70000021: "DT_MIPS_DELTA_CLASSSYM_NO",
    0x70000022: "DT_MIPS_CXX_FLAGS",
    0x70000023: "DT_MIPS_PIXIE_INIT",
    0x70000024: "DT_MIPS_SYMBOL_LIB",
    0x70000025: "DT_MIPS_LOCALPAGE_GOTIDX",
    0x70000026: "DT_MIPS_LOCAL_GOTIDX",
    0x70000027: "DT_MIPS_HIDDEN_GOTIDX",
    0x70000028: "DT_MIPS_PROTECTED_GOTIDX",
    0x70000029: "DT_MIPS_OPTIONS",
    0x7000002a: "DT_MIPS_INTERFACE",
    0x7000002b: "DT_MIPS_DYNSTR_ALIGN",
    0x7000002c: "DT_MIPS_INTERFACE_SIZE",
    0x7000002d: "DT_MIPS_RLD_TEXT_RESOLVE_ADDR",
    0x7000002e: "DT_MIPS_PERF_SUFFIX",
    0x7000002f: "DT_MIPS_COMPACT_SIZE",
    0x70000030: "DT_MIPS_GP_VALUE",
    0x70000031: "DT_MIPS_AUX_DYNAMIC",
    0x70000032: "DT_MIPS_PLTGOT",
    0x70000034: "DT_MIPS_RWPLT",
    0x70000035: "DT_MIPS_RLD_MAP_REL",
    0x7ffffffd: "DT_AUXILIARY",
    0x7fffffff: "DT_FILTER",
}
