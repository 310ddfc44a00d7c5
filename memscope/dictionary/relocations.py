"""Relocation type names, keyed by e_machine.

The tables for 386, x86-64, ARM, AArch64, MIPS, PowerPC, PowerPC64 and S390
come from pyelftools; the remaining architectures are listed here with the
names glibc's elf.h uses.
"""

from typing import Dict, Mapping

from elftools.elf.enums import (ENUM_RELOC_TYPE_AARCH64, ENUM_RELOC_TYPE_ARM,
                                ENUM_RELOC_TYPE_i386, ENUM_RELOC_TYPE_MIPS,
                                ENUM_RELOC_TYPE_PPC, ENUM_RELOC_TYPE_PPC64,
                                ENUM_RELOC_TYPE_S390X, ENUM_RELOC_TYPE_x64)


def _from_enum(enum: Mapping[str, object]) -> Dict[int, str]:
    """Invert a pyelftools name->value enum, skipping its _default_ entry"""
    table: Dict[int, str] = {}
    for name, value in enum.items():
        if isinstance(value, int):
            table.setdefault(value, name)
    return table


def _table(prefix: str, names: Mapping[int, str]) -> Dict[int, str]:
    return {code: prefix + suffix for code, suffix in names.items()}


I386_RELOCATIONS = _from_enum(ENUM_RELOC_TYPE_i386)
X86_64_RELOCATIONS = _from_enum(ENUM_RELOC_TYPE_x64)
ARM_RELOCATIONS = _from_enum(ENUM_RELOC_TYPE_ARM)
AARCH64_RELOCATIONS = _from_enum(ENUM_RELOC_TYPE_AARCH64)
MIPS_RELOCATIONS = _from_enum(ENUM_RELOC_TYPE_MIPS)

M68K_RELOCATIONS = _table('R_68K_', {
    0: 'NONE', 1: '32', 2: '16', 3: '8', 4: 'PC32', 5: 'PC16', 6: 'PC8',
    7: 'GOT32', 8: 'GOT16', 9: 'GOT8', 10: 'GOT32O', 11: 'GOT16O',
    12: 'GOT8O', 13: 'PLT32', 14: 'PLT16', 15: 'PLT8', 16: 'PLT32O',
    17: 'PLT16O', 18: 'PLT8O', 19: 'COPY', 20: 'GLOB_DAT', 21: 'JMP_SLOT',
    22: 'RELATIVE', 25: 'TLS_GD32', 26: 'TLS_GD16', 27: 'TLS_GD8',
    28: 'TLS_LDM32', 29: 'TLS_LDM16', 30: 'TLS_LDM8', 31: 'TLS_LDO32',
    32: 'TLS_LDO16', 33: 'TLS_LDO8', 34: 'TLS_IE32', 35: 'TLS_IE16',
    36: 'TLS_IE8', 37: 'TLS_LE32', 38: 'TLS_LE16', 39: 'TLS_LE8',
    40: 'TLS_DTPMOD32', 41: 'TLS_DTPREL32', 42: 'TLS_TPREL32',
})

SPARC_RELOCATIONS = _table('R_SPARC_', {
    0: 'NONE', 1: '8', 2: '16', 3: '32', 4: 'DISP8', 5: 'DISP16',
    6: 'DISP32', 7: 'WDISP30', 8: 'WDISP22', 9: 'HI22', 10: '22', 11: '13',
    12: 'LO10', 13: 'GOT10', 14: 'GOT13', 15: 'GOT22', 16: 'PC10',
    17: 'PC22', 18: 'WPLT30', 19: 'COPY', 20: 'GLOB_DAT', 21: 'JMP_SLOT',
    22: 'RELATIVE', 23: 'UA32', 24: 'PLT32', 25: 'HIPLT22', 26: 'LOPLT10',
    27: 'PCPLT32', 28: 'PCPLT22', 29: 'PCPLT10', 30: '10', 31: '11',
    32: '64', 33: 'OLO10', 34: 'HH22', 35: 'HM10', 36: 'LM22',
    37: 'PC_HH22', 38: 'PC_HM10', 39: 'PC_LM22', 40: 'WDISP16',
    41: 'WDISP19', 42: 'GLOB_JMP', 43: '7', 44: '5', 45: '6', 46: 'DISP64',
    47: 'PLT64', 48: 'HIX22', 49: 'LOX10', 50: 'H44', 51: 'M44', 52: 'L44',
    53: 'REGISTER', 54: 'UA64', 55: 'UA16', 56: 'TLS_GD_HI22',
    57: 'TLS_GD_LO10', 58: 'TLS_GD_ADD', 59: 'TLS_GD_CALL',
    60: 'TLS_LDM_HI22', 61: 'TLS_LDM_LO10', 62: 'TLS_LDM_ADD',
    63: 'TLS_LDM_CALL', 64: 'TLS_LDO_HIX22', 65: 'TLS_LDO_LOX10',
    66: 'TLS_LDO_ADD', 67: 'TLS_IE_HI22', 68: 'TLS_IE_LO10', 69: 'TLS_IE_LD',
    70: 'TLS_IE_LDX', 71: 'TLS_IE_ADD', 72: 'TLS_LE_HIX22',
    73: 'TLS_LE_LOX10', 74: 'TLS_DTPMOD32', 75: 'TLS_DTPMOD64',
    76: 'TLS_DTPOFF32', 77: 'TLS_DTPOFF64', 78: 'TLS_TPOFF32',
    79: 'TLS_TPOFF64', 80: 'GOTDATA_HIX22', 81: 'GOTDATA_LOX10',
    82: 'GOTDATA_OP_HIX22', 83: 'GOTDATA_OP_LOX10', 84: 'GOTDATA_OP',
    85: 'H34', 86: 'SIZE32', 87: 'SIZE64', 88: 'WDISP10', 248: 'JMP_IREL',
    249: 'IRELATIVE', 250: 'GNU_VTINHERIT', 251: 'GNU_VTENTRY', 252: 'REV32',
})

PARISC_RELOCATIONS = _table('R_PARISC_', {
    0: 'NONE', 1: 'DIR32', 2: 'DIR21L', 3: 'DIR17R', 4: 'DIR17F',
    6: 'DIR14R', 8: 'PCREL32', 9: 'PCREL21L', 10: 'PCREL17R',
    11: 'PCREL17F', 14: 'PCREL14R', 18: 'DPREL21L', 22: 'DPREL14R',
    26: 'GPREL21L', 30: 'GPREL14R', 34: 'LTOFF21L', 38: 'LTOFF14R',
    41: 'SECREL32', 48: 'SEGBASE', 49: 'SEGREL32', 50: 'PLTOFF21L',
    54: 'PLTOFF14R', 57: 'LTOFF_FPTR32', 58: 'LTOFF_FPTR21L',
    62: 'LTOFF_FPTR14R', 64: 'FPTR64', 65: 'PLABEL32', 66: 'PLABEL21L',
    70: 'PLABEL14R', 72: 'PCREL64', 74: 'PCREL22F', 75: 'PCREL14WR',
    76: 'PCREL14DR', 77: 'PCREL16F', 78: 'PCREL16WF', 79: 'PCREL16DF',
    80: 'DIR64', 83: 'DIR14WR', 84: 'DIR14DR', 85: 'DIR16F', 86: 'DIR16WF',
    87: 'DIR16DF', 88: 'GPREL64', 91: 'GPREL14WR', 92: 'GPREL14DR',
    93: 'GPREL16F', 94: 'GPREL16WF', 95: 'GPREL16DF', 96: 'LTOFF64',
    99: 'LTOFF14WR', 100: 'LTOFF14DR', 101: 'LTOFF16F', 102: 'LTOFF16WF',
    103: 'LTOFF16DF', 104: 'SECREL64', 112: 'SEGREL64', 115: 'PLTOFF14WR',
    116: 'PLTOFF14DR', 117: 'PLTOFF16F', 118: 'PLTOFF16WF',
    119: 'PLTOFF16DF', 120: 'LTOFF_FPTR64', 123: 'LTOFF_FPTR14WR',
    124: 'LTOFF_FPTR14DR', 125: 'LTOFF_FPTR16F', 126: 'LTOFF_FPTR16WF',
    127: 'LTOFF_FPTR16DF', 128: 'COPY', 129: 'IPLT', 130: 'EPLT',
    153: 'TPREL32', 154: 'TPREL21L', 158: 'TPREL14R', 162: 'LTOFF_TP21L',
    166: 'LTOFF_TP14R', 167: 'LTOFF_TP14F', 216: 'TPREL64',
    219: 'TPREL14WR', 220: 'TPREL14DR', 221: 'TPREL16F', 222: 'TPREL16WF',
    223: 'TPREL16DF', 224: 'LTOFF_TP64', 227: 'LTOFF_TP14WR',
    228: 'LTOFF_TP14DR', 229: 'LTOFF_TP16F', 230: 'LTOFF_TP16WF',
    231: 'LTOFF_TP16DF',
})

ALPHA_RELOCATIONS = _table('R_ALPHA_', {
    0: 'NONE', 1: 'REFLONG', 2: 'REFQUAD', 3: 'GPREL32', 4: 'LITERAL',
    5: 'LITUSE', 6: 'GPDISP', 7: 'BRADDR', 8: 'HINT', 9: 'SREL16',
    10: 'SREL32', 11: 'SREL64', 17: 'GPRELHIGH', 18: 'GPRELLOW',
    19: 'GPREL16', 24: 'COPY', 25: 'GLOB_DAT', 26: 'JMP_SLOT',
    27: 'RELATIVE', 28: 'TLS_GD_HI', 29: 'TLSGD', 30: 'TLS_LDM',
    31: 'DTPMOD64', 32: 'GOTDTPREL', 33: 'DTPREL64', 34: 'DTPRELHI',
    35: 'DTPRELLO', 36: 'DTPREL16', 37: 'GOTTPREL', 38: 'TPREL64',
    39: 'TPRELHI', 40: 'TPRELLO', 41: 'TPREL16',
})

SH_RELOCATIONS = _table('R_SH_', {
    0: 'NONE', 1: 'DIR32', 2: 'REL32', 3: 'DIR8WPN', 4: 'IND12W',
    5: 'DIR8WPL', 6: 'DIR8WPZ', 7: 'DIR8BP', 8: 'DIR8W', 9: 'DIR8L',
    25: 'SWITCH16', 26: 'SWITCH32', 27: 'USES', 28: 'COUNT', 29: 'ALIGN',
    30: 'CODE', 31: 'DATA', 32: 'LABEL', 33: 'SWITCH8',
    34: 'GNU_VTINHERIT', 35: 'GNU_VTENTRY', 144: 'TLS_GD_32',
    145: 'TLS_LD_32', 146: 'TLS_LDO_32', 147: 'TLS_IE_32',
    148: 'TLS_LE_32', 149: 'TLS_DTPMOD32', 150: 'TLS_DTPOFF32',
    151: 'TLS_TPOFF32', 160: 'GOT32', 161: 'PLT32', 162: 'COPY',
    163: 'GLOB_DAT', 164: 'JMP_SLOT', 165: 'RELATIVE', 166: 'GOTOFF',
    167: 'GOTPC',
})

M32R_RELOCATIONS = _table('R_M32R_', {
    0: 'NONE', 1: '16', 2: '32', 3: '24', 4: '10_PCREL', 5: '18_PCREL',
    6: '26_PCREL', 7: 'HI16_ULO', 8: 'HI16_SLO', 9: 'LO16', 10: 'SDA16',
    11: 'GNU_VTINHERIT', 12: 'GNU_VTENTRY', 33: '16_RELA', 34: '32_RELA',
    35: '24_RELA', 36: '10_PCREL_RELA', 37: '18_PCREL_RELA',
    38: '26_PCREL_RELA', 39: 'HI16_ULO_RELA', 40: 'HI16_SLO_RELA',
    41: 'LO16_RELA', 42: 'SDA16_RELA', 43: 'RELA_GNU_VTINHERIT',
    44: 'RELA_GNU_VTENTRY', 45: 'REL32', 48: 'GOT24', 49: '26_PLTREL',
    50: 'COPY', 51: 'GLOB_DAT', 52: 'JMP_SLOT', 53: 'RELATIVE',
    54: 'GOTOFF', 55: 'GOTPC24', 56: 'GOT16_HI_ULO', 57: 'GOT16_HI_SLO',
    58: 'GOT16_LO', 59: 'GOTPC_HI_ULO', 60: 'GOTPC_HI_SLO', 61: 'GOTPC_LO',
    62: 'GOTOFF_HI_ULO', 63: 'GOTOFF_HI_SLO', 64: 'GOTOFF_LO', 256: 'NUM',
})

PPC_RELOCATIONS = _from_enum(ENUM_RELOC_TYPE_PPC)
PPC64_RELOCATIONS = _from_enum(ENUM_RELOC_TYPE_PPC64)

IA64_RELOCATIONS = _table('R_IA64_', {
    0x00: 'NONE', 0x21: 'IMM14', 0x22: 'IMM22', 0x23: 'IMM64',
    0x24: 'DIR32MSB', 0x25: 'DIR32LSB', 0x26: 'DIR64MSB', 0x27: 'DIR64LSB',
    0x2a: 'GPREL22', 0x2b: 'GPREL64I', 0x2c: 'GPREL32MSB',
    0x2d: 'GPREL32LSB', 0x2e: 'GPREL64MSB', 0x2f: 'GPREL64LSB',
    0x32: 'LTOFF22', 0x33: 'LTOFF64I', 0x3a: 'PLTOFF22', 0x3b: 'PLTOFF64I',
    0x3e: 'PLTOFF64MSB', 0x3f: 'PLTOFF64LSB', 0x43: 'FPTR64I',
    0x44: 'FPTR32MSB', 0x45: 'FPTR32LSB', 0x46: 'FPTR64MSB',
    0x47: 'FPTR64LSB', 0x48: 'PCREL60B', 0x49: 'PCREL21B', 0x4a: 'PCREL21M',
    0x4b: 'PCREL21F', 0x4c: 'PCREL32MSB', 0x4d: 'PCREL32LSB',
    0x4e: 'PCREL64MSB', 0x4f: 'PCREL64LSB', 0x52: 'LTOFF_FPTR22',
    0x53: 'LTOFF_FPTR64I', 0x54: 'LTOFF_FPTR32MSB', 0x55: 'LTOFF_FPTR32LSB',
    0x56: 'LTOFF_FPTR64MSB', 0x57: 'LTOFF_FPTR64LSB', 0x5c: 'SEGREL32MSB',
    0x5d: 'SEGREL32LSB', 0x5e: 'SEGREL64MSB', 0x5f: 'SEGREL64LSB',
    0x64: 'SECREL32MSB', 0x65: 'SECREL32LSB', 0x66: 'SECREL64MSB',
    0x67: 'SECREL64LSB', 0x6c: 'REL32MSB', 0x6d: 'REL32LSB',
    0x6e: 'REL64MSB', 0x6f: 'REL64LSB', 0x74: 'LTV32MSB', 0x75: 'LTV32LSB',
    0x76: 'LTV64MSB', 0x77: 'LTV64LSB', 0x79: 'PCREL21BI', 0x7a: 'PCREL22',
    0x7b: 'PCREL64I', 0x80: 'IPLTMSB', 0x81: 'IPLTLSB', 0x84: 'COPY',
    0x85: 'SUB', 0x86: 'LTOFF22X', 0x87: 'LDXMOV', 0x91: 'TPREL14',
    0x92: 'TPREL22', 0x93: 'TPREL64I', 0x96: 'TPREL64MSB',
    0x97: 'TPREL64LSB', 0x9a: 'LTOFF_TPREL22', 0xa6: 'DTPMOD64MSB',
    0xa7: 'DTPMOD64LSB', 0xaa: 'LTOFF_DTPMOD22', 0xb1: 'DTPREL14',
    0xb2: 'DTPREL22', 0xb3: 'DTPREL64I', 0xb4: 'DTPREL32MSB',
    0xb5: 'DTPREL32LSB', 0xb6: 'DTPREL64MSB', 0xb7: 'DTPREL64LSB',
    0xba: 'LTOFF_DTPREL22',
})

S390_RELOCATIONS = _from_enum(ENUM_RELOC_TYPE_S390X)

CRIS_RELOCATIONS = _table('R_CRIS_', {
    0: 'NONE', 1: '8', 2: '16', 3: '32', 4: '8_PCREL', 5: '16_PCREL',
    6: '32_PCREL', 7: 'GNU_VTINHERIT', 8: 'GNU_VTENTRY', 9: 'COPY',
    10: 'GLOB_DAT', 11: 'JUMP_SLOT', 12: 'RELATIVE', 13: '16_GOT',
    14: '32_GOT', 15: '16_GOTPLT', 16: '32_GOTPLT', 17: '32_GOTREL',
    18: '32_PLT_GOTREL', 19: '32_PLT_PCREL',
})

MN10300_RELOCATIONS = _table('R_MN10300_', {
    0: 'NONE', 1: '32', 2: '16', 3: '8', 4: 'PCREL32', 5: 'PCREL16',
    6: 'PCREL8', 7: 'GNU_VTINHERIT', 8: 'GNU_VTENTRY', 9: '24',
    10: 'GOTPC32', 11: 'GOTPC16', 12: 'GOTOFF32', 13: 'GOTOFF24',
    14: 'GOTOFF16', 15: 'PLT32', 16: 'PLT16', 17: 'GOT32', 18: 'GOT24',
    19: 'GOT16', 20: 'COPY', 21: 'GLOB_DAT', 22: 'JMP_SLOT', 23: 'RELATIVE',
    24: 'TLS_GD', 25: 'TLS_LD', 26: 'TLS_LDO', 27: 'TLS_GOTIE',
    28: 'TLS_IE', 29: 'TLS_LE', 30: 'TLS_DTPMOD', 31: 'TLS_DTPOFF',
    32: 'TLS_TPOFF', 33: 'SYM_DIFF', 34: 'ALIGN',
})

MICROBLAZE_RELOCATIONS = _table('R_MICROBLAZE_', {
    0: 'NONE', 1: '32', 2: '32_PCREL', 3: '64_PCREL', 4: '32_PCREL_LO',
    5: '64', 6: '32_LO', 7: 'SRO32', 8: 'SRW32', 9: '64_NONE',
    10: '32_SYM_OP_SYM', 11: 'GNU_VTINHERIT', 12: 'GNU_VTENTRY',
    13: 'GOTPC_64', 14: 'GOT_64', 15: 'PLT_64', 16: 'REL', 17: 'JUMP_SLOT',
    18: 'GLOB_DAT', 19: 'GOTOFF_64', 20: 'GOTOFF_32', 21: 'COPY', 22: 'TLS',
    23: 'TLSGD', 24: 'TLSLD', 25: 'TLSDTPMOD32', 26: 'TLSDTPREL32',
    27: 'TLSDTPREL64', 28: 'TLSGOTTPREL32', 29: 'TLSTPREL32',
})

NIOS2_RELOCATIONS = _table('R_NIOS2_', {
    0: 'NONE', 1: 'S16', 2: 'U16', 3: 'PCREL16', 4: 'CALL26', 5: 'IMM5',
    6: 'CACHE_OPX', 7: 'IMM6', 8: 'IMM8', 9: 'HI16', 10: 'LO16',
    11: 'HIADJ16', 12: 'BFD_RELOC_32', 13: 'BFD_RELOC_16',
    14: 'BFD_RELOC_8', 15: 'GPREL', 16: 'GNU_VTINHERIT', 17: 'GNU_VTENTRY',
    18: 'UJMP', 19: 'CJMP', 20: 'CALLR', 21: 'ALIGN', 22: 'GOT16',
    23: 'CALL16', 24: 'GOTOFF_LO', 25: 'GOTOFF_HA', 26: 'PCREL_LO',
    27: 'PCREL_HA', 28: 'TLS_GD16', 29: 'TLS_LDM16', 30: 'TLS_LDO16',
    31: 'TLS_IE16', 32: 'TLS_LE16', 33: 'TLS_DTPMOD', 34: 'TLS_DTPREL',
    35: 'TLS_TPREL', 36: 'COPY', 37: 'GLOB_DAT', 38: 'JUMP_SLOT',
    39: 'RELATIVE', 40: 'GOTOFF', 41: 'CALL26_NOAT', 42: 'GOT_LO',
    43: 'GOT_HA', 44: 'CALL_LO', 45: 'CALL_HA',
})

TILEPRO_RELOCATIONS = _table('R_TILEPRO_', {
    0: 'NONE', 1: '32', 2: '16', 3: '8', 4: '32_PCREL', 5: '16_PCREL',
    6: '8_PCREL', 7: 'LO16', 8: 'HI16', 9: 'HA16', 10: 'COPY',
    11: 'GLOB_DAT', 12: 'JMP_SLOT', 13: 'RELATIVE', 14: 'BROFF_X1',
    15: 'JOFFLONG_X1', 16: 'JOFFLONG_X1_PLT', 17: 'IMM8_X0', 18: 'IMM8_Y0',
    19: 'IMM8_X1', 20: 'IMM8_Y1', 21: 'MT_IMM15_X1', 22: 'MF_IMM15_X1',
    23: 'IMM16_X0', 24: 'IMM16_X1', 25: 'IMM16_X0_LO', 26: 'IMM16_X1_LO',
    27: 'IMM16_X0_HI', 28: 'IMM16_X1_HI', 29: 'IMM16_X0_HA',
    30: 'IMM16_X1_HA', 31: 'IMM16_X0_PCREL', 32: 'IMM16_X1_PCREL',
    33: 'IMM16_X0_LO_PCREL', 34: 'IMM16_X1_LO_PCREL',
    35: 'IMM16_X0_HI_PCREL', 36: 'IMM16_X1_HI_PCREL',
    37: 'IMM16_X0_HA_PCREL', 38: 'IMM16_X1_HA_PCREL', 39: 'IMM16_X0_GOT',
    40: 'IMM16_X1_GOT', 41: 'IMM16_X0_GOT_LO', 42: 'IMM16_X1_GOT_LO',
    43: 'IMM16_X0_GOT_HI', 44: 'IMM16_X1_GOT_HI', 45: 'IMM16_X0_GOT_HA',
    46: 'IMM16_X1_GOT_HA', 47: 'MMSTART_X0', 48: 'MMEND_X0',
    49: 'MMSTART_X1', 50: 'MMEND_X1', 51: 'SHAMT_X0', 52: 'SHAMT_X1',
    53: 'SHAMT_Y0', 54: 'SHAMT_Y1', 55: 'DEST_IMM8_X1', 60: 'TLS_GD_CALL',
    61: 'IMM8_X0_TLS_GD_ADD', 62: 'IMM8_X1_TLS_GD_ADD',
    63: 'IMM8_Y0_TLS_GD_ADD', 64: 'IMM8_Y1_TLS_GD_ADD', 65: 'TLS_IE_LOAD',
    66: 'IMM16_X0_TLS_GD', 67: 'IMM16_X1_TLS_GD', 68: 'IMM16_X0_TLS_GD_LO',
    69: 'IMM16_X1_TLS_GD_LO', 70: 'IMM16_X0_TLS_GD_HI',
    71: 'IMM16_X1_TLS_GD_HI', 72: 'IMM16_X0_TLS_GD_HA',
    73: 'IMM16_X1_TLS_GD_HA', 74: 'IMM16_X0_TLS_IE', 75: 'IMM16_X1_TLS_IE',
    76: 'IMM16_X0_TLS_IE_LO', 77: 'IMM16_X1_TLS_IE_LO',
    78: 'IMM16_X0_TLS_IE_HI', 79: 'IMM16_X1_TLS_IE_HI',
    80: 'IMM16_X0_TLS_IE_HA', 81: 'IMM16_X1_TLS_IE_HA',
    82: 'TLS_DTPMOD32', 83: 'TLS_DTPOFF32', 84: 'TLS_TPOFF32',
    85: 'IMM16_X0_TLS_LE', 86: 'IMM16_X1_TLS_LE', 87: 'IMM16_X0_TLS_LE_LO',
    88: 'IMM16_X1_TLS_LE_LO', 89: 'IMM16_X0_TLS_LE_HI',
    90: 'IMM16_X1_TLS_LE_HI', 91: 'IMM16_X0_TLS_LE_HA',
    92: 'IMM16_X1_TLS_LE_HA', 128: 'GNU_VTINHERIT', 129: 'GNU_VTENTRY',
})

TILEGX_RELOCATIONS = _table('R_TILEGX_', {
    0: 'NONE', 1: '64', 2: '32', 3: '16', 4: '8', 5: '64_PCREL',
    6: '32_PCREL', 7: '16_PCREL', 8: '8_PCREL', 9: 'HW0', 10: 'HW1',
    11: 'HW2', 12: 'HW3', 13: 'HW0_LAST', 14: 'HW1_LAST', 15: 'HW2_LAST',
    16: 'COPY', 17: 'GLOB_DAT', 18: 'JMP_SLOT', 19: 'RELATIVE',
    20: 'BROFF_X1', 21: 'JUMPOFF_X1', 22: 'JUMPOFF_X1_PLT', 23: 'IMM8_X0',
    24: 'IMM8_Y0', 25: 'IMM8_X1', 26: 'IMM8_Y1', 27: 'DEST_IMM8_X1',
    28: 'MT_IMM14_X1', 29: 'MF_IMM14_X1', 30: 'MMSTART_X0', 31: 'MMEND_X0',
    32: 'SHAMT_X0', 33: 'SHAMT_X1', 34: 'SHAMT_Y0', 35: 'SHAMT_Y1',
    36: 'IMM16_X0_HW0', 37: 'IMM16_X1_HW0', 38: 'IMM16_X0_HW1',
    39: 'IMM16_X1_HW1', 40: 'IMM16_X0_HW2', 41: 'IMM16_X1_HW2',
    42: 'IMM16_X0_HW3', 43: 'IMM16_X1_HW3', 44: 'IMM16_X0_HW0_LAST',
    45: 'IMM16_X1_HW0_LAST', 46: 'IMM16_X0_HW1_LAST',
    47: 'IMM16_X1_HW1_LAST', 48: 'IMM16_X0_HW2_LAST',
    49: 'IMM16_X1_HW2_LAST', 50: 'IMM16_X0_HW0_PCREL',
    51: 'IMM16_X1_HW0_PCREL', 52: 'IMM16_X0_HW1_PCREL',
    53: 'IMM16_X1_HW1_PCREL', 54: 'IMM16_X0_HW2_PCREL',
    55: 'IMM16_X1_HW2_PCREL', 56: 'IMM16_X0_HW3_PCREL',
    57: 'IMM16_X1_HW3_PCREL', 58: 'IMM16_X0_HW0_LAST_PCREL',
    59: 'IMM16_X1_HW0_LAST_PCREL', 60: 'IMM16_X0_HW1_LAST_PCREL',
    61: 'IMM16_X1_HW1_LAST_PCREL', 62: 'IMM16_X0_HW2_LAST_PCREL',
    63: 'IMM16_X1_HW2_LAST_PCREL', 64: 'IMM16_X0_HW0_GOT',
    65: 'IMM16_X1_HW0_GOT', 128: 'GNU_VTINHERIT', 129: 'GNU_VTENTRY',
})

RISCV_RELOCATIONS = _table('R_RISCV_', {
    0: 'NONE', 1: '32', 2: '64', 3: 'RELATIVE', 4: 'COPY', 5: 'JUMP_SLOT',
    6: 'TLS_DTPMOD32', 7: 'TLS_DTPMOD64', 8: 'TLS_DTPREL32',
    9: 'TLS_DTPREL64', 10: 'TLS_TPREL32', 11: 'TLS_TPREL64', 12: 'TLSDESC',
    16: 'BRANCH', 17: 'JAL', 18: 'CALL', 19: 'CALL_PLT', 20: 'GOT_HI20',
    21: 'TLS_GOT_HI20', 22: 'TLS_GD_HI20', 23: 'PCREL_HI20',
    24: 'PCREL_LO12_I', 25: 'PCREL_LO12_S', 26: 'HI20', 27: 'LO12_I',
    28: 'LO12_S', 29: 'TPREL_HI20', 30: 'TPREL_LO12_I', 31: 'TPREL_LO12_S',
    32: 'TPREL_ADD', 33: 'ADD8', 34: 'ADD16', 35: 'ADD32', 36: 'ADD64',
    37: 'SUB8', 38: 'SUB16', 39: 'SUB32', 40: 'SUB64', 41: 'GNU_VTINHERIT',
    42: 'GNU_VTENTRY', 43: 'ALIGN', 44: 'RVC_BRANCH', 45: 'RVC_JUMP',
    46: 'RVC_LUI', 47: 'GPREL_I', 48: 'GPREL_S', 49: 'TPREL_I',
    50: 'TPREL_S', 51: 'RELAX', 52: 'SUB6', 53: 'SET6', 54: 'SET8',
    55: 'SET16', 56: 'SET32', 57: '32_PCREL', 58: 'IRELATIVE', 59: 'PLT32',
    60: 'SET_ULEB128', 61: 'SUB_ULEB128',
})

METAG_RELOCATIONS = _table('R_METAG_', {
    0: 'HIADDR16', 1: 'LOADDR16', 2: 'ADDR32', 3: 'NONE', 4: 'RELBRANCH',
    5: 'GETSETOFF', 6: 'REG32OP1', 7: 'REG32OP2', 8: 'REG32OP3',
    9: 'REG16OP1', 10: 'REG16OP2', 11: 'REG16OP3', 12: 'REG32OP4',
    13: 'HIOG', 14: 'LOOG', 15: 'REL8', 16: 'REL16', 30: 'GNU_VTINHERIT',
    31: 'GNU_VTENTRY', 32: 'HI16_GOTOFF', 33: 'LO16_GOTOFF',
    34: 'GETSET_GOTOFF', 35: 'GETSET_GOT', 36: 'HI16_GOTPC',
    37: 'LO16_GOTPC', 38: 'HI16_PLT', 39: 'LO16_PLT', 40: 'RELBRANCH_PLT',
    41: 'GOTOFF', 42: 'PLT', 43: 'COPY', 44: 'JMP_SLOT', 45: 'RELATIVE',
    46: 'GLOB_DAT', 47: 'TLS_GD', 48: 'TLS_LDM', 49: 'TLS_LDO_HI16',
    50: 'TLS_LDO_LO16', 51: 'TLS_LDO', 52: 'TLS_IE', 53: 'TLS_IENONPIC',
    54: 'TLS_IENONPIC_HI16', 55: 'TLS_IENONPIC_LO16', 56: 'TLS_TPOFF',
    57: 'TLS_DTPMOD', 58: 'TLS_DTPOFF', 59: 'TLS_LE', 60: 'TLS_LE_HI16',
    61: 'TLS_LE_LO16',
})

NDS32_RELOCATIONS = _table('R_NDS32_', {
    0: 'NONE', 20: '32_RELA', 39: 'COPY', 40: 'GLOB_DAT', 41: 'JMP_SLOT',
    42: 'RELATIVE', 94: 'TLS_TPOFF', 97: 'TLS_DESC',
})

# e_machine -> relocation table
RELOCATION_TABLES = {
    2: SPARC_RELOCATIONS,        # EM_SPARC
    3: I386_RELOCATIONS,         # EM_386
    4: M68K_RELOCATIONS,         # EM_68K
    8: MIPS_RELOCATIONS,         # EM_MIPS
    15: PARISC_RELOCATIONS,      # EM_PARISC
    18: SPARC_RELOCATIONS,       # EM_SPARC32PLUS
    20: PPC_RELOCATIONS,         # EM_PPC
    21: PPC64_RELOCATIONS,       # EM_PPC64
    22: S390_RELOCATIONS,        # EM_S390
    40: ARM_RELOCATIONS,         # EM_ARM
    41: ALPHA_RELOCATIONS,       # EM_FAKE_ALPHA
    42: SH_RELOCATIONS,          # EM_SH
    43: SPARC_RELOCATIONS,       # EM_SPARCV9
    50: IA64_RELOCATIONS,        # EM_IA_64
    62: X86_64_RELOCATIONS,      # EM_X86_64
    76: CRIS_RELOCATIONS,        # EM_CRIS
    88: M32R_RELOCATIONS,        # EM_M32R
    89: MN10300_RELOCATIONS,     # EM_MN10300
    113: NIOS2_RELOCATIONS,      # EM_ALTERA_NIOS2
    167: NDS32_RELOCATIONS,      # EM_NDS32
    174: METAG_RELOCATIONS,      # EM_METAG
    183: AARCH64_RELOCATIONS,    # EM_AARCH64
    188: TILEPRO_RELOCATIONS,    # EM_TILEPRO
    189: MICROBLAZE_RELOCATIONS, # EM_MICROBLAZE
    191: TILEGX_RELOCATIONS,     # EM_TILEGX
    243: RISCV_RELOCATIONS,      # EM_RISCV
    0x9026: ALPHA_RELOCATIONS,   # EM_ALPHA
}
