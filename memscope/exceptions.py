"""Exception hierarchy for memscope.

Every error raised by the decoders and parsers derives from MemscopeError so
callers can catch one type at the boundary. ELF decoding problems live under
ElfError; linker-script and map-file problems live under MemoryLayoutError.
FormatError spans both families so malformed input of either kind can be
caught together; ElfError never catches a map-file error.
"""


class MemscopeError(Exception):
    """Base exception for all memscope errors"""


class FormatError(MemscopeError):
    """Input bytes or text do not have the expected layout"""


class ElfError(MemscopeError):
    """Base exception for ELF decoding errors"""


class ElfFormatError(ElfError, FormatError):
    """ELF bytes do not have the expected layout"""


class StringTableIndexError(ElfError, IndexError):
    """e_shstrndx does not name a parsed section"""


class MissingTableError(ElfError):
    """A string table required to resolve names is absent"""


class UnsupportedArchitectureError(ElfError):
    """No relocation table is registered for the machine"""

    def __init__(self, machine: int):
        self.machine = machine
        super().__init__(f"Unsupported architecture: {machine}")


class UnknownRelocationTypeError(ElfError):
    """Relocation type code missing from the machine's table"""

    def __init__(self, machine: int, type_code: int):
        self.machine = machine
        self.type_code = type_code
        super().__init__(
            f"Unknown relocation type {type_code} for machine {machine}")


class MemoryLayoutError(MemscopeError):
    """Base exception for linker-script and map-file errors"""


class MalformedDefinitionError(MemoryLayoutError):
    """A MEMORY block line could not be parsed"""


class MissingMemoryBlockError(MemoryLayoutError):
    """Linker script has no MEMORY block"""


class MapFileFormatError(MemoryLayoutError, FormatError):
    """Map file Memory Configuration table is malformed"""
