"""Common base for the structure codecs."""

import logging
from typing import Optional

from .reader import ElfReader


class StructureParser:
    """Decodes one kind of ELF structure from a shared reader.

    Subclasses log through the injected logger when one is given, otherwise
    through the logger of their own module.
    """

    def __init__(self, reader: ElfReader, log: Optional[logging.Logger] = None):
        self.reader = reader
        self.log = log or logging.getLogger(type(self).__module__)

    @property
    def layout(self):
        return self.reader.layout

    def encode(self, kind: str, record) -> bytes:
        return self.reader.pack(kind, record)
