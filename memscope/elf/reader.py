"""Identification resolution and width/order-aware record access.

The identification is resolved once from e_ident and every later read goes
through the ElfReader built from it, so the class and data bytes are never
consulted again downstream.
"""

import logging
import struct
from typing import Any, Dict, Optional

from ..exceptions import ElfFormatError
from .layout import (EI_NIDENT, ELF_MAGIC, LAYOUTS, MACHINE_OFFSET, ByteOrder,
                     ElfClass, ElfLayout)
from .models import ElfIdentification

logger = logging.getLogger(__name__)


def resolve_identification(data: bytes) -> ElfIdentification:
    """
    Validate e_ident and build the identification for a buffer.

    Args:
        data: Complete ELF file contents

    Returns:
        ElfIdentification with class, byte order and machine resolved

    Raises:
        ElfFormatError: If the buffer is short, the magic is wrong, or the
            class or data byte holds an unsupported value
    """
    if len(data) < EI_NIDENT:
        raise ElfFormatError("Not a valid ELF file: shorter than the identification block")
    if data[:4] != ELF_MAGIC:
        raise ElfFormatError("Not a valid ELF file: magic number mismatch")

    try:
        elf_class = ElfClass(data[4])
    except ValueError as exc:
        raise ElfFormatError(f"Unsupported ELF class: {data[4]}") from exc
    try:
        byte_order = ByteOrder(data[5])
    except ValueError as exc:
        raise ElfFormatError(f"Unsupported ELF data encoding: {data[5]}") from exc

    try:
        (machine,) = struct.unpack_from(byte_order.struct_prefix + 'H', data, MACHINE_OFFSET)
    except struct.error as exc:
        raise ElfFormatError("Not a valid ELF file: truncated before e_machine") from exc

    identification = ElfIdentification(
        elf_class=elf_class,
        byte_order=byte_order,
        version=data[6],
        osabi=data[7],
        abiversion=data[8],
        machine=machine,
        pad=bytes(data[9:EI_NIDENT]),
        magic=bytes(data[:4]),
    )
    logger.debug("Resolved identification: %s %s machine=%d",
                 elf_class.name, byte_order.name, machine)
    return identification


class ElfReader:
    """Byte buffer bound to a resolved identification"""

    def __init__(self, data: bytes, identification: Optional[ElfIdentification] = None):
        self.data = bytes(data)
        self.identification = identification or resolve_identification(self.data)
        self.layout: ElfLayout = LAYOUTS[self.identification.elf_class]
        self._prefix = self.identification.byte_order.struct_prefix
        self._structs: Dict[str, struct.Struct] = {}

    @classmethod
    def for_identification(cls, identification: ElfIdentification) -> 'ElfReader':
        """Reader with no backing data, used for encoding records"""
        return cls(b'', identification)

    def _struct(self, kind: str) -> struct.Struct:
        compiled = self._structs.get(kind)
        if compiled is None:
            compiled = struct.Struct(self._prefix + self.layout.record(kind).format)
            self._structs[kind] = compiled
        return compiled

    def unpack(self, kind: str, offset: int) -> Dict[str, int]:
        """
        Decode one record of the given kind at an absolute offset.

        Raises:
            ElfFormatError: If the record does not fit inside the buffer
        """
        if offset < 0:
            raise ElfFormatError(f"Negative offset {offset} for {kind} record")
        try:
            values = self._struct(kind).unpack_from(self.data, offset)
        except struct.error as exc:
            raise ElfFormatError(
                f"Truncated {kind} record at offset {offset:#x} "
                f"(file is {len(self.data)} bytes)") from exc
        return dict(zip(self.layout.record(kind).names, values))

    def pack(self, kind: str, record: Any) -> bytes:
        """Encode a record object (or mapping) with this reader's width and order"""
        names = self.layout.record(kind).names
        if isinstance(record, dict):
            values = [record[name] for name in names]
        else:
            values = [getattr(record, name) for name in names]
        try:
            return self._struct(kind).pack(*values)
        except struct.error as exc:
            raise ElfFormatError(f"Cannot encode {kind} record: {exc}") from exc

    def read_bytes(self, offset: int, size: int) -> bytes:
        if offset < 0 or size < 0 or offset + size > len(self.data):
            raise ElfFormatError(
                f"Range {offset:#x}+{size:#x} is outside the file "
                f"({len(self.data)} bytes)")
        return self.data[offset:offset + size]

    def read_cstring(self, offset: int, limit: Optional[int] = None) -> str:
        """
        Read a NUL-terminated string.

        The string ends at the first NUL, at `limit` bytes, or at the end of
        the buffer, whichever comes first.
        """
        if offset < 0 or offset > len(self.data):
            raise ElfFormatError(f"String offset {offset:#x} is outside the file")
        end = len(self.data) if limit is None else min(len(self.data), offset + limit)
        terminator = self.data.find(b'\x00', offset, end)
        if terminator == -1:
            terminator = end
        return self.data[offset:terminator].decode('utf-8', errors='replace')
