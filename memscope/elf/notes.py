"""Note section codec."""

from typing import List

from .base import StructureParser
from .constants import SHT_NOTE
from .models import NoteEntry, SectionHeader


class NoteParser(StructureParser):
    """
    Walks every SHT_NOTE section.

    Each entry is a 12-byte header followed by the owner name and the
    descriptor. The next entry starts immediately after the descriptor;
    no 4-byte alignment padding is applied.
    """

    def parse(self, sections: List[SectionHeader]) -> List[NoteEntry]:
        notes: List[NoteEntry] = []
        for section in sections:
            if section.sh_type == SHT_NOTE:
                notes.extend(self._parse_section(section))
        self.log.debug("Decoded %d notes", len(notes))
        return notes

    def _parse_section(self, section: SectionHeader) -> List[NoteEntry]:
        header_size = self.layout.nhdr_size
        position = section.sh_offset
        end = section.sh_offset + section.sh_size
        entries = []
        while position < end:
            fields = self.reader.unpack('nhdr', position)
            name_offset = position + header_size
            owner = self.reader.read_cstring(name_offset, fields['n_namesz'])
            description = self.reader.read_bytes(name_offset + fields['n_namesz'],
                                                 fields['n_descsz'])
            entries.append(NoteEntry(owner=owner, description=description,
                                     section=section.name, **fields))
            position = name_offset + fields['n_namesz'] + fields['n_descsz']
        return entries

    def encode_entry(self, note: NoteEntry) -> bytes:
        """Note header, owner and descriptor packed back to back"""
        owner = note.owner.encode('utf-8').ljust(note.n_namesz, b'\x00')[:note.n_namesz]
        return self.encode('nhdr', note) + owner + note.description
