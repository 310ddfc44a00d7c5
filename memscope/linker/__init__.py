"""Linker script and map file parsers."""

from .map_file import MapFileParser, parse_map_file
from .parser import LinkerScriptParser, parse_linker_script

__all__ = ['MapFileParser', 'parse_map_file', 'LinkerScriptParser', 'parse_linker_script']
