"""Numeric literal handling shared by the linker-script and map-file parsers."""

import re

# Hex, octal with 0o, or decimal
NUMBER_PATTERN = r'0x[0-9a-f]+|0o[0-7]+|\d+'

SIZE_MULTIPLIERS = {
    '': 1,
    'K': 1024,
    'M': 1024 ** 2,
    'G': 1024 ** 3,
    'T': 1024 ** 4,
}

_NUMBER_RE = re.compile(rf'(?:{NUMBER_PATTERN})', re.IGNORECASE)


def parse_numeric_value(value: str) -> int:
    """
    Parse a 0x hex, 0o octal or decimal literal.

    Raises:
        ValueError: If the whole string is not one literal
    """
    value = value.strip()
    if not _NUMBER_RE.fullmatch(value):
        raise ValueError(f"Not a numeric literal: {value!r}")
    lowered = value.lower()
    if lowered.startswith('0x'):
        return int(lowered, 16)
    if lowered.startswith('0o'):
        return int(lowered, 8)
    return int(lowered, 10)


def apply_size_suffix(value: int, suffix: str) -> int:
    """Scale by a K/M/G/T suffix (powers of 1024); an empty suffix means bytes"""
    return value * SIZE_MULTIPLIERS[suffix.upper()]
