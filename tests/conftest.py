"""Shared pytest fixtures for memscope tests."""

import pytest

from elf_builder import FIRMWARE_LINKER_SCRIPT, WIDTHS_AND_ORDERS, build_firmware_image
from memscope.elf import parse_elf
from memscope.linker import parse_linker_script


@pytest.fixture
def firmware_bytes():
    """Raw bytes of the 32-bit little-endian firmware image"""
    return build_firmware_image()


@pytest.fixture
def firmware_image(firmware_bytes):
    return parse_elf(firmware_bytes)


@pytest.fixture
def firmware_regions():
    return parse_linker_script(FIRMWARE_LINKER_SCRIPT)


@pytest.fixture(params=WIDTHS_AND_ORDERS,
                ids=lambda param: f"{param[0].name}-{param[1].name}")
def firmware_variant(request):
    """(elf_class, byte_order, bytes) for every width and byte order"""
    elf_class, byte_order = request.param
    return elf_class, byte_order, build_firmware_image(elf_class, byte_order)


@pytest.fixture
def write_file(tmp_path):
    """Write content to a file under tmp_path and return its path as a string"""
    def _write(name, content):
        path = tmp_path / name
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content, encoding='utf-8')
        return str(path)
    return _write
