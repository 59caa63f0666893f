"""Common test fixtures for domain tests"""

import pytest

from barcode_server.domain import ModuleBitmap, Size


@pytest.fixture
def bar_space_bitmap() -> ModuleBitmap:
    """1-D bitmap: bar, space"""
    return ModuleBitmap.from_bits("10")


@pytest.fixture
def checker_bitmap() -> ModuleBitmap:
    """2x2 checkerboard, dark top-left"""
    return ModuleBitmap([[True, False], [False, True]])


@pytest.fixture
def square_size() -> Size:
    """200x200 target size"""
    return Size(width=200, height=200)
