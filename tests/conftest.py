"""
Shared fixtures for Icon Studio tests.

Provides small documents, grids drawn from text art, and an offscreen
QApplication for the rendering and widget tests.
"""
import os
import sys

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from icon_studio.logic.document import Document
from icon_studio.logic.grid import Grid


# ── Sample export text ──────────────────────────────────────────────────

SAMPLE_C_ARRAY = """\
// Frame: Frame 1 (8x2). Total Bytes: 2
const uint8_t FRAME_BITMAP[2] = {
    0x81, 0x7E
};
"""


@pytest.fixture
def sample_c_array():
    return SAMPLE_C_ARRAY


@pytest.fixture
def doc8():
    """Fresh 8x8 document"""
    return Document(8, 8)


@pytest.fixture
def doc16():
    return Document(16, 16)


@pytest.fixture
def art():
    """Build a Grid from text art: '#' on, anything else off"""
    def _build(*lines):
        return Grid.from_strings(lines)
    return _build


@pytest.fixture(scope="session")
def qapp():
    """One QApplication for the whole run (offscreen platform)"""
    from PyQt6.QtWidgets import QApplication
    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    yield app
