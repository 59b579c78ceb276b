"""Ensure the mtpeek package is importable for local pytest runs."""

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from mtpeek import DEFAULT_SEED_PS2, MT19937  # noqa: E402


@pytest.fixture
def ps2_mt():
    return MT19937(DEFAULT_SEED_PS2)
