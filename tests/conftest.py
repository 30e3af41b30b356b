"""Ensure the pcg_random package is importable for local pytest runs."""

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from pcg_random import PCG32  # noqa: E402


@pytest.fixture
def reference_rng() -> PCG32:
    """Generator with the seed/stream pair pinned by the golden-value tests."""
    return PCG32(42, 54)
