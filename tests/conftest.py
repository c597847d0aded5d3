"""Test configuration and fixtures."""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent))

from splice_builders import REFERENCE_PATTERNS, build_header, reference_bytes


@pytest.fixture
def pattern_1_data():
    """Return raw bytes of reference pattern 1."""
    return reference_bytes("pattern_1")


@pytest.fixture
def header_only_data():
    """Return a 50 byte file with no tracks."""
    return build_header()


@pytest.fixture
def fixtures_dir(tmp_path):
    """Write the reference patterns to a temp directory and return it."""
    for name in REFERENCE_PATTERNS:
        (tmp_path / f"{name}.splice").write_bytes(reference_bytes(name))
    return tmp_path


@pytest.fixture
def splice_file(fixtures_dir):
    """Return path to reference pattern 1 on disk."""
    return fixtures_dir / "pattern_1.splice"
