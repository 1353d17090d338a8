"""Shared test fixtures for detect-cycles tests."""

import pytest


# ─────────────────────────────────────────────────────────────────────
# SAMPLE DATA
# ─────────────────────────────────────────────────────────────────────

# (input line, expected cycle) pairs in the classic challenge format
SAMPLE_LINES = [
    ("2 0 6 3 1 6 3 1 6 3 1", "6 3 1"),
    ("3 4 8 0 11 9 7 2 5 6 10 1 49 49 49 49", "49"),
    ("1 2 3 1 2 3 1 2 3", "1 2 3"),
    ("z a b a b", "a b"),
]


# ─────────────────────────────────────────────────────────────────────
# FIXTURES
# ─────────────────────────────────────────────────────────────────────


@pytest.fixture
def sample_file(tmp_path):
    """Input file holding every SAMPLE_LINES input, one per line."""
    path = tmp_path / "input.txt"
    path.write_text("".join(f"{line}\n" for line, _ in SAMPLE_LINES))
    return path


@pytest.fixture
def expected_output():
    """Plain-text output expected for sample_file."""
    return "".join(f"{cycle}\n" for _, cycle in SAMPLE_LINES)
