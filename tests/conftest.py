"""Pytest configuration.

This conftest ensures tests can import the `kantong` package when running `pytest` from a checkout
without installing it, and provides the pocket roster shared by the parser tests.
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Ensure `import kantong...` works when running pytest without installing the package.
REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT))

from kantong.intent.aliases import generate_aliases  # noqa: E402
from kantong.intent.schema import PocketAlias  # noqa: E402


@pytest.fixture
def pockets() -> list[PocketAlias]:
    """Roster used by the assistant tests: one pocket carries aliases from its short name."""

    return [
        PocketAlias(id="tabungan", canonical_name="Tabungan"),
        PocketAlias(
            id="kebutuhan",
            canonical_name="Kebutuhan Pokok",
            aliases=generate_aliases("Keb. Pokok"),
        ),
        PocketAlias(id="emoney", canonical_name="E-Money"),
    ]
