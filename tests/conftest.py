"""Shared test fixtures for quotely-parser.

Fixtures defined here are available to all tests in the suite without
needing an explicit import. Add project-wide fixtures here; keep
domain-specific fixtures close to the tests that use them.
"""
from __future__ import annotations

import pytest

from quotely.state import Quote, QuoteItem, QuoteList, QuotelyState


@pytest.fixture()
def package_name() -> str:
    """Return the importable package name for assertions."""
    return "quotely"


@pytest.fixture()
def expected_version() -> str:
    """Return the current expected version string.

    Update this fixture when cutting a release so that the version
    test immediately catches stale ``__version__`` values.
    """
    return "0.1.0"


@pytest.fixture()
def q1() -> Quote:
    """Quote ``Q1`` for John Tan holding a single ``Widget`` line."""
    return Quote("Q1", "John Tan", [QuoteItem("Widget", 10.5, 2)])


@pytest.fixture()
def q2() -> Quote:
    """Empty quote ``Q2`` for Mary Lim."""
    return Quote("Q2", "Mary Lim")


@pytest.fixture()
def quote_list(q1: Quote, q2: Quote) -> QuoteList:
    return QuoteList([q1, q2])


@pytest.fixture()
def main_state() -> QuotelyState:
    """State at the main menu (no active quote)."""
    return QuotelyState()


@pytest.fixture()
def inside_state(q1: Quote) -> QuotelyState:
    """State inside quote ``Q1``."""
    return QuotelyState(q1)
