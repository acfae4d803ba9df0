"""Collaborator contracts read by the parser.

The parser never owns quotes or navigation state; it only reads them
through these protocols.  Any object with matching methods satisfies a
protocol structurally, so executors can pass their own classes.
"""
from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Quote(Protocol):
    """A quote as seen by the parser: a name and an ordered item list."""

    def get_quote_name(self) -> str:
        ...  # pragma: no cover

    def get_items(self) -> Sequence[Any]:
        """Return the quote's items in insertion order."""
        ...  # pragma: no cover

    def has_item(self, name: str) -> bool:
        """Return True if an item called *name* is on the quote."""
        ...  # pragma: no cover


@runtime_checkable
class QuoteList(Protocol):
    """Registry of all quotes, looked up by name."""

    def get_quote_by_name(self, name: str) -> Quote:
        """Return the quote called *name*.

        Raises
        ------
        QuotelyError
            With kind ``QUOTE_NOT_FOUND`` when no such quote exists.
        """
        ...  # pragma: no cover


@runtime_checkable
class QuotelyState(Protocol):
    """Navigation context: main menu, or inside one quote."""

    def is_inside_quote(self) -> bool:
        ...  # pragma: no cover

    def get_quote_reference(self) -> Quote | None:
        """Return the active quote, or None at the main menu."""
        ...  # pragma: no cover
