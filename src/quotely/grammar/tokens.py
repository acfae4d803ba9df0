"""Vocabulary of the Quotely command language.

Defines the twelve command keywords, the field tags that introduce
``tag/value`` arguments, and the ``Segment`` dataclass produced by the
tag scanner for every argument it recognises.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Keyword(Enum):
    """The fixed set of command keywords, keyed by their literal text."""

    REGISTER = "register"
    QUOTE = "quote"
    UNQUOTE = "unquote"
    SHOW = "show"
    FINISH = "finish"
    DELETE = "delete"
    EXPORT = "export"
    ADD = "add"
    TOTAL = "total"
    NAV = "nav"
    SEARCH = "search"
    EXIT = "exit"


class Tag(Enum):
    """Field tags.  The value is the literal prefix typed by the user."""

    QUOTE_NAME = "n/"
    CUSTOMER = "c/"
    ITEM = "i/"
    PRICE = "p/"
    QUANTITY = "q/"
    TAX = "t/"
    FILENAME = "f/"

    @property
    def prefix(self) -> str:
        return self.value


# Mapping from lower-cased keyword text to its ``Keyword``.
KEYWORDS: dict[str, Keyword] = {kw.value: kw for kw in Keyword}

# Literal accepted by ``nav`` to leave quote context.  Not a tag.
MAIN_MENU_LITERAL = "main"


@dataclass(frozen=True, slots=True)
class Segment:
    """A single ``tag/value`` argument cut out of an argument string.

    Parameters
    ----------
    tag:
        The ``Tag`` that introduced this segment.
    value:
        The text following the tag, stripped of surrounding whitespace.
    offset:
        0-based offset of the tag within the argument string.
    """

    tag: Tag
    value: str
    offset: int

    def __repr__(self) -> str:
        return f"Segment({self.tag.prefix}{self.value!r}@{self.offset})"
