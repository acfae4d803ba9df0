"""Error taxonomy for the Quotely command parser.

Every failure the parser can report is a ``QuotelyError`` carrying one
``ErrorKind`` and an optional detail.  ``WRONG_COMMAND_FORMAT`` carries
the correct-usage template of the command, ``QUOTE_NOT_FOUND`` the name
that could not be found, and the field and limit kinds the limit that
was broken (taken from the active ``FieldLimits``, so the message table
itself names no numbers).  The CLI renders both the message and the
detail.
"""
from __future__ import annotations

from enum import Enum, auto


class ErrorKind(Enum):
    """Every way a line can fail to become a command."""

    EMPTY_COMMAND = auto()
    INVALID_COMMAND = auto()
    WRONG_COMMAND_FORMAT = auto()
    INVALID_QUOTE_NAME = auto()
    INVALID_CUSTOMER_NAME = auto()
    INVALID_COMPANY_NAME = auto()
    INVALID_ITEM_NAME = auto()
    INVALID_NUMBER_FORMAT = auto()
    INVALID_ITEM_PRICE = auto()
    INVALID_ITEM_QTY = auto()
    INVALID_ITEM_TAX = auto()
    INVALID_ITEM_NUMBER = auto()
    ITEM_NOT_FOUND = auto()
    QUOTE_NOT_FOUND = auto()
    NO_ACTIVE_QUOTE = auto()


_MESSAGES: dict[ErrorKind, str] = {
    ErrorKind.EMPTY_COMMAND: "Command cannot be empty.",
    ErrorKind.INVALID_COMMAND: "Unknown command.",
    ErrorKind.WRONG_COMMAND_FORMAT: "Wrong command format.",
    ErrorKind.INVALID_QUOTE_NAME: (
        "Invalid quote name: use letters, digits, spaces or _'&.,()- characters only."
    ),
    ErrorKind.INVALID_CUSTOMER_NAME: (
        "Invalid customer name: use letters, digits, spaces or _'&.,()- characters only."
    ),
    ErrorKind.INVALID_COMPANY_NAME: (
        "Invalid company name: use letters, digits, spaces or _'&.,()- characters only."
    ),
    ErrorKind.INVALID_ITEM_NAME: (
        "Invalid item name: use letters, digits, spaces or _'&.,()- characters only."
    ),
    ErrorKind.INVALID_NUMBER_FORMAT: "Invalid number: expected a non-negative value.",
    ErrorKind.INVALID_ITEM_PRICE: "Item price is above the maximum.",
    ErrorKind.INVALID_ITEM_QTY: "Item quantity is above the maximum.",
    ErrorKind.INVALID_ITEM_TAX: "Item tax rate is above the maximum.",
    ErrorKind.INVALID_ITEM_NUMBER: "Quote already holds the maximum number of items.",
    ErrorKind.ITEM_NOT_FOUND: "Item not found in quote.",
    ErrorKind.QUOTE_NOT_FOUND: "Quote not found.",
    ErrorKind.NO_ACTIVE_QUOTE: "No active quote: enter a quote or name one with n/QUOTE_NAME.",
}


class QuotelyError(Exception):
    """Raised when a command line cannot be turned into a command.

    Parameters
    ----------
    kind:
        The ``ErrorKind`` describing what went wrong.
    detail:
        Optional extra text: the usage template for
        ``WRONG_COMMAND_FORMAT``, the missing name for ``QUOTE_NOT_FOUND``,
        or the broken limit for field and limit kinds.
    """

    def __init__(self, kind: ErrorKind, detail: str | None = None) -> None:
        self.kind = kind
        self.detail = detail
        super().__init__(self._render())

    @property
    def message(self) -> str:
        """The user-facing message for this error's kind, without detail."""
        return _MESSAGES[self.kind]

    @property
    def usage(self) -> str | None:
        """Correct-usage template, present only on format errors."""
        if self.kind is ErrorKind.WRONG_COMMAND_FORMAT:
            return self.detail
        return None

    def _render(self) -> str:
        if self.detail is None:
            return self.message
        if self.kind is ErrorKind.WRONG_COMMAND_FORMAT:
            return f"{self.message} Usage: {self.detail}"
        return f"{self.message} ({self.detail})"

    def __repr__(self) -> str:
        if self.detail is None:
            return f"QuotelyError({self.kind.name})"
        return f"QuotelyError({self.kind.name}, {self.detail!r})"


def wrong_format(usage: str) -> QuotelyError:
    """Build a ``WRONG_COMMAND_FORMAT`` error carrying *usage*."""
    return QuotelyError(ErrorKind.WRONG_COMMAND_FORMAT, usage)
