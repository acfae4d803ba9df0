"""Command variants produced by the Quotely parser.

Every command is a frozen dataclass so that parse results are immutable
value objects: parsing the same line twice against the same state gives
equal commands.  The ``Command`` union covers all twelve variants;
executors dispatch on ``command.kind`` or on the class itself.

Commands that act on a quote hold a reference to the resolved quote
object, never just its name.  The parser has already checked that the
quote exists.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import TYPE_CHECKING, ClassVar, Union

if TYPE_CHECKING:
    from quotely.state.protocols import Quote


class CommandKind(Enum):
    """Discriminator for the ``Command`` union, one member per keyword."""

    REGISTER = auto()
    ADD_QUOTE = auto()
    DELETE_QUOTE = auto()
    SHOW_QUOTES = auto()
    FINISH_QUOTE = auto()
    ADD_ITEM = auto()
    DELETE_ITEM = auto()
    EXPORT_QUOTE = auto()
    CALCULATE_TOTAL = auto()
    NAVIGATE = auto()
    SEARCH_QUOTE = auto()
    EXIT = auto()


# ---------------------------------------------------------------------------
# Company / quote lifecycle
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class RegisterCommand:
    """Register the user's own company name."""

    kind: ClassVar[CommandKind] = CommandKind.REGISTER

    company_name: str


@dataclass(frozen=True, slots=True)
class AddQuoteCommand:
    """Create a new quote for a customer."""

    kind: ClassVar[CommandKind] = CommandKind.ADD_QUOTE

    quote_name: str
    customer_name: str


@dataclass(frozen=True, slots=True)
class DeleteQuoteCommand:
    """Remove a quote from the registry."""

    kind: ClassVar[CommandKind] = CommandKind.DELETE_QUOTE

    quote: Quote


@dataclass(frozen=True, slots=True)
class ShowQuotesCommand:
    """List every quote."""

    kind: ClassVar[CommandKind] = CommandKind.SHOW_QUOTES


@dataclass(frozen=True, slots=True)
class FinishQuoteCommand:
    """Leave the current quote and return to the main menu."""

    kind: ClassVar[CommandKind] = CommandKind.FINISH_QUOTE


# ---------------------------------------------------------------------------
# Items
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class AddItemCommand:
    """Add a priced line item to a quote.

    Parameters
    ----------
    item_name:
        Name of the new line.
    quote:
        The quote receiving the item.
    price:
        Unit price, ``0 <= price <= max_price`` (9999.99 by default).
    quantity:
        Number of units, ``1 <= quantity <= max_quantity`` (999 by default).
    tax_rate:
        Tax percentage, ``0 <= tax_rate <= max_tax_rate`` (200 by default); 0 when not given.
    """

    kind: ClassVar[CommandKind] = CommandKind.ADD_ITEM

    item_name: str
    quote: Quote
    price: float
    quantity: int
    tax_rate: float = 0.0


@dataclass(frozen=True, slots=True)
class DeleteItemCommand:
    """Remove a named item from a quote."""

    kind: ClassVar[CommandKind] = CommandKind.DELETE_ITEM

    item_name: str
    quote: Quote


# ---------------------------------------------------------------------------
# Output / navigation
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class ExportQuoteCommand:
    """Export a quote to *filename* (defaults to the quote's name)."""

    kind: ClassVar[CommandKind] = CommandKind.EXPORT_QUOTE

    quote: Quote
    filename: str


@dataclass(frozen=True, slots=True)
class CalculateTotalCommand:
    kind: ClassVar[CommandKind] = CommandKind.CALCULATE_TOTAL

    quote: Quote


@dataclass(frozen=True, slots=True)
class NavigateCommand:
    """Move into a quote, or back to the main menu when ``quote`` is None."""

    kind: ClassVar[CommandKind] = CommandKind.NAVIGATE

    quote: Quote | None = None

    @property
    def to_main_menu(self) -> bool:
        return self.quote is None


@dataclass(frozen=True, slots=True)
class SearchQuoteCommand:
    """Search quotes by name."""

    kind: ClassVar[CommandKind] = CommandKind.SEARCH_QUOTE

    quote_name: str


@dataclass(frozen=True, slots=True)
class ExitCommand:
    kind: ClassVar[CommandKind] = CommandKind.EXIT


# ---------------------------------------------------------------------------
# Union type
# ---------------------------------------------------------------------------

Command = Union[
    RegisterCommand,
    AddQuoteCommand,
    DeleteQuoteCommand,
    ShowQuotesCommand,
    FinishQuoteCommand,
    AddItemCommand,
    DeleteItemCommand,
    ExportQuoteCommand,
    CalculateTotalCommand,
    NavigateCommand,
    SearchQuoteCommand,
    ExitCommand,
]
