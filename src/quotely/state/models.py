"""In-memory quote registry and navigation state.

Plain implementations of the collaborator protocols in
``quotely.state.protocols``.  They are what the CLI builds from a state
fixture and what the test-suite uses; an executor is free to supply
its own classes instead.

``Quote`` is an entity, compared by identity, while ``QuoteItem`` is a
frozen value object.
"""
from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from quotely.parser.errors import ErrorKind, QuotelyError


@dataclass(frozen=True, slots=True)
class QuoteItem:
    """A priced line on a quote."""

    name: str
    price: float
    quantity: int
    tax_rate: float = 0.0


@dataclass(eq=False)
class Quote:
    """A customer order under construction.

    Parameters
    ----------
    quote_name:
        Unique name of the quote within its ``QuoteList``.
    customer_name:
        The customer the quote is addressed to.
    items:
        Line items in insertion order.
    """

    quote_name: str
    customer_name: str
    items: list[QuoteItem] = field(default_factory=list)

    def __repr__(self) -> str:
        return f"Quote({self.quote_name!r}, customer={self.customer_name!r}, items={len(self.items)})"

    def get_quote_name(self) -> str:
        return self.quote_name

    def get_customer_name(self) -> str:
        return self.customer_name

    def get_items(self) -> list[QuoteItem]:
        return self.items

    def has_item(self, name: str) -> bool:
        return any(item.name == name for item in self.items)

    def add_item(self, item: QuoteItem) -> None:
        self.items.append(item)


class QuoteList:
    """Ordered registry of quotes keyed by quote name."""

    def __init__(self, quotes: list[Quote] | None = None) -> None:
        self._quotes: list[Quote] = []
        for quote in quotes or []:
            self.add_quote(quote)

    def __len__(self) -> int:
        return len(self._quotes)

    def __iter__(self) -> Iterator[Quote]:
        return iter(self._quotes)

    def __contains__(self, name: object) -> bool:
        return any(q.quote_name == name for q in self._quotes)

    def add_quote(self, quote: Quote) -> None:
        """Append *quote*.  Names must be unique within the list."""
        if quote.quote_name in self:
            raise ValueError(f"duplicate quote name {quote.quote_name!r}")
        self._quotes.append(quote)

    def get_quote_by_name(self, name: str) -> Quote:
        """Return the quote called *name*.

        Raises
        ------
        QuotelyError
            ``QUOTE_NOT_FOUND`` carrying *name* when no quote matches.
        """
        for quote in self._quotes:
            if quote.quote_name == name:
                return quote
        raise QuotelyError(ErrorKind.QUOTE_NOT_FOUND, name)


class QuotelyState:
    """Where the user currently is: the main menu or inside one quote."""

    def __init__(self, quote: Quote | None = None) -> None:
        self._quote: Quote | None = quote

    def __repr__(self) -> str:
        if self._quote is None:
            return "QuotelyState(main)"
        return f"QuotelyState(inside={self._quote.quote_name!r})"

    def is_inside_quote(self) -> bool:
        return self._quote is not None

    def get_quote_reference(self) -> Quote | None:
        return self._quote

    def set_inside_quote(self, quote: Quote) -> None:
        self._quote = quote

    def set_outside_quote(self) -> None:
        self._quote = None
