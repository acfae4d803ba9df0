"""Target-quote resolution shared by every quote-bound command.

An explicit ``n/QUOTE_NAME`` always wins over the quote the user is
currently inside; with neither, there is nothing to act on.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from quotely.parser.errors import ErrorKind, QuotelyError

if TYPE_CHECKING:
    from quotely.state.protocols import Quote, QuoteList, QuotelyState

logger = logging.getLogger(__name__)


def resolve_quote(
    quote_name: str | None,
    state: "QuotelyState",
    quote_list: "QuoteList",
) -> "Quote":
    """Return the quote a command should act on.

    Parameters
    ----------
    quote_name:
        Name given with ``n/``, or None when the user gave none.
    state:
        Current navigation state.
    quote_list:
        Registry used for explicit lookups.

    Raises
    ------
    QuotelyError
        ``NO_ACTIVE_QUOTE`` when no name is given and the user is at the
        main menu; ``QUOTE_NOT_FOUND`` when the named quote does not exist.
    """
    if quote_name is None:
        quote = state.get_quote_reference()
        if quote is None:
            logger.warning("No quote name provided and no active quote in state")
            raise QuotelyError(ErrorKind.NO_ACTIVE_QUOTE)
        logger.debug("Using current quote from state: %r", quote.get_quote_name())
        return quote

    logger.debug("Looking up quote by name: %r", quote_name)
    try:
        return quote_list.get_quote_by_name(quote_name)
    except LookupError as exc:
        # Registries outside this package may signal absence with KeyError.
        logger.warning("Quote not found: %r", quote_name)
        raise QuotelyError(ErrorKind.QUOTE_NOT_FOUND, quote_name) from exc
