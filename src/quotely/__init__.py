"""quotely-parser — command parsing and validation for the Quotely sales-quote tool.

Public API
----------
The stable public surface is everything exported from this module.
Anything inside submodules not re-exported here is considered private
and may change without notice.

Example
-------
::

    import quotely

    quote_list = quotely.QuoteList([quotely.Quote("Q1", "John Tan")])
    state = quotely.QuotelyState(quote_list.get_quote_by_name("Q1"))

    # Turn a line of input into a validated command
    command = quotely.parse("add i/Widget p/10.50 q/5", state, quote_list)
    command.quote.get_quote_name()
    'Q1'

    # Errors carry a kind and, for format errors, the usage template
    try:
        quotely.parse("quote n/Acme", state, quote_list)
    except quotely.QuotelyError as exc:
        exc.kind, exc.usage
    (<ErrorKind.WRONG_COMMAND_FORMAT: 3>, 'quote n/QUOTE_NAME c/CUSTOMER_NAME')

    quotely.__version__
    '0.1.0'
"""
from __future__ import annotations

import logging

__version__: str = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

# The parser package is imported first: the validator and state modules
# import the error types from it.
from quotely.parser import ErrorKind, Parser, QuotelyError, parse  # noqa: E402
from quotely.commands import Command, CommandKind, CommandSerializer  # noqa: E402
from quotely.state import Quote, QuoteItem, QuoteList, QuotelyState, load_state  # noqa: E402
from quotely.validator import DEFAULT_LIMITS, FieldLimits  # noqa: E402

__all__ = [
    "__version__",
    # Parsing
    "parse",
    "Parser",
    "ErrorKind",
    "QuotelyError",
    "FieldLimits",
    "DEFAULT_LIMITS",
    # Commands
    "Command",
    "CommandKind",
    "CommandSerializer",
    # State
    "Quote",
    "QuoteItem",
    "QuoteList",
    "QuotelyState",
    "load_state",
]
