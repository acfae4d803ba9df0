"""Quotely command parser.

Turns one line of user input into a fully validated ``Command``.

Parsing happens in three steps:

1. **Dispatch** - the first whitespace-delimited token is the keyword
   (matched case-insensitively against the twelve known keywords); the
   rest of the line, stripped, is the argument string.
2. **Extraction** - the keyword's extractor scans the argument string
   against that command's tag grammar (``quotely.grammar``).  Any
   structural problem becomes ``WRONG_COMMAND_FORMAT`` carrying the
   command's usage template.
3. **Validation** - every field is checked by ``quotely.validator``
   and, for commands that act on a quote, the target quote is resolved
   (``quotely.parser.resolution``).

The parser reads the navigation state and the quote registry but never
changes them, and keeps no state of its own between calls: the same
line against the same state always gives an equal command.
"""
from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

from quotely.commands.nodes import (
    AddItemCommand,
    AddQuoteCommand,
    CalculateTotalCommand,
    Command,
    DeleteItemCommand,
    DeleteQuoteCommand,
    ExitCommand,
    ExportQuoteCommand,
    FinishQuoteCommand,
    NavigateCommand,
    RegisterCommand,
    SearchQuoteCommand,
    ShowQuotesCommand,
)
from quotely.grammar.grammar import (
    ADD_ITEM_GRAMMAR,
    ADD_QUOTE_GRAMMAR,
    CALCULATE_TOTAL_GRAMMAR,
    DELETE_ITEM_GRAMMAR,
    DELETE_QUOTE_GRAMMAR,
    EXPORT_GRAMMAR,
    NAVIGATE_GRAMMAR,
    REGISTER_GRAMMAR,
    SEARCH_GRAMMAR,
    CommandGrammar,
)
from quotely.grammar.tokens import KEYWORDS, MAIN_MENU_LITERAL, Keyword, Tag
from quotely.lexer.lexer import TagScanError, TagScanner, fields
from quotely.parser import resolution
from quotely.parser.errors import ErrorKind, QuotelyError, wrong_format
from quotely.validator import rules
from quotely.validator.rules import DEFAULT_LIMITS, FieldLimits

if TYPE_CHECKING:
    from quotely.state.protocols import Quote, QuoteList, QuotelyState

logger = logging.getLogger(__name__)

_Extractor = Callable[[str], Command]


class Parser:
    """Line parser bound to a navigation state and a quote registry.

    Parameters
    ----------
    state:
        Where the user currently is.  Read on every call, so a parser can
        be reused after the executor moves the user in or out of a quote.
    quote_list:
        Registry used to look up quotes named with ``n/``.
    limits:
        Field limits; defaults to the application's standard limits.
    """

    def __init__(
        self,
        state: "QuotelyState",
        quote_list: "QuoteList",
        limits: FieldLimits = DEFAULT_LIMITS,
    ) -> None:
        self._state = state
        self._quote_list = quote_list
        self._limits = limits
        self._extractors: dict[Keyword, _Extractor] = {
            Keyword.REGISTER: self._parse_register,
            Keyword.QUOTE: self._parse_add_quote,
            Keyword.UNQUOTE: self._parse_delete_quote,
            Keyword.SHOW: lambda _args: ShowQuotesCommand(),
            Keyword.FINISH: self._parse_finish_quote,
            Keyword.DELETE: self._parse_delete_item,
            Keyword.EXPORT: self._parse_export,
            Keyword.ADD: self._parse_add_item,
            Keyword.TOTAL: self._parse_calculate_total,
            Keyword.NAV: self._parse_navigate,
            Keyword.SEARCH: self._parse_search,
            Keyword.EXIT: lambda _args: ExitCommand(),
        }

    # ------------------------------------------------------------------
    # Dispatcher
    # ------------------------------------------------------------------

    def parse(self, line: str | None) -> Command:
        """Parse one line of input into a command.

        Raises
        ------
        QuotelyError
            ``EMPTY_COMMAND`` for a missing or blank line,
            ``INVALID_COMMAND`` for an unknown keyword, or whichever kind
            the command's extractor reports.
        """
        if line is None or not line.strip():
            raise QuotelyError(ErrorKind.EMPTY_COMMAND)

        logger.info("Parsing command: %r", line)
        logger.debug(
            "Current state - inside quote: %s, quote: %r",
            self._state.is_inside_quote(),
            self._state.get_quote_reference(),
        )

        parts = line.strip().split(maxsplit=1)
        keyword_text = parts[0].lower()
        arguments = parts[1].strip() if len(parts) > 1 else ""
        logger.debug("Extracted keyword %r, arguments %r", keyword_text, arguments)

        keyword = KEYWORDS.get(keyword_text)
        if keyword is None:
            logger.warning("Unknown command keyword: %r", keyword_text)
            raise QuotelyError(ErrorKind.INVALID_COMMAND)
        return self._extractors[keyword](arguments)

    # ------------------------------------------------------------------
    # Shared helpers
    # ------------------------------------------------------------------

    def _scan(self, grammar: CommandGrammar, arguments: str) -> dict[Tag, str]:
        """Scan *arguments* against *grammar*; format problems become errors."""
        try:
            return fields(TagScanner(grammar).scan(arguments))
        except TagScanError as exc:
            logger.warning(
                "Invalid format for %s command: %r (%s)",
                grammar.keyword.value,
                arguments,
                exc.scan_message,
            )
            raise wrong_format(grammar.usage) from exc

    def _resolve(self, quote_name: str | None) -> "Quote":
        return resolution.resolve_quote(quote_name, self._state, self._quote_list)

    # ------------------------------------------------------------------
    # Company / quote lifecycle
    # ------------------------------------------------------------------

    def _parse_register(self, arguments: str) -> RegisterCommand:
        args = self._scan(REGISTER_GRAMMAR, arguments)
        company_name = rules.validate_company_name(args[Tag.CUSTOMER], self._limits)
        logger.info("Parsed register command for company: %r", company_name)
        return RegisterCommand(company_name=company_name)

    def _parse_add_quote(self, arguments: str) -> AddQuoteCommand:
        args = self._scan(ADD_QUOTE_GRAMMAR, arguments)
        quote_name = rules.validate_quote_name(args[Tag.QUOTE_NAME], self._limits)
        customer_name = rules.validate_customer_name(args[Tag.CUSTOMER], self._limits)
        logger.info("Parsed add quote command - quote: %r, customer: %r", quote_name, customer_name)
        return AddQuoteCommand(quote_name=quote_name, customer_name=customer_name)

    def _parse_delete_quote(self, arguments: str) -> DeleteQuoteCommand:
        args = self._scan(DELETE_QUOTE_GRAMMAR, arguments)
        quote = self._resolve(args.get(Tag.QUOTE_NAME))
        logger.info("Parsed delete quote command for quote: %r", quote.get_quote_name())
        return DeleteQuoteCommand(quote=quote)

    def _parse_finish_quote(self, arguments: str) -> FinishQuoteCommand:
        if not self._state.is_inside_quote():
            logger.warning("Attempted to finish quote while not inside a quote")
            raise QuotelyError(ErrorKind.NO_ACTIVE_QUOTE)
        return FinishQuoteCommand()

    # ------------------------------------------------------------------
    # Items
    # ------------------------------------------------------------------

    def _parse_add_item(self, arguments: str) -> AddItemCommand:
        args = self._scan(ADD_ITEM_GRAMMAR, arguments)
        item_name = rules.validate_item_name(args[Tag.ITEM], self._limits)
        logger.debug(
            "Extracted - item: %r, quote: %r, price: %r, quantity: %r, tax: %r",
            item_name,
            args.get(Tag.QUOTE_NAME),
            args[Tag.PRICE],
            args[Tag.QUANTITY],
            args.get(Tag.TAX),
        )

        quote = self._resolve(args.get(Tag.QUOTE_NAME))
        rules.check_item_capacity(quote, self._limits)
        price = rules.parse_price(args[Tag.PRICE], self._limits)
        quantity = rules.parse_quantity(args[Tag.QUANTITY], self._limits)
        tax_rate = rules.parse_tax_rate(args.get(Tag.TAX), self._limits)

        logger.info(
            "Parsed add item command - item: %r, price: %s, quantity: %d, tax rate: %s, quote: %r",
            item_name,
            price,
            quantity,
            tax_rate,
            quote.get_quote_name(),
        )
        return AddItemCommand(
            item_name=item_name,
            quote=quote,
            price=price,
            quantity=quantity,
            tax_rate=tax_rate,
        )

    def _parse_delete_item(self, arguments: str) -> DeleteItemCommand:
        args = self._scan(DELETE_ITEM_GRAMMAR, arguments)
        item_name = rules.validate_item_name(args[Tag.ITEM], self._limits)
        quote = self._resolve(args.get(Tag.QUOTE_NAME))
        rules.check_item_exists(quote, item_name)
        logger.info(
            "Parsed delete item command - item: %r, quote: %r", item_name, quote.get_quote_name()
        )
        return DeleteItemCommand(item_name=item_name, quote=quote)

    # ------------------------------------------------------------------
    # Output / navigation
    # ------------------------------------------------------------------

    def _parse_export(self, arguments: str) -> ExportQuoteCommand:
        args = self._scan(EXPORT_GRAMMAR, arguments)
        quote = self._resolve(args.get(Tag.QUOTE_NAME))

        # Only a filename typed with f/ is checked.
        filename = args.get(Tag.FILENAME)
        if filename is None:
            filename = quote.get_quote_name()
        elif len(filename) > self._limits.max_quote_name_length or not rules.is_valid_name(filename):
            logger.warning("Invalid export filename: %r", filename)
            raise wrong_format(EXPORT_GRAMMAR.usage)

        logger.info(
            "Parsed export command for quote: %r to %r", quote.get_quote_name(), filename
        )
        return ExportQuoteCommand(quote=quote, filename=filename)

    def _parse_calculate_total(self, arguments: str) -> CalculateTotalCommand:
        args = self._scan(CALCULATE_TOTAL_GRAMMAR, arguments)
        quote = self._resolve(args.get(Tag.QUOTE_NAME))
        return CalculateTotalCommand(quote=quote)

    def _parse_navigate(self, arguments: str) -> NavigateCommand:
        if arguments.lower() == MAIN_MENU_LITERAL:
            logger.info("Parsed navigate command to main menu")
            return NavigateCommand()

        args = self._scan(NAVIGATE_GRAMMAR, arguments)
        quote = self._resolve(args[Tag.QUOTE_NAME])
        logger.info("Parsed navigate command to quote: %r", quote.get_quote_name())
        return NavigateCommand(quote=quote)

    def _parse_search(self, arguments: str) -> SearchQuoteCommand:
        args = self._scan(SEARCH_GRAMMAR, arguments)
        quote_name = rules.validate_quote_name(args[Tag.QUOTE_NAME], self._limits)
        logger.info("Parsed search command for: %r", quote_name)
        return SearchQuoteCommand(quote_name=quote_name)


def parse(
    line: str | None,
    state: "QuotelyState",
    quote_list: "QuoteList",
    limits: FieldLimits = DEFAULT_LIMITS,
) -> Command:
    """Convenience function: parse *line* against *state* and *quote_list*.

    Parameters
    ----------
    line:
        One line of user input.  ``None`` and blank lines are rejected.
    state:
        Current navigation state (read only).
    quote_list:
        Quote registry (read only).
    limits:
        Field limits to validate against.

    Returns
    -------
    Command
        The validated command.

    Raises
    ------
    QuotelyError
        On any invalid input.
    """
    return Parser(state, quote_list, limits).parse(line)
