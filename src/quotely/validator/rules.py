"""Field validation rules for parsed command arguments.

Every rule either returns the validated (and, for numbers, converted)
value or raises ``QuotelyError`` with the field-specific kind:

    INVALID_QUOTE_NAME      quote name charset / length
    INVALID_CUSTOMER_NAME   customer name charset / length
    INVALID_COMPANY_NAME    company name charset / length
    INVALID_ITEM_NAME       item name charset / length
    INVALID_NUMBER_FORMAT   unparseable, negative, NaN or non-positive number
    INVALID_ITEM_PRICE      price above the ceiling
    INVALID_ITEM_QTY        quantity above the ceiling
    INVALID_ITEM_TAX        tax rate above the ceiling
    INVALID_ITEM_NUMBER     quote already holds the maximum number of items
    ITEM_NOT_FOUND          item to delete is not on the quote

Limits come from a ``FieldLimits`` instance; ``DEFAULT_LIMITS`` holds the
values the application ships with.
"""
from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

from quotely.parser.errors import ErrorKind, QuotelyError

if TYPE_CHECKING:
    from quotely.state.protocols import Quote

logger = logging.getLogger(__name__)

NAME_PATTERN: Final[re.Pattern[str]] = re.compile(r"[A-Za-z0-9 _'&.,()\-]+")

# Plain decimal and integer literals only: no digit separators, no non-ASCII
# digits. NaN and infinity spellings are let through to the range checks.
DECIMAL_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|[+-]?(?:nan|inf(?:inity)?)",
    re.IGNORECASE,
)
INTEGER_PATTERN: Final[re.Pattern[str]] = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True, slots=True)
class FieldLimits:
    """Upper bounds applied by the validation rules."""

    max_price: float = 9999.99
    max_quantity: int = 999
    max_tax_rate: float = 200.00
    max_items: int = 30
    max_item_name_length: int = 30
    max_quote_name_length: int = 50
    max_company_name_length: int = 46
    max_customer_name_length: int = 45


DEFAULT_LIMITS: Final[FieldLimits] = FieldLimits()


# ---------------------------------------------------------------------------
# Names
# ---------------------------------------------------------------------------


def is_valid_name(value: str) -> bool:
    """Return True if *value* is non-empty and uses only the name charset."""
    return NAME_PATTERN.fullmatch(value) is not None


def _check_name(value: str, max_length: int, kind: ErrorKind) -> str:
    if len(value) > max_length or not is_valid_name(value):
        logger.warning("Rejected %s: %r", kind.name.lower(), value)
        raise QuotelyError(kind, f"at most {max_length} characters")
    return value


def validate_quote_name(value: str, limits: FieldLimits = DEFAULT_LIMITS) -> str:
    return _check_name(value, limits.max_quote_name_length, ErrorKind.INVALID_QUOTE_NAME)


def validate_customer_name(value: str, limits: FieldLimits = DEFAULT_LIMITS) -> str:
    return _check_name(value, limits.max_customer_name_length, ErrorKind.INVALID_CUSTOMER_NAME)


def validate_company_name(value: str, limits: FieldLimits = DEFAULT_LIMITS) -> str:
    return _check_name(value, limits.max_company_name_length, ErrorKind.INVALID_COMPANY_NAME)


def validate_item_name(value: str, limits: FieldLimits = DEFAULT_LIMITS) -> str:
    return _check_name(value, limits.max_item_name_length, ErrorKind.INVALID_ITEM_NAME)


# ---------------------------------------------------------------------------
# Numbers
# ---------------------------------------------------------------------------


def _parse_amount(text: str, ceiling: float, over_kind: ErrorKind) -> float:
    """Parse a non-negative decimal no greater than *ceiling*."""
    if DECIMAL_PATTERN.fullmatch(text) is None:
        logger.warning("Not a number: %r", text)
        raise QuotelyError(ErrorKind.INVALID_NUMBER_FORMAT)
    value = float(text)
    if math.isnan(value) or value < 0:
        logger.warning("Not a non-negative number: %r", text)
        raise QuotelyError(ErrorKind.INVALID_NUMBER_FORMAT)
    if value > ceiling:
        logger.warning("%s above %s: %r", over_kind.name.lower(), ceiling, text)
        raise QuotelyError(over_kind, f"at most {ceiling:.2f}")
    return value


def parse_price(text: str, limits: FieldLimits = DEFAULT_LIMITS) -> float:
    """Parse an item price.

    Raises
    ------
    QuotelyError
        ``INVALID_NUMBER_FORMAT`` if *text* is not a non-negative number,
        ``INVALID_ITEM_PRICE`` if it exceeds ``limits.max_price``.
    """
    return _parse_amount(text, limits.max_price, ErrorKind.INVALID_ITEM_PRICE)


def parse_tax_rate(text: str | None, limits: FieldLimits = DEFAULT_LIMITS) -> float:
    """Parse an optional tax rate; ``None`` means no tax and yields 0."""
    if text is None:
        return 0.0
    return _parse_amount(text, limits.max_tax_rate, ErrorKind.INVALID_ITEM_TAX)


def parse_quantity(text: str, limits: FieldLimits = DEFAULT_LIMITS) -> int:
    """Parse an item quantity: a positive integer no greater than the ceiling."""
    if INTEGER_PATTERN.fullmatch(text) is None:
        logger.warning("Not an integer quantity: %r", text)
        raise QuotelyError(ErrorKind.INVALID_NUMBER_FORMAT)
    value = int(text)
    if value <= 0:
        logger.warning("Quantity must be positive: %r", text)
        raise QuotelyError(ErrorKind.INVALID_NUMBER_FORMAT)
    if value > limits.max_quantity:
        logger.warning("Quantity above %d: %r", limits.max_quantity, text)
        raise QuotelyError(ErrorKind.INVALID_ITEM_QTY, f"at most {limits.max_quantity}")
    return value


# ---------------------------------------------------------------------------
# Quote contents
# ---------------------------------------------------------------------------


def check_item_capacity(quote: "Quote", limits: FieldLimits = DEFAULT_LIMITS) -> None:
    """Raise ``INVALID_ITEM_NUMBER`` if *quote* cannot take another item."""
    if len(quote.get_items()) >= limits.max_items:
        logger.warning("Quote %r already holds %d items", quote.get_quote_name(), limits.max_items)
        raise QuotelyError(ErrorKind.INVALID_ITEM_NUMBER, f"at most {limits.max_items} items")


def check_item_exists(quote: "Quote", item_name: str) -> None:
    """Raise ``ITEM_NOT_FOUND`` if *quote* has no item called *item_name*."""
    if not quote.has_item(item_name):
        logger.warning("Item %r not found in quote %r", item_name, quote.get_quote_name())
        raise QuotelyError(ErrorKind.ITEM_NOT_FOUND)
