"""Unit tests for quotely.validator.rules."""
from __future__ import annotations

import pytest

from quotely.parser.errors import ErrorKind, QuotelyError
from quotely.state import Quote, QuoteItem
from quotely.validator import rules
from quotely.validator.rules import DEFAULT_LIMITS, FieldLimits


# ---------------------------------------------------------------------------
# Names
# ---------------------------------------------------------------------------


class TestNames:
    @pytest.mark.parametrize(
        "value",
        ["Acme", "Acme Pte. Ltd.", "O'Brien & Sons", "Q-1_(draft),v2", "123"],
    )
    def test_valid_charset(self, value: str) -> None:
        assert rules.is_valid_name(value)

    @pytest.mark.parametrize("value", ["", "Acme!", "a/b", "café", "tab\there", "50%"])
    def test_invalid_charset(self, value: str) -> None:
        assert not rules.is_valid_name(value)

    @pytest.mark.parametrize(
        ("validator", "limit", "kind"),
        [
            (rules.validate_quote_name, 50, ErrorKind.INVALID_QUOTE_NAME),
            (rules.validate_customer_name, 45, ErrorKind.INVALID_CUSTOMER_NAME),
            (rules.validate_company_name, 46, ErrorKind.INVALID_COMPANY_NAME),
            (rules.validate_item_name, 30, ErrorKind.INVALID_ITEM_NAME),
        ],
    )
    def test_length_boundaries(self, validator: object, limit: int, kind: ErrorKind) -> None:
        assert validator("a" * limit) == "a" * limit
        with pytest.raises(QuotelyError) as exc_info:
            validator("a" * (limit + 1))
        assert exc_info.value.kind is kind

    def test_custom_limit(self) -> None:
        limits = FieldLimits(max_item_name_length=3)
        assert rules.validate_item_name("abc", limits) == "abc"
        with pytest.raises(QuotelyError):
            rules.validate_item_name("abcd", limits)


# ---------------------------------------------------------------------------
# Numbers
# ---------------------------------------------------------------------------


class TestPrice:
    @pytest.mark.parametrize(("text", "expected"), [("0", 0.0), ("10.50", 10.5), ("9999.99", 9999.99)])
    def test_valid(self, text: str, expected: float) -> None:
        assert rules.parse_price(text) == expected

    @pytest.mark.parametrize("text", ["abc", "", "-0.01", "nan", "1,000", "1_0", "\u0661", "0x10", " 5"])
    def test_bad_format(self, text: str) -> None:
        with pytest.raises(QuotelyError) as exc_info:
            rules.parse_price(text)
        assert exc_info.value.kind is ErrorKind.INVALID_NUMBER_FORMAT

    @pytest.mark.parametrize("text", ["10000", "9999.991", "inf"])
    def test_over_ceiling(self, text: str) -> None:
        with pytest.raises(QuotelyError) as exc_info:
            rules.parse_price(text)
        assert exc_info.value.kind is ErrorKind.INVALID_ITEM_PRICE


class TestQuantity:
    @pytest.mark.parametrize(("text", "expected"), [("1", 1), ("999", 999), ("+5", 5)])
    def test_valid(self, text: str, expected: int) -> None:
        assert rules.parse_quantity(text) == expected

    @pytest.mark.parametrize("text", ["0", "-1", "2.5", "two", "", "1_000", "\u0663", "1e2"])
    def test_bad_format(self, text: str) -> None:
        with pytest.raises(QuotelyError) as exc_info:
            rules.parse_quantity(text)
        assert exc_info.value.kind is ErrorKind.INVALID_NUMBER_FORMAT

    def test_over_ceiling(self) -> None:
        with pytest.raises(QuotelyError) as exc_info:
            rules.parse_quantity("1000")
        assert exc_info.value.kind is ErrorKind.INVALID_ITEM_QTY


class TestTaxRate:
    def test_absent_is_zero(self) -> None:
        assert rules.parse_tax_rate(None) == 0.0

    @pytest.mark.parametrize(("text", "expected"), [("0", 0.0), ("7", 7.0), ("200", 200.0)])
    def test_valid(self, text: str, expected: float) -> None:
        assert rules.parse_tax_rate(text) == expected

    def test_over_ceiling(self) -> None:
        with pytest.raises(QuotelyError) as exc_info:
            rules.parse_tax_rate("200.5")
        assert exc_info.value.kind is ErrorKind.INVALID_ITEM_TAX

    def test_negative(self) -> None:
        with pytest.raises(QuotelyError) as exc_info:
            rules.parse_tax_rate("-1")
        assert exc_info.value.kind is ErrorKind.INVALID_NUMBER_FORMAT

    @pytest.mark.parametrize("text", ["1_5", "15%", "1 5"])
    def test_bad_format(self, text: str) -> None:
        with pytest.raises(QuotelyError) as exc_info:
            rules.parse_tax_rate(text)
        assert exc_info.value.kind is ErrorKind.INVALID_NUMBER_FORMAT


# ---------------------------------------------------------------------------
# Limit details
# ---------------------------------------------------------------------------


class TestLimitDetails:
    def test_quantity_detail_follows_custom_limit(self) -> None:
        with pytest.raises(QuotelyError) as exc_info:
            rules.parse_quantity("11", FieldLimits(max_quantity=10))
        assert exc_info.value.detail == "at most 10"
        assert "999" not in str(exc_info.value)

    def test_price_detail_follows_custom_limit(self) -> None:
        with pytest.raises(QuotelyError) as exc_info:
            rules.parse_price("60", FieldLimits(max_price=50.0))
        assert exc_info.value.detail == "at most 50.00"

    def test_default_tax_detail(self) -> None:
        with pytest.raises(QuotelyError) as exc_info:
            rules.parse_tax_rate("201")
        assert str(exc_info.value) == "Item tax rate is above the maximum. (at most 200.00)"

    def test_name_detail_follows_custom_limit(self) -> None:
        with pytest.raises(QuotelyError) as exc_info:
            rules.validate_item_name("abcd", FieldLimits(max_item_name_length=3))
        assert exc_info.value.detail == "at most 3 characters"

    def test_capacity_detail_follows_custom_limit(self, q1: Quote) -> None:
        with pytest.raises(QuotelyError) as exc_info:
            rules.check_item_capacity(q1, FieldLimits(max_items=1))
        assert exc_info.value.detail == "at most 1 items"


# ---------------------------------------------------------------------------
# Quote contents
# ---------------------------------------------------------------------------


class TestQuoteContents:
    def test_capacity_ok_below_limit(self) -> None:
        quote = Quote("Q", "C", [QuoteItem(str(n), 1.0, 1) for n in range(DEFAULT_LIMITS.max_items - 1)])
        rules.check_item_capacity(quote)

    def test_capacity_exceeded(self) -> None:
        quote = Quote("Q", "C", [QuoteItem(str(n), 1.0, 1) for n in range(DEFAULT_LIMITS.max_items)])
        with pytest.raises(QuotelyError) as exc_info:
            rules.check_item_capacity(quote)
        assert exc_info.value.kind is ErrorKind.INVALID_ITEM_NUMBER

    def test_item_exists(self, q1: Quote) -> None:
        rules.check_item_exists(q1, "Widget")

    def test_item_lookup_is_case_sensitive(self, q1: Quote) -> None:
        with pytest.raises(QuotelyError) as exc_info:
            rules.check_item_exists(q1, "widget")
        assert exc_info.value.kind is ErrorKind.ITEM_NOT_FOUND

    def test_default_limits(self) -> None:
        assert DEFAULT_LIMITS == FieldLimits(
            max_price=9999.99,
            max_quantity=999,
            max_tax_rate=200.00,
            max_items=30,
            max_item_name_length=30,
            max_quote_name_length=50,
            max_company_name_length=46,
            max_customer_name_length=45,
        )
