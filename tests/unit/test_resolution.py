"""Unit tests for quotely.parser.resolution."""
from __future__ import annotations

import pytest

from quotely.parser.errors import ErrorKind, QuotelyError
from quotely.parser.resolution import resolve_quote
from quotely.state import Quote, QuoteList, QuotelyState


class TestResolveQuote:
    def test_current_quote_when_no_name(
        self, inside_state: QuotelyState, quote_list: QuoteList, q1: Quote
    ) -> None:
        assert resolve_quote(None, inside_state, quote_list) is q1

    def test_explicit_name_wins(
        self, inside_state: QuotelyState, quote_list: QuoteList, q2: Quote
    ) -> None:
        assert resolve_quote("Q2", inside_state, quote_list) is q2

    def test_explicit_name_from_main_menu(
        self, main_state: QuotelyState, quote_list: QuoteList, q1: Quote
    ) -> None:
        assert resolve_quote("Q1", main_state, quote_list) is q1

    def test_no_name_at_main_menu(self, main_state: QuotelyState, quote_list: QuoteList) -> None:
        with pytest.raises(QuotelyError) as exc_info:
            resolve_quote(None, main_state, quote_list)
        assert exc_info.value.kind is ErrorKind.NO_ACTIVE_QUOTE

    def test_unknown_name(self, inside_state: QuotelyState, quote_list: QuoteList) -> None:
        with pytest.raises(QuotelyError) as exc_info:
            resolve_quote("q1", inside_state, quote_list)
        assert exc_info.value.kind is ErrorKind.QUOTE_NOT_FOUND
        assert exc_info.value.detail == "q1"
