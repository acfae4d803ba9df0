"""Unit tests for quotely.grammar.grammar: per-command tag grammars."""
from __future__ import annotations

from quotely.grammar.grammar import (
    ADD_ITEM_GRAMMAR,
    EXPORT_GRAMMAR,
    GRAMMARS,
    KEYWORD_ORDER,
    USAGE,
)
from quotely.grammar.tokens import Keyword, Tag


class TestGrammars:
    def test_argument_free_keywords_have_no_grammar(self) -> None:
        assert set(GRAMMARS) == set(Keyword) - {Keyword.SHOW, Keyword.FINISH, Keyword.EXIT}

    def test_every_keyword_has_usage(self) -> None:
        assert set(USAGE) == set(Keyword)
        assert [kw for kw in KEYWORD_ORDER] == list(Keyword)

    def test_usage_starts_with_keyword(self) -> None:
        for keyword, usage in USAGE.items():
            assert usage.split()[0] == keyword.value

    def test_add_item_tags(self) -> None:
        assert ADD_ITEM_GRAMMAR.required == (Tag.ITEM, Tag.PRICE, Tag.QUANTITY)
        assert ADD_ITEM_GRAMMAR.leading == (Tag.ITEM,)
        assert ADD_ITEM_GRAMMAR.tags == frozenset(
            {Tag.ITEM, Tag.PRICE, Tag.QUANTITY, Tag.QUOTE_NAME, Tag.TAX}
        )

    def test_export_tags_are_all_optional(self) -> None:
        assert EXPORT_GRAMMAR.required == ()
        assert EXPORT_GRAMMAR.leading == ()
        assert EXPORT_GRAMMAR.tags == frozenset({Tag.QUOTE_NAME, Tag.FILENAME})

    def test_navigate_usage_mentions_main(self) -> None:
        assert USAGE[Keyword.NAV] == "nav main OR nav n/QUOTE_NAME"
