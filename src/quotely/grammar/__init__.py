"""Quotely grammar module.

Exports the command vocabulary and the per-command field grammars.
"""
from __future__ import annotations

from quotely.grammar.grammar import (
    ADD_ITEM_GRAMMAR,
    ADD_QUOTE_GRAMMAR,
    CALCULATE_TOTAL_GRAMMAR,
    DELETE_ITEM_GRAMMAR,
    DELETE_QUOTE_GRAMMAR,
    EXPORT_GRAMMAR,
    GRAMMARS,
    KEYWORD_ORDER,
    NAVIGATE_GRAMMAR,
    REGISTER_GRAMMAR,
    SEARCH_GRAMMAR,
    USAGE,
    CommandGrammar,
)
from quotely.grammar.tokens import KEYWORDS, MAIN_MENU_LITERAL, Keyword, Segment, Tag

__all__ = [
    # Vocabulary
    "Keyword",
    "Tag",
    "Segment",
    "KEYWORDS",
    "MAIN_MENU_LITERAL",
    # Grammars
    "CommandGrammar",
    "GRAMMARS",
    "USAGE",
    "KEYWORD_ORDER",
    "REGISTER_GRAMMAR",
    "ADD_QUOTE_GRAMMAR",
    "DELETE_QUOTE_GRAMMAR",
    "DELETE_ITEM_GRAMMAR",
    "EXPORT_GRAMMAR",
    "ADD_ITEM_GRAMMAR",
    "CALCULATE_TOTAL_GRAMMAR",
    "NAVIGATE_GRAMMAR",
    "SEARCH_GRAMMAR",
]
