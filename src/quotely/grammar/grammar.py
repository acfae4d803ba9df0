"""Field grammars for every Quotely command.

Each command that takes ``tag/value`` arguments is described by a
``CommandGrammar``: which tags it understands, which of them are
required (and in what order), and which tag the argument string has to
open with.  The tag scanner (``quotely.lexer``) enforces these rules;
the parser only ever sees arguments that already conform.

Grammar notation used in the usage templates:
    ``UPPER_CASE``  user-supplied value
    ``[ ]``         optional field
    ``OR``          alternative forms
"""
from __future__ import annotations

from dataclasses import dataclass

from quotely.grammar.tokens import Keyword, Tag


@dataclass(frozen=True, slots=True)
class CommandGrammar:
    """Tag grammar of a single command.

    Parameters
    ----------
    keyword:
        The command this grammar belongs to.
    usage:
        Correct-usage template shown to the user on a format error.
    required:
        Tags that must be present, in the order they must appear.
    optional:
        Tags that may appear at most once, anywhere after the leading tag.
    leading:
        Tags allowed to open the argument string.  Empty means any tag
        of the grammar may come first.
    """

    keyword: Keyword
    usage: str
    required: tuple[Tag, ...] = ()
    optional: tuple[Tag, ...] = ()
    leading: tuple[Tag, ...] = ()

    @property
    def tags(self) -> frozenset[Tag]:
        """Every tag this grammar recognises as a segment boundary."""
        return frozenset(self.required) | frozenset(self.optional)


# ---------------------------------------------------------------------------
# Per-command grammars
# ---------------------------------------------------------------------------

REGISTER_GRAMMAR = CommandGrammar(
    keyword=Keyword.REGISTER,
    usage="register c/COMPANY_NAME",
    required=(Tag.CUSTOMER,),
    leading=(Tag.CUSTOMER,),
)

ADD_QUOTE_GRAMMAR = CommandGrammar(
    keyword=Keyword.QUOTE,
    usage="quote n/QUOTE_NAME c/CUSTOMER_NAME",
    required=(Tag.QUOTE_NAME, Tag.CUSTOMER),
    leading=(Tag.QUOTE_NAME,),
)

DELETE_QUOTE_GRAMMAR = CommandGrammar(
    keyword=Keyword.UNQUOTE,
    usage="unquote [n/QUOTE_NAME]",
    optional=(Tag.QUOTE_NAME,),
)

DELETE_ITEM_GRAMMAR = CommandGrammar(
    keyword=Keyword.DELETE,
    usage="delete i/ITEM_NAME [n/QUOTE_NAME]",
    required=(Tag.ITEM,),
    optional=(Tag.QUOTE_NAME,),
    leading=(Tag.ITEM,),
)

EXPORT_GRAMMAR = CommandGrammar(
    keyword=Keyword.EXPORT,
    usage="export [n/QUOTE_NAME] [f/FILENAME]",
    optional=(Tag.QUOTE_NAME, Tag.FILENAME),
)

ADD_ITEM_GRAMMAR = CommandGrammar(
    keyword=Keyword.ADD,
    usage="add i/ITEM_NAME [n/QUOTE_NAME] p/PRICE q/QUANTITY [t/TAX_RATE]",
    required=(Tag.ITEM, Tag.PRICE, Tag.QUANTITY),
    optional=(Tag.QUOTE_NAME, Tag.TAX),
    leading=(Tag.ITEM,),
)

CALCULATE_TOTAL_GRAMMAR = CommandGrammar(
    keyword=Keyword.TOTAL,
    usage="total [n/QUOTE_NAME]",
    optional=(Tag.QUOTE_NAME,),
)

NAVIGATE_GRAMMAR = CommandGrammar(
    keyword=Keyword.NAV,
    usage="nav main OR nav n/QUOTE_NAME",
    required=(Tag.QUOTE_NAME,),
)

SEARCH_GRAMMAR = CommandGrammar(
    keyword=Keyword.SEARCH,
    usage="search n/QUOTE_NAME",
    required=(Tag.QUOTE_NAME,),
)

GRAMMARS: dict[Keyword, CommandGrammar] = {
    g.keyword: g
    for g in (
        REGISTER_GRAMMAR,
        ADD_QUOTE_GRAMMAR,
        DELETE_QUOTE_GRAMMAR,
        DELETE_ITEM_GRAMMAR,
        EXPORT_GRAMMAR,
        ADD_ITEM_GRAMMAR,
        CALCULATE_TOTAL_GRAMMAR,
        NAVIGATE_GRAMMAR,
        SEARCH_GRAMMAR,
    )
}

# Usage line for every keyword, including the argument-less ones.
USAGE: dict[Keyword, str] = {
    Keyword.SHOW: "show",
    Keyword.FINISH: "finish",
    Keyword.EXIT: "exit",
    **{kw: g.usage for kw, g in GRAMMARS.items()},
}

# Display order for help listings.
KEYWORD_ORDER: tuple[Keyword, ...] = tuple(Keyword)
