"""Test that the quickstart API works for quotely-parser."""
from __future__ import annotations


def test_quickstart_parse_import() -> None:
    import quotely

    assert callable(quotely.parse)
    assert quotely.Parser is not None


def test_quickstart_version(package_name: str, expected_version: str) -> None:
    import importlib

    module = importlib.import_module(package_name)
    assert module.__version__ == expected_version


def test_quickstart_parse_add_item() -> None:
    import quotely

    quote_list = quotely.QuoteList([quotely.Quote("Q1", "John Tan")])
    state = quotely.QuotelyState(quote_list.get_quote_by_name("Q1"))
    command = quotely.parse("add i/Widget p/10.50 q/5", state, quote_list)
    assert command.kind is quotely.CommandKind.ADD_ITEM
    assert command.quote.get_quote_name() == "Q1"


def test_quickstart_error_usage() -> None:
    import quotely

    try:
        quotely.parse("quote n/Acme", quotely.QuotelyState(), quotely.QuoteList())
    except quotely.QuotelyError as exc:
        assert exc.kind is quotely.ErrorKind.WRONG_COMMAND_FORMAT
        assert exc.usage == "quote n/QUOTE_NAME c/CUSTOMER_NAME"
    else:
        raise AssertionError("expected QuotelyError")


def test_quickstart_serialize() -> None:
    import quotely

    command = quotely.parse("nav main", quotely.QuotelyState(), quotely.QuoteList())
    assert quotely.CommandSerializer().to_dict(command) == {"kind": "NAVIGATE", "quote": None}


def test_quickstart_all_exports() -> None:
    import quotely

    for name in quotely.__all__:
        assert hasattr(quotely, name), f"quotely.{name} missing"
