"""Build a quote registry and navigation state from a fixture document.

Fixtures are YAML (or JSON, which YAML reads as well)::

    current: Q1
    quotes:
      - name: Q1
        customer: John
        items:
          - {name: Widget, price: 10.5, quantity: 2, tax_rate: 0}

``current`` is optional; when present it must name one of the quotes
and puts the state inside that quote.
"""
from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from quotely.state.models import Quote, QuoteItem, QuoteList, QuotelyState


class StateLoadError(Exception):
    """Raised when a state fixture cannot be read or is malformed."""


def load_state(path: str | Path) -> tuple[QuotelyState, QuoteList]:
    """Read the fixture at *path* and return ``(state, quote_list)``.

    Raises
    ------
    StateLoadError
        When the file is unreadable, not valid YAML, or malformed.
    """
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        raise StateLoadError(f"Cannot read {path}: {exc}") from exc
    return loads_state(text)


def loads_state(text: str) -> tuple[QuotelyState, QuoteList]:
    """Parse fixture *text* and return ``(state, quote_list)``."""
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise StateLoadError(f"Invalid YAML: {exc}") from exc
    return state_from_dict(data or {})


def state_from_dict(data: Any) -> tuple[QuotelyState, QuoteList]:
    """Build ``(state, quote_list)`` from an already-decoded mapping."""
    if not isinstance(data, dict):
        raise StateLoadError("State document must be a mapping")

    quote_list = QuoteList()
    for entry in _list_field(data, "quotes"):
        try:
            quote_list.add_quote(_quote_from_dict(entry))
        except ValueError as exc:
            raise StateLoadError(str(exc)) from exc

    if data.get("current") is None:
        return QuotelyState(), quote_list
    current = str(data["current"])
    if current not in quote_list:
        raise StateLoadError(f"current quote {current!r} is not in the quote list")
    return QuotelyState(quote_list.get_quote_by_name(current)), quote_list


def _list_field(mapping: dict[str, Any], key: str) -> list[Any]:
    """Return the list under *key*; a missing or null value is an empty list."""
    value = mapping.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise StateLoadError(f"{key!r} must be a list, got {type(value).__name__}")
    return value


def _quote_from_dict(entry: Any) -> Quote:
    if not isinstance(entry, dict) or "name" not in entry:
        raise StateLoadError(f"Quote entry must be a mapping with a name: {entry!r}")
    quote = Quote(quote_name=str(entry["name"]), customer_name=str(entry.get("customer", "")))
    for item in _list_field(entry, "items"):
        quote.add_item(_item_from_dict(item))
    return quote


def _item_from_dict(item: Any) -> QuoteItem:
    if not isinstance(item, dict) or "name" not in item:
        raise StateLoadError(f"Item entry must be a mapping with a name: {item!r}")
    try:
        return QuoteItem(
            name=str(item["name"]),
            price=float(item.get("price", 0.0)),
            quantity=int(item.get("quantity", 1)),
            tax_rate=float(item.get("tax_rate", 0.0)),
        )
    except (TypeError, ValueError) as exc:
        raise StateLoadError(f"Invalid item {item!r}: {exc}") from exc
