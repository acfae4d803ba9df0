"""Quote registry and navigation state.

Exports the collaborator protocols the parser reads, plain in-memory
implementations of them, and the fixture loader used by the CLI.
"""
from __future__ import annotations

from quotely.state import protocols
from quotely.state.loader import StateLoadError, load_state, loads_state, state_from_dict
from quotely.state.models import Quote, QuoteItem, QuoteList, QuotelyState

__all__ = [
    "protocols",
    "Quote",
    "QuoteItem",
    "QuoteList",
    "QuotelyState",
    "StateLoadError",
    "load_state",
    "loads_state",
    "state_from_dict",
]
