"""Quotely parser module.

Exports the ``Parser`` class, the ``parse`` convenience function, the
quote resolution helper, and the error taxonomy.
"""
from __future__ import annotations

from quotely.parser.errors import ErrorKind, QuotelyError, wrong_format
from quotely.parser.parser import Parser, parse
from quotely.parser.resolution import resolve_quote

__all__ = [
    "Parser",
    "parse",
    "resolve_quote",
    "ErrorKind",
    "QuotelyError",
    "wrong_format",
]
