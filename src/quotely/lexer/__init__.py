"""Quotely tag scanner module.

Exports the ``TagScanner`` class and the ``scan`` convenience function.
"""
from __future__ import annotations

from quotely.lexer.lexer import TagScanError, TagScanner, fields, scan

__all__ = ["TagScanner", "scan", "fields", "TagScanError"]
