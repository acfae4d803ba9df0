"""Quotely command module.

Exports every command variant, the ``Command`` union, and the
serializer for dumping commands to JSON/YAML.
"""
from __future__ import annotations

from quotely.commands.nodes import (
    AddItemCommand,
    AddQuoteCommand,
    CalculateTotalCommand,
    Command,
    CommandKind,
    DeleteItemCommand,
    DeleteQuoteCommand,
    ExitCommand,
    ExportQuoteCommand,
    FinishQuoteCommand,
    NavigateCommand,
    RegisterCommand,
    SearchQuoteCommand,
    ShowQuotesCommand,
)
from quotely.commands.serializer import CommandSerializer

__all__ = [
    # Union and discriminator
    "Command",
    "CommandKind",
    # Variants
    "RegisterCommand",
    "AddQuoteCommand",
    "DeleteQuoteCommand",
    "ShowQuotesCommand",
    "FinishQuoteCommand",
    "AddItemCommand",
    "DeleteItemCommand",
    "ExportQuoteCommand",
    "CalculateTotalCommand",
    "NavigateCommand",
    "SearchQuoteCommand",
    "ExitCommand",
    # Serializer
    "CommandSerializer",
]
