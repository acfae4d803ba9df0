"""Command serialization for Quotely.

Converts parsed commands to plain dicts and from there to JSON or YAML,
for display by the CLI and for logging by executors.  Quote references
are written as the quote's name; the quote objects themselves belong to
the caller's registry.

Usage
-----
::

    from quotely.commands.serializer import CommandSerializer

    serializer = CommandSerializer()
    data = serializer.to_dict(command)
    json_text = serializer.to_json(command)
"""
from __future__ import annotations

import json
from dataclasses import fields
from typing import TYPE_CHECKING

import yaml

from quotely.commands.nodes import Command

if TYPE_CHECKING:
    from quotely.state.protocols import Quote


class CommandSerializer:
    """Converts ``Command`` values into JSON-compatible dicts.

    The serialized form uses a ``"kind"`` discriminator holding the
    ``CommandKind`` name; the remaining keys are the command's fields.
    """

    # ------------------------------------------------------------------
    # Serialization (Command → dict)
    # ------------------------------------------------------------------

    def to_dict(self, command: Command) -> dict[str, object]:
        """Serialize *command* to a JSON-compatible dict."""
        data: dict[str, object] = {"kind": command.kind.name}
        for f in fields(command):
            value = getattr(command, f.name)
            if f.name == "quote":
                data[f.name] = self._quote_ref(value)
            else:
                data[f.name] = value
        return data

    def _quote_ref(self, quote: "Quote | None") -> str | None:
        if quote is None:
            return None
        return quote.get_quote_name()

    # ------------------------------------------------------------------
    # JSON helpers
    # ------------------------------------------------------------------

    def to_json(self, command: Command, indent: int = 2) -> str:
        """Serialize *command* to a JSON string."""
        return json.dumps(self.to_dict(command), indent=indent, ensure_ascii=False)

    # ------------------------------------------------------------------
    # YAML helpers
    # ------------------------------------------------------------------

    def to_yaml(self, command: Command) -> str:
        """Serialize *command* to a YAML string."""
        return yaml.dump(
            self.to_dict(command), default_flow_style=False, allow_unicode=True, sort_keys=False
        )
