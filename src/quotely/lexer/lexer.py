"""Tag scanner: cuts an argument string into ``tag/value`` segments.

The scanner works against one ``CommandGrammar`` at a time.  Only the
tags of that grammar count as segment boundaries, and a tag only counts
when it opens the argument string or follows whitespace.  A segment's
value is everything between its tag and the next boundary (or the end
of the string), stripped.  This gives the same ungreedy behaviour as a
``tag/(.+?)(?=\\s+tag/|$)`` pattern without building one regex per
command.

Structural rules enforced here:

- a non-empty argument string must open with a tag;
- if the grammar names leading tags, the first segment must use one;
- no tag may appear twice;
- every required tag must be present, in the declared order;
- no value may be empty.
"""
from __future__ import annotations

import re
from functools import lru_cache
from typing import Final

from quotely.grammar.grammar import CommandGrammar
from quotely.grammar.tokens import Segment, Tag

_TAG_BOUNDARY: Final[str] = r"(?:(?<=\s)|^)({tags})"


class TagScanError(Exception):
    """Raised when an argument string does not fit its command grammar.

    Parameters
    ----------
    message:
        Human-readable description of the problem.
    offset:
        0-based offset in the argument string where the problem starts.
    """

    def __init__(self, message: str, offset: int) -> None:
        super().__init__(f"TagScanError at {offset}: {message}")
        self.scan_message = message
        self.offset = offset


@lru_cache(maxsize=None)
def _boundary_pattern(tags: frozenset[Tag]) -> re.Pattern[str]:
    # Longest prefix first so that alternation never picks a shorter overlap.
    alternatives = sorted((re.escape(t.prefix) for t in tags), key=len, reverse=True)
    return re.compile(_TAG_BOUNDARY.format(tags="|".join(alternatives)))


class TagScanner:
    """Scanner bound to a single command grammar.

    Parameters
    ----------
    grammar:
        The grammar whose tags delimit segments.
    """

    __slots__ = ("_grammar", "_prefix_to_tag")

    def __init__(self, grammar: CommandGrammar) -> None:
        self._grammar = grammar
        self._prefix_to_tag: dict[str, Tag] = {t.prefix: t for t in grammar.tags}

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def scan(self, arguments: str) -> tuple[Segment, ...]:
        """Split *arguments* into segments and check them against the grammar.

        Returns
        -------
        tuple[Segment, ...]
            Segments in the order they appear.  Empty for an empty string.

        Raises
        ------
        TagScanError
            When the arguments violate the grammar's structure.
        """
        text = arguments.strip()
        if not text:
            self._check_required(())
            return ()

        segments = self._split(text)
        self._check_leading(segments)
        self._check_unique(segments)
        self._check_required(segments)
        return segments

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _split(self, text: str) -> tuple[Segment, ...]:
        if not self._grammar.tags:
            raise TagScanError("command takes no tagged arguments", 0)
        matches = list(_boundary_pattern(self._grammar.tags).finditer(text))
        if not matches or matches[0].start() != 0:
            raise TagScanError("arguments must start with a tag", 0)

        segments: list[Segment] = []
        for index, match in enumerate(matches):
            end = matches[index + 1].start() if index + 1 < len(matches) else len(text)
            value = text[match.end() : end].strip()
            if not value:
                raise TagScanError(f"missing value after {match.group(1)}", match.start())
            segments.append(
                Segment(tag=self._prefix_to_tag[match.group(1)], value=value, offset=match.start())
            )
        return tuple(segments)

    def _check_leading(self, segments: tuple[Segment, ...]) -> None:
        leading = self._grammar.leading
        if leading and segments[0].tag not in leading:
            expected = " or ".join(t.prefix for t in leading)
            raise TagScanError(f"arguments must start with {expected}", 0)

    def _check_unique(self, segments: tuple[Segment, ...]) -> None:
        seen: set[Tag] = set()
        for seg in segments:
            if seg.tag in seen:
                raise TagScanError(f"{seg.tag.prefix} given more than once", seg.offset)
            seen.add(seg.tag)

    def _check_required(self, segments: tuple[Segment, ...]) -> None:
        order = [seg.tag for seg in segments if seg.tag in self._grammar.required]
        for tag in self._grammar.required:
            if tag not in order:
                raise TagScanError(f"missing required {tag.prefix}", 0)
        if tuple(order) != self._grammar.required:
            expected = " ".join(t.prefix for t in self._grammar.required)
            raise TagScanError(f"required tags must appear in order: {expected}", 0)


def scan(arguments: str, grammar: CommandGrammar) -> tuple[Segment, ...]:
    """Convenience function: scan *arguments* against *grammar*.

    Parameters
    ----------
    arguments:
        The argument string that followed the command keyword.
    grammar:
        The grammar of the command being parsed.

    Returns
    -------
    tuple[Segment, ...]
        The recognised segments, in input order.
    """
    return TagScanner(grammar).scan(arguments)


def fields(segments: tuple[Segment, ...]) -> dict[Tag, str]:
    """Index *segments* by tag.  Tags are unique after a successful scan."""
    return {seg.tag: seg.value for seg in segments}
