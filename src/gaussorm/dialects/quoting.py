"""
Delimited identifier quoting for dotted, possibly pre-quoted names.
"""

from __future__ import annotations

from enum import Enum
from typing import Protocol

QUOTE = '"'
ESCAPED_QUOTE = '""'


class Writer(Protocol):
    def write(self, text: str) -> None: ...


class _Segment(Enum):
    START = "start"
    BARE = "bare"
    SELF_QUOTED = "self_quoted"


def _close_segment(out: list[str], state: _Segment, pending: int) -> None:
    if state is _Segment.START:
        out.append(QUOTE)
    if pending and state is not _Segment.SELF_QUOTED:
        out.append(ESCAPED_QUOTE)
    out.append(QUOTE)


def quote_identifier(name: str) -> str:
    """
    Quote every dot-separated segment of ``name`` with double quotes.

    Embedded quotes are doubled. A pair of quotes already present in the input
    is kept as one escaped quote, and a segment that arrives wrapped in quotes is
    not wrapped again, so quoting a quoted identifier leaves it unchanged.
    A dot inside such a self-quoted segment belongs to the identifier.

    >>> quote_identifier("schema.table")
    '"schema"."table"'
    >>> quote_identifier('a"b')
    '"a""b"'
    """
    out: list[str] = []
    state = _Segment.START
    pending = 0

    for char in name:
        if char == QUOTE:
            pending += 1
            if pending == 2:
                if state is _Segment.START:
                    out.append(QUOTE)
                    state = _Segment.BARE
                out.append(ESCAPED_QUOTE)
                pending = 0
            continue

        if char == "." and not (state is _Segment.SELF_QUOTED and pending == 0):
            _close_segment(out, state, pending)
            out.append(".")
            state, pending = _Segment.START, 0
            continue

        if state is _Segment.START:
            out.append(QUOTE)
            if pending:
                # a lone leading quote opens a caller-quoted segment
                state = _Segment.SELF_QUOTED
                pending = 0
            else:
                state = _Segment.BARE
        elif pending:
            out.append(ESCAPED_QUOTE)
            pending = 0
        out.append(char)

    _close_segment(out, state, pending)
    return "".join(out)


def quote_to(writer: Writer, name: str) -> None:
    writer.write(quote_identifier(name))
