"""Parsing of ANSI escape sequences into display events."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Any

_ESCAPE = re.compile(r"\x1b\[[0-9;]*[a-zA-Z]")

_DEMO_LINES = (
    "\x1b[31mRed Text\x1b[0m Normal",
    "\x1b[32mGreen Text\x1b[0m Normal",
    "\x1b[1mBold Text\x1b[0m",
    "\x1b[4mUnderlined Text\x1b[0m",
    "\x1b[33;44mYellow on Blue\x1b[0m",
)


class AnsiEventKind(Enum):
    """The kinds of event an escape stream can produce."""

    SET_COLOR = "set_color"
    RESET_COLOR = "reset_color"
    MOVE_CURSOR = "move_cursor"
    CLEAR_LINE = "clear_line"
    PRINT_TEXT = "print_text"


@dataclass(frozen=True)
class AnsiEvent:
    """One parsed event; ``value`` holds the colour name, text or (row, column)."""

    kind: AnsiEventKind
    value: Any = None


_KNOWN_SEQUENCES = {
    "\x1b[0m": AnsiEvent(AnsiEventKind.RESET_COLOR),
    "\x1b[31m": AnsiEvent(AnsiEventKind.SET_COLOR, "Red"),
    "\x1b[32m": AnsiEvent(AnsiEventKind.SET_COLOR, "Green"),
    "\x1b[K": AnsiEvent(AnsiEventKind.CLEAR_LINE),
}


def parse_ansi(data: bytes | str) -> list[AnsiEvent]:
    """Split ``data`` into text and recognised escape events.

    Input that is not valid UTF-8 yields no events. Escape sequences that
    are not recognised are dropped.
    """
    if isinstance(data, (bytes, bytearray)):
        try:
            text = bytes(data).decode("utf-8")
        except UnicodeDecodeError:
            return []
    else:
        text = data

    events: list[AnsiEvent] = []
    last = 0
    for match in _ESCAPE.finditer(text):
        if match.start() > last:
            events.append(AnsiEvent(AnsiEventKind.PRINT_TEXT, text[last:match.start()]))
        event = _KNOWN_SEQUENCES.get(match.group())
        if event is not None:
            events.append(event)
        last = match.end()

    if last < len(text):
        events.append(AnsiEvent(AnsiEventKind.PRINT_TEXT, text[last:]))
    return events


def demo_lines() -> list[str]:
    """Sample lines showing a handful of colour and style escapes."""
    return list(_DEMO_LINES)