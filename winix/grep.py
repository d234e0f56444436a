"""Search files for lines matching a regular expression."""

from __future__ import annotations

import re
from collections.abc import AsyncIterator, Iterable
from pathlib import Path

from winix.cat import PathArg, _aiter_lines, _as_paths, _iter_lines, _split_lines


def _compile(pattern: str) -> re.Pattern[str]:
    try:
        return re.compile(pattern)
    except re.error as exc:
        raise ValueError(f"invalid pattern {pattern!r}: {exc}") from exc


def _format_match(path: Path, number: int, line: str) -> str:
    return f"{path}:{number}: {line}\n"


def grep_sync(pattern: str, files: PathArg | Iterable[PathArg]) -> str:
    """Return ``path:line: text`` for every matching line in every file."""
    regex = _compile(pattern)
    return "".join(
        _format_match(path, number, line)
        for path in _as_paths(files)
        for number, line in enumerate(_iter_lines(path), 1)
        if regex.search(line)
    )


async def grep_async(
    pattern: str, files: PathArg | Iterable[PathArg]
) -> AsyncIterator[bytes]:
    """Stream matching lines of the first file as UTF-8 chunks."""
    regex = _compile(pattern)
    paths = _as_paths(files)
    if not paths:
        return
    path = paths[0]
    number = 0
    async for line in _aiter_lines(path):
        number += 1
        if regex.search(line):
            yield _format_match(path, number, line).encode("utf-8")


async def grep_async_to_string(pattern: str, files: PathArg | Iterable[PathArg]) -> str:
    """Collect the output of :func:`grep_async` into a string."""
    parts: list[str] = []
    async for chunk in grep_async(pattern, files):
        try:
            parts.append(chunk.decode("utf-8"))
        except UnicodeDecodeError:
            continue
    return "".join(parts)


def grep_from_string(pattern: str, content: str) -> str:
    """Return the lines of ``content`` that contain ``pattern`` literally."""
    return "".join(f"{line}\n" for line in _split_lines(content) if pattern in line)