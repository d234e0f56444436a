"""Concatenate files, normalising Windows line endings."""

from __future__ import annotations

import asyncio
import contextlib
import os
import time
from collections.abc import AsyncIterator, Iterable, Iterator
from pathlib import Path
from typing import Union

PathArg = Union[str, bytes, "os.PathLike[str]"]


def _as_paths(files: PathArg | Iterable[PathArg]) -> list[Path]:
    if isinstance(files, (str, bytes, os.PathLike)):
        files = [files]
    return [Path(os.fsdecode(f)) for f in files]


def _strip_newline(raw: bytes) -> str:
    text = raw.decode("utf-8")
    if text.endswith("\n"):
        text = text[:-1]
        if text.endswith("\r"):
            text = text[:-1]
    return text


def _drop_cr(line: str) -> str:
    return line[:-1] if line.endswith("\r") else line


def _iter_lines(path: Path) -> Iterator[str]:
    with open(path, "rb") as handle:
        for raw in handle:
            yield _strip_newline(raw)


async def _aiter_lines(path: Path) -> AsyncIterator[str]:
    handle = await asyncio.to_thread(open, path, "rb")
    try:
        while raw := await asyncio.to_thread(handle.readline):
            yield _strip_newline(raw)
    finally:
        handle.close()


def _split_lines(content: str) -> list[str]:
    pieces = content.split("\n")
    tail = pieces.pop()
    lines = [piece[:-1] if piece.endswith("\r") else piece for piece in pieces]
    if tail:
        lines.append(tail)
    return lines


def cat(files: PathArg | Iterable[PathArg]) -> str:
    """Return the contents of all files, each line ending in ``\\n``."""
    return "".join(
        _drop_cr(line) + "\n" for path in _as_paths(files) for line in _iter_lines(path)
    )


async def cat_async(files: PathArg | Iterable[PathArg]) -> AsyncIterator[bytes]:
    """Stream the lines of the first file as UTF-8 chunks."""
    paths = _as_paths(files)
    if not paths:
        return
    async for line in _aiter_lines(paths[0]):
        yield (_drop_cr(line) + "\n").encode("utf-8")


async def cat_async_to_string(files: PathArg | Iterable[PathArg]) -> str:
    """Read all files asynchronously into one normalised string.

    A file that cannot be opened raises; a read that fails part way stops
    that file's output.
    """
    parts: list[str] = []
    for path in _as_paths(files):
        try:
            async for line in _aiter_lines(path):
                parts.append(_drop_cr(line) + "\n")
        except UnicodeDecodeError:
            continue
    return "".join(parts)


async def benchmark_cat_sync_vs_async(
    files: PathArg | Iterable[PathArg],
) -> tuple[float, float]:
    """Time :func:`cat` and :func:`cat_async_to_string`; return seconds for each."""
    paths = _as_paths(files)

    start = time.perf_counter()
    with contextlib.suppress(OSError, ValueError):
        cat(paths)
    sync_elapsed = time.perf_counter() - start

    start = time.perf_counter()
    with contextlib.suppress(OSError, ValueError):
        await cat_async_to_string(paths)
    async_elapsed = time.perf_counter() - start

    return sync_elapsed, async_elapsed