"""Print the first lines of files."""

from __future__ import annotations

import contextlib
import itertools
from collections.abc import AsyncIterator, Iterable, Iterator

from winix.cat import PathArg, _aiter_lines, _as_paths, _drop_cr, _iter_lines, _split_lines


def _all_lines(files: PathArg | Iterable[PathArg]) -> Iterator[str]:
    for path in _as_paths(files):
        for line in _iter_lines(path):
            yield _drop_cr(line)


def head_sync(files: PathArg | Iterable[PathArg], lines: int) -> str:
    """Return at most ``lines`` lines taken from the files in order."""
    return "".join(f"{line}\n" for line in itertools.islice(_all_lines(files), lines))


async def head_async(files: PathArg | Iterable[PathArg], lines: int) -> AsyncIterator[bytes]:
    """Stream at most ``lines`` lines of the first file as UTF-8 chunks."""
    paths = _as_paths(files)
    if not paths:
        return
    count = 0
    async with contextlib.aclosing(_aiter_lines(paths[0])) as source:
        async for line in source:
            if count >= lines:
                break
            yield (_drop_cr(line) + "\n").encode("utf-8")
            count += 1


async def head_async_to_string(files: PathArg | Iterable[PathArg], lines: int) -> str:
    """Collect the output of :func:`head_async` into a string."""
    parts: list[str] = []
    async for chunk in head_async(files, lines):
        try:
            parts.append(chunk.decode("utf-8"))
        except UnicodeDecodeError:
            continue
    return "".join(parts)


def head_from_string(content: str, lines: int) -> str:
    """Return the first ``lines`` lines of ``content``."""
    return "".join(f"{line}\n" for line in _split_lines(content)[:lines])