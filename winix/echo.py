"""Write arguments to standard output."""

from __future__ import annotations

from collections.abc import Sequence


def run(args: Sequence[str]) -> None:
    """Print the arguments joined by spaces, without a trailing newline."""
    print(" ".join(args), end="", flush=True)