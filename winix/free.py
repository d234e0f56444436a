"""Report memory and swap usage."""

from __future__ import annotations

import psutil

from winix.df import format_memory


def memory_report() -> list[tuple[str, int]]:
    """Return labelled byte counts for used and total memory and swap."""
    memory = psutil.virtual_memory()
    swap = psutil.swap_memory()
    return [
        ("Used memory", memory.total - memory.available),
        ("Total memory", memory.total),
        ("Total swap", swap.total),
        ("Used swap", swap.used),
    ]


def execute() -> None:
    """Print the memory report."""
    for label, value in memory_report():
        print(f"{label:<12}: {format_memory(value)}")