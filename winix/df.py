"""Report disk space usage."""

from __future__ import annotations

import psutil

_ROW = "{:<20} {:<15} {:<15} {:<15}"


def format_memory(num_bytes: int) -> str:
    """Render a byte count in GB, MB or KB with two decimals, or in bytes."""
    gb = num_bytes / (1024.0 ** 3)
    mb = num_bytes / (1024.0 ** 2)
    kb = num_bytes / 1024.0
    if gb >= 1.0:
        return f"{gb:.2f} GB"
    if mb >= 1.0:
        return f"{mb:.2f} MB"
    if kb >= 1.0:
        return f"{kb:.2f} KB"
    return f"{num_bytes} bytes"


def disk_usage_rows() -> list[tuple[str, int, int, int]]:
    """Return ``(name, total, available, used)`` for each mounted disk."""
    rows = []
    for partition in psutil.disk_partitions():
        try:
            usage = psutil.disk_usage(partition.mountpoint)
        except OSError:
            continue
        rows.append((partition.device, usage.total, usage.free, usage.total - usage.free))
    return rows


def execute() -> None:
    """Print a table of disk totals, free space and used space."""
    print(_ROW.format("Disk", "Total", "Available", "Used"))
    print("-" * 65)
    for name, total, available, used in disk_usage_rows():
        print(_ROW.format(
            f'"{name}"', format_memory(total), format_memory(available), format_memory(used)
        ))