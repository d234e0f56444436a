"""Start a command detached from the current terminal."""

from __future__ import annotations

import os
import subprocess
import sys
from collections.abc import Sequence

DETACHED_PROCESS = 0x00000008


def disown(command: Sequence[str]) -> subprocess.Popen[bytes]:
    """Start ``command`` with no standard streams, detached from this session."""
    command = list(command)
    if not command:
        raise ValueError("no command given")
    streams = {
        "stdin": subprocess.DEVNULL,
        "stdout": subprocess.DEVNULL,
        "stderr": subprocess.DEVNULL,
    }
    if os.name == "nt":
        return subprocess.Popen(command, creationflags=DETACHED_PROCESS, **streams)
    return subprocess.Popen(["nohup", *command], **streams)


def main(argv: Sequence[str] | None = None) -> int:
    """Command entry point: ``disown <command> [args...]``."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print("Usage: disown <command> [args...]", file=sys.stderr)
        return 1

    try:
        disown(args)
    except OSError as exc:
        print(f"Failed to disown process: {exc}", file=sys.stderr)
        return 0

    label = "Windows" if os.name == "nt" else "Unix-based OS"
    print(f"Process disowned ({label})")
    return 0


if __name__ == "__main__":
    sys.exit(main())