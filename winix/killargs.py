"""Command-line parsing and validation for the ``kill`` command."""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum

USAGE = (
    "Usage: kill [-signal|-s signal|-p] [-q value] [-a] "
    "[--timeout milliseconds signal] [--] pid|name...\n"
    "\n"
    "Supported signals on Windows:\n"
    "-2, -INT    Interrupt (Ctrl+C)\n"
    "-3, -QUIT   Quit (Ctrl+Break)\n"
    "-9, -KILL   Force terminate (default)\n"
    "-15, -TERM  Graceful terminate (Ctrl+C)\n"
    "\n"
    "Examples:\n"
    "kill 1234           # Force terminate process 1234\n"
    "kill -TERM 1234     # Graceful terminate\n"
    "kill -9 1234        # Force terminate\n"
    "kill -a notepad     # Kill all notepad processes"
)

_VALID_SIGNAL_NAMES = frozenset({"TERM", "KILL", "INT", "QUIT", "2", "3", "9", "15"})

_UNSIGNED = re.compile(r"\+?[0-9]+")
_SIGNED = re.compile(r"[+-]?[0-9]+")
_U64_MAX = 2**64 - 1
_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1


class KillError(Exception):
    """Raised when ``kill`` arguments are invalid or an operation fails."""


class KillMethod(Enum):
    """How a signal is delivered to a process."""

    FORCE_TERMINATE = "force_terminate"
    GRACEFUL_CTRL_C = "graceful_ctrl_c"
    GRACEFUL_CTRL_BREAK = "graceful_ctrl_break"
    WINDOW_CLOSE = "window_close"


_METHODS = {
    "KILL": KillMethod.FORCE_TERMINATE,
    "9": KillMethod.FORCE_TERMINATE,
    "TERM": KillMethod.GRACEFUL_CTRL_C,
    "15": KillMethod.GRACEFUL_CTRL_C,
    "INT": KillMethod.GRACEFUL_CTRL_C,
    "2": KillMethod.GRACEFUL_CTRL_C,
    "QUIT": KillMethod.GRACEFUL_CTRL_BREAK,
    "3": KillMethod.GRACEFUL_CTRL_BREAK,
}


@dataclass
class KillOptions:
    """Everything the ``kill`` command line can specify."""

    signal: str | None = None
    signal_explicit: str | None = None
    print_only: bool = False
    queue_value: int | None = None
    all_processes: bool = False
    timeout_ms: int | None = None
    timeout_signal: str | None = None
    end_of_options: bool = False
    targets: list[str] = field(default_factory=list)


def _is_all_digits(text: str) -> bool:
    """True when every character is an ASCII digit (also for ``""``)."""
    return all(ch in "0123456789" for ch in text)


def _parse_u64(text: str) -> int | None:
    if not _UNSIGNED.fullmatch(text):
        return None
    value = int(text)
    return value if value <= _U64_MAX else None


def _parse_i32(text: str) -> int | None:
    if not _SIGNED.fullmatch(text):
        return None
    value = int(text)
    return value if _I32_MIN <= value <= _I32_MAX else None


def is_valid_signal_name(signal: str) -> bool:
    """True for the signal names and numbers this command supports."""
    return signal.upper() in _VALID_SIGNAL_NAMES


def signal_to_method(signal: str) -> KillMethod:
    """Map a signal name or number to the way it is delivered."""
    try:
        return _METHODS[signal.upper()]
    except KeyError:
        raise KillError(
            f"Signal '{signal}' is not supported on Windows. "
            "Supported signals: TERM(15), INT(2), QUIT(3), KILL(9)"
        ) from None


def _parse_timeout(arg: str, rest: list[str], options: KillOptions) -> None:
    if "=" in arg:
        value = arg.split("=", 1)[1]
        ms = _parse_u64(value)
        if ms is None:
            raise KillError(f"Invalid timeout value: {value}")
        options.timeout_ms = ms
        return

    if not rest:
        raise KillError("Option --timeout requires milliseconds argument")
    value = rest.pop(0)
    ms = _parse_u64(value)
    if ms is None:
        raise KillError(f"Invalid timeout value: {value}")
    options.timeout_ms = ms

    if not rest:
        raise KillError("Option --timeout requires a signal argument")
    options.timeout_signal = rest.pop(0)


def parse_arguments(args: Sequence[str]) -> KillOptions:
    """Turn the ``kill`` command line into :class:`KillOptions`."""
    options = KillOptions()
    rest = list(args)
    while rest:
        arg = rest.pop(0)
        if options.end_of_options:
            options.targets.append(arg)
        elif arg == "--":
            options.end_of_options = True
        elif arg == "-p":
            options.print_only = True
        elif arg == "-a":
            options.all_processes = True
        elif arg == "-s":
            if not rest:
                raise KillError("Option -s requires a signal argument")
            options.signal_explicit = rest.pop(0)
        elif arg == "-q":
            if not rest:
                raise KillError("Option -q requires a value argument")
            value = rest.pop(0)
            parsed = _parse_i32(value)
            if parsed is None:
                raise KillError(f"Invalid queue value: {value}")
            options.queue_value = parsed
        elif arg.startswith("--timeout"):
            _parse_timeout(arg, rest, options)
        elif arg.startswith("-") and len(arg) > 1:
            signal = arg[1:]
            if _is_all_digits(signal) or is_valid_signal_name(signal):
                options.signal = signal
            else:
                raise KillError(f"Invalid signal: -{signal}")
        else:
            options.targets.append(arg)
    return options


def validate_options(options: KillOptions) -> None:
    """Check that parsed options form a consistent request."""
    if not options.targets and not options.print_only:
        raise KillError("No process ID or name specified")

    if options.signal is not None and options.signal_explicit is not None:
        raise KillError("Cannot specify signal with both -signal and -s options")

    signal = options.signal if options.signal is not None else options.signal_explicit
    if signal is not None:
        signal_to_method(signal)

    if options.all_processes and any(_is_all_digits(t) for t in options.targets):
        raise KillError("Cannot use -a flag with numeric PIDs")

    if options.timeout_ms is not None and options.timeout_signal is None:
        raise KillError("--timeout option requires a signal")

    if options.timeout_signal is not None:
        signal_to_method(options.timeout_signal)