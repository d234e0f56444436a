"""Change file permission bits from octal or symbolic modes."""

from __future__ import annotations

import os
from collections.abc import Sequence
from dataclasses import dataclass, field

from termcolor import colored

TARGETS = ("owner", "group", "other")

_WHO = {
    "u": ("owner",),
    "g": ("group",),
    "o": ("other",),
    "a": TARGETS,
}
_BITS = {"r": 4, "w": 2, "x": 1}
_PERMISSION_CHARS = frozenset("rwxXstugo")
_OPERATIONS = "+-="
_SHIFT = {"owner": 6, "group": 3, "other": 0}

_USAGE = (
    "Usage: chmod [OPTION]... MODE[,MODE]... FILE...",
    "   or: chmod [OPTION]... OCTAL-MODE FILE...",
)
_EXAMPLES = (
    "chmod 755 myfile.txt",
    "chmod u+x script.sh",
    "chmod g-w,o-w file.txt",
    "chmod a=r file.txt",
    "chmod u=rwx,g=rx,o=r file.txt",
)


class ChmodError(Exception):
    """Raised when a mode is invalid or cannot be applied."""


def _empty_bits() -> dict[str, set[str]]:
    return {target: set() for target in TARGETS}


@dataclass
class Permissions:
    """Read, write and execute flags for owner, group and other."""

    bits: dict[str, set[str]] = field(default_factory=_empty_bits)

    def add(self, target: str, perm: str, is_dir: bool = False) -> None:
        """Grant ``perm`` to ``target``; ``X`` grants execute only on directories."""
        if target in self.bits and perm in _BITS:
            self.bits[target].add(perm)
        elif perm == "X":
            if is_dir and target in self.bits:
                self.bits[target].add("x")
        elif perm in ("s", "t"):
            return
        else:
            raise ChmodError(f"Invalid permission: {perm} for {target}")

    def remove(self, target: str, perm: str) -> None:
        """Withdraw ``perm`` from ``target``; ``X`` withdraws execute."""
        if target in self.bits and perm in _BITS:
            self.bits[target].discard(perm)
        elif perm == "X":
            if target in self.bits:
                self.bits[target].discard("x")
        elif perm in ("s", "t"):
            return
        else:
            raise ChmodError(f"Invalid permission: {perm} for {target}")

    def clear(self, target: str) -> None:
        """Withdraw every permission from ``target``."""
        if target in self.bits:
            self.bits[target].clear()

    def to_octal(self) -> int:
        """Return the permission bits as an integer such as ``0o755``."""
        return sum(
            sum(_BITS[perm] for perm in perms) << _SHIFT[target]
            for target, perms in self.bits.items()
        )


def _is_octal_form(mode: str) -> bool:
    return all(ch in "0123456789" for ch in mode)


def parse_octal(mode: str) -> int:
    """Return the owner, group and other bits of an octal mode string.

    A fourth leading digit is accepted and ignored.
    """
    if not 1 <= len(mode) <= 4 or not all(ch in "01234567" for ch in mode):
        raise ChmodError("Invalid mode")
    if len(mode) < 3:
        raise ChmodError("Octal mode must be at least 3 digits")
    return int(mode[-3:], 8)


def _expression_mode(expr: str, is_dir: bool) -> int:
    if not expr:
        raise ChmodError("Empty expression")

    who_end = 0
    while who_end < len(expr) and expr[who_end] in _WHO:
        who_end += 1
    who = expr[:who_end] or "a"

    if who_end >= len(expr):
        raise ChmodError("Invalid symbolic expression: missing operation")
    operation = expr[who_end]
    if operation not in _OPERATIONS:
        raise ChmodError("Invalid operation: must be +, -, or =")

    permissions = expr[who_end + 1:]
    for ch in permissions:
        if ch not in _PERMISSION_CHARS:
            raise ChmodError(f"Invalid permission character: '{ch}'")

    # Every expression starts from a blank set of permissions.
    perms = Permissions()
    for who_char in who:
        for target in _WHO[who_char]:
            if operation == "=":
                perms.clear(target)
            for perm in permissions:
                if operation == "-":
                    perms.remove(target, perm)
                else:
                    perms.add(target, perm, is_dir)
    return perms.to_octal()


def _expressions(mode: str) -> list[str]:
    return [expr.strip() for expr in mode.split(",")]


def parse_symbolic(mode: str, is_dir: bool = False) -> int:
    """Return the bits a comma-separated symbolic mode leaves on a file.

    Each expression is applied from no permissions at all, so the last
    one decides the result; every expression is still validated.
    """
    result = 0
    for expr in _expressions(mode):
        result = _expression_mode(expr, is_dir)
    return result


def _apply(path: str | os.PathLike[str], bits: int) -> None:
    try:
        os.chmod(path, bits)
    except OSError as exc:
        raise ChmodError(f"failed to change permissions of '{path}': {exc.strerror}") from exc


def change_mode(path: str | os.PathLike[str], mode: str) -> None:
    """Apply an octal or symbolic ``mode`` to ``path``."""
    if _is_octal_form(mode):
        _apply(path, parse_octal(mode))
        return
    is_dir = os.path.isdir(path)
    for expr in _expressions(mode):
        _apply(path, _expression_mode(expr, is_dir))


def _print_usage() -> None:
    for line in _USAGE:
        print(colored(line, "red"))
    print()
    print(colored("Examples:", "yellow"))
    for example in _EXAMPLES:
        print(f"  {colored(example, attrs=['dark'])}")


def execute(args: Sequence[str]) -> None:
    """Run the ``chmod`` command: ``MODE FILE...``."""
    if len(args) < 2:
        _print_usage()
        return

    mode, *files = args
    for filename in files:
        if not os.path.exists(filename):
            print(colored(
                f"chmod: cannot access '{filename}': No such file or directory", "red"
            ))
            continue
        try:
            change_mode(filename, mode)
        except ChmodError as exc:
            print(colored(f"chmod: {exc}", "red"))
        else:
            print(colored(f"Permissions changed for '{filename}'", "green"))