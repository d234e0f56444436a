"""Change the owner of files."""

from __future__ import annotations

import os
from collections.abc import Sequence

from termcolor import colored

_USAGE = (
    "Usage: chown [OPTION]... [OWNER][:[GROUP]] FILE...",
    "   or: chown [OPTION]... --reference=RFILE FILE...",
)
_EXAMPLES = (
    "chown alice file.txt",
    "chown alice:developers file.txt",
    "chown :developers file.txt",
    "chown --recursive alice:developers /mydir",
    "chown --reference=ref.txt file.txt",
)
_GROUP_NOTE = "Note: Group ownership changes are not fully supported on Windows"


class ChownError(Exception):
    """Raised when an owner cannot be looked up or set."""


def parse_owner_spec(spec: str) -> tuple[str | None, str | None]:
    """Split ``USER[:GROUP]`` into its parts; empty parts become ``None``."""
    user, sep, group = spec.partition(":")
    if not sep:
        return spec, None
    return user or None, group or None


def _lookup_uid(username: str) -> int:
    try:
        import pwd
    except ImportError as exc:
        raise ChownError(f"error looking up user '{username}': not supported") from exc
    try:
        return pwd.getpwnam(username).pw_uid
    except KeyError as exc:
        raise ChownError(f"invalid user: {username}") from exc


def change_owner(path: str | os.PathLike[str], spec: str) -> None:
    """Set the owner of ``path`` to the user named in ``spec``.

    A group part is accepted but only reported, not applied.
    """
    user, group = parse_owner_spec(spec)
    if user is not None:
        uid = _lookup_uid(user)
        try:
            os.chown(path, uid, -1)
        except OSError as exc:
            raise ChownError(f"failed to change owner of '{path}': {exc.strerror}") from exc
    if group is not None:
        print(_GROUP_NOTE)


def _print_usage() -> None:
    for line in _USAGE:
        print(colored(line, "red"))
    print()
    print(colored("Examples:", "yellow"))
    for example in _EXAMPLES:
        print(f"  {colored(example, attrs=['dark'])}")


def execute(args: Sequence[str]) -> None:
    """Run the ``chown`` command: ``OWNER[:GROUP] FILE...``."""
    if len(args) < 2:
        _print_usage()
        return

    spec, *files = args
    for filename in files:
        if not os.path.exists(filename):
            print(colored(
                f"chown: cannot access '{filename}': No such file or directory", "red"
            ))
            continue
        try:
            change_owner(filename, spec)
        except ChownError as exc:
            print(colored(f"chown: {exc}", "red"))
        else:
            print(colored(f"Owner changed for '{filename}'", "green"))