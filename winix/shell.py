"""Interactive shell offering Unix-style commands."""

from __future__ import annotations

import os
import sys
from collections.abc import Callable, Sequence

from termcolor import colored

from winix import chmod, chown, df, echo, free, git, kill
from winix.killargs import KillError
from winix.lineedit import LineEditor

_BANNER = r"""██     ██ ██ ███    ██ ██ ██   ██
██     ██ ██ ████   ██ ██  ██ ██
██  █  ██ ██ ██ ██  ██ ██   ███
██ ███ ██ ██ ██  ██ ██ ██  ██ ██
 ███ ███  ██ ██   ████ ██ ██   ██"""

_TAGLINE = (
    "-----------Your Most Useful Linux Commands directly on Your Windows "
    "without WSL or a Linux Distro-------------"
)

_COMMAND_LIST = (
    ("cd", "yellow"),
    ("chmod", "yellow"),
    ("chown", "yellow"),
    ("df", "yellow"),
    ("echo", "yellow"),
    ("exit", "red"),
    ("free", "yellow"),
    ("git", "yellow"),
    ("help", "yellow"),
    ("kill", "yellow"),
    ("ls", "yellow"),
    ("pwd", "yellow"),
    ("rm", "yellow"),
)


def show_splash_screen() -> None:
    """Print the banner and the list of available commands."""
    print(colored(_BANNER, attrs=["bold"]))
    print(colored(_TAGLINE, "blue", attrs=["bold"]))
    print()
    print(colored("Available Commands:", "white", attrs=["bold"]))
    for name, color in _COMMAND_LIST:
        print(f"  {colored(name, color, attrs=['bold'])}")
    print()


def cd_command(path: str | os.PathLike[str]) -> None:
    """Change the current directory."""
    os.chdir(path)


def pwd_command() -> str:
    """Print and return the current directory."""
    cwd = os.getcwd()
    print(colored(cwd, "cyan", attrs=["bold"]))
    return cwd


def ls_command(path: str | os.PathLike[str] = ".") -> list[str]:
    """Print and return the names in ``path``; directories are shown in blue."""
    names = []
    with os.scandir(path) as entries:
        for entry in entries:
            names.append(entry.name)
            if entry.is_dir():
                print(colored(entry.name, "blue", attrs=["bold"]))
            else:
                print(colored(entry.name, "white"))
    return names


def _error_text(exc: OSError) -> str:
    return exc.strerror or str(exc)


def _cd(args: list[str]) -> None:
    if not args:
        print(colored("Usage: cd <directory>", "red"))
        return
    try:
        cd_command(args[0])
    except OSError as exc:
        print(colored(f"cd: {_error_text(exc)}", "red"))


def _pwd(args: list[str]) -> None:
    try:
        pwd_command()
    except OSError as exc:
        print(colored(f"pwd: {_error_text(exc)}", "red"))


def _ls(args: list[str]) -> None:
    try:
        ls_command(args[0] if args else ".")
    except OSError as exc:
        print(colored(f"ls: {_error_text(exc)}", "red"))


def _kill(args: list[str]) -> None:
    if not args:
        print(colored("Usage: kill <pid|name> [options]", "red"))
        return
    try:
        kill.execute(args)
    except KillError as exc:
        print(colored(f"kill: {exc}", "red"))


def _rm(args: list[str]) -> None:
    if not args:
        print(colored("Usage: rm <file1> [file2] ...", "red"))
        return
    for name in args:
        try:
            os.remove(name)
        except OSError as exc:
            print(f"Failed to delete {name}: {_error_text(exc)}", file=sys.stderr)
        else:
            print(f"Deleted {name}")


_HANDLERS: dict[str, Callable[[list[str]], None]] = {
    "cd": _cd,
    "pwd": _pwd,
    "ls": _ls,
    "echo": echo.run,
    "free": lambda args: free.execute(),
    "df": lambda args: df.execute(),
    "kill": _kill,
    "chmod": chmod.execute,
    "chown": chown.execute,
    "rm": _rm,
    "git": git.execute,
    "help": lambda args: show_splash_screen(),
}


def handle_command(line: str) -> None:
    """Run one command line."""
    parts = line.split()
    if not parts:
        return
    command = parts[0].lower()
    args = parts[1:]
    handler = _HANDLERS.get(command)
    if handler is None:
        print(colored(f"Unknown command: '{command}'", "red"))
        print(colored("Type 'help' for available commands", attrs=["dark"]))
        return
    handler(args)


def run_cli() -> None:
    """Read and run commands until ``exit``, ``quit`` or end of input."""
    editor = LineEditor()
    show_splash_screen()
    while True:
        try:
            line = editor.read_line()
        except KeyboardInterrupt:
            print("^C")
            break
        except EOFError:
            print("^D")
            break

        editor.add_history_entry(line)
        if line.strip() in ("exit", "quit"):
            print(colored("Goodbye!", "blue", attrs=["bold"]))
            break
        handle_command(line)


def main(argv: Sequence[str] | None = None) -> int:
    """Command entry point; ``--interactive`` first opens git interactive mode."""
    args = list(sys.argv[1:] if argv is None else argv)
    if "--interactive" in args:
        git.interactive_mode()
    run_cli()
    return 0


if __name__ == "__main__":
    sys.exit(main())