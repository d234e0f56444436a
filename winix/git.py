"""Run git commands and query repository state through the system git."""

from __future__ import annotations

import os
import subprocess
import sys
from collections.abc import Sequence

from termcolor import colored

_COMMON_COMMANDS = (
    ("status", "Show working tree status"),
    ("log", "Show commit logs"),
    ("add <file>", "Add file contents to index"),
    ("commit", "Record changes to repository"),
    ("push", "Update remote refs"),
    ("pull", "Fetch and merge from remote"),
    ("clone <url>", "Clone a repository"),
    ("branch", "List, create, or delete branches"),
    ("checkout", "Switch branches or restore files"),
    ("merge", "Join development histories"),
    ("diff", "Show changes between commits"),
    ("reset", "Reset current HEAD to state"),
    ("stash", "Stash changes in working directory"),
    ("remote", "Manage remote repositories"),
    ("init", "Create empty Git repository"),
)

_EXAMPLES = (
    "git status",
    "git log --oneline",
    "git add .",
    'git commit -m "Initial commit"',
    "git push origin main",
    "git pull origin main",
    "git branch -a",
    "git checkout -b new-feature",
)


def _run(args: Sequence[str]) -> subprocess.CompletedProcess[bytes]:
    return subprocess.run(["git", *args], capture_output=True, check=False)


def _decode(data: bytes) -> str:
    return data.decode("utf-8", errors="replace")


def is_git_available() -> bool:
    """True when a working ``git`` executable is on the PATH."""
    try:
        return _run(["--version"]).returncode == 0
    except OSError:
        return False


def run_git_command(args: Sequence[str]) -> int | None:
    """Run ``git`` with ``args``, echoing its output; return its exit code.

    Returns ``None`` when git could not be started at all.
    """
    try:
        result = _run(args)
    except OSError as exc:
        print(colored(f"Failed to execute git command: {exc}", "red"), file=sys.stderr)
        return None

    if result.stdout:
        print(_decode(result.stdout), end="")
    if result.stderr:
        print(_decode(result.stderr), end="", file=sys.stderr)
    if result.returncode > 0:
        print(
            colored(f"Git command failed with exit code: {result.returncode}", "red"),
            file=sys.stderr,
        )
    return result.returncode


def execute(args: Sequence[str]) -> None:
    """Run the ``git`` command, or show help when no arguments are given."""
    if not is_git_available():
        print(colored("Error: Git is not installed or not in PATH", "red"))
        print(colored("Please install Git and ensure it's in your PATH", "yellow"))
        return
    if not args:
        show_git_help()
        return
    run_git_command(args)


def interactive_mode() -> None:
    """Read git commands (without the ``git`` prefix) until ``exit`` or ``quit``."""
    print(colored("Git Interactive Mode", "green", attrs=["bold"]))
    print(colored(
        "Type git commands (without 'git' prefix) or 'exit' to quit", attrs=["dark"]
    ))
    print(colored(
        'Example: status, log --oneline, add ., commit -m "message"', attrs=["dark"]
    ))
    print()

    while True:
        try:
            line = input(colored("git> ", "cyan", attrs=["bold"]))
        except EOFError:
            break
        except OSError as exc:
            print(colored(f"Error reading input: {exc}", "red"), file=sys.stderr)
            break

        line = line.strip()
        if not line:
            continue
        if line in ("exit", "quit"):
            print(colored("Exiting git interactive mode", "green"))
            break
        run_git_command(line.split())


def show_git_help() -> None:
    """Print the most common git commands and a few examples."""
    print(colored("Git Commands Available", "green", attrs=["bold"]))
    print(colored("Usage: git <command> [options]", attrs=["dark"]))
    print()

    print(colored("Most Common Git Commands:", "white", attrs=["bold"]))
    for name, description in _COMMON_COMMANDS:
        print(f"  {colored(f'{name:<15}', 'yellow')} {description}")
    print()

    print(colored("Examples:", "cyan", attrs=["bold"]))
    for example in _EXAMPLES:
        print(f"  {colored(example, attrs=['dark'])}")
    print()

    print(colored("Interactive Mode:", "magenta", attrs=["bold"]))
    print(f"  {colored('git --interactive', attrs=['dark'])}")
    print(f"  {colored('  Enter interactive git mode for easier command execution', attrs=['dark'])}")


def is_git_repo() -> bool:
    """True when the current directory is inside a git repository."""
    if os.path.exists(".git"):
        return True
    if "GIT_DIR" in os.environ:
        return True
    try:
        return _run(["rev-parse", "--git-dir"]).returncode == 0
    except OSError:
        return False


def get_current_branch() -> str | None:
    """Return the name of the checked-out branch, if any."""
    try:
        result = _run(["branch", "--show-current"])
    except OSError:
        return None
    if result.returncode != 0:
        return None
    branch = _decode(result.stdout).strip()
    return branch or None


def get_repo_status() -> str | None:
    """Return ``"clean"`` or ``"dirty"`` for the working tree, or ``None``."""
    try:
        result = _run(["status", "--porcelain"])
    except OSError:
        return None
    if result.returncode != 0:
        return None
    return "clean" if not _decode(result.stdout).strip() else "dirty"