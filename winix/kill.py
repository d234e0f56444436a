"""Terminate processes by PID or by name."""

from __future__ import annotations

import os
import signal
import time
from collections.abc import Sequence

import psutil
from termcolor import colored

from winix.killargs import (
    USAGE,
    KillError,
    KillMethod,
    KillOptions,
    _is_all_digits,
    parse_arguments,
    signal_to_method,
    validate_options,
)

PROTECTED_PIDS = frozenset({0, 4, 8})
_U32_MAX = 2**32 - 1
_DEFAULT_SIGNAL = "9"

_CTRL_C = getattr(signal, "CTRL_C_EVENT", signal.SIGINT)
_CTRL_BREAK = getattr(signal, "CTRL_BREAK_EVENT", getattr(signal, "SIGQUIT", signal.SIGINT))


def _parse_pid(target: str) -> int:
    if target and _is_all_digits(target):
        pid = int(target)
        if pid <= _U32_MAX:
            return pid
    raise KillError(f"Invalid PID: {target} must be a number or name")


def process_exists(pid: int) -> bool:
    """True when ``pid`` names a live, accessible process."""
    try:
        return psutil.Process(pid).status() != psutil.STATUS_ZOMBIE
    except (psutil.NoSuchProcess, psutil.AccessDenied, ValueError, OverflowError):
        return False


def validate_pid_safety(pid: int) -> None:
    """Refuse to touch system processes or the current process."""
    if pid in PROTECTED_PIDS:
        raise KillError(f"Cannot kill system process with PID {pid}")
    if pid == os.getpid():
        raise KillError("Cannot kill current process")


def find_processes_by_name(name: str) -> list[int]:
    """Return the PIDs whose executable name matches ``name``, with or without ``.exe``."""
    target = name.lower()
    with_exe = f"{target}.exe"
    matches = []
    for proc in psutil.process_iter(["name"]):
        exe_name = proc.info.get("name")
        if not exe_name:
            continue
        exe_name = exe_name.lower()
        if exe_name in (target, with_exe):
            matches.append(proc.pid)
    return matches


def _force_terminate(pid: int) -> None:
    try:
        psutil.Process(pid).kill()
    except psutil.NoSuchProcess:
        raise KillError(f"Invalid PID: Process {pid} does not exist") from None
    except psutil.AccessDenied:
        raise KillError(
            f"Access denied: Cannot terminate process {pid} (insufficient privileges)"
        ) from None
    except (psutil.Error, OSError) as exc:
        raise KillError(f"Failed to terminate process {pid}: {exc}") from exc
    print(colored(f"Force terminated process {pid} (SIGKILL)", "green"))


def _request_close(pid: int) -> None:
    try:
        psutil.Process(pid).terminate()
    except (psutil.Error, OSError) as exc:
        raise KillError(f"Failed to send close request to process {pid}: {exc}") from exc
    print(colored(f"Sent close message to process {pid}", "green"))


def _graceful_fallback(pid: int, use_ctrl_break: bool) -> None:
    label = "Ctrl+Break" if use_ctrl_break else "Ctrl+C"
    try:
        _request_close(pid)
    except KillError:
        print(colored(
            f"Warning: Graceful termination failed for process {pid}, using force termination",
            "yellow",
        ))
        _force_terminate(pid)
    else:
        print(colored(
            f"Sent window close message to process {pid} (fallback for {label})", "yellow"
        ))


def _graceful_terminate(pid: int, use_ctrl_break: bool) -> None:
    if use_ctrl_break:
        label, sig = "Ctrl+Break (SIGQUIT)", _CTRL_BREAK
    else:
        label, sig = "Ctrl+C (SIGINT)", _CTRL_C
    try:
        psutil.Process(pid).send_signal(sig)
    except psutil.NoSuchProcess:
        raise KillError(
            f"Invalid parameter: Process {pid} may not exist or not be a console application"
        ) from None
    except (psutil.Error, OSError, ValueError):
        _graceful_fallback(pid, use_ctrl_break)
        return
    print(colored(f"Sent {label} to process {pid}", "green"))


def _kill_with_method(pid: int, method: KillMethod) -> None:
    if method is KillMethod.FORCE_TERMINATE:
        _force_terminate(pid)
    elif method is KillMethod.GRACEFUL_CTRL_C:
        _graceful_terminate(pid, use_ctrl_break=False)
    elif method is KillMethod.GRACEFUL_CTRL_BREAK:
        _graceful_terminate(pid, use_ctrl_break=True)
    else:
        _request_close(pid)


def kill_process_by_pid(pid: int, method: KillMethod, options: KillOptions) -> None:
    """Deliver ``method`` to one process after the safety checks."""
    validate_pid_safety(pid)
    if not process_exists(pid):
        raise KillError(f"No such process: {pid}")
    _kill_with_method(pid, method)


def kill_process_by_name(name: str, method: KillMethod, options: KillOptions) -> None:
    """Deliver ``method`` to the first process named ``name``, or to all with ``-a``."""
    pids = find_processes_by_name(name)
    if not pids:
        raise KillError(f"No processes found with name: {name}")
    targets = pids if options.all_processes else pids[:1]

    errors = []
    for pid in targets:
        try:
            kill_process_by_pid(pid, method, options)
        except KillError as exc:
            errors.append(f"Failed to kill {pid} ({name}): {exc}")
        else:
            print(colored(f"Killed process {pid} ({name})", "green"))
    if errors:
        raise KillError("; ".join(errors))


def _print_only(options: KillOptions) -> None:
    for target in options.targets:
        if _is_all_digits(target):
            print(target)
            continue
        pids = find_processes_by_name(target)
        if not pids:
            raise KillError(f"No processes found with name: {target}")
        for pid in pids if options.all_processes else pids[:1]:
            print(pid)


def _timeout_targets(
    results: list[tuple[str, str | None]], options: KillOptions
) -> list[tuple[int, str]]:
    targets = []
    for target, error in results:
        if error is not None:
            continue
        if _is_all_digits(target):
            if target and int(target) <= _U32_MAX:
                targets.append((int(target), target))
            continue
        pids = find_processes_by_name(target)
        chosen = pids if options.all_processes else pids[:1]
        targets.extend((pid, target) for pid in chosen)
    return targets


def _handle_timeout(
    results: list[tuple[str, str | None]], timeout_ms: int, options: KillOptions
) -> None:
    timeout_signal = options.timeout_signal
    if timeout_signal is None:
        raise KillError("Timeout signal not specified")
    method = signal_to_method(timeout_signal)
    print(colored(
        f"Timeout kill: waiting {timeout_ms} ms before sending {timeout_signal} signal",
        "yellow",
    ))

    targets = _timeout_targets(results, options)
    if not targets:
        print(colored("No processes to check for timeout kill", "yellow"))
        return

    print(colored(
        f"Waiting {timeout_ms} ms for processes to terminate gracefully...", "cyan"
    ))
    time.sleep(timeout_ms / 1000)

    still_alive = []
    for pid, name in targets:
        if process_exists(pid):
            still_alive.append((pid, name))
        else:
            print(colored(f"Process {pid} ({name}) terminated gracefully", "green"))

    if not still_alive:
        print(colored("All processes terminated gracefully within timeout period", "green"))
        return

    print(colored(
        f"Sending {timeout_signal} signal to {len(still_alive)} remaining process(es)",
        "yellow",
    ))
    errors = []
    killed = 0
    for pid, name in still_alive:
        try:
            validate_pid_safety(pid)
        except KillError as exc:
            errors.append(f"Cannot kill {pid} ({name}): {exc}")
            continue
        try:
            _kill_with_method(pid, method)
        except KillError as exc:
            errors.append(f"Timeout kill failed for {pid} ({name}): {exc}")
        else:
            killed += 1
            print(colored(
                f"Timeout kill: {timeout_signal} sent to process {pid} ({name})", "green"
            ))
    if errors:
        print(colored(f"Timeout kill errors: {'; '.join(errors)}", "red"))
    if killed:
        print(colored(
            f"Timeout kill completed: {killed} process(es) killed with {timeout_signal}",
            "green",
        ))


def _report(results: list[tuple[str, str | None]]) -> None:
    failed = False
    for target, error in results:
        if error is None:
            print(colored(f"Successfully processed target: {target}", "green"))
        else:
            print(colored(f"Failed to process {target}: {error}", "red"))
            failed = True
    if failed:
        raise KillError("Some kill operations failed")


def _handle_kill(options: KillOptions) -> None:
    if options.print_only:
        _print_only(options)
        return

    chosen = next(
        (s for s in (options.signal, options.signal_explicit) if s is not None),
        _DEFAULT_SIGNAL,
    )
    method = signal_to_method(chosen)

    results: list[tuple[str, str | None]] = []
    for target in options.targets:
        pid = _parse_pid(target) if _is_all_digits(target) else None
        try:
            if pid is not None:
                kill_process_by_pid(pid, method, options)
            else:
                kill_process_by_name(target, method, options)
        except KillError as exc:
            results.append((target, str(exc)))
        else:
            results.append((target, None))

    if options.timeout_ms is not None:
        _handle_timeout(results, options.timeout_ms, options)

    _report(results)


def execute(args: Sequence[str]) -> None:
    """Run the ``kill`` command; raise :class:`KillError` on any failure."""
    if not args:
        raise KillError(USAGE)
    options = parse_arguments(args)
    validate_options(options)
    _handle_kill(options)