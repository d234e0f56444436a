# winix

Everyday Unix-style commands and a small interactive shell that run
directly on your machine, with no Linux layer underneath.

## Installing

```
pip install .
```

For running the test suite:

```
pip install ".[test]"
pytest
```

## The shell

Start it with:

```
winix
```

`winix --interactive` first opens the interactive git mode (see below)
and starts the shell when you leave it.

At the `>>` prompt you can use:

| Command                       | What it does                                          |
|-------------------------------|-------------------------------------------------------|
| `cd <dir>`                    | change the working directory                          |
| `pwd`                         | print the working directory                           |
| `ls [dir]`                    | list a directory, directories shown in blue           |
| `echo <words>`                | print the words separated by spaces, no newline       |
| `rm <file>...`                | delete files                                          |
| `df`                          | show total, available and used space of each disk     |
| `free`                        | show used and total memory and swap                   |
| `kill [opts] <pid\|name>`     | stop processes by PID or by name                      |
| `chmod MODE FILE...`          | change permissions, octal (`755`) or symbolic (`u+x`) |
| `chown OWNER[:GROUP] FILE...` | change the owner of files                             |
| `git [args]`                  | run the system `git`; with no arguments, show help    |
| `help`                        | show the command list again                           |
| `exit` / `quit`               | leave the shell                                       |

Command names are case-insensitive. Entered lines are kept in
`.history.txt` in the working directory; empty lines and immediate
repeats are not recorded. Ctrl+C or end of input also leaves the shell.

### kill

```
kill [-signal|-s signal|-p] [-q value] [-a] [--timeout milliseconds signal] [--] pid|name...
```

Supported signals are `INT` (2), `QUIT` (3), `KILL` (9, the default) and
`TERM` (15); names are case-insensitive. A name matches a process's
executable name with or without `.exe`. Without `-a` only the first
matching process is acted on; `-a` acts on all of them and cannot be
combined with numeric PIDs. `-p` only prints the PIDs, `-q` takes an
integer value, and `--timeout` waits the given milliseconds and then
sends a second signal to whatever is still running. PIDs 0, 4 and 8 and
the shell's own process are never touched.

### chmod

An all-digit mode is octal; it must have three or four digits from 0–7,
and a fourth, leading digit is ignored. Otherwise the mode is a
comma-separated list of `[ugoa][+-=][rwxXst]` expressions. Each
expression is applied starting from no permissions at all, so with
several expressions the last one decides the final bits. `X` grants
execute only on directories; `s` and `t` are accepted and ignored.

### chown

The owner is looked up by user name in the system's password database,
which needs a POSIX system. A `:GROUP` part is accepted but only
reported, not applied.

### Interactive git mode

At the `git>` prompt, type git commands without the `git` prefix;
`exit` or `quit` returns.

## Detaching a program

```
disown <command> [args...]
```

starts the command in the background with its input and output
detached from the terminal (through `nohup` on Unix-like systems).

## Using the library

The file commands can be called from Python as well:

```python
from winix.cat import cat
from winix.grep import grep_sync
from winix.head import head_sync

text = cat(["notes.txt"])                   # CRLF line endings become LF
hits = grep_sync("hello", ["notes.txt"])    # "notes.txt:3: hello again\n"
first = head_sync(["notes.txt"], 10)
```

`cat_async_to_string`, `grep_async_to_string` and `head_async_to_string`
are async counterparts. The streaming forms `cat_async`, `grep_async` and
`head_async` yield UTF-8 chunks and read only the first file given.
`grep_from_string` and `head_from_string` work on a string instead of
files; `grep_from_string` matches the pattern literally.

ANSI escape sequences can be split into events:

```python
from winix.ansi import parse_ansi

events = parse_ansi(b"\x1b[31mHello\x1b[0m")
```

Red, green, reset and clear-line sequences become events, text between
them becomes text events, and other sequences are dropped.
`demo_lines()` returns a few sample coloured lines.

## What it does not do

There is no process listing, uptime, system name, sensor, `tail` or
`touch` command, no way to run a command at a changed priority or as
another user, no full-screen interface and no tab completion in the
shell.