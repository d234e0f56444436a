"""Unix-style file, process and system commands and an interactive shell."""

__version__ = "0.1.0"