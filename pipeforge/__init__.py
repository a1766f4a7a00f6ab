"""Run commands joined by pipes between an input file or here-document and an output file."""

__version__ = "0.1.0"

__all__ = [
    "chars",
    "errors",
    "heredoc",
    "lists",
    "memory",
    "numbers",
    "output",
    "paths",
    "pipeline",
    "strings",
]