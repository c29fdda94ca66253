"""Small utility library: characters, memory, numbers, strings, containers, fd output, line reading and printf."""

__version__ = "0.1.0"

__all__ = [
    "chars",
    "memory",
    "numbers",
    "linked_list",
    "strings",
    "output",
    "get_next_line",
    "printf",
    "dynstring",
    "vector",
]