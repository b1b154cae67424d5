"""Splitting of a parameter line into an argument vector."""

from __future__ import annotations

MAX_ARGS = 128

_PROTECTED_SPACE = "\x01"


def split(line: str) -> tuple[str, str | None]:
    """Split ``line`` at its first space.

    Returns the head and the rest with leading spaces removed; the rest is
    ``None`` when there is no space or nothing follows it.
    """
    head, sep, tail = line.partition(" ")
    if not sep:
        return head, None
    tail = tail.lstrip(" ")
    return head, (tail or None)


def _protect_quoted(line: str) -> str:
    chars = []
    quoted = False
    for ch in line:
        if ch == '"':
            quoted = not quoted
            chars.append(" ")
        elif quoted and ch == " ":
            chars.append(_PROTECTED_SPACE)
        else:
            chars.append(ch)
    return "".join(chars)


def parse(line: str) -> list[str]:
    """Split a command line into arguments.

    Double quotes group words together and are themselves dropped. At most
    ``MAX_ARGS`` arguments are produced; the last one keeps any remainder.
    """
    remaining: str | None = _protect_quoted(line)
    args: list[str] = []
    while remaining is not None and len(args) < MAX_ARGS - 1:
        head, remaining = split(remaining)
        args.append(head)
    if remaining is not None:
        args.append(remaining)
    return [arg.replace(_PROTECTED_SPACE, " ") for arg in args]