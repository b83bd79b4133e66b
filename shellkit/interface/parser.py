#!/usr/bin/env python3
# shellkit/interface/parser.py
from __future__ import annotations

"""
Command line tokenizer.

Rules:
- A backslash takes the next character literally, inside or outside quotes.
  A lone trailing backslash is dropped.
- ' and " open a quoted run that ends at the same quote character; the quotes
  themselves are not part of the token. An unterminated quote runs to the end
  of the line.
- Unquoted whitespace separates tokens; runs of whitespace collapse.

Unlike shlex, malformed input never raises.
"""

_QUOTES = ("'", '"')


def tokenize(command_line: str) -> list[str]:
    """Split a raw command line into tokens."""
    tokens: list[str] = []
    current: list[str] = []
    quote = ""
    index = 0
    length = len(command_line)

    while index < length:
        char = command_line[index]
        index += 1

        if char == "\\":
            if index < length:
                current.append(command_line[index])
                index += 1
            continue

        if quote:
            if char == quote:
                quote = ""
            else:
                current.append(char)
            continue

        if char in _QUOTES:
            quote = char
            continue

        if char.isspace():
            if current:
                tokens.append("".join(current))
                current.clear()
            continue

        current.append(char)

    if current:
        tokens.append("".join(current))
    return tokens
