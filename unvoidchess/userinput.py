"""Small helpers for reading a line of user input."""

from __future__ import annotations

import sys
from typing import Optional, TextIO


def read_input(prompt: str, stream: Optional[TextIO] = None) -> str:
    """Show a prompt and return the next line from stream, trimmed.

    Returns an empty string when the stream is exhausted.
    """
    sys.stdout.write(prompt)
    sys.stdout.flush()
    source = stream if stream is not None else sys.stdin
    line = source.readline()
    return line.strip()


def validate_input(text: str) -> bool:
    """Whether the input holds anything at all."""
    return text != ""