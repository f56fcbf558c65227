"""Small terminal and text helpers."""

from __future__ import annotations

import sys
from collections.abc import Iterable
from typing import TextIO

CLEAR_SCREEN = "\x1b[1;1H\x1b[2J"
CLEANUP_MESSAGE = "Cleaning up resources...\n"


def join_strings(items: Iterable[str]) -> str:
    """Join the strings with commas, as for a CSV header line."""
    return ",".join(items)


def clear_term(stream: TextIO | None = None) -> None:
    """Write the ANSI sequence that homes the cursor and clears the screen."""
    out = sys.stdout if stream is None else stream
    out.write(CLEAR_SCREEN)
    out.flush()


def cleanup(stream: TextIO | None = None) -> None:
    """Announce that resources are being released."""
    out = sys.stdout if stream is None else stream
    out.write(CLEANUP_MESSAGE)
    out.flush()