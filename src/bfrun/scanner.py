"""Bracket matching for the dispatch loop.

Partners are found by scanning the program text each time a loop is skipped
or repeated, so the cost is linear in the length of the loop body on every
jump. Nothing is cached between jumps or between runs.
"""

from __future__ import annotations

from .errors import make_bracket_error


def find_matching_close(code: str, i: int) -> int:
    """Return the index of the ``]`` that closes the ``[`` at ``i``."""
    depth = 1
    for j in range(i + 1, len(code)):
        ch = code[j]
        if ch == '[':
            depth += 1
        elif ch == ']':
            depth -= 1
            if depth == 0:
                return j
    raise make_bracket_error(which=']', index=i, source=code)


def find_matching_open(code: str, i: int) -> int:
    """Return the index of the ``[`` that opens the ``]`` at ``i``."""
    depth = 1
    for j in range(i - 1, -1, -1):
        ch = code[j]
        if ch == ']':
            depth += 1
        elif ch == '[':
            depth -= 1
            if depth == 0:
                return j
    raise make_bracket_error(which='[', index=i, source=code)
