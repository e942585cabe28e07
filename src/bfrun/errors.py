from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, List, Optional, Tuple


def _locate(source: str, index: int) -> Tuple[int, int]:
    line = source.count('\n', 0, index) + 1
    col = index - (source.rfind('\n', 0, index) + 1) + 1
    return line, col


def _source_excerpt(source: str, line: int, col: int, *, context: int = 2) -> str:
    lines = source.split('\n')
    first = max(1, line - context)
    last = min(len(lines), line + context)

    out: List[str] = []
    for n in range(first, last + 1):
        marker = '>' if n == line else ' '
        out.append(f"{marker} {n:4d} | {lines[n - 1]}")
        if n == line:
            out.append(f"{'':6} | {' ' * (col - 1)}^")
    return "\n".join(out)


def _hint_for(kind: str, which: Optional[str] = None) -> Optional[str]:
    if kind == 'PointerOverflow':
        return 'The program moved past the last cell. Raise --memory or check for a runaway ">" loop.'
    if kind == 'PointerUnderflow':
        return 'The program moved left of cell 0. Check the balance of "<" and ">" before this point.'
    if kind == 'UnmatchedBracket':
        if which == ']':
            return 'This "[" is never closed. Add the missing "]".'
        return 'This "]" has no opening "[" before it.'
    if kind == 'InputFailure':
        return 'Pipe more input into the program, or avoid reading past the end of it.'
    return None


@dataclass
class BFRunError(Exception):
    message: str

    kind: ClassVar[str] = 'Error'

    def __str__(self) -> str:
        return self.message


@dataclass
class PointerOverflowError(BFRunError):
    pointer: int
    index: int

    kind: ClassVar[str] = 'PointerOverflow'


@dataclass
class PointerUnderflowError(BFRunError):
    pointer: int
    index: int

    kind: ClassVar[str] = 'PointerUnderflow'


@dataclass
class UnmatchedBracketError(BFRunError):
    which: str
    index: int

    kind: ClassVar[str] = 'UnmatchedBracket'


@dataclass
class InputFailureError(BFRunError):
    pointer: int
    index: int

    kind: ClassVar[str] = 'InputFailure'


def _render(message: str, *, kind: str, source: Optional[str], index: int, which: Optional[str] = None) -> str:
    if source is None or not (0 <= index < len(source)):
        return message
    line, col = _locate(source, index)
    ctx = _source_excerpt(source, line, col)
    hint = _hint_for(kind, which)
    hint_block = f"\nHint: {hint}" if hint else ""
    return f"{message} (line {line}, column {col})\n{ctx}{hint_block}"


def make_overflow_error(*, pointer: int, index: int, source: Optional[str] = None) -> PointerOverflowError:
    message = f"pointer out of bounds (out of memory) at cell {pointer}"
    return PointerOverflowError(
        message=_render(message, kind=PointerOverflowError.kind, source=source, index=index),
        pointer=pointer,
        index=index,
    )


def make_underflow_error(*, pointer: int, index: int, source: Optional[str] = None) -> PointerUnderflowError:
    message = "pointer out of bounds (moved left of cell 0)"
    return PointerUnderflowError(
        message=_render(message, kind=PointerUnderflowError.kind, source=source, index=index),
        pointer=pointer,
        index=index,
    )


def make_bracket_error(*, which: str, index: int, source: Optional[str] = None) -> UnmatchedBracketError:
    message = f"unmatched brackets (missing '{which}')"
    return UnmatchedBracketError(
        message=_render(message, kind=UnmatchedBracketError.kind, source=source, index=index, which=which),
        which=which,
        index=index,
    )


def make_input_error(*, pointer: int, index: int, reason: str, source: Optional[str] = None) -> InputFailureError:
    message = f"failed to read input: {reason}"
    return InputFailureError(
        message=_render(message, kind=InputFailureError.kind, source=source, index=index),
        pointer=pointer,
        index=index,
    )
