from __future__ import annotations

import sys
from contextlib import contextmanager
from typing import Iterator, Optional, TextIO, Tuple

from colorama import Back, Fore, Style

# Image mode buckets, one per 32-value range of the cell.
CELL_COLORS: Tuple[str, ...] = (
    Back.LIGHTBLACK_EX,
    Back.RED,
    Back.GREEN,
    Back.YELLOW,
    Back.BLUE,
    Back.MAGENTA,
    Back.CYAN,
    Back.LIGHTWHITE_EX,
)

# RGB equivalents of CELL_COLORS for PNG export.
CELL_RGB: Tuple[Tuple[int, int, int], ...] = (
    (118, 118, 118),
    (197, 15, 31),
    (19, 161, 14),
    (193, 156, 0),
    (0, 55, 218),
    (136, 23, 152),
    (58, 150, 221),
    (242, 242, 242),
)

DEBUG_TITLE = (Back.LIGHTWHITE_EX, Style.BRIGHT)
SNAPSHOT_TITLE = (Back.LIGHTMAGENTA_EX, Style.BRIGHT)
POINTER_LOCATION = (Back.BLUE,)
POINTER_VALUE = (Back.RED,)
MEMORY_USAGE = (Back.GREEN,)
NON_ZERO_CELLS = (Back.CYAN,)
CURRENT_CELL = (Back.RED,)
OTHER_CELL = (Back.BLUE,)
VALUE = (Style.BRIGHT,)
ERROR_BANNER = (Back.RED, Fore.LIGHTWHITE_EX, Style.BRIGHT)


class TerminalSink:
    """Output capability shared by the renderers and diagnostics.

    Styles are only ever applied through :meth:`styled`, which always writes
    the reset sequence when its block exits. With ``color=False`` no escape
    sequences are written at all.
    """

    def __init__(self, stream: Optional[TextIO] = None, color: bool = True):
        self.stream = stream if stream is not None else sys.stdout
        self.color = color

    def write(self, text: str) -> None:
        try:
            self.stream.write(text)
        except UnicodeEncodeError:
            # Cell values 128-255 have no glyph in some console code pages.
            encoding = getattr(self.stream, "encoding", None) or "utf-8"
            self.stream.write(text.encode(encoding, errors="replace").decode(encoding))

    @contextmanager
    def styled(self, *styles: str) -> Iterator[None]:
        if self.color and styles:
            self.stream.write(''.join(styles))
            try:
                yield
            finally:
                self.stream.write(Style.RESET_ALL)
        else:
            yield

    def write_styled(self, text: str, *styles: str) -> None:
        with self.styled(*styles):
            self.write(text)

    def cell(self, color: str) -> None:
        self.write_styled('  ', color)

    def row_break(self) -> None:
        self.stream.write('\n')

    def flush(self) -> None:
        self.stream.flush()
