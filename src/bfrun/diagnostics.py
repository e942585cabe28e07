"""Read-only reports on the tape, written by the ``#`` and ``@`` instructions."""

from __future__ import annotations

from typing import Optional

from . import styling
from .styling import TerminalSink
from .tape import MemoryTape


def printable(value: int) -> Optional[str]:
    if 32 <= value <= 126:
        return chr(value)
    return None


def _value_text(value: int) -> str:
    ch = printable(value)
    return f"{value} ({ch})" if ch is not None else f"{value}"


def debug_report(tape: MemoryTape, sink: TerminalSink) -> None:
    """Write pointer location, current value, memory usage and non-zero cell count."""
    non_zero, highest = tape.usage()
    usage_pct = highest / len(tape) * 100

    sink.write("\n\n")
    sink.write_styled("    debug information    ", *styling.DEBUG_TITLE)
    sink.write("\n")

    rows = (
        (" pointer location ", styling.POINTER_LOCATION, f"{tape.pointer}"),
        (" pointer value    ", styling.POINTER_VALUE, _value_text(tape.read())),
        (" memory usage     ", styling.MEMORY_USAGE, f"{usage_pct:.2f}%"),
        (" non-zero cells   ", styling.NON_ZERO_CELLS, f"{non_zero}"),
    )
    for label, style, text in rows:
        sink.write_styled(label, *style)
        sink.write_styled(f"  {text}\n", *styling.VALUE)


def snapshot(tape: MemoryTape, sink: TerminalSink, start_offset: int, end_offset: int) -> None:
    """Write every cell in the window around the pointer, marking the current one."""
    sink.write("\n\n")
    sink.write_styled("      memory snapshot      ", *styling.SNAPSHOT_TITLE)
    sink.write("\n")

    start, end = tape.window(start_offset, end_offset)
    for i in range(start, end + 1):
        style = styling.CURRENT_CELL if i == tape.pointer else styling.OTHER_CELL
        sink.write_styled(f" [{i:02d}] ", *style)
        sink.write_styled(f" {_value_text(int(tape.cells[i]))}\n", *styling.VALUE)
    sink.write("\n")
