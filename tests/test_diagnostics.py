#!/usr/bin/env python3
"""
Tests for the debug report (#) and memory snapshot (@).
"""

import sys
import os
sys.path.append(os.path.join(os.path.dirname(__file__), '..', 'src'))

import io

import pytest
from colorama import Back, Style

from bfrun import Interpreter, RunConfig
from bfrun.diagnostics import debug_report, printable, snapshot
from bfrun.styling import TerminalSink
from bfrun.tape import MemoryTape


def run_plain(code, **options):
    stdout = io.StringIO()
    interp = Interpreter(RunConfig(**options), io.BytesIO(), TerminalSink(stdout, color=False))
    interp.run(code)
    return stdout.getvalue(), interp


def test_printable_range():
    assert printable(31) is None
    assert printable(32) == " "
    assert printable(65) == "A"
    assert printable(126) == "~"
    assert printable(127) is None


def test_debug_report_contents():
    output, _ = run_plain("+" * 65 + "#", memory_size=100)
    assert output == (
        "\n\n"
        "    debug information    \n"
        " pointer location   0\n"
        " pointer value      65 (A)\n"
        " memory usage       1.00%\n"
        " non-zero cells     1\n"
    )


def test_debug_report_usage_after_moving():
    output, _ = run_plain("+>>+>#", memory_size=8)
    assert " pointer location   3\n" in output
    assert " pointer value      0\n" in output
    assert " memory usage       50.00%\n" in output
    assert " non-zero cells     2\n" in output


def test_snapshot_window():
    output, _ = run_plain(">>" + "+" * 66 + "@")
    lines = output.split("\n")
    assert lines[2] == "      memory snapshot      "
    assert lines[3:8] == [
        " [00]  0",
        " [01]  0",
        " [02]  66 (B)",
        " [03]  0",
        " [04]  0",
    ]
    assert output.endswith("\n\n")


def test_snapshot_offsets_and_clamping():
    output, _ = run_plain(">>>+@", memory_size=5, snapshot_start=1, snapshot_end=3)
    assert " [02]  0\n [03]  1\n [04]  0\n" in output
    assert "[01]" not in output


def test_snapshot_two_digit_indices():
    output, _ = run_plain(">" * 12 + "@", snapshot_start=0, snapshot_end=0)
    assert " [12]  0\n" in output


def test_snapshot_marks_pointer_cell():
    tape = MemoryTape(10)
    tape.move_right()
    stdout = io.StringIO()
    snapshot(tape, TerminalSink(stdout, color=True), 1, 1)
    output = stdout.getvalue()
    assert Back.RED + " [01] " + Style.RESET_ALL in output
    assert Back.BLUE + " [00] " + Style.RESET_ALL in output
    assert Back.BLUE + " [02] " + Style.RESET_ALL in output


def test_reports_are_idempotent():
    tape = MemoryTape(50)
    for _ in range(3):
        tape.increment()
    tape.move_right()
    tape.write(72)
    before = (tape.cells.copy(), tape.pointer, tape.max_reached)

    outputs = []
    for _ in range(2):
        stdout = io.StringIO()
        sink = TerminalSink(stdout, color=True)
        debug_report(tape, sink)
        snapshot(tape, sink, 2, 2)
        outputs.append(stdout.getvalue())

    assert outputs[0] == outputs[1]
    assert (tape.cells == before[0]).all()
    assert (tape.pointer, tape.max_reached) == before[1:]


def test_styled_block_resets_on_error():
    stdout = io.StringIO()
    sink = TerminalSink(stdout, color=True)
    with pytest.raises(RuntimeError):
        with sink.styled(Back.RED):
            sink.write("partial")
            raise RuntimeError("boom")
    assert stdout.getvalue() == Back.RED + "partial" + Style.RESET_ALL


def test_no_escape_codes_without_color():
    output, _ = run_plain("+#@")
    assert "\x1b[" not in output
