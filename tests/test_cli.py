#!/usr/bin/env python3
"""
Tests for the command line entry point.
"""

import sys
import os
sys.path.append(os.path.join(os.path.dirname(__file__), '..', 'src'))

import runpy

import pytest

from bfrun.cli import is_program_file, is_program_literal, load_source, main


def test_source_detection():
    assert is_program_file("prog.bf")
    assert not is_program_file(".bf")
    assert not is_program_file("prog.txt")
    assert is_program_literal("+++.")
    assert is_program_literal("@")
    assert not is_program_literal("hello")
    assert not is_program_literal("")


def test_load_source_literal():
    assert load_source("+++#") == "+++#"


def test_runs_literal_program(capsys):
    status = main(["--no-color", "++++++++[>++++++++<-]>+."])
    assert status == 0
    assert capsys.readouterr().out == "A"


def test_runs_program_file(tmp_path, capsys):
    program = tmp_path / "hi.bf"
    program.write_text("++++++++[>+++++++++<-]>.+.", encoding="utf-8")
    status = main(["--no-color", str(program)])
    assert status == 0
    assert capsys.readouterr().out == "HI"


def test_missing_file(tmp_path, capsys):
    status = main(["--no-color", str(tmp_path / "absent.bf")])
    assert status == 1
    assert "Error reading file" in capsys.readouterr().out


def test_invalid_input(capsys):
    status = main(["--no-color", "hello"])
    assert status == 1
    assert "Invalid input" in capsys.readouterr().out


def test_execution_error_exit_status(capsys):
    status = main(["--no-color", "<"])
    out = capsys.readouterr().out
    assert status == 1
    assert "  Execution error  : pointer out of bounds" in out


def test_image_mode_with_png(tmp_path, capsys):
    target = tmp_path / "out.png"
    status = main(["--no-color", "--image", "-w", "2", "--png", str(target), "..."])
    assert status == 0
    assert capsys.readouterr().out == "    \n  "
    assert target.exists()


def test_usage_without_input(capsys):
    assert main([]) == 0
    assert "[USAGE]" in capsys.readouterr().out


def test_commands_listing(capsys):
    assert main(["--commands"]) == 0
    out = capsys.readouterr().out
    assert "@   print a memory snapshot" in out


def test_runs_as_module(monkeypatch, capsys):
    monkeypatch.setattr(sys, "argv", ["bfrun", "--commands"])
    with pytest.raises(SystemExit) as exc:
        runpy.run_module("bfrun", run_name="__main__")
    assert exc.value.code == 0
    assert "print debug information" in capsys.readouterr().out
