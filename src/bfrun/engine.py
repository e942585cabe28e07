from __future__ import annotations

import logging
import os
import sys
from typing import BinaryIO, Optional, TextIO, Union

from . import diagnostics
from .config import RunConfig
from .errors import (
    BFRunError,
    PointerOverflowError,
    PointerUnderflowError,
    make_input_error,
    make_overflow_error,
    make_underflow_error,
)
from .renderers import make_renderer
from .scanner import find_matching_close, find_matching_open
from .styling import TerminalSink
from .tape import MemoryTape

logger = logging.getLogger(__name__)


def configure_logging(force: bool = False) -> None:
    """Attach a DEBUG stream handler to the package logger.

    Done automatically when ``BFRUN_DEBUG`` is set; otherwise the package
    logger only carries a ``NullHandler``.
    """
    pkg_logger = logging.getLogger('bfrun')
    if not force and not os.getenv('BFRUN_DEBUG'):
        if not pkg_logger.handlers:
            pkg_logger.addHandler(logging.NullHandler())
        return
    if not any(isinstance(h, logging.StreamHandler) for h in pkg_logger.handlers):
        _h = logging.StreamHandler()
        _h.setFormatter(logging.Formatter("%(asctime)s | %(levelname)s | %(name)s | %(message)s"))
        pkg_logger.addHandler(_h)
    pkg_logger.setLevel(logging.DEBUG)


configure_logging()


class Interpreter:
    """Runs one program on one tape.

    Text and image mode share this loop; the only difference is the renderer
    that handles ``.``.
    """

    def __init__(
        self,
        config: Optional[RunConfig] = None,
        input_stream: Optional[Union[BinaryIO, TextIO]] = None,
        sink: Optional[TerminalSink] = None,
        record_image: bool = False,
    ):
        self.config = config if config is not None else RunConfig()
        self.input = input_stream if input_stream is not None else sys.stdin.buffer
        self.sink = sink if sink is not None else TerminalSink()
        self.tape = MemoryTape(self.config.memory_size)
        self.renderer = make_renderer(self.config, self.sink, record=record_image)

    def read_byte(self) -> int:
        # Anything printed so far must be visible before input blocks.
        self.sink.flush()
        # OSError is left for the caller to wrap with the instruction position.
        data = self.input.read(1)
        if not data:
            raise EOFError("end of input")
        if isinstance(data, str):
            return ord(data[0]) & 0xFF
        return data[0]

    def debug_report(self) -> None:
        diagnostics.debug_report(self.tape, self.sink)

    def snapshot(self) -> None:
        diagnostics.snapshot(self.tape, self.sink, self.config.snapshot_start, self.config.snapshot_end)

    def run(self, code: str) -> None:
        """Execute ``code`` to completion.

        Raises a :class:`~bfrun.errors.BFRunError` subclass at the first
        failing instruction. Output written before the failure is kept.
        """
        logger.debug(
            "running %d characters in %s mode (memory=%d)",
            len(code), self.config.output_mode, self.config.memory_size,
        )
        tape = self.tape
        i = 0
        n = len(code)
        try:
            while i < n:
                ch = code[i]
                if ch == '>':
                    tape.move_right()
                elif ch == '<':
                    tape.move_left()
                elif ch == '+':
                    tape.increment()
                elif ch == '-':
                    tape.decrement()
                elif ch == '.':
                    self.renderer.emit(tape.read())
                elif ch == ',':
                    try:
                        tape.write(self.read_byte())
                    except (EOFError, OSError) as e:
                        raise make_input_error(pointer=tape.pointer, index=i, reason=str(e), source=code) from e
                elif ch == '[':
                    if tape.read() == 0:
                        i = find_matching_close(code, i)
                elif ch == ']':
                    if tape.read() != 0:
                        i = find_matching_open(code, i)
                elif ch == '#':
                    self.debug_report()
                elif ch == '@':
                    self.snapshot()
                i += 1
        except (PointerOverflowError, PointerUnderflowError) as e:
            raise self._with_position(e, code, i) from None
        except BFRunError as e:
            logger.debug("halted at instruction %d: %s", i, e.kind)
            raise
        logger.debug("finished; pointer=%d max_reached=%d", tape.pointer, tape.max_reached)

    @staticmethod
    def _with_position(e: BFRunError, code: str, i: int) -> BFRunError:
        logger.debug("halted at instruction %d: %s", i, e.kind)
        if isinstance(e, PointerOverflowError):
            return make_overflow_error(pointer=e.pointer, index=i, source=code)
        if isinstance(e, PointerUnderflowError):
            return make_underflow_error(pointer=e.pointer, index=i, source=code)
        return e
