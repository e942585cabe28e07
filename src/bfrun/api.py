from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, Optional, TextIO, Union

from .config import RunConfig
from .engine import Interpreter
from .errors import BFRunError
from .renderers import ImageRenderer
from .styling import TerminalSink


@dataclass(frozen=True)
class ExecutionResult:
    error: Optional[BFRunError]
    pointer: int
    max_reached: int
    cells_emitted: int = 0

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def kind(self) -> Optional[str]:
        return None if self.error is None else self.error.kind


def run_string(
    code: str,
    *,
    config: Optional[RunConfig] = None,
    input_stream: Optional[Union[BinaryIO, TextIO]] = None,
    sink: Optional[TerminalSink] = None,
    png_path: Optional[Union[str, Path]] = None,
) -> ExecutionResult:
    """Run ``code`` and report the outcome as a value instead of raising.

    In image mode the grid is also saved to ``png_path`` when given, even if
    the run halted with an error.
    """
    interp = Interpreter(config, input_stream, sink, record_image=png_path is not None)
    error: Optional[BFRunError] = None
    try:
        interp.run(code)
    except BFRunError as e:
        error = e
    finally:
        interp.sink.flush()

    cells_emitted = 0
    if isinstance(interp.renderer, ImageRenderer):
        cells_emitted = interp.renderer.count
        if png_path is not None:
            interp.renderer.save(png_path)

    return ExecutionResult(
        error=error,
        pointer=interp.tape.pointer,
        max_reached=interp.tape.max_reached,
        cells_emitted=cells_emitted,
    )


def run_file(path: Union[str, Path], *, encoding: str = "utf-8", **kwargs) -> ExecutionResult:
    p = Path(path)
    return run_string(p.read_text(encoding=encoding), **kwargs)
