from __future__ import annotations

from pathlib import Path
from typing import List, Union

import numpy as np
from PIL import Image

from .config import OUTPUT_IMAGE, OUTPUT_TEXT, RunConfig
from .styling import CELL_COLORS, CELL_RGB, TerminalSink

BUCKET_WIDTH = 256 // len(CELL_COLORS)


def bucket_for(value: int) -> int:
    return (value & 0xFF) // BUCKET_WIDTH


class TextRenderer:
    """Renders ``.`` as the cell value cast to a character."""

    def __init__(self, sink: TerminalSink):
        self.sink = sink

    def emit(self, value: int) -> None:
        self.sink.write(chr(value))
        self.sink.flush()


class ImageRenderer:
    """Renders ``.`` as one colored grid cell, ``width`` cells per row.

    With ``record=True`` every emitted bucket is also kept in ``buckets`` so
    the grid can be exported with :meth:`to_image` once the run is over.
    """

    def __init__(self, sink: TerminalSink, width: int, record: bool = False):
        if width < 1:
            raise ValueError(f"image width must be at least 1, got {width}")
        self.sink = sink
        self.width = width
        self.record = record
        self.count = 0
        self.buckets: List[int] = []

    def emit(self, value: int) -> None:
        bucket = bucket_for(value)
        self.sink.cell(CELL_COLORS[bucket])
        self.count += 1
        if self.record:
            self.buckets.append(bucket)
        if self.count % self.width == 0:
            self.sink.row_break()

    def to_image(self, cell_px: int = 16) -> Image.Image:
        if not self.record:
            raise RuntimeError("grid was not recorded; create the renderer with record=True")
        rows = max(1, -(-len(self.buckets) // self.width))
        # Unfilled trailing cells stay black.
        grid = np.zeros((rows, self.width, 3), dtype=np.uint8)
        palette = np.array(CELL_RGB, dtype=np.uint8)
        for n, bucket in enumerate(self.buckets):
            grid[n // self.width, n % self.width] = palette[bucket]
        img = Image.fromarray(grid)
        return img.resize((self.width * cell_px, rows * cell_px), resample=Image.NEAREST)

    def save(self, path: Union[str, Path], cell_px: int = 16) -> Path:
        p = Path(path)
        self.to_image(cell_px).save(p, format='PNG')
        return p


def make_renderer(config: RunConfig, sink: TerminalSink, record: bool = False) -> Union[TextRenderer, ImageRenderer]:
    if config.output_mode == OUTPUT_IMAGE:
        return ImageRenderer(sink, config.image_width, record=record)
    if config.output_mode == OUTPUT_TEXT:
        return TextRenderer(sink)
    raise ValueError(f"unknown output mode: {config.output_mode!r}")
