from __future__ import annotations

from dataclasses import dataclass

DEFAULT_MEMORY_SIZE = 30000
DEFAULT_SNAPSHOT_SIZE = 2
DEFAULT_IMAGE_WIDTH = 16

OUTPUT_TEXT = 'text'
OUTPUT_IMAGE = 'image'
OUTPUT_MODES = (OUTPUT_TEXT, OUTPUT_IMAGE)


@dataclass(frozen=True)
class RunConfig:
    """Options fixed before a run starts.

    ``snapshot_start`` and ``snapshot_end`` are the number of cells shown
    before and after the pointer by the ``@`` instruction. ``image_width`` is
    the number of cells per row in image mode.
    """

    memory_size: int = DEFAULT_MEMORY_SIZE
    snapshot_start: int = DEFAULT_SNAPSHOT_SIZE
    snapshot_end: int = DEFAULT_SNAPSHOT_SIZE
    image_width: int = DEFAULT_IMAGE_WIDTH
    output_mode: str = OUTPUT_TEXT

    def __post_init__(self) -> None:
        if self.memory_size < 1:
            raise ValueError(f"memory size must be at least 1, got {self.memory_size}")
        if self.image_width < 1:
            raise ValueError(f"image width must be at least 1, got {self.image_width}")
        if self.snapshot_start < 0 or self.snapshot_end < 0:
            raise ValueError("snapshot offsets must not be negative")
        if self.output_mode not in OUTPUT_MODES:
            raise ValueError(f"unknown output mode: {self.output_mode!r}")
