"""
Immutable description of one export invocation.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .image_exporter import normalize_texture_format

LITERAL = "literal"
REGEX = "regex"
MATCH_MODES = (LITERAL, REGEX)


@dataclass(frozen=True)
class ExportRequest:
    """Everything the pipeline needs to know about a single run."""

    pak_directory: Path
    output_directory: Path
    pattern: str
    mode: str = LITERAL
    texture_format: Optional[str] = None
    unreal_version: Optional[str] = None

    def __post_init__(self):
        if self.mode not in MATCH_MODES:
            raise ValueError(f"Unknown match mode: {self.mode}. Expected one of: {', '.join(MATCH_MODES)}")
        if self.texture_format is not None:
            # Frozen: store the canonical name so every later lookup agrees
            object.__setattr__(self, "texture_format", normalize_texture_format(self.texture_format))

    @property
    def is_bulk(self) -> bool:
        return self.mode == REGEX

    @property
    def exports_images(self) -> bool:
        return self.texture_format is not None
