"""
config.py - Configuration dataclass for gallery rendering runs.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple


@dataclass(frozen=True)
class GalleryConfig:
    """Immutable configuration for `ringshapes.gallery.render_gallery`."""
    logger_level: int = logging.INFO
    img_size: Tuple[int, int] = (1200, 1000)
    dpi: int = 100
    output_dir: Path = Path("./out")
    seed: Optional[int] = None
    cell_size: float = 200.0

    def __post_init__(self):
        object.__setattr__(self, "output_dir", Path(self.output_dir))
        self.output_dir.mkdir(parents=True, exist_ok=True)
