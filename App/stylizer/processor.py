"""Frame stylizer orchestrating one processing tick.

AIDEV-NOTE: Synchronous and stateless between ticks. Each call takes a
fresh color grid and returns a StylizedFrame for a drawing surface.
"""

import logging
from pathlib import Path

import numpy as np
from PIL import Image

from models import StylizedFrame, StylizeMode, StylizerConfig

from .blocks import aggregate
from .quantization import quantize
from .sampling import sample
from .utils import downscale_grid, image_to_grid
from .voronoi import build

logger = logging.getLogger(__name__)


class FrameStylizer:
    """Turns color grids into block or mosaic abstractions."""

    def __init__(self, config: StylizerConfig | None = None):
        self.config = config or StylizerConfig()

    def load_image(self, file_path: str | Path) -> np.ndarray:
        """Load an image file as a color grid.

        Raises:
            ValueError: If file cannot be loaded or is invalid
        """
        try:
            with Image.open(file_path) as image:
                return image_to_grid(image)
        except Exception as e:
            raise ValueError(f"Failed to load image: {e}") from e

    def prepare(self, grid: np.ndarray) -> np.ndarray:
        """Apply the configured downscale before Voronoi sampling."""
        return downscale_grid(np.asarray(grid), self.config.max_grid_width)

    def stylize_blocks(self, grid: np.ndarray, mode: StylizeMode) -> StylizedFrame:
        """Average (and optionally quantize) blocks for SQUARE/CIRCLE modes."""
        size = self.config.block_size
        blocks = aggregate(grid, size)

        if self.config.use_palette and blocks.size:
            blocks = quantize(blocks, self.config.palette)

        rows, cols = blocks.shape[:2]
        return StylizedFrame(
            mode=mode,
            width=cols * size,
            height=rows * size,
            block_size=size,
            blocks=blocks,
        )

    def stylize_voronoi(self, grid: np.ndarray) -> StylizedFrame:
        """Build the adaptive Voronoi mosaic for a grid."""
        height, width = grid.shape[:2]
        seeds = sample(grid)
        cells = build(seeds, width, height)
        return StylizedFrame(
            mode=StylizeMode.VORONOI,
            width=width,
            height=height,
            cells=cells,
        )

    def process(self, grid: np.ndarray, mode: StylizeMode | None = None) -> StylizedFrame:
        """Execute one full stylization pass.

        Args:
            grid: (height, width, 3) color grid, may be empty
            mode: Style to produce, uses config default if None

        Returns:
            StylizedFrame ready for rendering (empty for an empty grid)
        """
        mode = mode or self.config.mode
        grid = np.asarray(grid)

        if grid.ndim != 3 or grid.shape[0] == 0 or grid.shape[1] == 0:
            return StylizedFrame(mode=mode, block_size=self.config.block_size)

        if mode == StylizeMode.VORONOI:
            # Only the mosaic is downscaled; block modes keep source pixels
            frame = self.stylize_voronoi(self.prepare(grid))
            logger.debug(
                "Voronoi tick: %d seeds, %d drawable cells",
                frame.seed_count,
                frame.cell_count,
            )
        elif mode in (StylizeMode.SQUARE, StylizeMode.CIRCLE):
            frame = self.stylize_blocks(grid, mode)
            logger.debug("Block tick: %dx%d blocks", *frame.blocks.shape[:2])
        else:
            raise NotImplementedError(f"Stylize mode {mode} not implemented.")

        return frame
