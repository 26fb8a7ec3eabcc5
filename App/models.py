"""Data models and constants for the camera stylizer."""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

import numpy as np

# AIDEV-NOTE: Adaptive sampler geometry - changing these moves every seed
STARTING_SIZE = 128  # px, side of the top-level tiles
MIN_SIZE = 8  # px, smallest region and sampling stride
VARIANCE_THRESHOLD = 80**2  # squared RGB distance

# Configuration file path
CONFIG_FILE = Path.home() / ".camera_stylizer_config.json"

# Palette used when quantization is switched on
POP_ART_PALETTE = [
    (255, 0, 0),  # Red
    (0, 0, 255),  # Blue
    (0, 255, 0),  # Green
    (255, 255, 0),  # Yellow
    (255, 165, 0),  # Orange
    (128, 0, 128),  # Purple
    (255, 192, 203),  # Pink
    (255, 255, 255),  # White
    (0, 0, 0),  # Black
    (128, 128, 128),  # Gray
    (210, 180, 140),  # Tan (light skin tone)
    (160, 82, 45),  # Brown (medium skin tone)
    (105, 57, 30),  # Dark brown (darker skin tone)
    (0, 255, 255),  # Cyan
    (255, 0, 255),  # Magenta
    (255, 240, 245),  # Linen (light pinkish-neutral)
]


def empty_grid() -> np.ndarray:
    """Return the 0x0 color grid used before the first frame arrives."""
    return np.zeros((0, 0, 3), dtype=np.uint8)


class CameraState(Enum):
    """Capture device states."""

    STOPPED = "Stopped"
    OPENING = "Opening..."
    RUNNING = "Running"
    PAUSED = "Paused"
    ERROR = "Error"


class StylizeMode(Enum):
    """Abstraction styles.

    AIDEV-NOTE: SQUARE and CIRCLE share block averaging, VORONOI uses
    the adaptive seed sampler and cell builder.
    """

    SQUARE = "square"  # Flat averaged blocks
    CIRCLE = "circle"  # Brightness-sized dots on black
    VORONOI = "voronoi"  # Adaptive mosaic


@dataclass(frozen=True)
class Seed:
    """A mosaic seed: grid coordinate plus the color sampled there."""

    x: float
    y: float
    r: float
    g: float
    b: float

    @property
    def point(self) -> "tuple[float, float]":
        return (self.x, self.y)

    @property
    def color(self) -> "tuple[float, float, float]":
        return (self.r, self.g, self.b)


@dataclass
class Cell:
    """Region of the frame closer to ``seed`` than to any other seed.

    AIDEV-NOTE: Vertex order comes straight from the clipper and must be
    kept when filling. An empty ``points`` list is valid output.
    """

    seed: Seed
    points: "list[tuple[float, float]]" = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.points


@dataclass
class StylizerConfig:
    """User-facing stylizer settings."""

    block_size: int = 8  # px per averaged block
    mode: StylizeMode = StylizeMode.SQUARE

    # Palette quantization (square/circle modes only)
    use_palette: bool = False
    palette: "list[tuple[int, int, int]]" = field(
        default_factory=lambda: list(POP_ART_PALETTE)
    )

    # Capture settings
    camera_index: int = 0
    mirror: bool = True  # Selfie-style horizontal flip on display
    max_grid_width: int = 320  # Voronoi input wider than this is downscaled
    frame_interval_ms: int = 33  # Processing tick (~30 FPS)


@dataclass
class StylizedFrame:
    """Renderer-agnostic result of one processing tick."""

    mode: StylizeMode

    # Output size in grid pixels
    width: int = 0
    height: int = 0

    block_size: int = 1

    # Block modes: (rows, cols, 3) float array, None for VORONOI
    blocks: "np.ndarray | None" = None

    # Voronoi mode: one cell per seed, possibly empty
    cells: "list[Cell]" = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        if self.mode == StylizeMode.VORONOI:
            return not self.cells
        return self.blocks is None or self.blocks.size == 0

    @property
    def seed_count(self) -> int:
        return len(self.cells)

    @property
    def cell_count(self) -> int:
        """Number of cells with a drawable polygon."""
        return sum(1 for cell in self.cells if not cell.is_empty)
