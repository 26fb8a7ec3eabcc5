import numpy as np
import pytest
from PIL import Image

from conftest import make_seed
from models import Cell, StylizedFrame, StylizeMode
from stylizer.svg_export import frame_to_svg, save_frame


@pytest.fixture
def voronoi_frame():
    cells = [
        Cell(make_seed(0, 0, (255, 0, 0)), [(5, 0), (5, 10), (0, 10), (0, 0)]),
        Cell(make_seed(10, 0, (0, 0, 255)), [(5, 0), (10, 0), (10, 10), (5, 10)]),
        Cell(make_seed(-50, 0, (0, 255, 0)), []),
    ]
    return StylizedFrame(mode=StylizeMode.VORONOI, width=10, height=10, cells=cells)


@pytest.fixture
def circle_frame():
    blocks = np.array([[[255.0, 255.0, 255.0], [0.0, 0.0, 0.0]]])
    return StylizedFrame(mode=StylizeMode.CIRCLE, width=16, height=8, block_size=8, blocks=blocks)


class TestFrameToSvg:

    def test_one_polygon_per_drawable_cell(self, voronoi_frame):
        content = frame_to_svg(voronoi_frame)

        assert content.startswith("<svg")
        assert content.count("<polygon") == 2
        assert "rgb(255,0,0)" in content
        assert "rgb(0,255,0)" not in content

    def test_circle_mode_skips_zero_radius_dots(self, circle_frame):
        content = frame_to_svg(circle_frame)

        assert content.count("<rect") == 1
        assert content.count("<circle") == 1

    def test_empty_frame_is_valid_document(self):
        content = frame_to_svg(StylizedFrame(mode=StylizeMode.SQUARE))

        assert content.startswith("<svg")
        assert "<rect" not in content


class TestSaveFrame:

    def test_svg_by_suffix(self, voronoi_frame, tmp_path):
        path = save_frame(voronoi_frame, tmp_path / "mosaic.svg")

        assert path.read_text(encoding="utf-8").count("<polygon") == 2

    def test_png_by_suffix(self, circle_frame, tmp_path):
        path = save_frame(circle_frame, tmp_path / "dots.PNG")

        with Image.open(path) as image:
            assert image.size == (16, 8)
            assert image.getpixel((4, 4))[:3] == (255, 255, 255)

    def test_unknown_suffix_is_rejected(self, voronoi_frame, tmp_path):
        with pytest.raises(ValueError):
            save_frame(voronoi_frame, tmp_path / "mosaic.txt")
