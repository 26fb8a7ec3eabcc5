import pytest
from PIL import Image

from app import apply_overrides, export, parse_args
from models import StylizeMode, StylizerConfig


def test_overrides_apply_on_top_of_config():
    args = parse_args(["--mode", "voronoi", "--block-size", "4", "--palette", "--camera", "1"])

    config = apply_overrides(StylizerConfig(), args)

    assert config.mode == StylizeMode.VORONOI
    assert (config.block_size, config.use_palette, config.camera_index) == (4, True, 1)


def test_absent_options_leave_config_alone():
    config = apply_overrides(StylizerConfig(block_size=12), parse_args([]))

    assert config == StylizerConfig(block_size=12)


def test_non_positive_block_size_is_rejected():
    with pytest.raises(SystemExit):
        apply_overrides(StylizerConfig(), parse_args(["--block-size", "0"]))


class TestHeadlessExport:

    def test_writes_svg_mosaic(self, tmp_path):
        source = tmp_path / "in.png"
        Image.new("RGB", (40, 30), (200, 10, 10)).save(source)
        target = tmp_path / "out.svg"
        args = parse_args(["--image", str(source), "--export", str(target)])

        assert export(args, StylizerConfig(mode=StylizeMode.VORONOI)) == 0
        assert target.read_text(encoding="utf-8").count("<polygon") == 1

    def test_requires_image(self, tmp_path):
        args = parse_args(["--export", str(tmp_path / "out.png")])

        assert export(args, StylizerConfig()) == 2

    def test_unreadable_image_fails(self, tmp_path):
        args = parse_args(["--image", str(tmp_path / "nope.png"), "--export", str(tmp_path / "o.png")])

        assert export(args, StylizerConfig()) == 1
