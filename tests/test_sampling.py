import numpy as np
import pytest

from conftest import checkerboard_grid, uniform_grid
from models import MIN_SIZE, STARTING_SIZE
from stylizer.sampling import clamp, is_uniform, region_sample, sample


class TestSample:

    def test_uniform_tile_yields_one_seed_at_its_midpoint(self):
        seeds = sample(uniform_grid(128, 128, (10, 20, 30)))

        assert len(seeds) == 1
        assert seeds[0].point == (64, 64)
        assert seeds[0].color == (10, 20, 30)

    def test_one_seed_per_uniform_starting_tile(self):
        seeds = sample(uniform_grid(256, 384))

        assert len(seeds) == 6
        assert [s.point for s in seeds[:3]] == [(64, 64), (192, 64), (320, 64)]

    def test_busy_region_recurses_down_to_min_size(self):
        grid = checkerboard_grid(STARTING_SIZE, STARTING_SIZE, cell=MIN_SIZE)

        seeds = sample(grid)

        assert len(seeds) == (STARTING_SIZE // MIN_SIZE) ** 2
        # Every terminal region is min_size wide, so seeds sit at +4 offsets
        assert {(s.x % MIN_SIZE, s.y % MIN_SIZE) for s in seeds} == {(4, 4)}

    def test_quadrants_are_visited_depth_first_tl_tr_bl_br(self):
        grid = np.zeros((16, 16, 3), dtype=np.uint8)
        grid[:8, 8:] = (255, 0, 0)
        grid[8:, :8] = (0, 255, 0)
        grid[8:, 8:] = (0, 0, 255)

        seeds = sample(grid, starting_size=16, min_size=8)

        assert [s.point for s in seeds] == [(4, 4), (12, 4), (4, 12), (12, 12)]
        assert [s.color for s in seeds] == [(0, 0, 0), (255, 0, 0), (0, 255, 0), (0, 0, 255)]

    def test_split_halves_give_four_quadrant_seeds(self):
        grid = uniform_grid(128, 128, (0, 0, 0))
        grid[:, 64:] = (200, 200, 200)

        seeds = sample(grid)

        assert [s.point for s in seeds] == [(32, 32), (96, 32), (32, 96), (96, 96)]

    def test_threshold_is_inclusive(self):
        at_threshold = uniform_grid(128, 128, (0, 0, 0))
        at_threshold[:, 64:] = (80, 0, 0)
        over_threshold = uniform_grid(128, 128, (0, 0, 0))
        over_threshold[:, 64:] = (81, 0, 0)

        assert len(sample(at_threshold)) == 1
        assert len(sample(over_threshold)) == 4

    def test_partial_tiles_clamp_midpoint_to_grid(self):
        seeds = sample(uniform_grid(100, 150))

        assert [s.point for s in seeds] == [(64, 64), (149, 64)]

    def test_partial_tile_quadrants_outside_grid_still_emit_seeds(self):
        grid = uniform_grid(40, 40, (0, 0, 0))
        grid[:, 20:] = (255, 255, 255)

        seeds = sample(grid)

        # Every seed lies inside the grid even when its region does not
        assert all(0 <= s.x < 40 and 0 <= s.y < 40 for s in seeds)
        assert len(seeds) > 1

    def test_seed_color_is_sampled_at_midpoint(self, random_grid):
        for seed in sample(random_grid):
            assert seed.color == tuple(random_grid[seed.y, seed.x].tolist())

    def test_is_deterministic(self, random_grid):
        assert sample(random_grid) == sample(random_grid)

    def test_empty_grid_has_no_seeds(self):
        assert sample(np.zeros((0, 0, 3), dtype=np.uint8)) == []
        assert sample(np.zeros((0, 10, 3), dtype=np.uint8)) == []

    def test_min_size_must_be_positive(self):
        with pytest.raises(ValueError):
            sample(uniform_grid(8, 8), min_size=0)


class TestUniformity:

    def test_single_and_empty_samples_are_uniform(self):
        assert is_uniform(np.array([[1, 2, 3]]))
        assert is_uniform(np.zeros((0, 3)))

    def test_any_distant_pair_fails(self):
        sample_colors = np.array([[0, 0, 0], [10, 10, 10], [0, 0, 90]], dtype=np.uint8)

        assert not is_uniform(sample_colors)

    def test_uint8_samples_do_not_overflow(self):
        assert not is_uniform(np.array([[0, 0, 0], [255, 0, 0]], dtype=np.uint8))

    def test_region_sample_uses_stride_and_grid_bounds(self):
        grid = uniform_grid(20, 20)

        assert len(region_sample(grid, 0, 0, 16, 8)) == 4
        assert len(region_sample(grid, 16, 16, 16, 8)) == 1
        assert len(region_sample(grid, 24, 0, 8, 8)) == 0


def test_clamp():
    assert clamp(0, 5, 3) == 3
    assert clamp(0, -2, 3) == 0
    # Degenerate range resolves to the lower bound
    assert clamp(0, 4, -1) == 0
