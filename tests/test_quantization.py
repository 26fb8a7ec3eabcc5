import numpy as np
import pytest

from models import POP_ART_PALETTE
from stylizer.quantization import nearest_indices, quantize


def _brute_force(color, palette):
    best, best_dist = palette[0], float("inf")
    for entry in palette:
        dist = sum((c - e) ** 2 for c, e in zip(color, entry))
        if dist < best_dist:
            best, best_dist = entry, dist
    return best


class TestQuantize:

    def test_every_block_becomes_nearest_palette_entry(self, random_grid):
        blocks = random_grid[:6, :8].astype(np.float64) + 0.25

        result = quantize(blocks, POP_ART_PALETTE)

        assert result.shape == blocks.shape
        for y in range(blocks.shape[0]):
            for x in range(blocks.shape[1]):
                expected = _brute_force(blocks[y, x].tolist(), POP_ART_PALETTE)
                assert tuple(result[y, x].tolist()) == expected

    def test_equidistant_entries_keep_the_first(self):
        probe = np.array([[[10.0, 0.0, 0.0]]])
        palette = [(0, 0, 0), (20, 0, 0)]

        assert quantize(probe, palette)[0, 0].tolist() == [0.0, 0.0, 0.0]
        assert quantize(probe, palette[::-1])[0, 0].tolist() == [20.0, 0.0, 0.0]

    def test_duplicate_entries_resolve_to_first_index(self):
        indices = nearest_indices(np.array([[1.0, 1.0, 1.0]]), [(0, 0, 0), (0, 0, 0)])

        assert indices.tolist() == [0]

    def test_exact_palette_colors_are_unchanged(self):
        blocks = np.array([[[255.0, 165.0, 0.0], [128.0, 0.0, 128.0]]])

        assert np.array_equal(quantize(blocks, POP_ART_PALETTE), blocks)

    def test_empty_palette_is_rejected(self):
        with pytest.raises(ValueError):
            quantize(np.zeros((1, 1, 3)), [])

    def test_empty_palette_is_rejected_even_for_empty_blocks(self):
        with pytest.raises(ValueError):
            quantize(np.zeros((0, 0, 3)), [])

    def test_empty_blocks_stay_empty(self):
        assert quantize(np.zeros((0, 0, 3)), POP_ART_PALETTE).shape == (0, 0, 3)


def test_pop_art_palette_targets():
    blocks = np.array([[[250, 10, 5], [200, 175, 150]]], dtype=np.float64)

    assert quantize(blocks, POP_ART_PALETTE).tolist() == [[[255, 0, 0], [210, 180, 140]]]
