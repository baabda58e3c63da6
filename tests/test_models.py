# Copyright (c) 2026 TrailLensCo
# All rights reserved.
#
# This file is proprietary and confidential.
# Unauthorized copying, distribution, or use of this file,
# via any medium, is strictly prohibited without the express
# written permission of TrailLensCo.

"""Unit tests for models module."""

import os
import sys
import unittest

# Add src to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))
sys.path.insert(0, os.path.dirname(__file__))

from models import (
    EMPTY, LETTERS, GenerationResult, GenerationStatus, Grid, PlacedWordInfo
)
from random_source import SeededRandomSource
from sequence_random import SequenceRandomSource


class TestGrid(unittest.TestCase):
    """Tests for Grid class."""

    def test_create_empty(self):
        """Test a new grid has every cell empty."""
        grid = Grid.create_empty(4)

        self.assertEqual(grid.size, 4)
        self.assertEqual(len(grid.cells), 4)
        for row in grid.cells:
            self.assertEqual(row, [EMPTY] * 4)

    def test_create_rejects_non_positive_size(self):
        """Test that size 0 and negative sizes are refused."""
        with self.assertRaises(ValueError):
            Grid.create_empty(0)
        with self.assertRaises(ValueError):
            Grid.create_empty(-3)

    def test_rows_are_independent(self):
        """Test writing one row does not leak into others."""
        grid = Grid.create_empty(3)
        grid.set(0, 0, "A")

        self.assertEqual(grid.get(1, 0), EMPTY)
        self.assertEqual(grid.get(2, 0), EMPTY)

    def test_get_out_of_bounds_returns_none(self):
        """Test out-of-bounds reads are absent, not errors."""
        grid = Grid.create_empty(3)

        self.assertIsNone(grid.get(-1, 0))
        self.assertIsNone(grid.get(0, 3))
        self.assertIsNone(grid.get(3, 3))

    def test_set_out_of_bounds_is_ignored(self):
        """Test out-of-bounds writes do nothing and do not raise."""
        grid = Grid.create_empty(3)

        self.assertFalse(grid.set(5, 5, "A"))
        self.assertFalse(grid.set(-1, 0, "A"))
        self.assertEqual(grid.count_filled(), 0)

    def test_set_stores_value_as_given(self):
        """Test writes are stored unchanged."""
        grid = Grid.create_empty(3)

        self.assertTrue(grid.set(1, 1, "Q"))
        self.assertEqual(grid.get(1, 1), "Q")
        grid.set(1, 2, "q")
        self.assertEqual(grid.get(1, 2), "q")

    def test_fill_remaining_keeps_existing_letters(self):
        """Test filling only touches empty cells."""
        grid = Grid.create_empty(4)
        grid.set(0, 0, "W")
        grid.set(3, 3, "Z")

        grid.fill_remaining(SeededRandomSource(1))

        self.assertEqual(grid.get(0, 0), "W")
        self.assertEqual(grid.get(3, 3), "Z")
        self.assertEqual(grid.count_filled(), 16)
        for row in grid.cells:
            for value in row:
                self.assertIn(value, LETTERS)
                self.assertEqual(len(value), 1)

    def test_fill_remaining_uses_random_source(self):
        """Test filler letters come from the injected source."""
        grid = Grid.create_empty(2)

        grid.fill_remaining(SequenceRandomSource([0, 1, 2, 25]))

        self.assertEqual(grid.to_rows(), ["AB", "CZ"])

    def test_density(self):
        """Test density is the filled fraction."""
        grid = Grid.create_empty(4)
        self.assertEqual(grid.density(), 0.0)

        grid.set(0, 0, "A")
        grid.set(0, 1, "B")
        grid.set(0, 2, "C")
        grid.set(0, 3, "D")

        self.assertEqual(grid.count_filled(), 4)
        self.assertAlmostEqual(grid.density(), 0.25)

    def test_to_rows(self):
        """Test row strings mark empty cells."""
        grid = Grid.create_empty(3)
        grid.set(1, 0, "A")
        grid.set(1, 2, "B")

        self.assertEqual(grid.to_rows(), ["...", "A.B", "..."])
        self.assertEqual(grid.to_rows(empty_char="-"), ["---", "A-B", "---"])


class TestPlacedWordInfo(unittest.TestCase):
    """Tests for PlacedWordInfo class."""

    def test_cells_horizontal(self):
        """Test cells of a left-to-right word."""
        info = PlacedWordInfo("CAT", 2, 1, 0, 1, 3)

        self.assertEqual(info.cells(), [(2, 1), (2, 2), (2, 3)])
        self.assertEqual((info.end_row, info.end_col), (2, 3))

    def test_cells_reversed_diagonal(self):
        """Test cells of an up-left word."""
        info = PlacedWordInfo("DOG", 4, 4, -1, -1, 3)

        self.assertEqual(info.cells(), [(4, 4), (3, 3), (2, 2)])
        self.assertEqual(info.vector, (-1, -1))

    def test_is_immutable(self):
        """Test committed placements cannot be modified."""
        info = PlacedWordInfo("CAT", 0, 0, 0, 1, 3)

        with self.assertRaises(Exception):
            info.start_row = 3


class TestGenerationResult(unittest.TestCase):
    """Tests for GenerationResult class."""

    def test_success_flags(self):
        """Test which statuses count as success."""
        self.assertTrue(GenerationResult(GenerationStatus.SUCCESS, 5).success)
        self.assertTrue(GenerationResult(GenerationStatus.PARTIAL, 5).success)
        self.assertFalse(GenerationResult(GenerationStatus.EXHAUSTED, 5).success)
        self.assertFalse(
            GenerationResult(GenerationStatus.CONFIGURATION_ERROR, 5).success
        )

    def test_occupied_cells(self):
        """Test shared cells list every word crossing them."""
        cat = PlacedWordInfo("CAT", 0, 0, 0, 1, 3)
        cow = PlacedWordInfo("COW", 0, 0, 1, 0, 3)
        result = GenerationResult(
            GenerationStatus.SUCCESS, 3, placed_words=[cat, cow]
        )

        occupied = result.occupied_cells()

        self.assertEqual(len(occupied), 5)
        self.assertEqual(occupied[(0, 0)], [cat, cow])
        self.assertEqual(occupied[(2, 0)], [cow])
        self.assertEqual(result.placed_word_strings(), ["CAT", "COW"])


class TestRandomSources(unittest.TestCase):
    """Tests for the random sources."""

    def test_seeded_is_reproducible(self):
        """Test equal seeds give equal sequences."""
        a = SeededRandomSource(42)
        b = SeededRandomSource(42)

        self.assertEqual(
            [a.randint(0, 25) for _ in range(20)],
            [b.randint(0, 25) for _ in range(20)]
        )
        self.assertEqual(a.seed, 42)

    def test_shuffle_keeps_elements(self):
        """Test shuffling permutes without losing items."""
        items = list(range(10))

        SeededRandomSource(3).shuffle(items)

        self.assertEqual(sorted(items), list(range(10)))

    def test_choice(self):
        """Test choice indexes through randint."""
        self.assertEqual(SequenceRandomSource([2]).choice("ABC"), "C")
        with self.assertRaises(IndexError):
            SequenceRandomSource([0]).choice([])


if __name__ == '__main__':
    unittest.main()
