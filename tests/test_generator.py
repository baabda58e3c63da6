# Copyright (c) 2026 TrailLensCo
# All rights reserved.
#
# This file is proprietary and confidential.
# Unauthorized copying, distribution, or use of this file,
# via any medium, is strictly prohibited without the express
# written permission of TrailLensCo.

"""Unit tests for the PuzzleGenerator in word_search_generator module."""

import os
import sys
import unittest

# Add src to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from models import DirectionOptions, Grid, GenerationStatus, PlacedWordInfo
from random_source import SeededRandomSource
from validator import validate_result
from word_search_generator import PuzzleGenerator, _Attempt

STRAIGHT = DirectionOptions(horizontal=True, vertical=True)
ALL = DirectionOptions(horizontal=True, vertical=True, diagonal=True, reverse=True)


class TestPuzzleGenerator(unittest.TestCase):
    """Tests for PuzzleGenerator class."""

    def test_two_short_words(self):
        """Test two short words on a small grid are both placed."""
        generator = PuzzleGenerator(SeededRandomSource(11))

        result = generator.generate(["CAT", "DOG"], 5, STRAIGHT)

        self.assertEqual(result.status, GenerationStatus.SUCCESS)
        self.assertEqual(sorted(result.placed_word_strings()), ["CAT", "DOG"])
        self.assertEqual(result.failed_words, [])
        self.assertEqual(result.attempts, 1)
        for info in result.placed_words:
            self.assertIn(info.vector, [(0, 1), (1, 0)])
        self.assertTrue(validate_result(result, ["CAT", "DOG"]).valid)

    def test_word_longer_than_grid(self):
        """Test an unplaceable word exhausts every attempt."""
        generator = PuzzleGenerator(SeededRandomSource(11))

        result = generator.generate(["SUPERCALIFRAGILISTIC"], 5, ALL)

        self.assertEqual(result.status, GenerationStatus.EXHAUSTED)
        self.assertFalse(result.success)
        self.assertEqual(result.failed_words, ["SUPERCALIFRAGILISTIC"])
        self.assertEqual(result.placed_words, [])
        self.assertEqual(result.attempts, 10)
        self.assertIsNone(result.display_grid)

    def test_no_directions(self):
        """Test an empty direction set is a configuration error, not a crash."""
        generator = PuzzleGenerator(SeededRandomSource(11))
        options = DirectionOptions(horizontal=False, vertical=False, diagonal=False)

        result = generator.generate(["CAT"], 5, options)

        self.assertEqual(result.status, GenerationStatus.CONFIGURATION_ERROR)
        self.assertEqual(result.attempts, 0)
        self.assertEqual(result.failed_words, ["CAT"])
        self.assertIsNone(result.display_grid)
        self.assertIn("No valid directions", result.reason)

    def test_reverse_only_is_configuration_error(self):
        """Test reverse without an axis places nothing."""
        generator = PuzzleGenerator(SeededRandomSource(11))
        options = DirectionOptions(
            horizontal=False, vertical=False, diagonal=False, reverse=True
        )

        result = generator.generate(["CAT"], 5, options)

        self.assertEqual(result.status, GenerationStatus.CONFIGURATION_ERROR)

    def test_partial_result(self):
        """Test the best partial attempt is kept after all attempts."""
        generator = PuzzleGenerator(SeededRandomSource(5))
        words = ["ABCDE", "FGHIJ", "KLMNO", "PQRST", "UVWXY", "ZZZZZ"]
        options = DirectionOptions(horizontal=True, vertical=False)

        result = generator.generate(words, 5, options)

        self.assertEqual(result.status, GenerationStatus.PARTIAL)
        self.assertTrue(result.success)
        self.assertEqual(result.failed_words, ["ZZZZZ"])
        self.assertEqual(result.placed_count, 5)
        self.assertEqual(result.attempts, 10)
        self.assertEqual(generator.attempt_history, [5] * 10)
        self.assertIn("ZZZZZ", result.reason)
        self.assertTrue(validate_result(result, words).valid)

    def test_longest_first(self):
        """Test words are placed in descending length order."""
        generator = PuzzleGenerator(SeededRandomSource(3))

        result = generator.generate(["OX", "HORSE", "COW"], 8, ALL)

        self.assertEqual(result.placed_word_strings(), ["HORSE", "COW", "OX"])

    def test_same_seed_same_puzzle(self):
        """Test generation is reproducible with a fixed seed."""
        words = ["PYTHON", "SNAKE", "VIPER", "COBRA", "MAMBA", "ADDER", "BOA"]

        first = PuzzleGenerator(SeededRandomSource(42)).generate(words, 9, ALL)
        second = PuzzleGenerator(SeededRandomSource(42)).generate(words, 9, ALL)

        self.assertEqual(first.display_grid.to_rows(), second.display_grid.to_rows())
        self.assertEqual(first.solution_grid.to_rows(), second.solution_grid.to_rows())
        self.assertEqual(first.placed_words, second.placed_words)
        self.assertEqual(first.failed_words, second.failed_words)

    def test_larger_puzzle_is_consistent(self):
        """Test placement invariants hold on a crowded grid."""
        words = [
            "APPLE", "BANANA", "CHERRY", "GRAPE", "LEMON", "MANGO",
            "PEACH", "PEAR", "PLUM", "KIWI", "LIME", "FIG",
        ]
        for seed in range(3):
            generator = PuzzleGenerator(SeededRandomSource(seed))
            result = generator.generate(words, 10, ALL)

            with self.subTest(seed=seed):
                self.assertTrue(result.success)
                validation = validate_result(result, words)
                self.assertTrue(validation.valid, str(validation))
                self.assertEqual(result.display_grid.count_filled(), 100)

    def test_rejects_bad_input(self):
        """Test malformed arguments raise."""
        generator = PuzzleGenerator(SeededRandomSource(1))

        with self.assertRaises(ValueError):
            generator.generate(["CAT"], 0, STRAIGHT)
        with self.assertRaises(ValueError):
            generator.generate(["CAT", ""], 5, STRAIGHT)

    def test_rejects_words_outside_uppercase_letters(self):
        """Test lowercase or non-letter words are refused before placement."""
        generator = PuzzleGenerator(SeededRandomSource(1))

        for words in (["cat"], ["CAT", "Dog"], ["ICE CREAM"], ["R2D2"]):
            with self.subTest(words=words):
                with self.assertRaises(ValueError):
                    generator.generate(words, 10, STRAIGHT)
        self.assertEqual(generator.attempt_history, [])

    def test_exhausted_keeps_input_order(self):
        """Test failed words of an exhausted run follow the input order."""
        generator = PuzzleGenerator(SeededRandomSource(1), max_attempts=2)
        words = ["ABCDEF", "ABCDEFGHIJ", "ABCDEFGH"]

        result = generator.generate(words, 5, STRAIGHT)

        self.assertEqual(result.status, GenerationStatus.EXHAUSTED)
        self.assertEqual(result.failed_words, words)

    def test_rejects_bad_attempt_caps(self):
        """Test attempt caps below one are refused."""
        with self.assertRaises(ValueError):
            PuzzleGenerator(max_attempts=0)
        with self.assertRaises(ValueError):
            PuzzleGenerator(attempts_per_word=0)


class ScriptedGenerator(PuzzleGenerator):
    """PuzzleGenerator whose attempts come from a script."""

    def __init__(self, script, **kwargs):
        super().__init__(SeededRandomSource(0), **kwargs)
        self.script = list(script)
        self.calls = 0

    def _run_attempt(self, ordered, size, vectors):
        step = self.script[self.calls]
        self.calls += 1
        if isinstance(step, Exception):
            raise step
        placed_words, failed = step
        attempt = _Attempt(display=Grid.create_empty(size), solution=Grid.create_empty(size))
        for row, word in enumerate(placed_words):
            info = PlacedWordInfo(word, row, 0, 0, 1, len(word))
            for (r, c), letter in zip(info.cells(), word):
                attempt.display.set(r, c, letter)
                attempt.solution.set(r, c, letter)
            attempt.placed.append(info)
        attempt.failed.extend(failed)
        attempt.display.fill_remaining(self.rng)
        return attempt


class TestBestOfAttempts(unittest.TestCase):
    """Tests for the retry loop of PuzzleGenerator."""

    WORDS = ["AAA", "BBB", "CCC"]

    def test_keeps_first_strictly_better(self):
        """Test the best attempt only changes on a strict improvement."""
        script = [
            (["AAA"], ["BBB", "CCC"]),
            (["BBB", "AAA"], ["CCC"]),
            (["CCC"], ["AAA", "BBB"]),
            (["CCC", "BBB"], ["AAA"]),
        ]
        generator = ScriptedGenerator(script, max_attempts=4)

        result = generator.generate(self.WORDS, 5, STRAIGHT)

        self.assertEqual(result.status, GenerationStatus.PARTIAL)
        self.assertEqual(result.placed_word_strings(), ["BBB", "AAA"])
        self.assertEqual(result.failed_words, ["CCC"])
        self.assertEqual(generator.attempt_history, [1, 2, 1, 2])
        self.assertEqual(result.attempts, 4)

    def test_stops_on_perfect_attempt(self):
        """Test no attempt runs after all words are placed."""
        script = [
            (["AAA"], ["BBB", "CCC"]),
            (["AAA", "BBB", "CCC"], []),
            (["AAA"], ["BBB", "CCC"]),
        ]
        generator = ScriptedGenerator(script, max_attempts=10)

        result = generator.generate(self.WORDS, 5, STRAIGHT)

        self.assertEqual(result.status, GenerationStatus.SUCCESS)
        self.assertEqual(generator.calls, 2)
        self.assertEqual(result.attempts, 2)

    def test_failed_attempt_is_skipped(self):
        """Test an attempt that raises does not end the run."""
        script = [
            RuntimeError("boom"),
            (["AAA", "BBB", "CCC"], []),
        ]
        generator = ScriptedGenerator(script, max_attempts=3)

        with self.assertLogs('word_search_generator', level='ERROR'):
            result = generator.generate(self.WORDS, 5, STRAIGHT)

        self.assertEqual(result.status, GenerationStatus.SUCCESS)
        self.assertEqual(result.attempts, 2)
        self.assertEqual(generator.attempt_history, [3])

    def test_zero_placed_is_exhausted(self):
        """Test attempts that place nothing give no grid."""
        script = [([], ["AAA", "BBB", "CCC"])] * 2
        generator = ScriptedGenerator(script, max_attempts=2)

        result = generator.generate(self.WORDS, 5, STRAIGHT)

        self.assertEqual(result.status, GenerationStatus.EXHAUSTED)
        self.assertEqual(sorted(result.failed_words), self.WORDS)


if __name__ == '__main__':
    unittest.main()
