#!/usr/bin/env python3
# Copyright (c) 2026 TrailLensCo
# All rights reserved.
#
# This file is proprietary and confidential.
# Unauthorized copying, distribution, or use of this file,
# via any medium, is strictly prohibited without the express
# written permission of TrailLensCo.

"""
Word Search Generator

Generates word search puzzles:
1. Longest-first placement with overlap/spacing scoring
2. Best-of retry over whole-grid attempts
3. Validation of the finished grids
4. SVG puzzle and solution pages with word outlines
5. YAML export of the result

Usage:
    # With YAML configuration:
    python word_search_generator.py --config puzzle.yaml

    # With command-line arguments:
    python word_search_generator.py --words CAT DOG BIRD --size 10 --seed 7
"""

import logging
import os
import re
import sys
import time
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from config import (
    PuzzleConfig, ConfigValidationError, create_argument_parser, load_config
)
from directions import resolve_direction_vectors
from logging_config import setup_logging
from models import (
    DirectionOptions, GenerationResult, GenerationStatus, Grid, PlacedWordInfo
)
from random_source import RandomSource, SeededRandomSource
from svg_renderer import SVGConfig, SVGRenderer
from validator import validate_result
from word_list import (
    WORD_PATTERN, WordListError, load_words_file, normalize_words, validate_words
)
from word_placer import ScoringWeights, WordPlacer
from yaml_exporter import YAMLExporter, YAMLExportError


logger = logging.getLogger(__name__)

DEFAULT_MAX_ATTEMPTS = 10
DEFAULT_ATTEMPTS_PER_WORD = 1


@dataclass
class _Attempt:
    """One whole-grid attempt; discarded unless it becomes the best."""
    display: Grid
    solution: Grid
    placed: List[PlacedWordInfo] = field(default_factory=list)
    failed: List[str] = field(default_factory=list)


class PuzzleGenerator:
    """
    Places a word list onto a fresh grid, retrying whole attempts.

    Each attempt owns its own pair of grids. Only the attempt that placed
    the most words is kept, and a perfect attempt stops the loop.
    """

    def __init__(
        self,
        rng: Optional[RandomSource] = None,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
        attempts_per_word: int = DEFAULT_ATTEMPTS_PER_WORD,
        weights: Optional[ScoringWeights] = None,
    ):
        """
        Initialize the generator.

        Args:
            rng: Random source; a fresh unseeded one if None
            max_attempts: Whole-grid attempts before settling for the best
            attempts_per_word: Placement calls per word within one attempt
            weights: Placement scoring weights
        """
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        if attempts_per_word < 1:
            raise ValueError("attempts_per_word must be at least 1")

        self.rng = rng or SeededRandomSource()
        self.max_attempts = max_attempts
        self.attempts_per_word = attempts_per_word
        self.placer = WordPlacer(self.rng, weights)

        # Placed-word count of each scored attempt, in order
        self.attempt_history: List[int] = []

    def generate(
        self,
        words: Sequence[str],
        size: int,
        options: DirectionOptions
    ) -> GenerationResult:
        """
        Generate a puzzle.

        Args:
            words: Normalized uppercase words
            size: Grid size N (N x N)
            options: Enabled directions

        Returns:
            GenerationResult (never raises for unplaceable words or empty directions)

        Raises:
            ValueError: On a non-positive size or a malformed word list
        """
        self._check_input(words, size)
        self.attempt_history = []

        vectors = resolve_direction_vectors(options)
        if not vectors:
            logger.error("No direction enabled; nothing can be placed")
            return GenerationResult(
                status=GenerationStatus.CONFIGURATION_ERROR,
                size=size,
                failed_words=list(words),
                reason="No valid directions selected",
            )

        ordered = sorted(words, key=len, reverse=True)
        best: Optional[_Attempt] = None
        attempts_run = 0

        for attempt_number in range(1, self.max_attempts + 1):
            attempts_run = attempt_number
            logger.debug(f"Attempt {attempt_number}/{self.max_attempts} started")
            try:
                attempt = self._run_attempt(ordered, size, vectors)
            except Exception:
                logger.exception(f"Attempt {attempt_number} failed unexpectedly, retrying")
                continue

            placed = len(attempt.placed)
            self.attempt_history.append(placed)
            logger.debug(
                f"Attempt {attempt_number} scored: {placed}/{len(ordered)} words placed"
            )

            if best is None or placed > len(best.placed):
                best = attempt

            if not attempt.failed:
                logger.info(f"All {placed} words placed on attempt {attempt_number}")
                break
        else:
            logger.info(f"Attempts exhausted after {attempts_run} tries")

        if best is None or not best.placed:
            return GenerationResult(
                status=GenerationStatus.EXHAUSTED,
                size=size,
                failed_words=list(words),
                attempts=attempts_run,
                reason=(
                    "Unable to place any words. Try reducing the number of words, "
                    "increasing the puzzle size, or adding more direction options."
                ),
            )

        status = GenerationStatus.PARTIAL if best.failed else GenerationStatus.SUCCESS
        return GenerationResult(
            status=status,
            size=size,
            display_grid=best.display,
            solution_grid=best.solution,
            placed_words=best.placed,
            failed_words=best.failed,
            attempts=attempts_run,
            reason=(
                f"Could not place: {', '.join(best.failed)}" if best.failed else ""
            ),
        )

    def _run_attempt(self, ordered: Sequence[str], size: int, vectors) -> _Attempt:
        """Place every word once on fresh grids, then fill the rest."""
        attempt = _Attempt(display=Grid.create_empty(size), solution=Grid.create_empty(size))

        for word in ordered:
            info = None
            for _ in range(self.attempts_per_word):
                info = self.placer.place_word(attempt.display, attempt.solution, word, vectors)
                if info is not None:
                    break
            if info is None:
                attempt.failed.append(word)
            else:
                attempt.placed.append(info)

        attempt.display.fill_remaining(self.rng)
        return attempt

    @staticmethod
    def _check_input(words: Sequence[str], size: int):
        if not isinstance(size, int) or size < 1:
            raise ValueError(f"Grid size must be a positive integer, got {size!r}")
        for word in words:
            if not isinstance(word, str) or not WORD_PATTERN.match(word):
                raise ValueError(f"Words must be uppercase A-Z strings, got {word!r}")


class WordSearchGenerator:
    """
    Complete word search generator.

    Workflow:
    1. Load and check the word list
    2. Generate the puzzle (best-of attempts)
    3. Validate the result
    4. Render SVG puzzle and solution pages
    5. Export YAML result
    """

    def __init__(self, config: PuzzleConfig):
        """
        Initialize the word search generator.

        Args:
            config: PuzzleConfig instance with all settings
        """
        self.config = config
        self.start_time = time.time()

        self.log_file_path = setup_logging(
            output_dir=config.output.directory,
            log_level=config.output.log_level,
            log_file_prefix=config.output.log_file_prefix,
            enable_console=config.output.enable_console_logging,
        )
        self.logger = logging.getLogger(__name__)
        self.logger.info(f"Initialized WordSearchGenerator: {config.title}")
        self.logger.info(f"Grid size: {config.size}x{config.size}")
        self.logger.debug(f"Log file: {self.log_file_path}")

        self.rng = SeededRandomSource(config.generation.seed)
        self.puzzle_generator = PuzzleGenerator(
            rng=self.rng,
            max_attempts=config.generation.max_attempts,
            attempts_per_word=config.generation.attempts_per_word,
            weights=config.generation.to_scoring_weights(),
        )
        self.words: List[str] = []
        self.result: Optional[GenerationResult] = None

    def generate(self) -> Optional[Dict[str, str]]:
        """
        Generate the puzzle and write the requested outputs.

        Returns:
            Dict of output name to file path, or None if generation failed
        """
        self.logger.info("=" * 60)
        self.logger.info("WORD SEARCH GENERATOR")
        self.logger.info("=" * 60)

        # Step 1: Word list
        self.logger.info("Step 1: Loading word list...")
        self.words = self._build_word_list()
        errors = validate_words(self.words, self.config.size)
        if errors:
            for error in errors:
                self.logger.error(f"   X {error}")
            return None
        self.logger.info(f"   - {len(self.words)} words")

        # Step 2: Generation
        self.logger.info("Step 2: Placing words...")
        options = self.config.directions.to_options()
        result = self.puzzle_generator.generate(self.words, self.config.size, options)
        self.result = result
        if not result.success:
            self.logger.error(f"   X {result.reason}")
            return None
        self.logger.info(
            f"   - {result.placed_count}/{len(self.words)} words placed "
            f"in {result.attempts} attempt(s)"
        )
        if result.failed_words:
            self.logger.warning(f"   ! Could not place: {', '.join(result.failed_words)}")

        # Step 3: Validation
        self.logger.info("Step 3: Validating puzzle...")
        validation = validate_result(result, self.words)
        if not validation.valid:
            for error in validation.errors:
                self.logger.error(f"   X {error}")
            return None
        self.logger.info(f"   - Puzzle valid ({validation.stats['overlap_cells']} shared cells)")

        # Step 4-5: Output
        self.logger.info("Step 4: Writing output...")
        output_files = self._write_output(result)

        elapsed = time.time() - self.start_time
        self.logger.info("=" * 60)
        self.logger.info("GENERATION COMPLETE!")
        self.logger.info("=" * 60)
        for name, path in output_files.items():
            self.logger.info(f"   {name}: {path}")
        self.logger.debug(f"Placer stats: {self.puzzle_generator.placer.stats}")
        self.logger.info(f"Generation time: {elapsed:.2f} seconds")

        return output_files

    def _build_word_list(self) -> List[str]:
        """Combine configured words with the words file."""
        raw = list(self.config.words)
        if self.config.words_file:
            raw.extend(load_words_file(self.config.words_file))
        return normalize_words(raw)

    def _base_name(self) -> str:
        base = re.sub(r"[^a-z0-9]+", "_", self.config.title.lower()).strip("_")
        return base[:30] or "word_search"

    def _write_output(self, result: GenerationResult) -> Dict[str, str]:
        """Render the requested formats into the output directory."""
        output_dir = self.config.output.directory
        os.makedirs(output_dir, exist_ok=True)
        base_name = self._base_name()
        formats = self.config.output.formats
        display = self.config.display
        output_files: Dict[str, str] = {}

        renderer = SVGRenderer(SVGConfig(cell_size=display.cell_size))

        if "svg_puzzle" in formats:
            svg = renderer.render_puzzle(
                result,
                title=self.config.title,
                words=self.words,
                show_grid_lines=display.show_grid_lines,
                show_border=display.show_grid_border,
            )
            path = os.path.join(output_dir, f"{base_name}_puzzle.svg")
            renderer.save(svg, path)
            output_files["svg_puzzle"] = path

        if "svg_solution" in formats:
            svg = renderer.render_solution(
                result,
                title=f"{self.config.title} - Solution",
                outline_words=display.outline_words,
                color_words=display.color_words,
                hide_other_letters=display.effective_hide_other_letters(),
                show_grid_lines=display.show_grid_lines,
                show_border=display.show_grid_border,
            )
            path = os.path.join(output_dir, f"{base_name}_solution.svg")
            renderer.save(svg, path)
            output_files["svg_solution"] = path

        if "yaml_result" in formats:
            try:
                exporter = YAMLExporter()
                path = os.path.join(output_dir, f"{base_name}_puzzle.yaml")
                output_files["yaml_result"] = exporter.save(
                    result,
                    path=path,
                    title=self.config.title,
                    options=self.config.directions.to_options(),
                    seed=self.config.generation.seed,
                    cell_size=display.cell_size,
                )
            except YAMLExportError as e:
                self.logger.warning(f"Could not export YAML: {e}")

        return output_files


def main(argv: Optional[List[str]] = None):
    """Main entry point."""
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    try:
        # Load configuration
        config = load_config(args)

        # Handle dry-run
        if args.dry_run:
            print("Configuration valid:")
            print(f"  Title: {config.title}")
            print(f"  Size: {config.size}")
            print(f"  Words: {len(config.words)} inline"
                  + (f", file {config.words_file}" if config.words_file else ""))
            print(f"  Directions: {config.directions}")
            print(f"  Max Attempts: {config.generation.max_attempts}")
            print(f"  Seed: {config.generation.seed}")
            print(f"  Output Directory: {config.output.directory}")
            return

        # Generate puzzle
        generator = WordSearchGenerator(config)
        if generator.generate() is None:
            sys.exit(1)

    except (ConfigValidationError, WordListError) as e:
        print(f"Configuration error: {e}")
        sys.exit(1)
    except KeyboardInterrupt:
        print("\nGeneration cancelled.")
        sys.exit(0)
    except Exception as e:
        print(f"Error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
