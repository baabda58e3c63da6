"""
Word Search Result Validator

Checks that a generated puzzle is consistent:
1. Every placed word lies inside the grid and reads correctly in both grids
2. Words sharing a cell agree on its letter
3. The solution grid holds only word letters; the display grid is fully filled

Run after generation so a broken puzzle is never published.
"""

from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from directions import direction_name
from models import EMPTY, LETTERS, GenerationResult


@dataclass
class ValidationResult:
    """Result of puzzle validation."""
    valid: bool
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    stats: Dict = field(default_factory=dict)

    def __str__(self):
        status = "✅ VALID" if self.valid else "❌ INVALID"
        lines = [f"Puzzle: {status}"]

        if self.errors:
            lines.append("\nErrors:")
            for e in self.errors:
                lines.append(f"  ❌ {e}")

        if self.warnings:
            lines.append("\nWarnings:")
            for w in self.warnings:
                lines.append(f"  ⚠️ {w}")

        if self.stats:
            lines.append("\nStats:")
            for k, v in self.stats.items():
                lines.append(f"  {k}: {v}")

        return "\n".join(lines)


class PuzzleValidator:
    """
    Validates a GenerationResult against the placement invariants.
    """

    def __init__(self, result: GenerationResult, words: Optional[List[str]] = None):
        """
        Initialize validator.

        Args:
            result: Finished generation result
            words: Input word list, to check placed + failed accounts for it
        """
        self.result = result
        self.words = words

    def validate(self) -> ValidationResult:
        """Run all checks."""
        result = ValidationResult(valid=True)

        if not self.result.success:
            result.errors.append(f"Generation failed: {self.result.reason}")
            result.valid = False
            return result

        display = self.result.display_grid
        solution = self.result.solution_grid
        if display is None or solution is None:
            result.errors.append("Successful result is missing its grids")
            result.valid = False
            return result

        self._check_words(result)
        self._check_overlaps(result)
        self._check_cells(result)
        self._check_accounting(result)
        self._collect_stats(result)

        result.valid = not result.errors
        return result

    def _check_words(self, result: ValidationResult):
        """Every placed word stays in bounds and reads correctly in both grids."""
        display = self.result.display_grid
        solution = self.result.solution_grid

        for info in self.result.placed_words:
            if info.length != len(info.word):
                result.errors.append(
                    f"{info.word}: length {info.length} does not match word"
                )
                continue
            try:
                direction_name(info.d_row, info.d_col)
            except ValueError as e:
                result.errors.append(f"{info.word}: {e}")
                continue

            for i, (row, col) in enumerate(info.cells()):
                if not display.in_bounds(row, col):
                    result.errors.append(
                        f"{info.word}: letter {i + 1} falls outside the grid at ({row}, {col})"
                    )
                    break
                expected = info.word[i]
                if display.get(row, col) != expected:
                    result.errors.append(
                        f"{info.word}: display grid has {display.get(row, col)!r} "
                        f"at ({row}, {col}), expected {expected!r}"
                    )
                if solution.get(row, col) != expected:
                    result.errors.append(
                        f"{info.word}: solution grid has {solution.get(row, col)!r} "
                        f"at ({row}, {col}), expected {expected!r}"
                    )

    def _check_overlaps(self, result: ValidationResult):
        """Words crossing the same cell need the same letter there."""
        shared = 0
        for pos, infos in self.result.occupied_cells().items():
            if len(infos) < 2:
                continue
            shared += 1
            letters = {info.word[info.cells().index(pos)] for info in infos}
            if len(letters) > 1:
                names = ", ".join(info.word for info in infos)
                result.errors.append(
                    f"Conflicting letters {sorted(letters)} at {pos} ({names})"
                )
        result.stats["overlap_cells"] = shared

    def _check_cells(self, result: ValidationResult):
        """Non-word cells: empty in the solution, a filler letter in the display."""
        display = self.result.display_grid
        solution = self.result.solution_grid
        occupied = self.result.occupied_cells()

        for row in range(display.size):
            for col in range(display.size):
                value = display.get(row, col)
                if value == EMPTY or value not in LETTERS:
                    result.errors.append(
                        f"Display grid cell ({row}, {col}) is not a letter: {value!r}"
                    )
                if (row, col) not in occupied and solution.get(row, col) != EMPTY:
                    result.errors.append(
                        f"Solution grid cell ({row}, {col}) holds "
                        f"{solution.get(row, col)!r} but no word covers it"
                    )

    def _check_accounting(self, result: ValidationResult):
        """Placed and failed words together match the input list."""
        placed = self.result.placed_word_strings()
        failed = self.result.failed_words

        duplicates = [w for w, n in Counter(placed).items() if n > 1]
        if duplicates:
            result.errors.append(f"Words placed more than once: {duplicates}")

        both = set(placed) & set(failed)
        if both:
            result.errors.append(f"Words both placed and failed: {sorted(both)}")

        if self.words is not None and sorted(placed + failed) != sorted(self.words):
            result.errors.append("Placed and failed words do not match the input list")

        if failed:
            result.warnings.append(
                f"{len(failed)} word(s) could not be placed: {', '.join(failed)}"
            )

    def _collect_stats(self, result: ValidationResult):
        size = self.result.size
        result.stats["size"] = f"{size}x{size}"
        result.stats["words_placed"] = self.result.placed_count
        result.stats["words_failed"] = len(self.result.failed_words)
        result.stats["word_density"] = f"{self.result.solution_grid.density():.1%}"
        result.stats["attempts"] = self.result.attempts

        directions = Counter(
            direction_name(info.d_row, info.d_col)
            for info in self.result.placed_words
            if info.vector != (0, 0) and abs(info.d_row) <= 1 and abs(info.d_col) <= 1
        )
        result.stats["directions"] = dict(sorted(directions.items()))


def validate_result(result: GenerationResult, words: Optional[List[str]] = None) -> ValidationResult:
    """
    Convenience function to validate a generation result.

    Args:
        result: Finished generation result
        words: Optional input word list

    Returns:
        ValidationResult
    """
    validator = PuzzleValidator(result, words)
    return validator.validate()
