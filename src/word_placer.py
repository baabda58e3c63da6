"""
Single-word placement search for word search puzzles.
Scans every start cell and direction, scores the legal placements and
commits one of the best.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence

from models import EMPTY, Grid, PlacedWordInfo, PlacementCandidate, Vector
from random_source import RandomSource


logger = logging.getLogger(__name__)

NEIGHBOR_OFFSETS = [
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1), (0, 1),
    (1, -1), (1, 0), (1, 1),
]


@dataclass
class ScoringWeights:
    """
    Density-dependent weights for overlap reward and crowding penalty.

    Below sparse_density the sparse weights apply, above dense_density the
    dense weights apply, and in between they are interpolated linearly.
    """
    sparse_density: float = 0.3
    dense_density: float = 0.6
    overlap_weight_sparse: float = 2.0
    overlap_weight_dense: float = 10.0
    spacing_weight_sparse: float = 1.0
    spacing_weight_dense: float = 0.25

    def __post_init__(self):
        if not 0.0 <= self.sparse_density <= self.dense_density <= 1.0:
            raise ValueError(
                "Density thresholds must satisfy "
                "0 <= sparse_density <= dense_density <= 1"
            )

    def _blend(self, density: float) -> float:
        if density <= self.sparse_density:
            return 0.0
        if density >= self.dense_density:
            return 1.0
        return (density - self.sparse_density) / (self.dense_density - self.sparse_density)

    def overlap_weight(self, density: float) -> float:
        t = self._blend(density)
        return self.overlap_weight_sparse + t * (self.overlap_weight_dense - self.overlap_weight_sparse)

    def spacing_weight(self, density: float) -> float:
        t = self._blend(density)
        return self.spacing_weight_sparse + t * (self.spacing_weight_dense - self.spacing_weight_sparse)


class WordPlacer:
    """
    Places one word at a time onto a pair of parallel grids.

    The display grid is what the player sees once filled; the solution grid
    only ever holds word letters. Both receive identical writes.
    """

    def __init__(self, rng: RandomSource, weights: Optional[ScoringWeights] = None):
        """
        Initialize the placer.

        Args:
            rng: Source of randomness for tie-breaking between equal scores
            weights: Scoring weights (defaults favour spacing early, overlap late)
        """
        self.rng = rng
        self.weights = weights or ScoringWeights()

        self.stats = {
            "searches": 0,
            "candidates_scored": 0,
            "placements": 0,
            "misses": 0,
        }

    def can_place(self, grid: Grid, word: str, row: int, col: int, d_row: int, d_col: int) -> bool:
        """Check the word fits in bounds and only overlaps matching letters."""
        end_row = row + (len(word) - 1) * d_row
        end_col = col + (len(word) - 1) * d_col
        if not (grid.in_bounds(row, col) and grid.in_bounds(end_row, end_col)):
            return False

        for i, letter in enumerate(word):
            cell = grid.cells[row + i * d_row][col + i * d_col]
            if cell != EMPTY and cell != letter:
                return False
        return True

    def count_overlap(self, grid: Grid, word: str, row: int, col: int, d_row: int, d_col: int) -> int:
        """Count positions that already hold the required letter."""
        overlap = 0
        for i, letter in enumerate(word):
            if grid.get(row + i * d_row, col + i * d_col) == letter:
                overlap += 1
        return overlap

    def count_crowding(self, grid: Grid, word: str, row: int, col: int, d_row: int, d_col: int) -> int:
        """
        Count filled neighbours around the word's cells.

        Each of the 8 neighbours of every occupied cell is counted when it
        holds a letter and is not itself one of the word's cells.
        """
        own_cells = {(row + i * d_row, col + i * d_col) for i in range(len(word))}
        crowding = 0
        for r, c in own_cells:
            for dr, dc in NEIGHBOR_OFFSETS:
                pos = (r + dr, c + dc)
                if pos in own_cells:
                    continue
                value = grid.get(*pos)
                if value:
                    crowding += 1
        return crowding

    def score(self, overlap: int, crowding: int, density: float) -> float:
        """Reward overlap, penalise crowding, weighted by grid density."""
        return (
            self.weights.overlap_weight(density) * overlap
            - self.weights.spacing_weight(density) * crowding
        )

    def find_candidates(self, grid: Grid, word: str, vectors: Sequence[Vector]) -> List[PlacementCandidate]:
        """Enumerate and score every legal placement of word."""
        density = grid.density()
        candidates = []

        for row in range(grid.size):
            for col in range(grid.size):
                for d_row, d_col in vectors:
                    if not self.can_place(grid, word, row, col, d_row, d_col):
                        continue
                    overlap = self.count_overlap(grid, word, row, col, d_row, d_col)
                    crowding = self.count_crowding(grid, word, row, col, d_row, d_col)
                    candidates.append(PlacementCandidate(
                        row=row,
                        col=col,
                        d_row=d_row,
                        d_col=d_col,
                        score=self.score(overlap, crowding, density),
                        overlap=overlap,
                        crowding=crowding,
                    ))

        self.stats["candidates_scored"] += len(candidates)
        return candidates

    def select_best(self, candidates: List[PlacementCandidate]) -> PlacementCandidate:
        """Pick uniformly among the top-scoring candidates."""
        best_score = max(c.score for c in candidates)
        best = [c for c in candidates if c.score == best_score]
        return best[self.rng.randint(0, len(best) - 1)]

    def place_word(
        self,
        display: Grid,
        solution: Grid,
        word: str,
        vectors: Sequence[Vector]
    ) -> Optional[PlacedWordInfo]:
        """
        Place word on both grids.

        Args:
            display: Grid the puzzle is built on (legality is checked here)
            solution: Grid receiving only word letters
            word: Uppercase word
            vectors: Non-empty set of direction vectors

        Returns:
            PlacedWordInfo, or None if no legal placement exists (grids untouched)
        """
        if not vectors:
            raise ValueError("place_word needs at least one direction vector")
        if display.size != solution.size:
            raise ValueError("Display and solution grids must be the same size")

        self.stats["searches"] += 1
        candidates = self.find_candidates(display, word, vectors)
        if not candidates:
            self.stats["misses"] += 1
            logger.debug(f"No legal placement for {word}")
            return None

        chosen = self.select_best(candidates)
        info = PlacedWordInfo(
            word=word,
            start_row=chosen.row,
            start_col=chosen.col,
            d_row=chosen.d_row,
            d_col=chosen.d_col,
            length=len(word),
        )
        for (row, col), letter in zip(info.cells(), word):
            display.set(row, col, letter)
            solution.set(row, col, letter)

        self.stats["placements"] += 1
        logger.debug(
            f"Placed {word} at ({chosen.row}, {chosen.col}) step ({chosen.d_row}, {chosen.d_col}) "
            f"score={chosen.score:.2f} overlap={chosen.overlap} crowding={chosen.crowding} "
            f"from {len(candidates)} candidates"
        )
        return info
